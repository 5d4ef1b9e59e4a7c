"""
Symbol name → integer id registry.

Ids are stable for the lifetime of the registry and never evicted. Lookups of
names that are already registered read the dict without locking; first-time
inserts are serialized under a lock with a second check inside it.
"""

from __future__ import annotations
import threading
from typing import Dict


class SymbolRegistry:
	"""Interning table giving each symbol name a unique positive id."""

	def __init__(self) -> None:
		"""Start empty; the first registered name receives id 1."""
		self._lock = threading.Lock()
		self._name_to_id: Dict[str, int] = {}
		self._id_to_name: Dict[int, str] = {}
		self._next_id = 1

	def get_id(self, name: str) -> int:
		"""Return the id for `name`, registering it on first use."""
		sid = self._name_to_id.get(name)
		if sid is not None:
			return sid
		with self._lock:
			sid = self._name_to_id.get(name)
			if sid is None:
				sid = self._next_id
				self._next_id += 1
				self._id_to_name[sid] = name
				self._name_to_id[name] = sid
			return sid

	def get_name(self, sid: int) -> str:
		"""Return the name registered under `sid`, or a placeholder."""
		name = self._id_to_name.get(sid)
		if name is None:
			return f"symbol_{sid}"
		return name

	def clear(self) -> None:
		"""Forget every registration and restart ids at 1."""
		with self._lock:
			self._name_to_id.clear()
			self._id_to_name.clear()
			self._next_id = 1

	def __contains__(self, name: object) -> bool:
		return name in self._name_to_id

	def __len__(self) -> int:
		return len(self._name_to_id)


default_registry = SymbolRegistry()

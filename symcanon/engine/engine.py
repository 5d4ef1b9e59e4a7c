"""
SymEngine: the stable call surface over a computation backend, plus module-level
convenience constructors that go straight to the core.
"""

from __future__ import annotations
from typing import Dict, List, Mapping, Optional, Set, Type, Union

from symcanon.core import (
	Add,
	Expression,
	Mul,
	Number,
	Pow,
	Symbol,
	SymbolRegistry,
	make_number,
	make_symbol,
)
from symcanon.evaluation import EvaluationError
from .backend import ComputationBackend, PythonBackend
from .config import BackendType, EngineConfig, LogEvent


_BACKENDS: Dict[BackendType, Type[PythonBackend]] = {
	BackendType.PYTHON: PythonBackend,
}


class SymEngine:
	"""Main engine for symbolic computation."""

	def __init__(self, config: Optional[EngineConfig] = None, registry: Optional[SymbolRegistry] = None) -> None:
		"""
		Build the engine around the configured default backend. The backend is
		usable immediately; initialize() re-selects and initializes it.
		"""
		if config is not None:
			self.config = config
		else:
			self.config = EngineConfig()
		self.registry = registry
		self.events: List[LogEvent] = []
		self.backend: ComputationBackend = PythonBackend()

	def _emit(self, kind: str, payload: Dict[str, object]) -> None:
		"""Record a structured event when event recording is enabled."""
		if self.config.record_events:
			self.events.append(LogEvent(kind=kind, payload=payload))

	def initialize(self, backend_type: Optional[Union[BackendType, str]] = None) -> None:
		"""Select and initialize a backend (the configured default when omitted)."""
		target = backend_type if backend_type is not None else self.config.default_backend
		try:
			bt = BackendType(target)
		except ValueError:
			raise ValueError(f"Unknown backend type: {target}") from None
		self.backend = _BACKENDS[bt]()
		self.backend.initialize()
		self._emit("initialize", {"backend": bt.value})

	def number(self, value: Union[int, float, str]) -> Number:
		"""Create a numerical constant; strings are parsed as floats."""
		if isinstance(value, str):
			return make_number(float(value))
		return make_number(value)

	def symbol(self, name: str) -> Symbol:
		"""Create a symbolic variable in this engine's registry."""
		return make_symbol(name, self.registry)

	def add(self, left: Expression, right: Expression) -> Expression:
		return self.backend.add(left, right)

	def multiply(self, left: Expression, right: Expression) -> Expression:
		return self.backend.multiply(left, right)

	def power(self, base: Expression, exponent: Expression) -> Expression:
		return self.backend.power(base, exponent)

	def simplify(self, expr: Expression) -> Expression:
		return self.backend.simplify(expr)

	def evaluate(self, expr: Expression, substitutions: Optional[Mapping[str, float]] = None) -> float:
		"""Evaluate numerically; failures are recorded as events and re-raised."""
		try:
			return self.backend.evaluate_numerical(expr, substitutions)
		except EvaluationError as e:
			self._emit("evaluation_error", {"error": type(e).__name__, "message": str(e)})
			raise

	def to_string(self, expr: Expression) -> str:
		return expr.to_string()

	def get_symbols(self, expr: Expression) -> Set[str]:
		return expr.get_symbols()

	@property
	def backend_type(self) -> BackendType:
		return self.backend.type

	def switch_backend(self, backend_type: Union[BackendType, str]) -> None:
		"""Dispose the current backend and initialize another."""
		previous = self.backend.type
		self.backend.dispose()
		self.initialize(backend_type)
		self._emit("switch_backend", {"from": previous.value, "to": self.backend.type.value})

	def dispose(self) -> None:
		self.backend.dispose()
		self._emit("dispose", {"backend": self.backend.type.value})


def sym(name: str) -> Symbol:
	"""Create a symbol in the process-wide registry."""
	return make_symbol(name)


def num(value: Union[int, float, str]) -> Number:
	"""Create a number; strings are parsed as floats."""
	if isinstance(value, str):
		return make_number(float(value))
	return make_number(value)


def add(left: Expression, right: Expression) -> Expression:
	return Add.create(left, right)


def multiply(left: Expression, right: Expression) -> Expression:
	return Mul.create(left, right)


def power(base: Expression, exponent: Expression) -> Expression:
	return Pow.create(base, exponent)

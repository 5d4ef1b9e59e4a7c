"""
Engine configuration and typed containers for the façade.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict


class BackendType(str, Enum):
	"""Available computation backends."""

	PYTHON = "python"


@dataclass
class EngineConfig:
	"""
	Engine settings. precision_bits and max_simplification_steps are carried for
	callers that inspect them; the Python backend computes in float64 and its
	simplify is a no-op over already-canonical trees.
	"""
	default_backend: BackendType = BackendType.PYTHON
	precision_bits: int = 64
	max_simplification_steps: int = 100
	record_events: bool = True


@dataclass
class LogEvent:
	"""
	Structured event for run-time logging.
	"""
	kind: str
	payload: Dict[str, object]

"""
Engine façade.

Public API re-export:
	SymEngine, PythonBackend, ComputationBackend
	BackendType, EngineConfig, LogEvent
	sym, num, add, multiply, power
"""

from .config import BackendType, EngineConfig, LogEvent
from .backend import ComputationBackend, PythonBackend
from .engine import SymEngine, sym, num, add, multiply, power

__all__ = [
	"BackendType", "EngineConfig", "LogEvent",
	"ComputationBackend", "PythonBackend",
	"SymEngine", "sym", "num", "add", "multiply", "power",
]

"""
symcanon: canonical construction of symbolic Add/Mul/Pow expressions.

Top-level re-exports so callers can `from symcanon import Add, Mul, ...`
without reaching into the subpackages.
"""

from .core import (
	Expression, Number, Symbol, Add, Mul, Pow,
	ZERO, ONE, NEGATIVE_ONE,
	make_number, make_symbol, make_symbols,
	ExpressionKind, TYPE_ORDER,
	SymbolRegistry, default_registry,
	fast_hash, combine_hashes,
)
from .evaluation import (
	EvaluationError, UnboundSymbolError, UnevaluableError,
	evaluate_numerical, evaluate_array, substitute,
	numeric_fingerprint, numerically_equivalent,
)
from .interop import to_sympy, from_sympy
from .engine import (
	SymEngine, PythonBackend, BackendType, EngineConfig, LogEvent,
	sym, num, add, multiply, power,
)


def get_symbols(expr: Expression) -> set:
	"""Return the set of symbol names in `expr`."""
	return expr.get_symbols()


def to_string(expr: Expression) -> str:
	"""Render `expr` in the parenthesized operator notation."""
	return expr.to_string()


__all__ = [
	"Expression", "Number", "Symbol", "Add", "Mul", "Pow",
	"ZERO", "ONE", "NEGATIVE_ONE",
	"make_number", "make_symbol", "make_symbols",
	"ExpressionKind", "TYPE_ORDER", "SymbolRegistry", "default_registry",
	"fast_hash", "combine_hashes",
	"EvaluationError", "UnboundSymbolError", "UnevaluableError",
	"evaluate_numerical", "evaluate_array", "substitute",
	"numeric_fingerprint", "numerically_equivalent",
	"to_sympy", "from_sympy",
	"SymEngine", "PythonBackend", "BackendType", "EngineConfig", "LogEvent",
	"sym", "num", "add", "multiply", "power",
	"get_symbols", "to_string",
]

"""
Canonical expression core.

Public API re-export:
	Expression, Number, Symbol            — node types
	Add, Mul, Pow                         — canonicalizing constructors (.create)
	make_number, make_symbol, make_symbols
	ZERO, ONE, NEGATIVE_ONE               — shared numeric singletons
	ExpressionKind, TYPE_ORDER            — kinds and their canonical order
	SymbolRegistry, default_registry      — symbol interning
	fast_hash, combine_hashes             — structural hashing
"""

from .hashing import fast_hash, combine_hashes
from .kinds import ExpressionKind, TYPE_ORDER, NUMERIC_KINDS, is_numeric_kind
from .registry import SymbolRegistry, default_registry
from .expr import (
	Expression,
	Number,
	Symbol,
	ZERO,
	ONE,
	NEGATIVE_ONE,
	make_number,
	make_symbol,
	make_symbols,
)
from .operators import Add, Mul, Pow

__all__ = [
	"fast_hash", "combine_hashes",
	"ExpressionKind", "TYPE_ORDER", "NUMERIC_KINDS", "is_numeric_kind",
	"SymbolRegistry", "default_registry",
	"Expression", "Number", "Symbol", "ZERO", "ONE", "NEGATIVE_ONE",
	"make_number", "make_symbol", "make_symbols",
	"Add", "Mul", "Pow",
]

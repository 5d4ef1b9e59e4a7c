"""
Expression kinds and their fixed canonical ordering.

Zero, One and NegativeOne are kinds of their own (not just Number values) so
absorption checks and sorting can dispatch on the kind alone.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict


class ExpressionKind(str, Enum):
	"""Closed set of node kinds."""

	ZERO = "Zero"
	ONE = "One"
	NEGATIVE_ONE = "NegativeOne"
	NUMBER = "Number"
	SYMBOL = "Symbol"
	POW = "Pow"
	MUL = "Mul"
	ADD = "Add"


TYPE_ORDER: Dict[ExpressionKind, int] = {
	ExpressionKind.ZERO: 0,
	ExpressionKind.ONE: 1,
	ExpressionKind.NEGATIVE_ONE: 2,
	ExpressionKind.NUMBER: 3,
	ExpressionKind.SYMBOL: 4,
	ExpressionKind.POW: 5,
	ExpressionKind.MUL: 6,
	ExpressionKind.ADD: 7,
}

NUMERIC_KINDS = frozenset({
	ExpressionKind.ZERO,
	ExpressionKind.ONE,
	ExpressionKind.NEGATIVE_ONE,
	ExpressionKind.NUMBER,
})


def is_numeric_kind(kind: ExpressionKind) -> bool:
	"""Return True for the four number kinds."""
	return kind in NUMERIC_KINDS

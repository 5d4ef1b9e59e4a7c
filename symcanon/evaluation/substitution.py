"""
Partial substitution: replace symbols by expressions or numbers and rebuild the
tree through the canonicalizing constructors, so the result is canonical again
(a fully numeric result collapses to a single Number).
"""

from __future__ import annotations
from typing import Dict, Mapping, Union

from symcanon.core import Add, Expression, ExpressionKind, Mul, Pow, make_number

Replacement = Union[Expression, int, float]


def _as_expression(value: Replacement) -> Expression:
	if isinstance(value, Expression):
		return value
	return make_number(value)


def substitute(expr: Expression, mapping: Mapping[str, Replacement]) -> Expression:
	"""Return `expr` with every mapped symbol replaced; unmapped symbols stay symbolic."""
	if not isinstance(expr, Expression):
		raise TypeError(f"substitute expects an Expression, got {type(expr).__name__}")
	replacements: Dict[str, Expression] = {}
	for name, value in mapping.items():
		replacements[name] = _as_expression(value)
	if not replacements:
		return expr
	return _rebuild(expr, replacements)


def _rebuild(expr: Expression, replacements: Mapping[str, Expression]) -> Expression:
	kind = expr.kind
	if kind is ExpressionKind.SYMBOL:
		return replacements.get(expr.name, expr)
	if not expr.args:
		return expr
	new_args = []
	for a in expr.args:
		new_args.append(_rebuild(a, replacements))
	if kind is ExpressionKind.ADD:
		return Add.create(*new_args)
	if kind is ExpressionKind.MUL:
		return Mul.create(*new_args)
	return Pow.create(new_args[0], new_args[1])

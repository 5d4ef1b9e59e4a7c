"""
Numeric evaluation of canonical expressions (single source of truth)
--------------------------------------------------------------------
Two reductions over the same dispatch:

  • scalar      — Python floats, one substitution value per symbol
  • vectorized  — numpy float64 arrays, broadcasting across substitutions

Both are pure: no caching between calls, no mutation of the tree. Floating-point
overflow and invalid operations yield inf/nan rather than raising.

Failures
--------
  • UnboundSymbolError — a Symbol has no entry in the substitution mapping
  • UnevaluableError   — a node with no numeric reduction rule
"""

from __future__ import annotations
from typing import Mapping, Optional
import numpy as np

from symcanon.core import Expression, ExpressionKind, is_numeric_kind
from symcanon.core.numeric import float_pow


class EvaluationError(ValueError):
	"""Base class for evaluation failures."""


class UnboundSymbolError(EvaluationError):
	"""A symbol was reached that has no substitution value."""

	def __init__(self, name: str) -> None:
		super().__init__(f"Cannot evaluate symbol '{name}' without substitution")
		self.name = name


class UnevaluableError(EvaluationError):
	"""A node was reached that has no numeric reduction rule."""


def _unevaluable(expr: object) -> UnevaluableError:
	"""Build the error for a node without a reduction rule."""
	if isinstance(expr, Expression):
		return UnevaluableError(f"Cannot evaluate expression {expr} to a number")
	return UnevaluableError(f"Cannot evaluate object of type {type(expr).__name__} to a number")


class NumericEvaluator:
	"""Recursive substitution-based reducers for canonical expressions."""

	@staticmethod
	def scalar(expr: Expression, substitutions: Optional[Mapping[str, float]] = None) -> float:
		"""Reduce `expr` to a float given a name → number mapping."""
		subs = substitutions if substitutions is not None else {}
		return NumericEvaluator._scalar(expr, subs)

	@staticmethod
	def _scalar(expr: Expression, subs: Mapping[str, float]) -> float:
		if not isinstance(expr, Expression):
			raise _unevaluable(expr)
		kind = expr.kind
		if is_numeric_kind(kind):
			return expr.value
		if kind is ExpressionKind.SYMBOL:
			if expr.name not in subs:
				raise UnboundSymbolError(expr.name)
			return float(subs[expr.name])
		if kind is ExpressionKind.ADD:
			total = 0.0
			for a in expr.args:
				total += NumericEvaluator._scalar(a, subs)
			return total
		if kind is ExpressionKind.MUL:
			product = 1.0
			for a in expr.args:
				product *= NumericEvaluator._scalar(a, subs)
			return product
		if kind is ExpressionKind.POW:
			base = NumericEvaluator._scalar(expr.args[0], subs)
			exponent = NumericEvaluator._scalar(expr.args[1], subs)
			return float_pow(base, exponent)
		raise _unevaluable(expr)

	@staticmethod
	def vectorized(expr: Expression, substitutions: Optional[Mapping[str, object]] = None) -> np.ndarray:
		"""
		Reduce `expr` over numpy float64 arrays. Substitution values may be
		scalars or array-likes of broadcast-compatible shapes.
		"""
		subs = {}
		if substitutions is not None:
			for k, v in substitutions.items():
				subs[k] = np.asarray(v, dtype=np.float64)
		with np.errstate(all="ignore"):
			out = NumericEvaluator._vectorized(expr, subs)
		return np.asarray(out, dtype=np.float64)

	@staticmethod
	def _vectorized(expr: Expression, subs: Mapping[str, np.ndarray]) -> np.ndarray:
		if not isinstance(expr, Expression):
			raise _unevaluable(expr)
		kind = expr.kind
		if is_numeric_kind(kind):
			return np.float64(expr.value)
		if kind is ExpressionKind.SYMBOL:
			if expr.name not in subs:
				raise UnboundSymbolError(expr.name)
			return subs[expr.name]
		if kind is ExpressionKind.ADD:
			total = np.float64(0.0)
			for a in expr.args:
				total = total + NumericEvaluator._vectorized(a, subs)
			return total
		if kind is ExpressionKind.MUL:
			product = np.float64(1.0)
			for a in expr.args:
				product = product * NumericEvaluator._vectorized(a, subs)
			return product
		if kind is ExpressionKind.POW:
			base = NumericEvaluator._vectorized(expr.args[0], subs)
			exponent = NumericEvaluator._vectorized(expr.args[1], subs)
			return np.power(base, exponent)
		raise _unevaluable(expr)


def evaluate_numerical(expr: Expression, substitutions: Optional[Mapping[str, float]] = None) -> float:
	"""Proxy to NumericEvaluator.scalar."""
	return NumericEvaluator.scalar(expr, substitutions)


def evaluate_array(expr: Expression, substitutions: Optional[Mapping[str, object]] = None) -> np.ndarray:
	"""Proxy to NumericEvaluator.vectorized."""
	return NumericEvaluator.vectorized(expr, substitutions)

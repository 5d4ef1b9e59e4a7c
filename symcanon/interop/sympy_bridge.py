"""SymPy bridge: convert canonical expressions to SymPy trees and back.

Provides:
  • SympyBridge.to_sympy(expr): non-evaluating SymPy construction that preserves the canonical structure.
  • SympyBridge.from_sympy(e, registry): rebuild a SymPy Add/Mul/Pow/Symbol/Number tree through the create routines.

Module-level functions proxy to SympyBridge methods.
"""

from __future__ import annotations
from typing import Optional
import math
import sympy as sp

from symcanon.core import (
	Add,
	Expression,
	ExpressionKind,
	Mul,
	Pow,
	SymbolRegistry,
	is_numeric_kind,
	make_number,
	make_symbol,
)


class SympyBridge:
	"""Utility namespace for SymPy conversion."""

	@staticmethod
	def _number_to_sympy(value: float) -> sp.Expr:
		"""Integral finite floats become Integers; non-finite values map to oo/-oo/nan."""
		if math.isnan(value):
			return sp.nan
		if math.isinf(value):
			if value > 0:
				return sp.oo
			return -sp.oo
		if value.is_integer():
			return sp.Integer(int(value))
		return sp.Float(value)

	@staticmethod
	def to_sympy(expr: Expression) -> sp.Expr:
		"""Return a SymPy expression with the same tree shape as `expr`."""
		kind = expr.kind
		if is_numeric_kind(kind):
			return SympyBridge._number_to_sympy(expr.value)
		if kind is ExpressionKind.SYMBOL:
			return sp.Symbol(expr.name)
		args_list = []
		for a in expr.args:
			args_list.append(SympyBridge.to_sympy(a))
		if kind is ExpressionKind.ADD:
			return sp.Add(*args_list, evaluate=False)
		if kind is ExpressionKind.MUL:
			return sp.Mul(*args_list, evaluate=False)
		if kind is ExpressionKind.POW:
			return sp.Pow(args_list[0], args_list[1], evaluate=False)
		raise ValueError(f"Unsupported expr node: {type(expr).__name__}")

	@staticmethod
	def from_sympy(e: sp.Basic, registry: Optional[SymbolRegistry] = None) -> Expression:
		"""
		Rebuild a SymPy expression as a canonical expression. Exact SymPy numbers
		are converted to floats; functions, relationals and other heads are
		rejected.
		"""
		if e is sp.nan:
			return make_number(float("nan"))
		if e is sp.oo:
			return make_number(float("inf"))
		if e is sp.S.NegativeInfinity:
			return make_number(float("-inf"))
		if e.is_Number or isinstance(e, sp.NumberSymbol):
			return make_number(float(e))
		if e.is_Symbol:
			return make_symbol(e.name, registry)
		if isinstance(e, sp.Add):
			args_list = []
			for a in e.args:
				args_list.append(SympyBridge.from_sympy(a, registry))
			return Add.create(*args_list)
		if isinstance(e, sp.Mul):
			args_list = []
			for a in e.args:
				args_list.append(SympyBridge.from_sympy(a, registry))
			return Mul.create(*args_list)
		if isinstance(e, sp.Pow):
			base = SympyBridge.from_sympy(e.base, registry)
			exp = SympyBridge.from_sympy(e.exp, registry)
			return Pow.create(base, exp)
		raise ValueError(f"Unsupported expr node: {type(e).__name__}")


def to_sympy(expr: Expression) -> sp.Expr:
	"""Proxy to SympyBridge.to_sympy."""
	return SympyBridge.to_sympy(expr)


def from_sympy(e: sp.Basic, registry: Optional[SymbolRegistry] = None) -> Expression:
	"""Proxy to SympyBridge.from_sympy."""
	return SympyBridge.from_sympy(e, registry)

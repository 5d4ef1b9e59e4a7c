"""
Canonicalizing constructors for the associative/commutative operators.

Transforms (all applied at construction, never afterwards):
  • Flatten nested Add into Add and nested Mul into Mul
  • Eliminate neutral elements (0 in Add, 1 in Mul), short-circuit zero in Mul
  • Collect numeric constants into a single leading Number
  • Combine like terms (Add) and like bases (Mul) by structural identity
  • Evaluate numeric powers immediately; absorb exponent 0/1 and base 0/1
  • Sort operands by the canonical total order

Two constructions of the same polynomial-like expression therefore produce the
same tree, whatever order or nesting the operands arrived in.
"""

from __future__ import annotations
from functools import cmp_to_key
from typing import Dict, List, Tuple

from .expr import Expression, ONE, ZERO, make_number
from .kinds import ExpressionKind, is_numeric_kind
from .numeric import float_pow


_canonical_key = cmp_to_key(lambda a, b: a.compare_to(b))


def _check_operands(args: Tuple[Expression, ...]) -> None:
	"""Raise TypeError for any operand that is not an Expression."""
	for a in args:
		if not isinstance(a, Expression):
			raise TypeError(f"operands must be Expressions, got {type(a).__name__}")


def _render(args: Tuple[Expression, ...], sep: str, empty: str) -> str:
	"""Join operand strings; single operands render bare."""
	if not args:
		return empty
	if len(args) == 1:
		return args[0].to_string()
	parts = []
	for a in args:
		parts.append(a.to_string())
	return "(" + sep.join(parts) + ")"


class Add(Expression):
	"""Canonical sum node. Build with Add.create(...)."""

	__slots__ = ()

	def __init__(self, args: Tuple[Expression, ...]) -> None:
		super().__init__(ExpressionKind.ADD, args)

	@staticmethod
	def create(*args: Expression) -> Expression:
		"""Return the unique canonical expression for the sum of `args`."""
		_check_operands(args)
		if not args:
			return ZERO
		if len(args) == 1:
			return args[0]

		constant, terms = Add._flatten(args)

		if not terms:
			return make_number(constant)
		if len(terms) == 1 and constant == 0:
			return terms[0]

		final: List[Expression] = []
		if constant != 0:
			final.append(make_number(constant))
		final.extend(terms)
		return Add(tuple(final))

	@staticmethod
	def split_coefficient(expr: Expression) -> Tuple[float, Expression]:
		"""
		Split a term into (numeric coefficient, remaining term).

		Numbers split into (value, One); a Mul with a leading Number loses it and
		the other factors are re-wrapped (unwrapped when only one is left);
		anything else has coefficient 1.
		"""
		if is_numeric_kind(expr.kind):
			return expr.value, ONE
		if expr.kind is ExpressionKind.MUL and expr.args:
			first = expr.args[0]
			if is_numeric_kind(first.kind):
				rest = expr.args[1:]
				if len(rest) == 1:
					return first.value, rest[0]
				return first.value, Mul(rest)
		return 1.0, expr

	@staticmethod
	def _flatten(seq: Tuple[Expression, ...]) -> Tuple[float, List[Expression]]:
		"""
		Collect a numeric constant and a term → coefficient table.

		The table is keyed by the term itself (structural hash + structural
		equality), so the key doubles as the representative term.
		"""
		coefficients: Dict[Expression, float] = {}
		constant = 0.0

		def collect(expr: Expression, multiplier: float) -> None:
			nonlocal constant
			kind = expr.kind
			if kind is ExpressionKind.ZERO:
				return
			if is_numeric_kind(kind):
				constant += expr.value * multiplier
			elif kind is ExpressionKind.ADD:
				for a in expr.args:
					collect(a, multiplier)
			elif kind is ExpressionKind.MUL:
				c, term = Add.split_coefficient(expr)
				coefficients[term] = coefficients.get(term, 0.0) + c * multiplier
			else:
				coefficients[expr] = coefficients.get(expr, 0.0) + multiplier

		for expr in seq:
			collect(expr, 1.0)

		# A sum split out of a Mul whose coefficient nets to 1 is spliced back in
		nested = [t for t, c in coefficients.items() if c == 1 and t.kind is ExpressionKind.ADD]
		while nested:
			for term in nested:
				del coefficients[term]
				collect(term, 1.0)
			nested = [t for t, c in coefficients.items() if c == 1 and t.kind is ExpressionKind.ADD]

		terms: List[Expression] = []
		for term, c in coefficients.items():
			if c == 0:
				continue
			if c == 1:
				terms.append(term)
			else:
				terms.append(Mul.create(make_number(c), term))
		terms.sort(key=_canonical_key)
		return constant, terms

	def to_string(self) -> str:
		return _render(self.args, " + ", "0")


class _FactorCollector:
	"""Mutable accumulation state for one Mul.create call."""

	def __init__(self) -> None:
		self.coeff = 1.0
		self.powers: Dict[Expression, float] = {}
		self.factors: List[Expression] = []

	def collect(self, expr: Expression, exponent: float) -> None:
		"""Fold `expr ** exponent` into the running state; no-op once coeff is 0."""
		if self.coeff == 0:
			return
		kind = expr.kind
		if kind is ExpressionKind.ZERO:
			self.coeff = 0.0
		elif kind is ExpressionKind.ONE:
			return
		elif kind is ExpressionKind.NUMBER or kind is ExpressionKind.NEGATIVE_ONE:
			self.coeff *= float_pow(expr.value, exponent)
		elif kind is ExpressionKind.MUL:
			for a in expr.args:
				self.collect(a, exponent)
		elif kind is ExpressionKind.POW:
			base, exp = expr.args
			if is_numeric_kind(exp.kind):
				self.collect(base, exponent * exp.value)
			else:
				self.factors.append(expr)
		else:
			self.powers[expr] = self.powers.get(expr, 0.0) + exponent


class Mul(Expression):
	"""Canonical product node. Build with Mul.create(...)."""

	__slots__ = ()

	def __init__(self, args: Tuple[Expression, ...]) -> None:
		super().__init__(ExpressionKind.MUL, args)

	@staticmethod
	def create(*args: Expression) -> Expression:
		"""Return the unique canonical expression for the product of `args`."""
		_check_operands(args)
		if not args:
			return ONE
		if len(args) == 1:
			return args[0]

		acc = _FactorCollector()
		for expr in args:
			if acc.coeff == 0:
				break
			acc.collect(expr, 1.0)
		if acc.coeff == 0:
			return ZERO

		pairs: List[Tuple[Expression, float]] = []
		for base, e in acc.powers.items():
			if e == 0:
				continue
			pairs.append((base, e))
		pairs.sort(key=lambda p: _canonical_key(p[0]))
		factors = sorted(acc.factors, key=_canonical_key)

		final: List[Expression] = []
		if acc.coeff != 1:
			final.append(make_number(acc.coeff))
		for base, e in pairs:
			if e == 1:
				final.append(base)
			else:
				final.append(Pow.create(base, make_number(e)))
		final.extend(factors)

		if not final:
			return ONE
		if len(final) == 1:
			return final[0]
		return Mul(tuple(final))

	def to_string(self) -> str:
		return _render(self.args, " * ", "1")


class Pow(Expression):
	"""Canonical power node over exactly [base, exponent]. Build with Pow.create."""

	__slots__ = ()

	def __init__(self, base: Expression, exponent: Expression) -> None:
		super().__init__(ExpressionKind.POW, (base, exponent))

	@property
	def base(self) -> Expression:
		return self.args[0]

	@property
	def exponent(self) -> Expression:
		return self.args[1]

	@staticmethod
	def create(base: Expression, exponent: Expression) -> Expression:
		"""
		Apply the absorption table in order: x^0 → 1, x^1 → x, 0^y → 0, 1^y → 1,
		numeric^numeric → evaluated Number; otherwise build the node verbatim.
		"""
		_check_operands((base, exponent))
		if exponent.kind is ExpressionKind.ZERO:
			return ONE
		if exponent.kind is ExpressionKind.ONE:
			return base
		if base.kind is ExpressionKind.ZERO:
			return ZERO
		if base.kind is ExpressionKind.ONE:
			return ONE
		if is_numeric_kind(base.kind) and is_numeric_kind(exponent.kind):
			return make_number(float_pow(base.value, exponent.value))
		return Pow(base, exponent)

	def _compare_same_kind(self, other: Expression) -> int:
		c = self.args[0].compare_to(other.args[0])
		if c != 0:
			return c
		return self.args[1].compare_to(other.args[1])

	def _deep_equals(self, other: Expression) -> bool:
		return self.args[0].equals(other.args[0]) and self.args[1].equals(other.args[1])

	def to_string(self) -> str:
		return f"({self.args[0].to_string()}^{self.args[1].to_string()})"

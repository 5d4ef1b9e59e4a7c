"""
Expression data model: the immutable node base plus the Number and Symbol leaves.

Every node carries
  • kind  — an ExpressionKind discriminant
  • hash  — a 32-bit structural hash fixed at construction
  • args  — the ordered operand tuple (empty for leaves)

Equality is a hash/kind fast-reject followed by a structural deep comparison, so
hash collisions never make two different trees compare equal. The composite
nodes Add, Mul and Pow live in `operators`, which owns the canonicalization.
"""

from __future__ import annotations
import math
import numbers
from typing import Iterable, Optional, Set, Tuple

from .hashing import combine_hashes, fast_hash
from .kinds import ExpressionKind, TYPE_ORDER
from .numeric import as_float, format_number
from .registry import SymbolRegistry, default_registry


def _cmp(a, b) -> int:
	"""Three-way comparison returning -1, 0 or 1."""
	return (a > b) - (a < b)


class Expression:
	"""Immutable base node; construct through the create routines or leaf makers."""

	__slots__ = ("kind", "hash", "args")

	def __init__(
		self,
		kind: ExpressionKind,
		args: Iterable[Expression] = (),
		hash_value: Optional[int] = None,
	) -> None:
		object.__setattr__(self, "kind", kind)
		object.__setattr__(self, "args", tuple(args))
		if hash_value is None:
			hash_value = self._structural_hash()
		object.__setattr__(self, "hash", hash_value)

	def __setattr__(self, name, value) -> None:
		raise AttributeError(f"{type(self).__name__} is immutable")

	def __delattr__(self, name) -> None:
		raise AttributeError(f"{type(self).__name__} is immutable")

	def _structural_hash(self) -> int:
		"""Hash of the kind tag folded with the operand hashes in order."""
		if not self.args:
			return fast_hash(self.kind.value)
		hashes = [fast_hash(self.kind.value)]
		for a in self.args:
			hashes.append(a.hash)
		return combine_hashes(hashes)

	# ------------------------------------------------------------------
	# ordering and equality

	def compare_to(self, other: Expression) -> int:
		"""
		Canonical total order: by kind rank first, then a kind-specific
		comparison. Negative, zero or positive like a classic cmp.
		"""
		diff = TYPE_ORDER[self.kind] - TYPE_ORDER[other.kind]
		if diff != 0:
			return diff
		return self._compare_same_kind(other)

	def _compare_same_kind(self, other: Expression) -> int:
		"""Lexicographic operand comparison, then operand count."""
		for mine, theirs in zip(self.args, other.args):
			c = mine.compare_to(theirs)
			if c != 0:
				return c
		return len(self.args) - len(other.args)

	def equals(self, other: object) -> bool:
		"""Structural equality with a hash and kind fast-reject."""
		if self is other:
			return True
		if not isinstance(other, Expression):
			return False
		if self.hash != other.hash or self.kind != other.kind:
			return False
		return self._deep_equals(other)

	def _deep_equals(self, other: Expression) -> bool:
		"""Position-sensitive pairwise operand equality."""
		if len(self.args) != len(other.args):
			return False
		for mine, theirs in zip(self.args, other.args):
			if not mine.equals(theirs):
				return False
		return True

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Expression):
			return NotImplemented
		return self.equals(other)

	def __ne__(self, other: object) -> bool:
		if not isinstance(other, Expression):
			return NotImplemented
		return not self.equals(other)

	def __hash__(self) -> int:
		return self.hash

	def __lt__(self, other: Expression) -> bool:
		if not isinstance(other, Expression):
			return NotImplemented
		return self.compare_to(other) < 0

	# ------------------------------------------------------------------
	# queries and rendering

	@property
	def is_number(self) -> bool:
		return False

	@property
	def is_symbol(self) -> bool:
		return False

	def get_symbols(self) -> Set[str]:
		"""Return the names of all symbols in this subtree."""
		out: Set[str] = set()
		for a in self.args:
			out |= a.get_symbols()
		return out

	def to_string(self) -> str:
		"""Render composite nodes as a parenthesized operator-joined list."""
		raise NotImplementedError

	def __str__(self) -> str:
		return self.to_string()

	def __repr__(self) -> str:
		inner = ", ".join(repr(a) for a in self.args)
		return f"{self.kind.value}({inner})"

	# ------------------------------------------------------------------
	# operator sugar, routed through the canonicalizing constructors

	def __add__(self, other):
		from .operators import Add
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Add.create(self, o)

	def __radd__(self, other):
		from .operators import Add
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Add.create(o, self)

	def __sub__(self, other):
		from .operators import Add, Mul
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Add.create(self, Mul.create(NEGATIVE_ONE, o))

	def __rsub__(self, other):
		from .operators import Add, Mul
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Add.create(o, Mul.create(NEGATIVE_ONE, self))

	def __mul__(self, other):
		from .operators import Mul
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Mul.create(self, o)

	def __rmul__(self, other):
		from .operators import Mul
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Mul.create(o, self)

	def __pow__(self, other):
		from .operators import Pow
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Pow.create(self, o)

	def __rpow__(self, other):
		from .operators import Pow
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Pow.create(o, self)

	def __neg__(self):
		from .operators import Mul
		return Mul.create(NEGATIVE_ONE, self)


class Number(Expression):
	"""
	Float leaf. The kind is derived from the value, so 0, 1 and -1 always carry
	the Zero, One and NegativeOne kinds; make_number hands out shared instances
	for those three.
	"""

	__slots__ = ("value",)

	def __init__(self, value: float) -> None:
		v = as_float(value)
		if v == 0:
			kind = ExpressionKind.ZERO
			v = 0.0
		elif v == 1:
			kind = ExpressionKind.ONE
		elif v == -1:
			kind = ExpressionKind.NEGATIVE_ONE
		else:
			kind = ExpressionKind.NUMBER
		object.__setattr__(self, "value", v)
		super().__init__(kind, (), fast_hash(f"{kind.value}:{format_number(v)}"))

	def _compare_same_kind(self, other: Expression) -> int:
		# nan sorts after every other value
		a_nan = math.isnan(self.value)
		b_nan = math.isnan(other.value)
		if a_nan or b_nan:
			return _cmp(a_nan, b_nan)
		return _cmp(self.value, other.value)

	def _deep_equals(self, other: Expression) -> bool:
		if math.isnan(self.value):
			return math.isnan(other.value)
		return self.value == other.value

	@property
	def is_number(self) -> bool:
		return True

	def to_string(self) -> str:
		return format_number(self.value)

	def __repr__(self) -> str:
		return f"Number({format_number(self.value)})"


class Symbol(Expression):
	"""Named leaf interned through a SymbolRegistry."""

	__slots__ = ("name", "symbol_id", "registry")

	def __init__(self, name: str, registry: Optional[SymbolRegistry] = None) -> None:
		reg = registry if registry is not None else default_registry
		object.__setattr__(self, "name", name)
		object.__setattr__(self, "registry", reg)
		object.__setattr__(self, "symbol_id", reg.get_id(name))
		super().__init__(ExpressionKind.SYMBOL, (), fast_hash(f"Symbol:{name}"))

	def _compare_same_kind(self, other: Expression) -> int:
		return _cmp(self.name, other.name)

	def _deep_equals(self, other: Expression) -> bool:
		if self.registry is other.registry:
			return self.symbol_id == other.symbol_id
		return self.name == other.name

	@property
	def is_symbol(self) -> bool:
		return True

	def get_symbols(self) -> Set[str]:
		return {self.name}

	def to_string(self) -> str:
		return self.name

	def __repr__(self) -> str:
		return f"Symbol({self.name!r})"


ZERO = Number(0)
ONE = Number(1)
NEGATIVE_ONE = Number(-1)


def make_number(value) -> Number:
	"""Return a Number leaf, reusing the shared singletons for 0, 1 and -1."""
	v = as_float(value)
	if v == 0:
		return ZERO
	if v == 1:
		return ONE
	if v == -1:
		return NEGATIVE_ONE
	return Number(v)


def make_symbol(name: str, registry: Optional[SymbolRegistry] = None) -> Symbol:
	"""Return a Symbol leaf registered in `registry` (the process-wide one by default)."""
	if not isinstance(name, str):
		raise TypeError(f"symbol name must be a string, got {type(name).__name__}")
	if name == "":
		raise ValueError("symbol name must not be empty")
	return Symbol(name, registry)


def make_symbols(names: str, registry: Optional[SymbolRegistry] = None) -> Tuple[Symbol, ...]:
	"""Return one Symbol per whitespace- or comma-separated name."""
	parts = names.replace(",", " ").split()
	return tuple(make_symbol(p, registry) for p in parts)


def _coerce(value) -> Optional[Expression]:
	"""Lift real scalars to Numbers for operator sugar; None for anything else."""
	if isinstance(value, Expression):
		return value
	if isinstance(value, numbers.Real) and not isinstance(value, bool):
		return make_number(value)
	return None

"""
Computation backends behind the engine façade.
"""

from __future__ import annotations
from typing import Mapping, Optional, Protocol

from symcanon.core import Add, Expression, Mul, Pow
from symcanon.evaluation import evaluate_numerical
from .config import BackendType


class ComputationBackend(Protocol):
	type: BackendType

	def initialize(self) -> None: ...

	def add(self, left: Expression, right: Expression) -> Expression: ...

	def multiply(self, left: Expression, right: Expression) -> Expression: ...

	def power(self, base: Expression, exponent: Expression) -> Expression: ...

	def simplify(self, expr: Expression) -> Expression: ...

	def evaluate_numerical(self, expr: Expression, substitutions: Optional[Mapping[str, float]] = None) -> float: ...

	def dispose(self) -> None: ...


class PythonBackend:
	"""Pure-Python backend over the canonicalizing constructors."""

	type = BackendType.PYTHON

	def __init__(self) -> None:
		self.initialized = False

	def initialize(self) -> None:
		self.initialized = True

	def add(self, left: Expression, right: Expression) -> Expression:
		return Add.create(left, right)

	def multiply(self, left: Expression, right: Expression) -> Expression:
		return Mul.create(left, right)

	def power(self, base: Expression, exponent: Expression) -> Expression:
		return Pow.create(base, exponent)

	def simplify(self, expr: Expression) -> Expression:
		"""Identity: the create routines already return the canonical form."""
		return expr

	def evaluate_numerical(self, expr: Expression, substitutions: Optional[Mapping[str, float]] = None) -> float:
		return evaluate_numerical(expr, substitutions)

	def dispose(self) -> None:
		self.initialized = False

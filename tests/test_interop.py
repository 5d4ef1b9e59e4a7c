import math

import pytest
import sympy as sp

from symcanon.core import Add, Mul, NEGATIVE_ONE, Pow, SymbolRegistry, make_number, make_symbols
from symcanon.interop import from_sympy, to_sympy


x, y = make_symbols("x y")
sx, sy = sp.symbols("x y")


class TestToSympy:
	def test_numbers(self):
		assert to_sympy(make_number(3)) == sp.Integer(3)
		assert to_sympy(make_number(2.5)) == sp.Float(2.5)
		assert to_sympy(make_number(float("inf"))) == sp.oo
		assert to_sympy(make_number(float("-inf"))) == -sp.oo
		assert to_sympy(make_number(float("nan"))) is sp.nan

	def test_tree_is_mathematically_equal(self):
		e = Add.create(Mul.create(make_number(2), x, y), Pow.create(x, make_number(2)), make_number(1))
		converted = to_sympy(e)
		assert sp.simplify(converted - (2 * sx * sy + sx ** 2 + 1)) == 0

	def test_structure_is_preserved(self):
		e = Add.create(x, make_number(1))
		converted = to_sympy(e)
		assert isinstance(converted, sp.Add)
		assert set(converted.args) == {sp.Integer(1), sx}


class TestFromSympy:
	def test_collects_like_terms(self):
		e = from_sympy(sx * sx + 2 * sx + sx)
		assert e == Add.create(Pow.create(x, make_number(2)), Mul.create(make_number(3), x))

	def test_division_becomes_negative_power(self):
		e = from_sympy(sx / sy)
		assert e == Mul.create(x, Pow.create(y, NEGATIVE_ONE))

	def test_exact_numbers_become_floats(self):
		assert from_sympy(sp.Rational(1, 2)) == make_number(0.5)
		assert from_sympy(sp.Integer(-1)) is NEGATIVE_ONE
		assert math.isclose(from_sympy(sp.pi).value, math.pi)

	def test_unsupported_heads(self):
		with pytest.raises(ValueError):
			from_sympy(sp.sin(sx))
		with pytest.raises(ValueError):
			from_sympy(sp.I)

	def test_registry_injection(self):
		reg = SymbolRegistry()
		e = from_sympy(sx, registry=reg)
		assert e.registry is reg
		assert "x" in reg

	def test_round_trip(self):
		e = Add.create(
			make_number(3),
			x,
			Mul.create(make_number(2), y),
			Pow.create(x, make_number(2)),
			Pow.create(x, y),
		)
		assert from_sympy(to_sympy(e)) == e

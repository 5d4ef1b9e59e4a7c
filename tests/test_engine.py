import pytest

from symcanon.core import SymbolRegistry
from symcanon.engine import (
	BackendType,
	EngineConfig,
	PythonBackend,
	SymEngine,
	add,
	multiply,
	num,
	power,
	sym,
)
from symcanon.evaluation import UnboundSymbolError


@pytest.fixture
def engine():
	eng = SymEngine()
	eng.initialize()
	yield eng
	eng.dispose()


class TestNumbersAndSymbols:
	def test_numbers(self, engine):
		n1 = num(5)
		n2 = engine.number("3.14")
		assert n1.value == 5
		assert n2.to_string() == "3.14"
		assert n1.is_number
		assert engine.evaluate(num(42)) == 42

	def test_symbols(self):
		x = sym("x")
		v = sym("variable_name")
		assert x.name == "x"
		assert v.to_string() == "variable_name"
		assert x.is_symbol

	def test_engine_registry(self):
		reg = SymbolRegistry()
		eng = SymEngine(registry=reg)
		s = eng.symbol("q")
		assert s.registry is reg
		assert "q" in reg


class TestArithmetic:
	def test_addition(self, engine):
		expr = add(num(2), num(3))
		assert engine.simplify(expr).to_string() == "5"
		assert engine.evaluate(expr) == 5

	def test_symbolic_addition(self, engine):
		x, y = sym("x"), sym("y")
		expr = engine.add(x, y)
		assert engine.to_string(expr) == "(x + y)"
		assert engine.evaluate(expr, {"x": 2, "y": 3}) == 5
		assert engine.simplify(add(x, num(0))) == x

	def test_multiplication(self, engine):
		x = sym("x")
		assert engine.simplify(multiply(num(4), num(5))).to_string() == "20"
		expr = engine.multiply(x, num(3))
		assert expr.to_string() == "(3 * x)"
		assert engine.evaluate(expr, {"x": 4}) == 12
		assert engine.simplify(multiply(x, num(1))) == x
		assert multiply(x, num(0)).to_string() == "0"

	def test_power(self, engine):
		x = sym("x")
		assert power(num(2), num(3)).to_string() == "8"
		expr = engine.power(x, num(2))
		assert expr.to_string() == "(x^2)"
		assert engine.evaluate(expr, {"x": 3}) == 9
		assert power(x, num(0)).to_string() == "1"
		assert power(x, num(1)) == x

	def test_nested(self, engine):
		x = sym("x")
		expr = multiply(add(x, num(1)), add(x, num(2)))
		assert engine.evaluate(expr, {"x": 3}) == 20

	def test_get_symbols(self, engine):
		x, y = sym("x"), sym("y")
		expr = add(multiply(x, y), power(x, num(2)))
		assert engine.get_symbols(expr) == {"x", "y"}


class TestLifecycle:
	def test_defaults(self):
		cfg = EngineConfig()
		assert cfg.default_backend is BackendType.PYTHON
		assert cfg.precision_bits == 64
		assert cfg.max_simplification_steps == 100

	def test_initialize_records_event(self, engine):
		assert engine.backend_type is BackendType.PYTHON
		assert isinstance(engine.backend, PythonBackend)
		assert engine.backend.initialized
		assert engine.events[0].kind == "initialize"
		assert engine.events[0].payload == {"backend": "python"}

	def test_unknown_backend(self, engine):
		with pytest.raises(ValueError, match="Unknown backend type"):
			engine.initialize("gpu")

	def test_switch_backend(self, engine):
		engine.switch_backend("python")
		kinds = [ev.kind for ev in engine.events]
		assert kinds == ["initialize", "initialize", "switch_backend"]
		assert engine.events[-1].payload == {"from": "python", "to": "python"}

	def test_evaluation_failure_is_recorded(self, engine):
		with pytest.raises(UnboundSymbolError):
			engine.evaluate(sym("x"), {})
		last = engine.events[-1]
		assert last.kind == "evaluation_error"
		assert last.payload["error"] == "UnboundSymbolError"

	def test_events_can_be_disabled(self):
		eng = SymEngine(EngineConfig(record_events=False))
		eng.initialize()
		eng.dispose()
		assert eng.events == []

	def test_dispose(self):
		eng = SymEngine()
		eng.initialize()
		eng.dispose()
		assert not eng.backend.initialized
		assert eng.events[-1].kind == "dispose"

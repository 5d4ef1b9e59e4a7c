"""
Float64 helpers shared by construction and evaluation.

Exponentiation goes through numpy so that IEEE semantics hold without Python's
exceptions: overflow gives ±inf, a negative base with a fractional exponent
gives nan, and no ComplexWarning/OverflowError escapes.
"""

from __future__ import annotations
import math
import numbers
import numpy as np


def as_float(value) -> float:
	"""Coerce a real scalar to a Python float; reject bools and non-reals."""
	if isinstance(value, bool) or not isinstance(value, numbers.Real):
		raise TypeError(f"expected a real number, got {type(value).__name__}")
	return float(value)


def float_pow(base: float, exponent: float) -> float:
	"""Return base ** exponent with float64 semantics and warnings suppressed."""
	with np.errstate(all="ignore"):
		return float(np.power(np.float64(base), np.float64(exponent)))


def format_number(value: float) -> str:
	"""
	Canonical decimal literal for a float: integral finite values print without
	a fractional part, everything else uses the shortest round-tripping repr.
	"""
	if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
		return str(int(value))
	return repr(value)

"""
Evaluation of canonical expressions.

Public API re-export:
	evaluate_numerical, evaluate_array     — scalar and numpy reductions
	substitute                             — partial, canonical substitution
	numeric_fingerprint, numerically_equivalent
	EvaluationError, UnboundSymbolError, UnevaluableError
"""

from .numeric import (
	NumericEvaluator,
	EvaluationError,
	UnboundSymbolError,
	UnevaluableError,
	evaluate_numerical,
	evaluate_array,
)
from .substitution import substitute
from .fingerprint import NumericFingerprint, numeric_fingerprint, numerically_equivalent

__all__ = [
	"NumericEvaluator", "EvaluationError", "UnboundSymbolError", "UnevaluableError",
	"evaluate_numerical", "evaluate_array", "substitute",
	"NumericFingerprint", "numeric_fingerprint", "numerically_equivalent",
]

"""
Deterministic numeric fingerprints for canonical expressions.

The expression is evaluated on a fixed nonzero grid and the formatted values are
hashed with BLAKE2b. Structurally equal trees always share a fingerprint; trees
that differ only by algebra the canonicalizer does not perform (for example an
unexpanded product against its expansion) usually share one too, which makes the
fingerprint a cheap equivalence probe.
"""

from __future__ import annotations
from typing import Dict, List
import hashlib
import math
import numpy as np

from symcanon.core import Expression
from .numeric import EvaluationError, NumericEvaluator


GRID = np.array([-2.0, -1.0, -0.5, 0.5, 1.0, 2.0], dtype=np.float64)


class NumericFingerprint:
	"""
	Fingerprinting namespace.

	Methods
	-------
	fingerprint(expr, n_points)  -> BLAKE2b hex digest of grid evaluations
	equivalent(a, b, n_points)   -> True if both fingerprints match
	"""

	@staticmethod
	def _assignments(names: List[str], t: int) -> Dict[str, float]:
		"""Grid point t: the k-th symbol (sorted by name) gets GRID[(2t + k) % len(GRID)]."""
		out: Dict[str, float] = {}
		for k, name in enumerate(names):
			out[name] = float(GRID[(2 * t + k) % len(GRID)])
		return out

	@staticmethod
	def fingerprint(expr: Expression, n_points: int = 8) -> str:
		"""Return the hex digest of `expr` evaluated on `n_points` grid points."""
		names = sorted(expr.get_symbols())
		n_eval = max(1, int(n_points))
		out_codes: List[str] = []

		for t in range(n_eval):
			assigns = NumericFingerprint._assignments(names, t)
			try:
				v = NumericEvaluator.scalar(expr, assigns)
			except EvaluationError as e:
				print(f"numeric_fingerprint: {e}; emitting 'nan'")
				out_codes.append("nan")
				continue

			if not math.isfinite(v):
				out_codes.append("nan")
			else:
				out_codes.append(f"{v:.6f}")

		blob = "|".join(out_codes).encode("utf-8")
		h = hashlib.blake2b(blob, digest_size=8)
		return h.hexdigest()

	@staticmethod
	def equivalent(a: Expression, b: Expression, n_points: int = 8) -> bool:
		"""Compare two expressions by fingerprint (structural equality short-circuits)."""
		if a.equals(b):
			return True
		return NumericFingerprint.fingerprint(a, n_points) == NumericFingerprint.fingerprint(b, n_points)


def numeric_fingerprint(expr: Expression, n_points: int = 8) -> str:
	"""Proxy to NumericFingerprint.fingerprint."""
	return NumericFingerprint.fingerprint(expr, n_points)


def numerically_equivalent(a: Expression, b: Expression, n_points: int = 8) -> bool:
	"""Proxy to NumericFingerprint.equivalent."""
	return NumericFingerprint.equivalent(a, b, n_points)

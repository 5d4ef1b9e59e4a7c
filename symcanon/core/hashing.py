"""
Structural hashing for expression nodes.

  • fast_hash(payload)      — FNV-1a over the UTF-8 bytes of a string, unsigned 32-bit
  • combine_hashes(hashes)  — FNV-1a fold over already-computed 32-bit hashes

combine_hashes is order-sensitive: operands are hashed after canonical sorting,
so position carries meaning.
"""

from __future__ import annotations
from typing import Iterable


FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
MASK_32 = 0xFFFFFFFF


def fast_hash(payload: str) -> int:
	"""Return the 32-bit FNV-1a hash of `payload`."""
	h = FNV_OFFSET_BASIS
	for byte in payload.encode("utf-8"):
		h ^= byte
		h = (h * FNV_PRIME) & MASK_32
	return h


def combine_hashes(hashes: Iterable[int]) -> int:
	"""Fold a sequence of 32-bit hashes into one, in positional order."""
	h = FNV_OFFSET_BASIS
	for part in hashes:
		h ^= part & MASK_32
		h = (h * FNV_PRIME) & MASK_32
	return h

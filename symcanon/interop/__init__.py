"""
Interop with external expression libraries.

Public API re-export:
	SympyBridge, to_sympy, from_sympy
"""

from .sympy_bridge import SympyBridge, to_sympy, from_sympy

__all__ = ["SympyBridge", "to_sympy", "from_sympy"]

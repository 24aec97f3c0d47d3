"""Window functions for FIR filter design."""

from ._kaiser_window import kaiser_window

__all__ = [
    "kaiser_window",
]

"""Filter analysis functions for frequency response."""

from ._frequency_response_zpk import frequency_response_zpk

__all__ = [
    "frequency_response_zpk",
]

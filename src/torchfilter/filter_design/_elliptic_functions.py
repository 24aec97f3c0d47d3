"""Elliptic functions for filter design.

This module evaluates the Jacobi elliptic functions cd and sn, and the
inverse of sn, through Landen transformations of the modulus, following
Orfanidis' lecture notes on elliptic filter design [1]_.

References
----------
.. [1] S. J. Orfanidis, "Lecture Notes on Elliptic Filter Design," 2007.
"""

from __future__ import annotations

import cmath
import math
from typing import List, Union

from ._constants import ASNE_MAX_ITERATIONS, LANDEN_ITERATIONS
from ._exceptions import ConvergenceError

Number = Union[float, complex]


def landen(k: float) -> List[float]:
    """Descending Landen sequence of the modulus ``k``.

    Parameters
    ----------
    k : float
        Elliptic modulus in (0, 1).

    Returns
    -------
    list of float
        ``LANDEN_ITERATIONS`` moduli, each obtained from the previous one by
        ``k <- (k / (1 + sqrt(1 - k^2)))^2``.
    """
    sequence = []

    for _ in range(LANDEN_ITERATIONS):
        k = (k / (1 + math.sqrt(1 - k * k))) ** 2
        sequence.append(k)

    return sequence


def cde(u: Number, landen_sequence: List[float]) -> Number:
    """Evaluate ``cd(u * K, k)`` from the Landen sequence of ``k``."""
    if isinstance(u, complex):
        seed = cmath.cos(math.pi * u / 2)
    else:
        seed = math.cos(math.pi * u / 2)

    return _ascend(1 / seed, landen_sequence)


def sne(u: Number, landen_sequence: List[float]) -> Number:
    """Evaluate ``sn(u * K, k)`` from the Landen sequence of ``k``."""
    if isinstance(u, complex):
        seed = cmath.sin(math.pi * u / 2)
    else:
        seed = math.sin(math.pi * u / 2)

    return _ascend(1 / seed, landen_sequence)


def _ascend(winv: Number, landen_sequence: List[float]) -> Number:
    # Undo the Landen transformations from the smallest modulus upwards
    for k in reversed(landen_sequence):
        winv = 1 / (1 + k) * (winv + k / winv)

    return 1 / winv


def asne(w: Number, k: float) -> complex:
    """Inverse of :func:`sne`.

    Solves ``w = sn(u * K, k)`` for ``u``.

    Parameters
    ----------
    w : float or complex
        Value of the elliptic function.
    k : float
        Elliptic modulus in (0, 1).

    Returns
    -------
    complex
        The normalized argument ``u``.

    Raises
    ------
    ConvergenceError
        If successive iterates never compare equal.

    Notes
    -----
    The iteration stops when an iterate is exactly equal to its predecessor,
    which happens once the descending modulus underflows to zero.
    """
    w = complex(w)
    previous = None

    for _ in range(ASNE_MAX_ITERATIONS):
        if w == previous:
            return 2 * cmath.asin(w) / math.pi

        previous = w
        k_previous = k

        k = (k / (1 + math.sqrt(1 - k * k))) ** 2

        w = 2 * w / ((1 + k) * (1 + cmath.sqrt(1 - k_previous**2 * w**2)))

    raise ConvergenceError(
        f"Inverse elliptic sn did not converge in {ASNE_MAX_ITERATIONS} "
        f"iterations for w={w}, k={k}"
    )

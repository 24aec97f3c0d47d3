"""Kaiser window FIR filter order estimation."""

import math
from typing import Tuple

from ._constants import KAISER_ATTENUATION_DB
from ._exceptions import SpecificationError


def kaiser_order(
    transition_width: float,
    attenuation_db: float = KAISER_ATTENUATION_DB,
) -> Tuple[int, float]:
    """
    Estimate the length and shape of a Kaiser window FIR design.

    Parameters
    ----------
    transition_width : float
        Width of the transition band as a fraction of the Nyquist frequency.
    attenuation_db : float, optional
        Stopband attenuation in decibels. Default is 60.

    Returns
    -------
    num_taps : int
        Number of taps.
    alpha : float
        Kaiser shape parameter divided by pi (beta / pi).

    Notes
    -----
    Kaiser's empirical formulas [1]_:

    .. math::
        N = \\lceil (A - 7.95) / (2.285 \\pi \\Delta\\omega) \\rceil + 1

    .. math::
        \\beta = \\begin{cases}
            0.1102 (A - 8.7) & A > 50 \\\\
            0.5842 (A - 21)^{0.4} + 0.07886 (A - 21) & 21 \\le A \\le 50 \\\\
            0 & A < 21
        \\end{cases}

    Multiply ``alpha`` by pi to obtain the ``beta`` of
    :func:`~torchfilter.window_function.kaiser_window`.

    Examples
    --------
    >>> num_taps, alpha = kaiser_order(0.1, 60.0)
    >>> num_taps
    74

    References
    ----------
    .. [1] J. F. Kaiser, "Nonrecursive Digital Filter Design Using the
           I0-sinh Window Function," Proc. IEEE ISCAS, 1974.
    """
    if transition_width <= 0:
        raise SpecificationError(
            f"Transition width must be positive, got {transition_width}"
        )

    num_taps = (
        math.ceil(
            (attenuation_db - 7.95) / (math.pi * 2.285 * transition_width)
        )
        + 1
    )

    if attenuation_db > 50:
        beta = 0.1102 * (attenuation_db - 8.7)
    elif attenuation_db >= 21:
        beta = 0.5842 * (attenuation_db - 21) ** 0.4 + 0.07886 * (
            attenuation_db - 21
        )
    else:
        beta = 0.0

    return num_taps, beta / math.pi

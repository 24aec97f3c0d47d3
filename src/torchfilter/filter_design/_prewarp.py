"""Frequency prewarping for the bilinear transform."""

import math

from ._filter_type import Bandpass, Bandstop, FilterType, Highpass, Lowpass


def prewarp(filter_type: FilterType) -> FilterType:
    """
    Prewarp the frequencies of a digital band shape.

    Maps every normalized frequency w to 4 * tan(pi * w / 2), the analog
    frequency that the bilinear transform at a sampling frequency of 2 sends
    back to w. Designing the analog filter at the prewarped frequencies keeps
    the digital band edges where they were requested.

    Parameters
    ----------
    filter_type : Lowpass, Highpass, Bandpass or Bandstop
        Band shape with frequencies as fractions of Nyquist.

    Returns
    -------
    FilterType
        Band shape of the same type holding analog frequencies (rad/s).
    """
    if isinstance(filter_type, (Lowpass, Highpass)):
        return type(filter_type)(_warp(filter_type.w))
    elif isinstance(filter_type, (Bandpass, Bandstop)):
        return type(filter_type)(_warp(filter_type.w1), _warp(filter_type.w2))
    else:
        raise TypeError(
            f"Unsupported filter type: {type(filter_type).__name__}"
        )


def _warp(w: float) -> float:
    return 4 * math.tan(math.pi * w / 2)

"""Frequency transformation of a lowpass prototype to a band shape."""

from ._filter_type import Bandpass, Bandstop, FilterType, Highpass, Lowpass
from ._lowpass_to_bandpass_zpk import lowpass_to_bandpass_zpk
from ._lowpass_to_bandstop_zpk import lowpass_to_bandstop_zpk
from ._lowpass_to_highpass_zpk import lowpass_to_highpass_zpk
from ._lowpass_to_lowpass_zpk import lowpass_to_lowpass_zpk
from ._zeros_poles_gain import (
    ZerosPolesGain,
    ZerosPolesGainLike,
    as_zeros_poles_gain,
)


def transform_prototype(
    filter_type: FilterType,
    prototype: ZerosPolesGainLike,
) -> ZerosPolesGain:
    """
    Transform a lowpass prototype into the requested band shape.

    Parameters
    ----------
    filter_type : Lowpass, Highpass, Bandpass or Bandstop
        Target band shape. Its frequencies are used as analog frequencies
        (rad/s).
    prototype : ZerosPolesGain or tuple
        Analog lowpass prototype with cutoff 1 rad/s, as a ``ZerosPolesGain``,
        a ``(zeros, poles, gain)`` triple or a ``(numerator, denominator)``
        pair.

    Returns
    -------
    ZerosPolesGain
        Analog filter with the requested band shape.

    Examples
    --------
    >>> from torchfilter.filter_design import (
    ...     Bandpass, butterworth_prototype, transform_prototype,
    ... )
    >>> zeros, poles, gain = transform_prototype(
    ...     Bandpass(1.0, 2.0), butterworth_prototype(4)
    ... )
    >>> poles.shape
    torch.Size([8])
    """
    zeros, poles, gain = as_zeros_poles_gain(prototype)

    if isinstance(filter_type, Lowpass):
        return lowpass_to_lowpass_zpk(zeros, poles, gain, filter_type.w)
    elif isinstance(filter_type, Highpass):
        return lowpass_to_highpass_zpk(zeros, poles, gain, filter_type.w)
    elif isinstance(filter_type, Bandpass):
        return lowpass_to_bandpass_zpk(
            zeros, poles, gain, filter_type.w1, filter_type.w2
        )
    elif isinstance(filter_type, Bandstop):
        return lowpass_to_bandstop_zpk(
            zeros, poles, gain, filter_type.w1, filter_type.w2
        )
    else:
        raise TypeError(
            f"Unsupported filter type: {type(filter_type).__name__}"
        )


def analog_filter(
    filter_type: FilterType,
    prototype: ZerosPolesGainLike,
) -> ZerosPolesGain:
    """Design an analog filter; same as :func:`transform_prototype`."""
    return transform_prototype(filter_type, prototype)

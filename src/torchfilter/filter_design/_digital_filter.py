"""Digital filter design from an analog prototype or an FIR window."""

from typing import Union

from torch import Tensor

from ._bilinear_transform_zpk import bilinear_transform_zpk
from ._constants import NORMALIZED_SAMPLING_FREQUENCY
from ._filter_type import FilterType
from ._fir_prototype import fir_prototype, scale_factor
from ._fir_window import FIRWindow
from ._prewarp import prewarp
from ._transform_prototype import transform_prototype
from ._zeros_poles_gain import ZerosPolesGain, ZerosPolesGainLike


def digital_filter(
    filter_type: FilterType,
    prototype: Union[ZerosPolesGainLike, FIRWindow],
) -> Union[ZerosPolesGain, Tensor]:
    """
    Design a digital filter.

    Parameters
    ----------
    filter_type : Lowpass, Highpass, Bandpass or Bandstop
        Band shape with frequencies as fractions of Nyquist, usually built
        with :func:`lowpass`, :func:`highpass`, :func:`bandpass` or
        :func:`bandstop`.
    prototype : ZerosPolesGain, tuple or FIRWindow
        Either an analog lowpass prototype with cutoff 1 rad/s (IIR design),
        or an :class:`FIRWindow` (FIR design).

    Returns
    -------
    ZerosPolesGain
        Zeros, poles and gain of the digital IIR filter, if ``prototype`` is
        an analog prototype.
    Tensor
        FIR taps, if ``prototype`` is an :class:`FIRWindow`.

    Notes
    -----
    The IIR design prewarps the band edges, transforms the prototype to the
    band shape, and applies the bilinear transform at a sampling frequency of
    2, where Nyquist is 1 in the units of the band shape.

    The FIR design multiplies the ideal response of the band shape by the
    window and, if ``prototype.scale`` is set, divides the taps by their
    :func:`scale_factor`.

    Examples
    --------
    >>> from torchfilter.filter_design import (
    ...     FIRWindow, butterworth_prototype, digital_filter, lowpass,
    ... )
    >>> zeros, poles, gain = digital_filter(lowpass(0.2), butterworth_prototype(4))
    >>> poles.shape
    torch.Size([4])
    >>> taps = digital_filter(lowpass(0.2), FIRWindow.from_transition_width(0.1))
    >>> taps.shape
    torch.Size([74])
    """
    if isinstance(prototype, FIRWindow):
        return _fir_filter(filter_type, prototype)

    analog = transform_prototype(prewarp(filter_type), prototype)

    return bilinear_transform_zpk(
        *analog, sampling_frequency=NORMALIZED_SAMPLING_FREQUENCY
    )


def _fir_filter(filter_type: FilterType, window: FIRWindow) -> Tensor:
    coefficients = fir_prototype(
        window.num_taps,
        filter_type,
        dtype=window.window.dtype,
        device=window.window.device,
    )
    assert coefficients.numel() == window.num_taps

    h = coefficients * window.window

    if window.scale:
        h = h * (1 / scale_factor(h, filter_type))

    return h

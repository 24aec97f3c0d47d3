"""Polyphase lowpass filters for sample rate conversion."""

import math
from fractions import Fraction
from typing import Optional, Union

import torch
from torch import Tensor

from ..window_function import kaiser_window
from ._constants import (
    KAISER_ATTENUATION_DB,
    RESAMPLE_NUM_PHASES,
    RESAMPLE_TRANSITION_RATIO,
)
from ._digital_filter import digital_filter
from ._exceptions import SpecificationError
from ._filter_type import lowpass
from ._fir_window import FIRWindow
from ._kaiser_order import kaiser_order


def resample_filter(
    rate: Union[float, Fraction],
    num_phases: Optional[int] = None,
    relative_bandwidth: float = 1.0,
    attenuation_db: float = KAISER_ATTENUATION_DB,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Design the prototype filter of a polyphase resampler.

    Parameters
    ----------
    rate : float or Fraction
        Output rate divided by input rate. A :class:`fractions.Fraction`
        designs a rational resampler that interpolates by the numerator and
        decimates by the denominator; any other number designs an arbitrary
        rate resampler.
    num_phases : int, optional
        Number of polyphase branches (interpolation factor). Defaults to 32
        for arbitrary rates and to the numerator for rational rates; for a
        rational rate it must equal the numerator if given.
    relative_bandwidth : float, optional
        Cutoff relative to the Nyquist frequency of the slower side.
        Default is 1.0.
    attenuation_db : float, optional
        Stopband attenuation in decibels. Default is 60.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.float64.
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    Tensor
        Odd-length Kaiser window lowpass taps with a DC gain of
        ``num_phases``, so every polyphase branch has unit gain.

    Raises
    ------
    SpecificationError
        If ``rate`` is not positive.
    ValueError
        If ``num_phases`` disagrees with the numerator of a rational rate.

    Notes
    -----
    The cutoff is ``min(1, rate) / num_phases * relative_bandwidth`` for
    arbitrary rates and ``min(1/P, 1/Q) * relative_bandwidth`` for a rate
    P/Q. The transition band is a fifth of the cutoff. The Kaiser tap count
    is rounded up to a multiple of ``num_phases`` (otherwise the missing taps
    would be filled with zeros), then up to an odd length.

    Examples
    --------
    >>> from fractions import Fraction
    >>> h = resample_filter(Fraction(2, 3))
    >>> h.numel() % 2
    1
    """
    if rate <= 0:
        raise SpecificationError(f"Resampling rate must be positive, got {rate}")

    if isinstance(rate, Fraction):
        if num_phases is not None and num_phases != rate.numerator:
            raise ValueError(
                f"num_phases ({num_phases}) must equal the numerator of "
                f"rate ({rate})"
            )

        num_phases = rate.numerator
        nyquist = min(1 / rate.numerator, 1 / rate.denominator)
    else:
        if num_phases is None:
            num_phases = RESAMPLE_NUM_PHASES

        nyquist = (1.0 if rate >= 1.0 else float(rate)) / num_phases

    cutoff = nyquist * relative_bandwidth
    transition_width = cutoff * RESAMPLE_TRANSITION_RATIO

    num_taps, alpha = kaiser_order(transition_width, attenuation_db)

    num_taps = num_phases * math.ceil(num_taps / num_phases)

    if num_taps % 2 == 0:
        num_taps += 1

    window = kaiser_window(
        num_taps,
        math.pi * alpha,
        dtype=dtype or torch.float64,
        device=device,
    )

    h = digital_filter(lowpass(cutoff), FIRWindow(window))

    return h * num_phases

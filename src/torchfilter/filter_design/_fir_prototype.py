"""Ideal (unwindowed) FIR responses for each band shape."""

import math
from typing import Optional

import torch
from torch import Tensor

from ._exceptions import InvalidNumTapsError
from ._filter_type import Bandpass, Bandstop, FilterType, Highpass, Lowpass


def fir_prototype(
    num_taps: int,
    filter_type: FilterType,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Truncated ideal impulse response of a band shape.

    Parameters
    ----------
    num_taps : int
        Number of taps. Must be odd for highpass and bandstop filters.
    filter_type : Lowpass, Highpass, Bandpass or Bandstop
        Band shape with frequencies as fractions of Nyquist.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.float64.
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    Tensor
        Taps of shape (num_taps,), centered on (num_taps - 1) / 2.

    Raises
    ------
    InvalidNumTapsError
        If ``num_taps`` is not positive, or is even for a highpass or
        bandstop filter.

    Notes
    -----
    With m = k - (num_taps - 1) / 2 and the normalized sinc:

    - lowpass: w * sinc(w * m)
    - bandpass: w2 * sinc(w2 * m) - w1 * sinc(w1 * m)
    - highpass: delta(m) - w * sinc(w * m)
    - bandstop: delta(m) + w1 * sinc(w1 * m) - w2 * sinc(w2 * m)

    Highpass and bandstop responses are obtained by spectral inversion, which
    needs a center tap; an even length would leave a zero at Nyquist.
    """
    if num_taps < 1:
        raise InvalidNumTapsError(
            f"num_taps must be at least 1, got {num_taps}"
        )

    if dtype is None:
        dtype = torch.float64
    if device is None:
        device = torch.device("cpu")

    k = torch.arange(num_taps, dtype=torch.float64, device=device)
    m = k - (num_taps - 1) / 2

    if isinstance(filter_type, Lowpass):
        h = _sinc(filter_type.w, m)
    elif isinstance(filter_type, Bandpass):
        h = _sinc(filter_type.w2, m) - _sinc(filter_type.w1, m)
    elif isinstance(filter_type, Highpass):
        _check_odd(num_taps, "highpass")
        h = _impulse(num_taps, m) - _sinc(filter_type.w, m)
    elif isinstance(filter_type, Bandstop):
        _check_odd(num_taps, "bandstop")
        h = (
            _impulse(num_taps, m)
            + _sinc(filter_type.w1, m)
            - _sinc(filter_type.w2, m)
        )
    else:
        raise TypeError(
            f"Unsupported filter type: {type(filter_type).__name__}"
        )

    return h.to(dtype)


def scale_factor(coefficients: Tensor, filter_type: FilterType) -> Tensor:
    """
    Gain of FIR taps at the reference frequency of a band shape.

    Parameters
    ----------
    coefficients : Tensor
        FIR taps, shape (num_taps,).
    filter_type : Lowpass, Highpass, Bandpass or Bandstop
        Band shape the taps were designed for.

    Returns
    -------
    Tensor
        Scalar response at DC (lowpass, bandstop), the alternating sum
        (highpass), or the response at the center of the band (bandpass).
        Dividing the taps by this value gives unit gain at that frequency.
    """
    num_taps = coefficients.numel()

    if isinstance(filter_type, (Lowpass, Bandstop)):
        return coefficients.sum()
    elif isinstance(filter_type, Highpass):
        signs = torch.ones(
            num_taps, dtype=coefficients.dtype, device=coefficients.device
        )
        signs[1::2] = -1

        return (coefficients * signs).sum()
    elif isinstance(filter_type, Bandpass):
        frequency = (filter_type.w1 + filter_type.w2) / 2

        k = torch.arange(
            num_taps, dtype=coefficients.dtype, device=coefficients.device
        )
        m = k - (num_taps - 1) / 2

        return (coefficients * torch.cos(math.pi * frequency * m)).sum()
    else:
        raise TypeError(
            f"Unsupported filter type: {type(filter_type).__name__}"
        )


def _sinc(w: float, m: Tensor) -> Tensor:
    return w * torch.sinc(w * m)


def _impulse(num_taps: int, m: Tensor) -> Tensor:
    impulse = torch.zeros_like(m)
    impulse[num_taps // 2] = 1

    return impulse


def _check_odd(num_taps: int, name: str) -> None:
    if num_taps % 2 == 0:
        raise InvalidNumTapsError(
            f"FIR {name} filters must have an odd number of coefficients, "
            f"got {num_taps}"
        )

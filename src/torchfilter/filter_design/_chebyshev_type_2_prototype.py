"""Chebyshev Type II analog lowpass filter prototype."""

import math
import warnings
from typing import Optional

import torch

from ._chebyshev_type_1_prototype import _chebyshev_poles
from ._exceptions import (
    FilterDesignWarning,
    InvalidOrderError,
    InvalidRippleError,
)
from ._zeros_poles_gain import ZerosPolesGain, _complex_dtype


def chebyshev_type_2_prototype(
    order: int,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> ZerosPolesGain:
    """
    Design an analog Chebyshev Type II lowpass filter prototype.

    Returns the zeros, poles, and gain of a normalized analog Chebyshev Type II
    lowpass filter with the specified stopband attenuation. The filter has
    monotonic passband and equiripple stopband.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    stopband_attenuation_db : float
        Minimum attenuation in the stopband in decibels. Must be non-negative.
        Common values: 20 dB, 40 dB, 60 dB.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Zeros of the filter (on imaginary axis), complex tensor.
    poles : Tensor
        Poles of the filter, complex tensor of shape (order,).
    gain : Tensor
        System gain, scalar tensor.

    Notes
    -----
    The Chebyshev Type II filter (also called inverse Chebyshev) has:
    - Monotonically decreasing passband (like Butterworth)
    - Equiripple stopband with attenuation oscillating at the specified level

    The poles are the reciprocals of the Chebyshev Type I poles computed with
    the reciprocal ripple factor

    .. math::
        \\epsilon = 1 / \\sqrt{10^{R_s/10} - 1}

    The zeros are located at:

    .. math::
        z_i = -j / \\cos(\\theta_i)

    and their conjugates, where theta_i = pi * (2i - 1) / (2n) for
    i = 1, ..., n // 2. For odd order there is one fewer zero than poles.

    Examples
    --------
    >>> import torch
    >>> from torchfilter.filter_design import chebyshev_type_2_prototype
    >>> zeros, poles, gain = chebyshev_type_2_prototype(4, stopband_attenuation_db=40.0)
    >>> zeros.shape, poles.shape
    (torch.Size([4]), torch.Size([4]))
    """
    if order < 1:
        raise InvalidOrderError(f"Filter order must be positive, got {order}")
    if stopband_attenuation_db < 0:
        raise InvalidRippleError(
            f"Stopband attenuation must be non-negative, got {stopband_attenuation_db}"
        )
    if stopband_attenuation_db == 0:
        warnings.warn(
            "Zero stopband attenuation makes every pole cancel a zero",
            FilterDesignWarning,
            stacklevel=2,
        )

    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    complex_dtype = _complex_dtype(dtype)

    denominator = 10 ** (stopband_attenuation_db / 10) - 1
    eps = math.inf if denominator == 0 else 1.0 / math.sqrt(denominator)

    poles = 1.0 / _chebyshev_poles(order, eps, device=device)

    i = torch.arange(1, order // 2 + 1, dtype=torch.float64, device=device)
    theta = math.pi * (2 * i - 1) / (2 * order)
    upper = torch.complex(torch.zeros_like(theta), -1.0 / torch.cos(theta))

    zeros = torch.stack([upper, upper.conj()], dim=-1).reshape(-1)

    # Normalize the DC response to 1 pair by pair
    pair_poles = poles[1 : 2 * (order // 2) : 2]
    gain = torch.prod(pair_poles.abs() ** 2 / upper.abs() ** 2)

    if order % 2 == 1:
        gain = gain * -poles[-1].real

    return ZerosPolesGain(
        zeros.to(complex_dtype), poles.to(complex_dtype), gain.to(dtype)
    )

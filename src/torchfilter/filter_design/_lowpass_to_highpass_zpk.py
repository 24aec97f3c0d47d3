"""Lowpass to highpass frequency transform for analog filters."""

import math
from typing import Union

import torch
from torch import Tensor

from ._zeros_poles_gain import ZerosPolesGain


def lowpass_to_highpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    cutoff_frequency: Union[float, Tensor] = 1.0,
) -> ZerosPolesGain:
    """
    Transform a lowpass filter to a highpass filter.

    Performs the analog transformation s -> cutoff_frequency/s, which converts a
    lowpass filter with cutoff 1 rad/s to a highpass filter with
    cutoff cutoff_frequency rad/s.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the analog lowpass filter.
    poles : Tensor
        Poles of the analog lowpass filter.
    gain : Tensor
        System gain of the analog lowpass filter.
    cutoff_frequency : float or Tensor
        Cutoff frequency of the highpass filter (rad/s).

    Returns
    -------
    zeros_new : Tensor
        Zeros of the highpass filter.
    poles_new : Tensor
        Poles of the highpass filter.
    gain_new : Tensor
        System gain of the highpass filter.

    Notes
    -----
    The transformation s -> cutoff_frequency/s:
    - Maps poles p_k to cutoff_frequency/p_k
    - Maps zeros z_k to cutoff_frequency/z_k
    - Pads both zeros and poles with entries at s=0 up to
      max(len(zeros), len(poles))
    - Sets the gain to gain * real(prod(-zeros)) / real(prod(-poles))

    Each product is snapped to exactly 1 when it lies within
    len(poles) units in the last place of 1, so that a product which is
    mathematically 1 does not carry round-off into the gain.
    """
    n_zeros = zeros.numel()
    n_poles = poles.numel()
    n = max(n_zeros, n_poles)

    complex_dtype = torch.promote_types(zeros.dtype, poles.dtype)

    zeros_new = torch.cat(
        [
            cutoff_frequency / zeros.to(complex_dtype),
            torch.zeros(n - n_zeros, dtype=complex_dtype, device=zeros.device),
        ]
    )
    poles_new = torch.cat(
        [
            cutoff_frequency / poles.to(complex_dtype),
            torch.zeros(n - n_poles, dtype=complex_dtype, device=poles.device),
        ]
    )

    # The pole count sets the tolerance for both products
    num = _snap_to_one(torch.prod(-zeros).real, n_poles)
    den = _snap_to_one(torch.prod(-poles).real, n_poles)

    gain_new = gain * num / den

    return ZerosPolesGain(zeros_new, poles_new, gain_new.to(gain.dtype))


def _snap_to_one(value: Tensor, count: int) -> Tensor:
    """Return exactly 1 if ``value`` is within ``count`` ulps of 1."""
    magnitude = value.abs()
    spacing = torch.nextafter(magnitude, magnitude.new_tensor(math.inf))
    spacing = spacing - magnitude

    if torch.abs(value - 1) < count * spacing:
        return torch.ones_like(value)

    return value

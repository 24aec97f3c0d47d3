"""Lowpass to bandstop frequency transform for analog filters."""

import math
from typing import Union

import torch
from torch import Tensor

from ._lowpass_to_highpass_zpk import _snap_to_one
from ._zeros_poles_gain import ZerosPolesGain


def lowpass_to_bandstop_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    low_frequency: Union[float, Tensor],
    high_frequency: Union[float, Tensor],
) -> ZerosPolesGain:
    """
    Transform a lowpass filter prototype to a bandstop filter.

    Performs the analog transformation
    s -> s * (w2 - w1) / (s^2 + w1*w2), which converts a lowpass filter with
    cutoff 1 rad/s to a bandstop filter rejecting w1 to w2 rad/s.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the analog lowpass filter prototype.
    poles : Tensor
        Poles of the analog lowpass filter prototype.
    gain : Tensor
        System gain of the analog lowpass filter prototype.
    low_frequency : float or Tensor
        Lower band edge w1 (rad/s).
    high_frequency : float or Tensor
        Upper band edge w2 (rad/s).

    Returns
    -------
    zeros_new : Tensor
        Zeros of the bandstop filter.
    poles_new : Tensor
        Poles of the bandstop filter.
    gain_new : Tensor
        System gain of the bandstop filter.

    Notes
    -----
    Each zero or pole x becomes the pair

    .. math::
        b \\mp \\sqrt{b^2 - w_1 w_2}, \\quad b = (w_2 - w_1) / (2 x)

    Both sides end up with 2 * max(len(zeros), len(poles)) entries; unmatched
    slots are filled with the conjugate pair -j*sqrt(w1*w2), +j*sqrt(w1*w2),
    the notch at the geometric center of the band. The gain is
    gain * real(prod(-zeros)) / real(prod(-poles)), with the same snapping of
    near-unit products as :func:`lowpass_to_highpass_zpk`.
    """
    n_zeros = zeros.numel()
    n_poles = poles.numel()
    n_pairs = max(n_zeros, n_poles)

    complex_dtype = torch.promote_types(zeros.dtype, poles.dtype)

    bandwidth = high_frequency - low_frequency
    product = high_frequency * low_frequency

    notch = complex(0.0, math.sqrt(float(product)))
    notch_pair = torch.tensor(
        [-notch, notch], dtype=complex_dtype, device=poles.device
    )

    zeros_new = torch.cat(
        [
            _split(zeros.to(complex_dtype), bandwidth, product),
            notch_pair.repeat(n_pairs - n_zeros),
        ]
    )
    poles_new = torch.cat(
        [
            _split(poles.to(complex_dtype), bandwidth, product),
            notch_pair.repeat(n_pairs - n_poles),
        ]
    )

    # The pole count sets the tolerance for both products
    num = _snap_to_one(torch.prod(-zeros).real, n_poles)
    den = _snap_to_one(torch.prod(-poles).real, n_poles)

    gain_new = gain * num / den

    return ZerosPolesGain(zeros_new, poles_new, gain_new.to(gain.dtype))


def _split(
    roots: Tensor,
    bandwidth: Union[float, Tensor],
    product: Union[float, Tensor],
) -> Tensor:
    b = bandwidth / 2 / roots
    pm = torch.sqrt(b**2 - product)

    return torch.stack([b - pm, b + pm], dim=-1).reshape(-1)

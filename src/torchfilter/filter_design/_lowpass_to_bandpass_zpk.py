"""Lowpass to bandpass frequency transform for analog filters."""

from typing import Union

import torch
from torch import Tensor

from ._zeros_poles_gain import ZerosPolesGain


def lowpass_to_bandpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    low_frequency: Union[float, Tensor],
    high_frequency: Union[float, Tensor],
) -> ZerosPolesGain:
    """
    Transform a lowpass filter prototype to a bandpass filter.

    Performs the analog transformation
    s -> (s^2 + w1*w2) / (s * (w2 - w1)), which converts a lowpass filter with
    cutoff 1 rad/s to a bandpass filter passing w1 to w2 rad/s.

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
        Zeros of the bandpass filter.
    poles_new : Tensor
        Poles of the bandpass filter.
    gain_new : Tensor
        System gain of the bandpass filter.

    Notes
    -----
    Each zero or pole x becomes the pair

    .. math::
        b \\pm \\sqrt{b^2 - w_1 w_2}, \\quad b = x (w_2 - w_1) / 2

    The side with fewer entries is padded with entries at s=0 so that both
    sides keep the degree difference of the prototype. The gain is multiplied
    by (w2 - w1)^(len(poles) - len(zeros)).
    """
    n_zeros = zeros.numel()
    n_poles = poles.numel()
    n_common = min(n_zeros, n_poles)

    bandwidth = high_frequency - low_frequency
    product = high_frequency * low_frequency

    zeros_new = torch.cat(
        [
            _split(zeros, bandwidth, product),
            torch.zeros(
                n_poles - n_common, dtype=zeros.dtype, device=zeros.device
            ),
        ]
    )
    poles_new = torch.cat(
        [
            _split(poles, bandwidth, product),
            torch.zeros(
                n_zeros - n_common, dtype=poles.dtype, device=poles.device
            ),
        ]
    )

    gain_new = gain * bandwidth ** (n_poles - n_zeros)

    return ZerosPolesGain(zeros_new, poles_new, gain_new)


def _split(
    roots: Tensor,
    bandwidth: Union[float, Tensor],
    product: Union[float, Tensor],
) -> Tensor:
    b = roots * (bandwidth / 2)
    pm = torch.sqrt(b**2 - product)

    return torch.stack([b + pm, b - pm], dim=-1).reshape(-1)

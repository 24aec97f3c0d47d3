"""Bilinear transform for analog to digital filter conversion."""

from typing import Union

import torch
from torch import Tensor

from ._zeros_poles_gain import ZerosPolesGain


def bilinear_transform_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    sampling_frequency: Union[float, Tensor],
) -> ZerosPolesGain:
    """
    Map an analog filter into the z-plane with the bilinear transform.

    Every root x goes to ``(2 + x / fs) / (2 - x / fs)``, the image of
    ``s = 2 fs (z - 1) / (z + 1)``. The left half-plane lands inside the unit
    circle and the imaginary axis on the circle itself.

    Parameters
    ----------
    zeros, poles : Tensor
        Roots of the analog filter.
    gain : Tensor
        Gain of the analog filter.
    sampling_frequency : float or Tensor
        Sampling frequency ``fs``. :func:`digital_filter` uses 2, which puts
        Nyquist at a normalized frequency of 1.

    Returns
    -------
    ZerosPolesGain
        Digital zeros, poles and gain.

    Notes
    -----
    Zeros at infinity, one for each pole in excess of the zeros, land on
    z = -1 (Nyquist). The gain becomes
    ``gain * real(prod(2 fs - zeros)) / real(prod(2 fs - poles))``.

    Analog frequencies are compressed by
    ``omega_d = 2 arctan(omega_a / (2 fs))``; see :func:`prewarp`.
    """
    n_zeros = zeros.numel()
    n_poles = poles.numel()

    complex_dtype = torch.promote_types(zeros.dtype, poles.dtype)

    zeros_transformed = (2 + zeros / sampling_frequency) / (
        2 - zeros / sampling_frequency
    )
    poles_digital = (2 + poles / sampling_frequency) / (
        2 - poles / sampling_frequency
    )

    # Zeros at infinity map to Nyquist
    zeros_at_nyquist = -torch.ones(
        max(n_poles - n_zeros, 0), dtype=complex_dtype, device=poles.device
    )
    zeros_digital = torch.cat(
        [zeros_transformed.to(complex_dtype), zeros_at_nyquist]
    )

    num = torch.prod(2 * sampling_frequency - zeros)
    den = torch.prod(2 * sampling_frequency - poles)
    gain_digital = gain * num.real / den.real

    return ZerosPolesGain(
        zeros_digital, poles_digital, gain_digital.to(gain.dtype)
    )

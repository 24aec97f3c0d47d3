"""Chebyshev Type I analog lowpass filter prototype."""

import math
import warnings
from typing import Optional

import torch
from torch import Tensor

from ._exceptions import (
    FilterDesignWarning,
    InvalidOrderError,
    InvalidRippleError,
)
from ._zeros_poles_gain import ZerosPolesGain, _complex_dtype


def chebyshev_type_1_prototype(
    order: int,
    passband_ripple_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> ZerosPolesGain:
    """
    Design an analog Chebyshev Type I lowpass filter prototype.

    Returns the zeros, poles, and gain of a normalized analog Chebyshev Type I
    lowpass filter with the specified passband ripple. The filter has equiripple
    passband and monotonic stopband.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    passband_ripple_db : float
        Maximum ripple in the passband in decibels. Must be non-negative.
        Common values: 0.5 dB, 1 dB, 3 dB.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Zeros of the filter (empty for Chebyshev Type I).
    poles : Tensor
        Poles of the filter, complex tensor of shape (order,).
    gain : Tensor
        System gain, scalar tensor.

    Notes
    -----
    The Chebyshev Type I filter has the property that the magnitude response
    oscillates between 1 and 1/(1+eps^2) in the passband, where:

    .. math::
        \\epsilon = \\sqrt{10^{R_p/10} - 1}

    and R_p is the passband ripple in dB.

    The poles lie on an ellipse:

    .. math::
        p_i = -\\sinh(\\mu) \\sin(\\theta_i) + j \\cosh(\\mu) \\cos(\\theta_i)

    where:
    - mu = (1/n) * arcsinh(1/eps)
    - theta_i = pi * (2i - 1) / (2n) for i = 1, ..., n // 2

    Each pole is followed by its conjugate; odd orders end with a real pole.

    The gain is the product of the squared pole magnitudes of the conjugate
    pairs, divided by sqrt(1 + eps^2) for even order (the response starts at
    the bottom of the ripple) or multiplied by the magnitude of the real pole
    for odd order.

    Examples
    --------
    >>> import torch
    >>> from torchfilter.filter_design import chebyshev_type_1_prototype
    >>> zeros, poles, gain = chebyshev_type_1_prototype(4, passband_ripple_db=1.0)
    >>> poles.shape
    torch.Size([4])
    """
    if order < 1:
        raise InvalidOrderError(f"Filter order must be positive, got {order}")
    if passband_ripple_db < 0:
        raise InvalidRippleError(
            f"Passband ripple must be non-negative, got {passband_ripple_db}"
        )
    if passband_ripple_db == 0:
        warnings.warn(
            "Zero passband ripple places the Chebyshev poles at infinity",
            FilterDesignWarning,
            stacklevel=2,
        )

    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    complex_dtype = _complex_dtype(dtype)

    # Compute epsilon from ripple: eps = sqrt(10^(Rp/10) - 1)
    eps = math.sqrt(10 ** (passband_ripple_db / 10) - 1)

    poles = _chebyshev_poles(order, eps, device=device)

    gain = torch.prod(poles[1 : 2 * (order // 2) : 2].abs() ** 2)

    if order % 2 == 0:
        gain = gain / math.sqrt(1 + eps**2)
    else:
        gain = gain * -poles[-1].real

    # No zeros for Chebyshev Type I (all-pole filter)
    zeros = torch.zeros(0, dtype=complex_dtype, device=device)

    return ZerosPolesGain(zeros, poles.to(complex_dtype), gain.to(dtype))


def _chebyshev_poles(
    order: int,
    eps: float,
    *,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Poles of the Chebyshev ellipse for ripple factor ``eps``, complex128."""
    mu = math.asinh(math.inf if eps == 0 else 1.0 / eps) / order

    b = -math.sinh(mu)
    c = math.cosh(mu)

    i = torch.arange(1, order // 2 + 1, dtype=torch.float64, device=device)
    theta = math.pi * (2 * i - 1) / (2 * order)

    upper = torch.complex(b * torch.sin(theta), c * torch.cos(theta))

    poles = torch.stack([upper, upper.conj()], dim=-1).reshape(-1)

    if order % 2 == 1:
        # theta = pi / 2 for the unpaired pole
        real_pole = torch.full(
            (1,), b, dtype=torch.complex128, device=device
        )
        poles = torch.cat([poles, real_pole])

    return poles

"""Butterworth analog lowpass filter prototype."""

import math
from typing import Optional

import torch

from ._exceptions import InvalidOrderError
from ._zeros_poles_gain import ZerosPolesGain, _complex_dtype


def butterworth_prototype(
    order: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> ZerosPolesGain:
    """
    Maximally flat analog lowpass prototype with a 1 rad/s cutoff.

    Parameters
    ----------
    order : int
        Number of poles. Must be positive.
    dtype : torch.dtype, optional
        Real dtype of the gain; poles use the matching complex dtype.
        Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    ZerosPolesGain
        No zeros, ``order`` poles and a gain of 1.

    Notes
    -----
    The poles are spread evenly over the left half of the unit circle,

    .. math::
        p_i = -\\sin\\theta_i + j \\cos\\theta_i,
        \\quad \\theta_i = \\pi (2i - 1) / (2n),

    for i = 1, ..., n // 2. Each is followed by its conjugate, and an odd
    order ends with the real pole -1.

    Examples
    --------
    >>> zeros, poles, gain = butterworth_prototype(3)
    >>> poles.shape, zeros.shape
    (torch.Size([3]), torch.Size([0]))
    """
    if order < 1:
        raise InvalidOrderError(f"Filter order must be positive, got {order}")

    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    complex_dtype = _complex_dtype(dtype)

    i = torch.arange(1, order // 2 + 1, dtype=torch.float64, device=device)
    theta = math.pi * (2 * i - 1) / (2 * order)
    upper = torch.complex(-torch.sin(theta), torch.cos(theta))

    poles = torch.stack([upper, upper.conj()], dim=-1).reshape(-1)

    if order % 2 == 1:
        poles = torch.cat(
            [poles, torch.full((1,), -1.0, dtype=torch.complex128, device=device)]
        )

    return ZerosPolesGain(
        torch.empty(0, dtype=complex_dtype, device=device),
        poles.to(complex_dtype),
        torch.tensor(1.0, dtype=dtype, device=device),
    )

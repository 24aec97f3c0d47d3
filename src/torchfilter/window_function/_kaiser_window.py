from typing import Optional, Union

import torch
from torch import Tensor


def kaiser_window(
    n: int,
    beta: Union[float, Tensor],
    *,
    dtype: Optional[torch.dtype] = None,
    layout: Optional[torch.layout] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Symmetric Kaiser window for FIR filter design.

    .. math::
        w[k] = I_0\\left(\\beta \\sqrt{1 - r_k^2}\\right) / I_0(\\beta),
        \\quad r_k = 2k / (n - 1) - 1

    for k = 0, ..., n - 1, where I_0 is the zeroth order modified Bessel
    function of the first kind.

    Parameters
    ----------
    n : int
        Window length, the number of FIR taps. Must be non-negative.
    beta : float or Tensor
        Shape parameter. Zero gives a rectangular window; increasing it
        lowers the sidelobes and widens the main lobe. For a stopband
        attenuation target use ``pi * alpha`` from
        :func:`~torchfilter.filter_design.kaiser_order`.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.float32.
    layout : torch.layout, optional
        Output layout.
    device : torch.device, optional
        Output device.

    Returns
    -------
    Tensor
        Window of shape (n,), peaking at 1 in the middle.

    Notes
    -----
    Gradients flow through a tensor ``beta``.

    Examples
    --------
    >>> kaiser_window(5, 0.0)
    tensor([1., 1., 1., 1., 1.])
    """
    if n < 0:
        raise ValueError(f"kaiser_window: n must be non-negative, got {n}")

    target_dtype = dtype or torch.float32

    if n == 0:
        return torch.empty(0, dtype=target_dtype, layout=layout, device=device)

    if n == 1:
        return torch.ones(1, dtype=target_dtype, layout=layout, device=device)

    if not isinstance(beta, Tensor):
        beta = torch.tensor(beta, dtype=target_dtype, device=device)

    k = torch.arange(n, dtype=target_dtype, device=device)
    ratio = 2 * k / (n - 1) - 1

    # Rounding can push 1 - ratio**2 slightly below zero at the end points
    argument = torch.sqrt(torch.clamp(1 - ratio**2, min=0))

    window = torch.special.i0(beta * argument) / torch.special.i0(beta)

    return window.to(dtype=target_dtype)

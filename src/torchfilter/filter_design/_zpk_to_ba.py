"""Expansion of a zeros-poles-gain filter into polynomial coefficients."""

from typing import Tuple

import torch
from torch import Tensor


def zpk_to_ba(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
) -> Tuple[Tensor, Tensor]:
    """Multiply out the roots of a filter into ``(b, a)`` coefficients.

    Parameters
    ----------
    zeros, poles : Tensor
        Roots of the numerator and denominator.
    gain : Tensor
        Scalar gain, folded into the numerator.

    Returns
    -------
    b, a : Tensor
        Real coefficients in descending powers, in the dtype of ``gain``.
        ``a[0]`` is 1.

    Notes
    -----
    The expansion runs in complex128 and keeps the real part, which loses
    nothing when complex roots come in conjugate pairs.

    Examples
    --------
    >>> from torchfilter.filter_design import butterworth_prototype
    >>> b, a = zpk_to_ba(*butterworth_prototype(2, dtype=torch.float64))
    >>> a
    tensor([1.0000, 1.4142, 1.0000], dtype=torch.float64)
    """
    b = gain * _poly_from_roots(zeros)
    a = _poly_from_roots(poles)

    return b.real.to(gain.dtype), a.real.to(gain.dtype)


def _poly_from_roots(roots: Tensor) -> Tensor:
    coeffs = torch.ones(1, dtype=torch.complex128, device=roots.device)

    # coeffs(x) * (x - r)
    for r in roots.to(torch.complex128):
        shifted = torch.cat([coeffs, coeffs.new_zeros(1)])
        scaled = torch.cat([coeffs.new_zeros(1), coeffs * r])
        coeffs = shifted - scaled

    return coeffs

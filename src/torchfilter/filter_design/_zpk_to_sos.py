"""Conversion from zeros-poles-gain to second-order sections."""

from typing import List, Tuple

import torch
from torch import Tensor

from ._exceptions import SOSNormalizationError


def zpk_to_sos(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
) -> Tensor:
    """
    Convert zeros, poles, and gain of a digital filter to second-order sections.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the filter.
    poles : Tensor
        Poles of the filter.
    gain : Tensor
        System gain.

    Returns
    -------
    sos : Tensor
        Second-order sections, shape (n_sections, 6).
        Each row is [b0, b1, b2, a0, a1, a2] with a0 = 1.

    Raises
    ------
    SOSNormalizationError
        If there are more zeros than poles.

    Notes
    -----
    Conjugate pole pairs form one section each, followed by pairs of real
    poles and, for odd order, a final first-order section. Zeros are grouped
    the same way and assigned to the sections in order. Missing zeros are
    placed at the origin, which only delays the response. The whole gain is
    applied to the numerator of the first section.
    """
    if zeros.numel() > poles.numel():
        raise SOSNormalizationError(
            f"Cannot form sections with more zeros ({zeros.numel()}) than "
            f"poles ({poles.numel()})"
        )

    if poles.numel() == 0:
        return torch.zeros((0, 6), dtype=gain.dtype, device=gain.device)

    # Pad zeros at the origin up to the number of poles
    zeros = torch.cat(
        [
            zeros.to(poles.dtype),
            torch.zeros(
                poles.numel() - zeros.numel(),
                dtype=poles.dtype,
                device=poles.device,
            ),
        ]
    )

    numerators = _quadratic_factors(zeros)
    denominators = _quadratic_factors(poles)

    sos = torch.cat(
        [
            torch.stack(numerators).to(gain.dtype),
            torch.stack(denominators).to(gain.dtype),
        ],
        dim=1,
    )

    # Gain goes into the first numerator (avoid inplace ops for autograd)
    first = torch.cat([sos[:1, :3] * gain, sos[:1, 3:]], dim=1)

    return torch.cat([first, sos[1:]])


def _quadratic_factors(roots: Tensor) -> List[Tensor]:
    """Real quadratics [1, c1, c2] whose product has the given roots."""
    real_roots, complex_roots = _separate_real_complex(roots)

    factors = []

    for r in complex_roots:
        factors.append(
            torch.stack(
                [torch.ones_like(r.real), -2 * r.real, r.real**2 + r.imag**2]
            )
        )

    for i in range(0, real_roots.numel() - 1, 2):
        r1, r2 = real_roots[i], real_roots[i + 1]
        factors.append(torch.stack([torch.ones_like(r1), -(r1 + r2), r1 * r2]))

    if real_roots.numel() % 2 == 1:
        r = real_roots[-1]
        factors.append(torch.stack([torch.ones_like(r), -r, torch.zeros_like(r)]))

    return factors


def _separate_real_complex(x: Tensor) -> Tuple[Tensor, Tensor]:
    """Separate real and complex values, keeping only one of each conjugate pair.

    A value is considered "real" if:
    - Its imaginary part is negligible relative to its real part (1e-6 relative tol)
    - OR if the entire value is very small (< 1e-6), treat as real at origin

    For complex values, we keep only the one with positive imaginary part
    from each conjugate pair.
    """
    if x.numel() == 0:
        return x.real, x

    rel_tol = 1e-6 * x.real.abs() + 1e-10
    is_negligible = x.abs() < 1e-6
    is_real = (x.imag.abs() < rel_tol) | is_negligible

    real_vals = x[is_real].real

    # For complex, keep only positive imaginary (one of each conjugate pair)
    complex_mask = ~is_real & (x.imag > 0)
    complex_vals = x[complex_mask]

    return real_vals, complex_vals

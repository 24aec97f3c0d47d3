"""Conversion from transfer function coefficients to zeros-poles-gain."""

import torch
from torch import Tensor

from ._zeros_poles_gain import ZerosPolesGain, _complex_dtype


def ba_to_zpk(
    numerator: Tensor,
    denominator: Tensor,
) -> ZerosPolesGain:
    """Factor ``(b, a)`` polynomial coefficients into roots and a gain.

    Parameters
    ----------
    numerator, denominator : Tensor
        Coefficients in descending powers. Leading zeros are ignored.

    Returns
    -------
    ZerosPolesGain
        Roots of ``b`` and ``a`` in the complex dtype matching ``b`` (the
        default dtype for integer input) and the gain ``b[0] / a[0]``.

    Raises
    ------
    ZeroDivisionError
        If every denominator coefficient is zero.

    Notes
    -----
    Roots are the eigenvalues of the companion matrix of the monic
    polynomial, found with :func:`torch.linalg.eigvals`.

    Examples
    --------
    >>> b = torch.tensor([1.0])
    >>> a = torch.tensor([1.0, 1.4142135623730951, 1.0])
    >>> zeros, poles, gain = ba_to_zpk(b, a)
    >>> poles.shape
    torch.Size([2])
    """
    real_dtype = (
        numerator.dtype
        if numerator.is_floating_point()
        else torch.get_default_dtype()
    )
    complex_dtype = _complex_dtype(real_dtype)

    # Ensure complex dtype for root finding
    b = _strip_leading_zeros(numerator.reshape(-1).to(torch.complex128))
    a = _strip_leading_zeros(denominator.reshape(-1).to(torch.complex128))

    if a.numel() == 0 or a[0] == 0:
        raise ZeroDivisionError("Denominator polynomial is zero")

    zeros = _polynomial_roots(b)
    poles = _polynomial_roots(a)

    # Gain is ratio of leading coefficients
    gain = (b[0] / a[0]).real if b.numel() > 0 else torch.tensor(0.0)

    return ZerosPolesGain(
        zeros.to(complex_dtype),
        poles.to(complex_dtype),
        gain.to(real_dtype),
    )


def _strip_leading_zeros(coeffs: Tensor) -> Tensor:
    """Remove leading zero coefficients from polynomial."""
    nonzero = (coeffs != 0).nonzero()

    if nonzero.numel() == 0:
        return coeffs[:0]

    return coeffs[nonzero[0, 0] :]


def _polynomial_roots(coeffs: Tensor) -> Tensor:
    """Find roots of polynomial using companion matrix method.

    Parameters
    ----------
    coeffs : Tensor
        Polynomial coefficients in descending order [c_n, c_{n-1}, ..., c_0]
        representing c_n*x^n + c_{n-1}*x^{n-1} + ... + c_0.

    Returns
    -------
    roots : Tensor
        Roots of the polynomial.
    """
    n = coeffs.numel() - 1
    if n <= 0:
        return torch.zeros(0, dtype=torch.complex128, device=coeffs.device)

    # Normalize to monic polynomial (leading coefficient = 1)
    coeffs = coeffs / coeffs[0]

    # Companion matrix: -coefficients in the first row, 1s on the subdiagonal
    companion = torch.zeros(
        (n, n), dtype=torch.complex128, device=coeffs.device
    )
    companion[0, :] = -coeffs[1:]

    if n > 1:
        companion[1:, :-1] = torch.eye(
            n - 1, dtype=torch.complex128, device=coeffs.device
        )

    # Eigenvalues of companion matrix are roots of polynomial
    return torch.linalg.eigvals(companion)

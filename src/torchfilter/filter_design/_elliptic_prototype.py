"""Elliptic (Cauer) analog lowpass filter prototype."""

import math
from typing import Optional

import torch

from ._elliptic_functions import asne, cde, landen, sne
from ._exceptions import (
    InvalidOrderError,
    InvalidRippleError,
    SpecificationError,
)
from ._zeros_poles_gain import ZerosPolesGain, _complex_dtype


def elliptic_prototype(
    order: int,
    passband_ripple_db: float,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> ZerosPolesGain:
    """
    Design an analog elliptic (Cauer) lowpass filter prototype.

    Returns the zeros, poles, and gain of a normalized analog elliptic
    lowpass filter with the specified passband ripple and stopband attenuation.
    Elliptic filters provide the steepest rolloff for a given filter order
    at the cost of ripple in both passband and stopband.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    passband_ripple_db : float
        Maximum ripple in the passband in decibels. Must be positive.
        Common values: 0.5 dB, 1 dB, 3 dB.
    stopband_attenuation_db : float
        Minimum attenuation in the stopband in decibels. Must exceed the
        passband ripple. Common values: 20 dB, 40 dB, 60 dB.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Zeros of the filter (on imaginary axis), complex tensor.
    poles : Tensor
        Poles of the filter, complex tensor of shape (order,).
    gain : Tensor
        System gain, scalar tensor.

    Raises
    ------
    InvalidOrderError
        If ``order`` is not positive.
    InvalidRippleError
        If ``passband_ripple_db`` is not positive.
    SpecificationError
        If the stopband attenuation does not exceed the passband ripple.

    Notes
    -----
    The elliptic filter (also called Cauer or Zolotarev filter) has:
    - Equiripple passband with specified maximum ripple
    - Equiripple stopband with specified minimum attenuation
    - Sharpest possible transition band for given order and ripple specs

    The design follows Orfanidis [1]_. The selectivity modulus ``k`` is solved
    from the degree equation with the ripple modulus
    ``k1 = eps_p / eps_s``; zeros are ``-j / (k cd(u_i K, k))`` and poles
    ``j cd((u_i - j v0) K, k)`` for ``u_i = (2i - 1) / n``, where ``v0`` comes
    from the inverse sn of ``j / eps_p``. The elliptic functions are evaluated
    through Landen transformations.

    For even order filters there are n zeros and n poles. For odd order
    filters there are n-1 zeros and n poles (one real pole).

    Examples
    --------
    >>> import torch
    >>> from torchfilter.filter_design import elliptic_prototype
    >>> zeros, poles, gain = elliptic_prototype(4, passband_ripple_db=1.0, stopband_attenuation_db=40.0)
    >>> zeros.shape, poles.shape
    (torch.Size([4]), torch.Size([4]))

    References
    ----------
    .. [1] S. J. Orfanidis, "Lecture Notes on Elliptic Filter Design," 2007.
    """
    if order < 1:
        raise InvalidOrderError(f"Filter order must be positive, got {order}")
    if passband_ripple_db <= 0:
        raise InvalidRippleError(
            f"Passband ripple must be positive, got {passband_ripple_db}"
        )
    if passband_ripple_db >= stopband_attenuation_db:
        raise SpecificationError(
            f"Passband ripple ({passband_ripple_db} dB) must be less than "
            f"stopband attenuation ({stopband_attenuation_db} dB)"
        )

    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    complex_dtype = _complex_dtype(dtype)

    eps_p = math.sqrt(10 ** (passband_ripple_db / 10) - 1)
    eps_s = math.sqrt(10 ** (stopband_attenuation_db / 10) - 1)

    k1 = eps_p / eps_s
    if k1 >= 1:
        raise SpecificationError("Filter order is too high for parameters")

    # Degree equation solved for the complementary selectivity modulus
    k1_complement_sq = 1 - k1 * k1
    k1_complement_landen = landen(math.sqrt(k1_complement_sq))

    k_complement = 1.0
    for i in range(1, order // 2 + 1):
        k_complement *= sne((2 * i - 1) / order, k1_complement_landen)
    k_complement = k1_complement_sq ** (order / 2) * k_complement**4

    k = math.sqrt(1 - k_complement * k_complement)
    k_landen = landen(k)

    v0 = -1j / order * asne(1j / eps_p, k1)

    zeros = []
    poles = []
    gain = 1.0

    for i in range(1, order // 2 + 1):
        u = (2 * i - 1) / order

        zero = complex(0.0, -1 / (k * cde(u, k_landen)))
        zeros.extend([zero, zero.conjugate()])

        pole = 1j * cde(u - 1j * v0, k_landen)
        poles.extend([pole.conjugate(), pole])

        gain *= abs(pole) ** 2 / abs(zero) ** 2

    if order % 2 == 1:
        pole = 1j * sne(1j * v0, k_landen)
        poles.append(pole)
        gain *= abs(pole)
    else:
        gain *= 10 ** (-passband_ripple_db / 20)

    return ZerosPolesGain(
        torch.tensor(zeros, dtype=torch.complex128, device=device).to(
            complex_dtype
        ),
        torch.tensor(poles, dtype=torch.complex128, device=device).to(
            complex_dtype
        ),
        torch.tensor(gain, dtype=dtype, device=device),
    )

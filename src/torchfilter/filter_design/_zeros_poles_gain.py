"""Zeros-poles-gain representation of a rational transfer function."""

from __future__ import annotations

from typing import NamedTuple, Sequence, Union

import torch
from torch import Tensor


class ZerosPolesGain(NamedTuple):
    """Factored transfer function ``gain * prod(s - zeros) / prod(s - poles)``.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the transfer function, 1-D complex tensor.
    poles : Tensor
        Poles of the transfer function, 1-D complex tensor.
    gain : Tensor
        System gain, real scalar tensor.

    Notes
    -----
    Zeros and poles are either real or come in conjugate pairs whenever the
    design parameters are real. Their order carries no meaning beyond the
    pair adjacency produced during construction.
    """

    zeros: Tensor
    poles: Tensor
    gain: Tensor


ZerosPolesGainLike = Union[ZerosPolesGain, Sequence[Union[Tensor, float]]]


def as_zeros_poles_gain(prototype: ZerosPolesGainLike) -> ZerosPolesGain:
    """Convert a filter description to :class:`ZerosPolesGain`.

    Parameters
    ----------
    prototype : ZerosPolesGain or tuple
        Either a ``ZerosPolesGain``, a ``(zeros, poles, gain)`` triple, or a
        ``(numerator, denominator)`` pair of polynomial coefficients in
        descending powers.

    Returns
    -------
    ZerosPolesGain
        Zeros and poles as complex tensors and gain as a real scalar tensor.
    """
    if isinstance(prototype, ZerosPolesGain):
        return prototype

    if not isinstance(prototype, (tuple, list)):
        raise TypeError(
            f"Cannot convert {type(prototype).__name__} to ZerosPolesGain"
        )

    if len(prototype) == 2:
        from ._ba_to_zpk import ba_to_zpk

        numerator, denominator = prototype
        return ba_to_zpk(
            torch.as_tensor(numerator), torch.as_tensor(denominator)
        )

    if len(prototype) != 3:
        raise ValueError(
            "Expected (zeros, poles, gain) or (numerator, denominator), "
            f"got a sequence of length {len(prototype)}"
        )

    zeros, poles, gain = (torch.as_tensor(x) for x in prototype)

    if gain.is_complex():
        gain = gain.real

    if not gain.is_floating_point():
        gain = gain.to(torch.get_default_dtype())

    complex_dtype = _complex_dtype(gain.dtype)

    return ZerosPolesGain(
        zeros.to(complex_dtype).reshape(-1),
        poles.to(complex_dtype).reshape(-1),
        gain.reshape(()),
    )


def _complex_dtype(dtype: torch.dtype) -> torch.dtype:
    if dtype == torch.float32:
        return torch.complex64
    elif dtype == torch.float64:
        return torch.complex128
    else:
        raise ValueError(f"Unsupported dtype: {dtype}")

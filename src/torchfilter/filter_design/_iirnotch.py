"""Second-order IIR notch filter design."""

from __future__ import annotations

import math
from typing import NamedTuple, Optional

import torch
from torch import Tensor

from ._constants import NORMALIZED_SAMPLING_FREQUENCY
from ._filter_type import normalize_frequency


class SecondOrderSection(NamedTuple):
    """Biquad ``(b0 + b1 z^-1 + b2 z^-2) / (1 + a1 z^-1 + a2 z^-2)``.

    The leading denominator coefficient ``a0`` is implicitly 1.
    """

    b0: Tensor
    b1: Tensor
    b2: Tensor
    a1: Tensor
    a2: Tensor

    def to_sos(self) -> Tensor:
        """Section as a row ``[b0, b1, b2, 1, a1, a2]`` of shape (1, 6)."""
        a0 = torch.ones_like(self.b0)

        return torch.stack(
            [self.b0, self.b1, self.b2, a0, self.a1, self.a2]
        ).unsqueeze(0)


def iirnotch(
    notch_frequency: float,
    bandwidth: float,
    sampling_frequency: float = NORMALIZED_SAMPLING_FREQUENCY,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> SecondOrderSection:
    """
    Design a second-order IIR notch (band-reject) filter.

    A notch filter is a band-reject filter with a very narrow reject band.
    It attenuates frequencies near the notch frequency while passing all others.

    Parameters
    ----------
    notch_frequency : float
        Frequency to remove from the signal. If sampling_frequency is not
        specified (defaults to 2.0), this is normalized frequency in (0, 1)
        where 1 corresponds to the Nyquist frequency.
    bandwidth : float
        Width of the notch at the -3 dB points, in the same units as
        notch_frequency.
    sampling_frequency : float, optional
        The sampling frequency of the digital system. Default is 2.0
        (normalized frequency). If specified, notch_frequency and bandwidth
        should be in the same units (e.g., Hz).
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    SecondOrderSection
        Coefficients (b0, b1, b2, a1, a2) of the biquad.

    Notes
    -----
    The notch filter is designed in closed form [1]_ (Eq. 8.2.22-23):

        b = 1 / (1 + tan(pi * bandwidth / 2))

        H(z) = b * (1 - 2*cos(w0)*z^-1 + z^-2) / (1 - 2*b*cos(w0)*z^-1 + (2*b - 1)*z^-2)

    where w0 = pi * notch_frequency and both frequencies are normalized to
    Nyquist. This matches a notch with quality factor
    Q = notch_frequency / bandwidth.

    Examples
    --------
    >>> import torch
    >>> from torchfilter.filter_design import iirnotch
    >>> # Remove 60 Hz hum from 1000 Hz sampled signal
    >>> section = iirnotch(60.0, 2.0, sampling_frequency=1000.0)
    >>> section.to_sos().shape
    torch.Size([1, 6])

    References
    ----------
    .. [1] S. J. Orfanidis, "Introduction to Signal Processing,"
           Prentice Hall, 1996, p. 370.
    """
    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    w0 = normalize_frequency(notch_frequency, sampling_frequency)
    bw = normalize_frequency(bandwidth, sampling_frequency)

    b = 1.0 / (1.0 + math.tan(math.pi * bw / 2))

    cos_w0 = math.cos(math.pi * w0)

    coefficients = [b, -2.0 * b * cos_w0, b, -2.0 * b * cos_w0, 2.0 * b - 1.0]

    return SecondOrderSection(
        *(torch.tensor(c, dtype=dtype, device=device) for c in coefficients)
    )

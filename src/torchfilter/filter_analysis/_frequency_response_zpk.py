"""Frequency response of a digital filter given by its roots."""

import math
from typing import Optional, Tuple, Union

import torch
from torch import Tensor


def frequency_response_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    frequencies: Union[Tensor, int] = 512,
    whole: bool = False,
    sampling_frequency: Optional[float] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Evaluate a digital zeros-poles-gain filter on the unit circle.

    Parameters
    ----------
    zeros, poles : Tensor
        Roots of the numerator and denominator in the z-plane.
    gain : Tensor
        Scalar gain.
    frequencies : Tensor or int, optional
        Frequencies to evaluate at, or the size of an evenly spaced grid that
        starts at 0 and stops just short of Nyquist (or of the sampling
        frequency when ``whole`` is set). Default is 512.
    whole : bool, optional
        Extend the grid over the whole unit circle. Default is False.
    sampling_frequency : float, optional
        Units of ``frequencies``. None means fractions of Nyquist; otherwise
        the same units as ``sampling_frequency`` (e.g. Hz).

    Returns
    -------
    frequencies : Tensor
        Evaluation points, float64.
    response : Tensor
        H at each point, complex128.

    Notes
    -----
    .. math::
        H(z) = k \\prod_i (z - z_i) / \\prod_i (z - p_i),
        \\quad z = e^{j\\omega}

    Examples
    --------
    >>> from torchfilter.filter_design import butterworth_prototype, digital_filter, lowpass
    >>> zeros, poles, gain = digital_filter(lowpass(0.3), butterworth_prototype(4))
    >>> freqs, response = frequency_response_zpk(zeros, poles, gain, 8)
    >>> freqs.shape
    torch.Size([8])
    """
    device = poles.device

    if isinstance(frequencies, int):
        if sampling_frequency is None:
            stop = 2.0 if whole else 1.0
        else:
            stop = sampling_frequency if whole else sampling_frequency / 2

        points = torch.linspace(
            0, stop, frequencies + 1, dtype=torch.float64, device=device
        )[:-1]
    else:
        points = frequencies.to(dtype=torch.float64, device=device)

    if sampling_frequency is None:
        omega = math.pi * points
    else:
        omega = 2 * math.pi * points / sampling_frequency

    z = torch.exp(1j * omega).unsqueeze(-1)

    # An empty product is 1, so missing roots contribute nothing
    numerator = torch.prod(z - zeros.to(torch.complex128), dim=-1)
    denominator = torch.prod(z - poles.to(torch.complex128), dim=-1)

    return points, gain.to(torch.complex128) * numerator / denominator

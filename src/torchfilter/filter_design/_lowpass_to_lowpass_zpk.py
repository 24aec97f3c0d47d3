"""Lowpass to lowpass frequency transform for analog filters."""

from typing import Union

from torch import Tensor

from ._zeros_poles_gain import ZerosPolesGain


def lowpass_to_lowpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    cutoff_frequency: Union[float, Tensor] = 1.0,
) -> ZerosPolesGain:
    """
    Transform a lowpass filter prototype to a different cutoff frequency.

    Performs the analog transformation s -> s/cutoff_frequency, which moves the
    cutoff of a lowpass filter from 1 rad/s to cutoff_frequency rad/s.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the analog lowpass filter.
    poles : Tensor
        Poles of the analog lowpass filter.
    gain : Tensor
        System gain of the analog lowpass filter.
    cutoff_frequency : float or Tensor
        Desired cutoff frequency (rad/s).

    Returns
    -------
    zeros_new : Tensor
        Scaled zeros.
    poles_new : Tensor
        Scaled poles.
    gain_new : Tensor
        Gain scaled by cutoff_frequency^(len(poles) - len(zeros)), which keeps
        the high-frequency asymptote of the transfer function.
    """
    degree = poles.numel() - zeros.numel()

    return ZerosPolesGain(
        zeros * cutoff_frequency,
        poles * cutoff_frequency,
        gain * cutoff_frequency**degree,
    )

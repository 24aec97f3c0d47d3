"""Window specification for FIR filter design."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import torch
from torch import Tensor

from ..window_function import kaiser_window
from ._constants import KAISER_ATTENUATION_DB
from ._kaiser_order import kaiser_order


@dataclass
class FIRWindow:
    """Window applied to an ideal FIR response.

    Parameters
    ----------
    window : Tensor
        Window taps, shape (num_taps,). Its length sets the filter length.
    scale : bool
        If True, the designed taps are rescaled to unit gain at the
        reference frequency of the band shape (see :func:`scale_factor`).

    Examples
    --------
    >>> from torchfilter.window_function import kaiser_window
    >>> window = FIRWindow(kaiser_window(65, 5.0, dtype=torch.float64))
    >>> window.num_taps
    65
    """

    window: Tensor
    scale: bool = True

    @property
    def num_taps(self) -> int:
        """Number of taps of the designed filter."""
        return self.window.numel()

    @classmethod
    def from_transition_width(
        cls,
        transition_width: float,
        attenuation_db: float = KAISER_ATTENUATION_DB,
        scale: bool = True,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> FIRWindow:
        """Kaiser window meeting a transition width and attenuation.

        Parameters
        ----------
        transition_width : float
            Width of the transition band as a fraction of Nyquist.
        attenuation_db : float, optional
            Stopband attenuation in decibels. Default is 60.
        scale : bool, optional
            Whether to rescale the designed taps. Default is True.
        dtype : torch.dtype, optional
            Window dtype. Defaults to torch.float64.
        device : torch.device, optional
            Window device. Defaults to CPU.
        """
        num_taps, alpha = kaiser_order(transition_width, attenuation_db)

        window = kaiser_window(
            num_taps,
            math.pi * alpha,
            dtype=dtype or torch.float64,
            device=device,
        )

        return cls(window, scale)

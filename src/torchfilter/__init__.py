"""torchfilter: PyTorch filter design for digital signal processing."""

from . import filter_analysis, filter_design, window_function

__all__ = [
    "filter_analysis",
    "filter_design",
    "window_function",
]

__version__ = "0.1.0"

"""Filter design functions for IIR and FIR filters."""

from ._ba_to_zpk import ba_to_zpk
from ._bilinear_transform_zpk import bilinear_transform_zpk
from ._butterworth_prototype import butterworth_prototype
from ._chebyshev_type_1_prototype import chebyshev_type_1_prototype
from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._digital_filter import digital_filter
from ._elliptic_functions import asne, cde, landen, sne
from ._elliptic_prototype import elliptic_prototype
from ._exceptions import (
    ConvergenceError,
    FilterDesignError,
    FilterDesignWarning,
    FrequencyOrderError,
    InvalidCutoffError,
    InvalidNumTapsError,
    InvalidOrderError,
    InvalidRippleError,
    NyquistViolationError,
    SOSNormalizationError,
    SpecificationError,
)
from ._filter_type import (
    Bandpass,
    Bandstop,
    FilterType,
    Highpass,
    Lowpass,
    bandpass,
    bandstop,
    highpass,
    lowpass,
    normalize_frequency,
)
from ._fir_prototype import fir_prototype, scale_factor
from ._fir_window import FIRWindow
from ._iirnotch import SecondOrderSection, iirnotch
from ._kaiser_order import kaiser_order
from ._lowpass_to_bandpass_zpk import lowpass_to_bandpass_zpk
from ._lowpass_to_bandstop_zpk import lowpass_to_bandstop_zpk
from ._lowpass_to_highpass_zpk import lowpass_to_highpass_zpk
from ._lowpass_to_lowpass_zpk import lowpass_to_lowpass_zpk
from ._prewarp import prewarp
from ._resample_filter import resample_filter
from ._transform_prototype import analog_filter, transform_prototype
from ._zeros_poles_gain import ZerosPolesGain, as_zeros_poles_gain
from ._zpk_to_ba import zpk_to_ba
from ._zpk_to_sos import zpk_to_sos

__all__ = [
    # Prototypes
    "butterworth_prototype",
    "chebyshev_type_1_prototype",
    "chebyshev_type_2_prototype",
    "elliptic_prototype",
    # Elliptic functions
    "asne",
    "cde",
    "landen",
    "sne",
    # Band shapes
    "Bandpass",
    "Bandstop",
    "FilterType",
    "Highpass",
    "Lowpass",
    "bandpass",
    "bandstop",
    "highpass",
    "lowpass",
    "normalize_frequency",
    # Transforms
    "analog_filter",
    "bilinear_transform_zpk",
    "lowpass_to_bandpass_zpk",
    "lowpass_to_bandstop_zpk",
    "lowpass_to_highpass_zpk",
    "lowpass_to_lowpass_zpk",
    "prewarp",
    "transform_prototype",
    # Design functions
    "FIRWindow",
    "SecondOrderSection",
    "digital_filter",
    "fir_prototype",
    "iirnotch",
    "kaiser_order",
    "resample_filter",
    "scale_factor",
    # Conversions
    "ZerosPolesGain",
    "as_zeros_poles_gain",
    "ba_to_zpk",
    "zpk_to_ba",
    "zpk_to_sos",
    # Exceptions
    "ConvergenceError",
    "FilterDesignError",
    "FilterDesignWarning",
    "FrequencyOrderError",
    "InvalidCutoffError",
    "InvalidNumTapsError",
    "InvalidOrderError",
    "InvalidRippleError",
    "NyquistViolationError",
    "SOSNormalizationError",
    "SpecificationError",
]

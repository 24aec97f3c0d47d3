"""Exceptions for filter design module."""


class FilterDesignError(ValueError):
    """Base exception for filter design errors."""

    pass


class InvalidOrderError(FilterDesignError):
    """Raised when filter order is invalid.

    This occurs when:
    - Order is not a positive integer
    """

    pass


class InvalidRippleError(FilterDesignError):
    """Raised when a ripple or attenuation in decibels is invalid.

    This occurs when:
    - Chebyshev ripple is negative
    - Elliptic passband ripple is not positive
    """

    pass


class InvalidCutoffError(FilterDesignError):
    """Raised when cutoff frequency is not positive."""

    pass


class InvalidNumTapsError(FilterDesignError):
    """Raised when FIR filter tap count is invalid for the requested filter type.

    This occurs when:
    - num_taps is not positive
    - Even num_taps used with highpass/bandstop (Type II filter constraint)
    """

    pass


class FrequencyOrderError(FilterDesignError):
    """Raised when band edges are not in ascending order.

    This occurs when the lower edge of a bandpass or bandstop filter is not
    strictly below the upper edge.
    """

    pass


class NyquistViolationError(FilterDesignError):
    """Raised when frequency exceeds the Nyquist frequency.

    This occurs when:
    - Cutoff >= sampling_frequency / 2
    - Band edges reach or exceed Nyquist
    """

    pass


class SpecificationError(FilterDesignError):
    """Raised when filter specifications are contradictory or impossible to meet.

    This occurs when:
    - Passband ripple >= stopband attenuation
    - The selectivity derived from the ripples leaves no valid modulus
    - Transition width or resampling rate is not positive
    """

    pass


class ConvergenceError(FilterDesignError):
    """Raised when iterative algorithms fail to converge.

    This occurs in:
    - Inverse elliptic function iteration exceeding its iteration cap
    """

    pass


class SOSNormalizationError(FilterDesignError):
    """Raised when conversion to second-order sections fails.

    This occurs when:
    - The filter has fewer poles than zeros, so sections would be improper
    """

    pass


class FilterDesignWarning(UserWarning):
    """Warning for degenerate but permitted designs (e.g., zero ripple)."""

    pass

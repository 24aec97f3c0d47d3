"""Band shapes of a filter: lowpass, highpass, bandpass and bandstop."""

from __future__ import annotations

from dataclasses import dataclass

from ._constants import NORMALIZED_SAMPLING_FREQUENCY
from ._exceptions import (
    FrequencyOrderError,
    InvalidCutoffError,
    NyquistViolationError,
)


class FilterType:
    """Base class of the band shapes.

    The set of band shapes is closed: :class:`Lowpass`, :class:`Highpass`,
    :class:`Bandpass` and :class:`Bandstop`. Frequencies are stored as
    fractions of the Nyquist frequency.
    """

    __slots__ = ()


@dataclass(frozen=True)
class Lowpass(FilterType):
    """Lowpass band shape with cutoff ``w`` (fraction of Nyquist)."""

    w: float


@dataclass(frozen=True)
class Highpass(FilterType):
    """Highpass band shape with cutoff ``w`` (fraction of Nyquist)."""

    w: float


@dataclass(frozen=True)
class Bandpass(FilterType):
    """Bandpass band shape with band edges ``w1 < w2`` (fractions of Nyquist)."""

    w1: float
    w2: float


@dataclass(frozen=True)
class Bandstop(FilterType):
    """Bandstop band shape with band edges ``w1 < w2`` (fractions of Nyquist)."""

    w1: float
    w2: float


def normalize_frequency(
    frequency: float,
    sampling_frequency: float = NORMALIZED_SAMPLING_FREQUENCY,
) -> float:
    """Express ``frequency`` as a fraction of the Nyquist frequency.

    Raises
    ------
    InvalidCutoffError
        If ``frequency`` is not positive.
    NyquistViolationError
        If ``frequency`` is not below ``sampling_frequency / 2``.
    """
    if frequency <= 0:
        raise InvalidCutoffError(
            f"Frequencies must be positive, got {frequency}"
        )

    normalized = 2 * frequency / sampling_frequency

    if normalized >= 1:
        raise NyquistViolationError(
            f"Frequencies must be less than the Nyquist frequency "
            f"({sampling_frequency / 2}), got {frequency}"
        )

    return normalized


def lowpass(
    frequency: float,
    sampling_frequency: float = NORMALIZED_SAMPLING_FREQUENCY,
) -> Lowpass:
    """Lowpass band shape with cutoff ``frequency``.

    With the default ``sampling_frequency`` of 2.0 the cutoff is given as a
    fraction of the Nyquist frequency.

    Examples
    --------
    >>> lowpass(1000.0, sampling_frequency=8000.0)
    Lowpass(w=0.25)
    """
    return Lowpass(normalize_frequency(frequency, sampling_frequency))


def highpass(
    frequency: float,
    sampling_frequency: float = NORMALIZED_SAMPLING_FREQUENCY,
) -> Highpass:
    """Highpass band shape with cutoff ``frequency``."""
    return Highpass(normalize_frequency(frequency, sampling_frequency))


def bandpass(
    low: float,
    high: float,
    sampling_frequency: float = NORMALIZED_SAMPLING_FREQUENCY,
) -> Bandpass:
    """Bandpass band shape passing ``low`` to ``high``.

    Raises
    ------
    FrequencyOrderError
        If ``low`` is not below ``high``.
    """
    if low >= high:
        raise FrequencyOrderError(
            f"Lower band edge must be less than upper band edge, "
            f"got {low} and {high}"
        )

    return Bandpass(
        normalize_frequency(low, sampling_frequency),
        normalize_frequency(high, sampling_frequency),
    )


def bandstop(
    low: float,
    high: float,
    sampling_frequency: float = NORMALIZED_SAMPLING_FREQUENCY,
) -> Bandstop:
    """Bandstop band shape rejecting ``low`` to ``high``.

    Raises
    ------
    FrequencyOrderError
        If ``low`` is not below ``high``.
    """
    if low >= high:
        raise FrequencyOrderError(
            f"Lower band edge must be less than upper band edge, "
            f"got {low} and {high}"
        )

    return Bandstop(
        normalize_frequency(low, sampling_frequency),
        normalize_frequency(high, sampling_frequency),
    )

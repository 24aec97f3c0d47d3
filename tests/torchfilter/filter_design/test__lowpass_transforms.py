"""Tests for the analog lowpass band transformations."""

import math

import pytest
import torch
from scipy import signal as scipy_signal

from torchfilter.filter_design import (
    Bandpass,
    Bandstop,
    Highpass,
    Lowpass,
    analog_filter,
    butterworth_prototype,
    chebyshev_type_1_prototype,
    chebyshev_type_2_prototype,
    elliptic_prototype,
    lowpass_to_bandpass_zpk,
    lowpass_to_bandstop_zpk,
    lowpass_to_highpass_zpk,
    lowpass_to_lowpass_zpk,
    transform_prototype,
)
from torchfilter.filter_design._lowpass_to_highpass_zpk import _snap_to_one

PROTOTYPES = {
    "butterworth_3": lambda: butterworth_prototype(3, dtype=torch.float64),
    "butterworth_4": lambda: butterworth_prototype(4, dtype=torch.float64),
    "chebyshev_1": lambda: chebyshev_type_1_prototype(5, 1.0, dtype=torch.float64),
    "chebyshev_2": lambda: chebyshev_type_2_prototype(4, 40.0, dtype=torch.float64),
    "elliptic": lambda: elliptic_prototype(3, 1.0, 40.0, dtype=torch.float64),
}


def _sorted(values):
    return sorted(values, key=lambda x: (round(x.real, 8), round(x.imag, 8)))


def _assert_roots_close(actual, expected, tol=1e-8):
    assert len(actual) == len(expected)
    for a, e in zip(_sorted(actual), _sorted(expected)):
        assert abs(a - e) < tol * max(1.0, abs(e)), f"{a} vs {e}"


class TestLowpassToLowpass:
    """Test lowpass_to_lowpass_zpk."""

    @pytest.mark.parametrize("name", list(PROTOTYPES))
    def test_matches_scipy(self, name: str) -> None:
        """Should match scipy.signal.lp2lp_zpk."""
        z, p, k = PROTOTYPES[name]()
        z_new, p_new, k_new = lowpass_to_lowpass_zpk(z, p, k, 2.5)
        z_sp, p_sp, k_sp = scipy_signal.lp2lp_zpk(z.numpy(), p.numpy(), k.item(), 2.5)

        _assert_roots_close(z_new.numpy(), z_sp)
        _assert_roots_close(p_new.numpy(), p_sp)
        assert abs(k_new.item() - k_sp) < 1e-10 * abs(k_sp)

    def test_butterworth_scaling(self) -> None:
        """Poles scale by the cutoff and gain by cutoff^n."""
        z, p, k = butterworth_prototype(4, dtype=torch.float64)
        z_new, p_new, k_new = lowpass_to_lowpass_zpk(z, p, k, 2.0)

        torch.testing.assert_close(p_new, 2.0 * p)
        assert abs(k_new.item() - 16.0) < 1e-12


class TestLowpassToHighpass:
    """Test lowpass_to_highpass_zpk."""

    @pytest.mark.parametrize("name", list(PROTOTYPES))
    def test_matches_scipy(self, name: str) -> None:
        """Should match scipy.signal.lp2hp_zpk."""
        z, p, k = PROTOTYPES[name]()
        z_new, p_new, k_new = lowpass_to_highpass_zpk(z, p, k, 0.7)
        z_sp, p_sp, k_sp = scipy_signal.lp2hp_zpk(z.numpy(), p.numpy(), k.item(), 0.7)

        _assert_roots_close(z_new.numpy(), z_sp)
        _assert_roots_close(p_new.numpy(), p_sp)
        assert abs(k_new.item() - k_sp) < 1e-10 * max(1.0, abs(k_sp))

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6, 7, 8])
    def test_butterworth_gain_positive_unit(self, order: int) -> None:
        """Butterworth highpass gain is 1 without a sign flip."""
        z, p, k = butterworth_prototype(order, dtype=torch.float64)
        _, _, k_new = lowpass_to_highpass_zpk(z, p, k, 0.4)

        assert k_new.item() > 0
        assert abs(k_new.item() - 1.0) < 1e-12

    def test_zero_count_padded(self) -> None:
        """All-pole prototypes gain n zeros at the origin."""
        z, p, k = butterworth_prototype(5, dtype=torch.float64)
        z_new, p_new, _ = lowpass_to_highpass_zpk(z, p, k, 1.0)

        assert z_new.numel() == 5
        assert p_new.numel() == 5
        assert torch.all(z_new == 0)


class TestSnapToOne:
    """Test the ulp-based snapping of highpass products."""

    def test_within_tolerance(self) -> None:
        """Values a few ulps from 1 become exactly 1."""
        value = torch.tensor(1.0 + 2.0**-52, dtype=torch.float64)

        assert _snap_to_one(value, 4).item() == 1.0

    def test_outside_tolerance(self) -> None:
        """Values further from 1 are kept."""
        value = torch.tensor(1.0 + 1e-10, dtype=torch.float64)

        assert _snap_to_one(value, 4).item() == 1.0 + 1e-10

    def test_negative_one_kept(self) -> None:
        """Snapping never flips a sign."""
        value = torch.tensor(-1.0, dtype=torch.float64)

        assert _snap_to_one(value, 4).item() == -1.0


class TestLowpassToBandpass:
    """Test lowpass_to_bandpass_zpk."""

    @pytest.mark.parametrize("name", list(PROTOTYPES))
    def test_matches_scipy(self, name: str) -> None:
        """Should match scipy.signal.lp2bp_zpk."""
        w1, w2 = 0.5, 2.0
        z, p, k = PROTOTYPES[name]()
        z_new, p_new, k_new = lowpass_to_bandpass_zpk(z, p, k, w1, w2)
        z_sp, p_sp, k_sp = scipy_signal.lp2bp_zpk(
            z.numpy(), p.numpy(), k.item(), wo=math.sqrt(w1 * w2), bw=w2 - w1
        )

        _assert_roots_close(z_new.numpy(), z_sp)
        _assert_roots_close(p_new.numpy(), p_sp)
        assert abs(k_new.item() - k_sp) < 1e-10 * max(1.0, abs(k_sp))

    def test_doubles_order(self) -> None:
        """Each prototype pole becomes two poles, zeros go to the origin."""
        z, p, k = butterworth_prototype(3, dtype=torch.float64)
        z_new, p_new, _ = lowpass_to_bandpass_zpk(z, p, k, 1.0, 2.0)

        assert p_new.numel() == 6
        assert z_new.numel() == 3
        assert torch.all(z_new == 0)


class TestLowpassToBandstop:
    """Test lowpass_to_bandstop_zpk."""

    @pytest.mark.parametrize("name", list(PROTOTYPES))
    def test_matches_scipy(self, name: str) -> None:
        """Should match scipy.signal.lp2bs_zpk."""
        w1, w2 = 0.5, 2.0
        z, p, k = PROTOTYPES[name]()
        z_new, p_new, k_new = lowpass_to_bandstop_zpk(z, p, k, w1, w2)
        z_sp, p_sp, k_sp = scipy_signal.lp2bs_zpk(
            z.numpy(), p.numpy(), k.item(), wo=math.sqrt(w1 * w2), bw=w2 - w1
        )

        _assert_roots_close(z_new.numpy(), z_sp)
        _assert_roots_close(p_new.numpy(), p_sp)
        assert abs(k_new.item() - k_sp) < 1e-10 * max(1.0, abs(k_sp))

    def test_notch_zeros(self) -> None:
        """All-pole prototypes get zeros at +/- j sqrt(w1 w2)."""
        z, p, k = butterworth_prototype(2, dtype=torch.float64)
        z_new, _, _ = lowpass_to_bandstop_zpk(z, p, k, 1.0, 4.0)

        assert z_new.numel() == 4
        torch.testing.assert_close(z_new.abs(), torch.full((4,), 2.0, dtype=torch.float64))
        assert torch.all(z_new.real == 0)


class TestTransformPrototype:
    """Test dispatch on band shape."""

    @pytest.mark.parametrize(
        "filter_type,expected",
        [
            (Lowpass(0.5), 3),
            (Highpass(0.5), 3),
            (Bandpass(0.5, 1.0), 6),
            (Bandstop(0.5, 1.0), 6),
        ],
    )
    def test_pole_count(self, filter_type, expected: int) -> None:
        """Band transforms double the order."""
        _, poles, _ = transform_prototype(
            filter_type, butterworth_prototype(3, dtype=torch.float64)
        )

        assert poles.numel() == expected

    def test_accepts_transfer_function(self) -> None:
        """Prototypes may be given as (b, a) coefficients."""
        b = torch.tensor([1.0], dtype=torch.float64)
        a = torch.tensor([1.0, math.sqrt(2), 1.0], dtype=torch.float64)

        _, poles, gain = transform_prototype(Lowpass(2.0), (b, a))
        _, expected, _ = butterworth_prototype(2, dtype=torch.float64)

        _assert_roots_close(poles.numpy(), (2.0 * expected).numpy())
        assert abs(gain.item() - 4.0) < 1e-10

    def test_analog_filter_alias(self) -> None:
        """analog_filter gives the same result."""
        prototype = butterworth_prototype(4, dtype=torch.float64)

        result = analog_filter(Highpass(0.3), prototype)
        expected = transform_prototype(Highpass(0.3), prototype)

        torch.testing.assert_close(result.poles, expected.poles)
        torch.testing.assert_close(result.gain, expected.gain)

    def test_unknown_type(self) -> None:
        """Unknown band shapes are rejected."""
        with pytest.raises(TypeError):
            transform_prototype(object(), butterworth_prototype(2))

"""Tests for Chebyshev Type I and Type II analog lowpass prototypes."""

import math

import pytest
import torch
from scipy import signal as scipy_signal

from torchfilter.filter_design import (
    FilterDesignWarning,
    InvalidOrderError,
    InvalidRippleError,
    chebyshev_type_1_prototype,
    chebyshev_type_2_prototype,
)


def _sorted(values):
    return sorted(values, key=lambda x: (round(x.real, 8), round(x.imag, 8)))


class TestChebyshevType1PrototypeForward:
    """Test chebyshev_type_1_prototype against scipy.signal.cheb1ap."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6, 7, 8])
    @pytest.mark.parametrize("ripple", [0.1, 0.5, 1.0, 3.0])
    def test_matches_scipy(self, order: int, ripple: float) -> None:
        """Poles and gain should match scipy."""
        zeros, poles, gain = chebyshev_type_1_prototype(
            order, ripple, dtype=torch.float64
        )
        z_scipy, p_scipy, k_scipy = scipy_signal.cheb1ap(order, ripple)

        assert zeros.numel() == 0
        assert len(z_scipy) == 0
        assert poles.numel() == order

        for p_ts, p_sp in zip(_sorted(poles.numpy()), _sorted(p_scipy)):
            assert abs(p_ts - p_sp) < 1e-10, f"Pole mismatch: {p_ts} vs {p_sp}"

        assert abs(gain.item() - k_scipy) < 1e-10 * max(1.0, abs(k_scipy))

    @pytest.mark.parametrize("order", [2, 3, 4, 5])
    def test_poles_in_left_half_plane(self, order: int) -> None:
        """All poles should have negative real part."""
        _, poles, _ = chebyshev_type_1_prototype(
            order, 1.0, dtype=torch.float64
        )
        assert torch.all(poles.real < 0)

    @pytest.mark.parametrize("order", [2, 4, 6])
    def test_even_order_dc_gain(self, order: int) -> None:
        """Even orders start at the bottom of the ripple: |H(0)| = 10^(-Rp/20)."""
        ripple = 1.0
        _, poles, gain = chebyshev_type_1_prototype(
            order, ripple, dtype=torch.float64
        )
        dc = gain / torch.prod(-poles)

        assert abs(abs(dc.item()) - 10 ** (-ripple / 20)) < 1e-10

    @pytest.mark.parametrize("order", [1, 3, 5])
    def test_odd_order_dc_gain(self, order: int) -> None:
        """Odd orders have unit DC gain."""
        _, poles, gain = chebyshev_type_1_prototype(
            order, 1.0, dtype=torch.float64
        )
        dc = gain / torch.prod(-poles)

        assert abs(abs(dc.item()) - 1.0) < 1e-10


class TestChebyshevType2PrototypeForward:
    """Test chebyshev_type_2_prototype against scipy.signal.cheb2ap."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6, 7, 8])
    @pytest.mark.parametrize("attenuation", [20.0, 40.0, 60.0])
    def test_matches_scipy(self, order: int, attenuation: float) -> None:
        """Zeros, poles and gain should match scipy."""
        zeros, poles, gain = chebyshev_type_2_prototype(
            order, attenuation, dtype=torch.float64
        )
        z_scipy, p_scipy, k_scipy = scipy_signal.cheb2ap(order, attenuation)

        assert zeros.numel() == len(z_scipy) == 2 * (order // 2)
        assert poles.numel() == order

        for z_ts, z_sp in zip(_sorted(zeros.numpy()), _sorted(z_scipy)):
            assert abs(z_ts - z_sp) < 1e-8 * max(1.0, abs(z_sp))

        for p_ts, p_sp in zip(_sorted(poles.numpy()), _sorted(p_scipy)):
            assert abs(p_ts - p_sp) < 1e-10, f"Pole mismatch: {p_ts} vs {p_sp}"

        assert abs(gain.item() - k_scipy) < 1e-10 * max(1.0, abs(k_scipy))

    @pytest.mark.parametrize("order", [2, 3, 4, 5])
    def test_zeros_on_imaginary_axis(self, order: int) -> None:
        """Zeros lie on the imaginary axis in conjugate pairs."""
        zeros, _, _ = chebyshev_type_2_prototype(
            order, 40.0, dtype=torch.float64
        )

        assert torch.all(zeros.real == 0)
        for i in range(order // 2):
            assert zeros[2 * i] == zeros[2 * i + 1].conj()

    @pytest.mark.parametrize("order", [2, 3, 4, 5, 6])
    def test_unit_dc_gain(self, order: int) -> None:
        """Type II response is 1 at DC."""
        zeros, poles, gain = chebyshev_type_2_prototype(
            order, 40.0, dtype=torch.float64
        )
        dc = gain * torch.prod(-zeros) / torch.prod(-poles)

        assert abs(dc.item() - 1.0) < 1e-10

    @pytest.mark.parametrize("order", [2, 3, 4, 5])
    def test_poles_reciprocal_of_type_1(self, order: int) -> None:
        """Type II poles are reciprocals of Type I poles at reciprocal eps."""
        attenuation = 40.0
        eps_2 = 1 / math.sqrt(10 ** (attenuation / 10) - 1)
        # Ripple whose ripple factor is 1 / eps_2
        ripple = 10 * math.log10(1 + eps_2**2)

        _, poles_1, _ = chebyshev_type_1_prototype(
            order, ripple, dtype=torch.float64
        )
        _, poles_2, _ = chebyshev_type_2_prototype(
            order, attenuation, dtype=torch.float64
        )

        torch.testing.assert_close(
            1 / poles_1, poles_2, rtol=1e-8, atol=1e-10
        )


class TestChebyshevPrototypeDtypes:
    """Test dtype handling."""

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_type_1_output_dtype(self, dtype: torch.dtype) -> None:
        """Type I output should match requested dtype."""
        zeros, poles, gain = chebyshev_type_1_prototype(4, 1.0, dtype=dtype)

        expected = torch.complex64 if dtype == torch.float32 else torch.complex128
        assert poles.dtype == expected
        assert zeros.dtype == expected
        assert gain.dtype == dtype

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_type_2_output_dtype(self, dtype: torch.dtype) -> None:
        """Type II output should match requested dtype."""
        zeros, poles, gain = chebyshev_type_2_prototype(4, 40.0, dtype=dtype)

        expected = torch.complex64 if dtype == torch.float32 else torch.complex128
        assert poles.dtype == expected
        assert zeros.dtype == expected
        assert gain.dtype == dtype


class TestChebyshevPrototypeEdgeCases:
    """Test error handling."""

    @pytest.mark.parametrize(
        "design", [chebyshev_type_1_prototype, chebyshev_type_2_prototype]
    )
    def test_invalid_order(self, design) -> None:
        """Order must be positive."""
        with pytest.raises(InvalidOrderError):
            design(0, 1.0)

    @pytest.mark.parametrize(
        "design", [chebyshev_type_1_prototype, chebyshev_type_2_prototype]
    )
    def test_negative_ripple(self, design) -> None:
        """Negative ripple is rejected."""
        with pytest.raises(InvalidRippleError):
            design(4, -1.0)

    def test_zero_passband_ripple_warns(self) -> None:
        """Zero passband ripple issues a warning."""
        with pytest.warns(FilterDesignWarning):
            chebyshev_type_1_prototype(4, 0.0)

    def test_zero_stopband_attenuation_warns(self) -> None:
        """Zero stopband attenuation issues a warning."""
        with pytest.warns(FilterDesignWarning):
            chebyshev_type_2_prototype(4, 0.0)

    def test_ripple_error_is_value_error(self) -> None:
        """Errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            chebyshev_type_1_prototype(4, -0.5)

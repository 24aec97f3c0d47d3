"""Tests for Butterworth analog lowpass prototype."""

import pytest
import torch
from scipy import signal as scipy_signal

from torchfilter.filter_design import (
    InvalidOrderError,
    ZerosPolesGain,
    butterworth_prototype,
)


class TestButterworthPrototypeForward:
    """Test butterworth_prototype forward correctness."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6, 7, 8])
    def test_poles_match_scipy(self, order: int) -> None:
        """Poles should match scipy.signal.buttap."""
        zeros, poles, gain = butterworth_prototype(order, dtype=torch.float64)

        z_scipy, p_scipy, k_scipy = scipy_signal.buttap(order)

        assert zeros.numel() == 0
        assert len(z_scipy) == 0

        p_sorted = sorted(
            poles.numpy(), key=lambda x: (round(x.real, 8), x.imag)
        )
        p_scipy_sorted = sorted(
            p_scipy, key=lambda x: (round(x.real, 8), x.imag)
        )

        for p_ts, p_sp in zip(p_sorted, p_scipy_sorted):
            assert abs(p_ts - p_sp) < 1e-10, f"Pole mismatch: {p_ts} vs {p_sp}"

        assert abs(gain.item() - k_scipy) < 1e-10

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6, 7, 8])
    def test_pole_structure(self, order: int) -> None:
        """n poles in the left half-plane, in conjugate pairs."""
        zeros, poles, gain = butterworth_prototype(order, dtype=torch.float64)

        assert poles.numel() == order
        assert zeros.numel() == 0
        assert torch.all(poles.real < 0)

        for i in range(order // 2):
            assert poles[2 * i] == poles[2 * i + 1].conj()
            assert poles[2 * i].imag > 0

        if order % 2 == 1:
            assert poles[-1] == -1

    def test_order_1_single_real_pole(self) -> None:
        """Order 1 should have single real pole at -1."""
        zeros, poles, gain = butterworth_prototype(1, dtype=torch.float64)

        assert zeros.numel() == 0
        assert poles.numel() == 1
        assert abs(poles[0].real + 1.0) < 1e-10
        assert abs(poles[0].imag) < 1e-10
        assert abs(gain.item() - 1.0) < 1e-10

    def test_poles_on_unit_circle(self) -> None:
        """All poles should lie on the unit circle."""
        for order in range(1, 9):
            zeros, poles, gain = butterworth_prototype(
                order, dtype=torch.float64
            )
            for pole in poles:
                assert abs(abs(pole) - 1.0) < 1e-10

    def test_returns_named_tuple(self) -> None:
        """Result is a ZerosPolesGain with named fields."""
        result = butterworth_prototype(3)

        assert isinstance(result, ZerosPolesGain)
        assert result.poles is result[1]


class TestButterworthPrototypeDtypes:
    """Test butterworth_prototype dtype handling."""

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_output_dtype(self, dtype: torch.dtype) -> None:
        """Output should match requested dtype."""
        zeros, poles, gain = butterworth_prototype(4, dtype=dtype)

        if dtype == torch.float32:
            assert poles.dtype == torch.complex64
        else:
            assert poles.dtype == torch.complex128
        assert gain.dtype == dtype

    def test_unsupported_dtype(self) -> None:
        """Integer dtypes are rejected."""
        with pytest.raises(ValueError):
            butterworth_prototype(4, dtype=torch.int32)


class TestButterworthPrototypeDevice:
    """Test butterworth_prototype device handling."""

    def test_cpu_device(self) -> None:
        """Should work on CPU."""
        zeros, poles, gain = butterworth_prototype(
            4, device=torch.device("cpu")
        )
        assert poles.device.type == "cpu"
        assert gain.device.type == "cpu"

    @pytest.mark.skipif(
        not torch.cuda.is_available(), reason="CUDA not available"
    )
    def test_cuda_device(self) -> None:
        """Should work on CUDA."""
        zeros, poles, gain = butterworth_prototype(
            4, device=torch.device("cuda")
        )
        assert poles.device.type == "cuda"
        assert gain.device.type == "cuda"


class TestButterworthPrototypeEdgeCases:
    """Test butterworth_prototype edge cases."""

    def test_invalid_order_zero(self) -> None:
        """Order 0 should raise error."""
        with pytest.raises(InvalidOrderError):
            butterworth_prototype(0)

    def test_invalid_order_negative(self) -> None:
        """Negative order should raise error."""
        with pytest.raises(ValueError):
            butterworth_prototype(-1)

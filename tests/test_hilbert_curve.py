"""
Tests for the Hilbert curve mappers.

Covers construction validation, range validation, the N=16 reference table and
the bijection between indices and coordinates for both index widths.
"""

import dataclasses

import pytest

from hilbert_curves_pytorch import (
    CurveError,
    GridTooLargeError,
    HilbertCurve,
    HilbertCurve64,
    NotPositiveError,
    NotPowerOfTwoError,
    OutOfRangeError,
    SpaceFillingCurve,
)

HILBERT_CLASSES = [HilbertCurve, HilbertCurve64]

# Reference values for N=16: (t, x, y)
HILBERT_16_CASES = [
    (0, 0, 0),
    (16, 4, 0),
    (32, 4, 4),
    (48, 3, 7),
    (64, 0, 8),
    (80, 0, 12),
    (96, 4, 12),
    (112, 7, 11),
    (128, 8, 8),
    (144, 8, 12),
    (160, 12, 12),
    (170, 15, 15),
    (176, 15, 11),
    (192, 15, 7),
    (208, 11, 7),
    (224, 11, 3),
    (240, 12, 0),
    (255, 15, 0),
]


@pytest.mark.parametrize("cls", HILBERT_CLASSES)
class TestConstruction:
    """Test grid size validation."""

    @pytest.mark.parametrize("n", [0, -1, -16])
    def test_not_positive(self, cls, n):
        with pytest.raises(NotPositiveError, match="N must be greater than zero"):
            cls(n)

    @pytest.mark.parametrize("n", [3, 5, 6, 7, 12, 100])
    def test_not_power_of_two(self, cls, n):
        with pytest.raises(NotPowerOfTwoError, match="N must be a power of two"):
            cls(n)

    @pytest.mark.parametrize("n", [1, 2, 4, 8, 16, 1024])
    def test_valid_sizes(self, cls, n):
        curve = cls(n)
        assert curve.n == n
        assert curve.get_dimensions() == (n, n)

    def test_errors_are_value_errors(self, cls):
        with pytest.raises(ValueError):
            cls(3)
        with pytest.raises(CurveError):
            cls(0)

    def test_non_integer_size(self, cls):
        with pytest.raises(TypeError, match="N must be an integer"):
            cls(4.0)

    def test_immutable(self, cls):
        curve = cls(4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            curve.n = 8

    def test_satisfies_interface(self, cls):
        assert isinstance(cls(4), SpaceFillingCurve)


class TestIndexWidthLimits:
    """Test the largest grid each index width accepts."""

    def test_32_bit_limit(self):
        assert HilbertCurve(2**15).n == 2**15
        with pytest.raises(GridTooLargeError, match="too large"):
            HilbertCurve(2**16)

    def test_64_bit_limit(self):
        assert HilbertCurve64(2**16).n == 2**16
        assert HilbertCurve64(2**31).n == 2**31
        with pytest.raises(GridTooLargeError):
            HilbertCurve64(2**32)

    def test_shape_checked_before_size(self):
        with pytest.raises(NotPowerOfTwoError):
            HilbertCurve(2**16 + 1)


@pytest.mark.parametrize("cls", HILBERT_CLASSES)
class TestRangeValidation:
    """Test index and coordinate range checks."""

    @pytest.mark.parametrize("t", [-1, 256, 1000])
    def test_map_out_of_range(self, cls, t):
        curve = cls(16)
        with pytest.raises(OutOfRangeError, match="out of range"):
            curve.map(t)

    @pytest.mark.parametrize("t", [0, 255])
    def test_map_bounds(self, cls, t):
        cls(16).map(t)

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (16, 0), (0, 16), (16, 16)])
    def test_map_inverse_out_of_range(self, cls, x, y):
        curve = cls(16)
        with pytest.raises(OutOfRangeError):
            curve.map_inverse(x, y)

    @pytest.mark.parametrize("x, y", [(0, 0), (15, 15)])
    def test_map_inverse_bounds(self, cls, x, y):
        cls(16).map_inverse(x, y)

    @pytest.mark.parametrize("t", [3.0, 96.5])
    def test_map_rejects_non_integer(self, cls, t):
        with pytest.raises(TypeError, match="t must be an integer"):
            cls(16).map(t)

    def test_map_inverse_rejects_non_integer(self, cls):
        with pytest.raises(TypeError, match="x must be an integer"):
            cls(16).map_inverse(1.0, 2)
        with pytest.raises(TypeError, match="y must be an integer"):
            cls(16).map_inverse(1, 2.0)

    def test_instance_usable_after_error(self, cls):
        curve = cls(16)
        with pytest.raises(OutOfRangeError):
            curve.map(256)
        assert curve.map(96) == (4, 12)


@pytest.mark.parametrize("cls", HILBERT_CLASSES)
class TestMapping:
    """Test known values and the bijection."""

    @pytest.mark.parametrize("t, x, y", HILBERT_16_CASES)
    def test_map(self, cls, t, x, y):
        assert cls(16).map(t) == (x, y)

    @pytest.mark.parametrize("t, x, y", HILBERT_16_CASES)
    def test_map_inverse(self, cls, t, x, y):
        assert cls(16).map_inverse(x, y) == t

    def test_single_cell(self, cls):
        curve = cls(1)
        assert curve.map(0) == (0, 0)
        assert curve.map_inverse(0, 0) == 0

    @pytest.mark.parametrize("n", [2, 4, 8, 16, 32])
    def test_bijection(self, cls, n):
        curve = cls(n)
        seen = set()
        for t in range(n * n):
            x, y = curve.map(t)
            assert 0 <= x < n and 0 <= y < n, f"n={n} t={t}: ({x}, {y}) out of bounds"
            assert (x, y) not in seen, f"n={n} t={t}: duplicate coordinate"
            seen.add((x, y))
            assert curve.map_inverse(x, y) == t

        assert len(seen) == n * n
        for x in range(n):
            for y in range(n):
                assert curve.map(curve.map_inverse(x, y)) == (x, y)

    @pytest.mark.parametrize("n", [4, 16, 64])
    def test_adjacent_indices_are_adjacent_cells(self, cls, n):
        curve = cls(n)
        for t in range(n * n - 1):
            x1, y1 = curve.map(t)
            x2, y2 = curve.map(t + 1)
            assert abs(x2 - x1) + abs(y2 - y1) == 1

    @pytest.mark.parametrize("n", [2, 16, 256])
    def test_endpoints(self, cls, n):
        curve = cls(n)
        assert curve.map(0) == (0, 0)
        assert curve.map(n * n - 1) == (n - 1, 0)


class TestWidthsAgree:
    """The two index widths describe the same curve."""

    @pytest.mark.parametrize("n", [1, 2, 8, 32])
    def test_same_curve(self, n):
        narrow = HilbertCurve(n)
        wide = HilbertCurve64(n)
        for t in range(n * n):
            assert narrow.map(t) == wide.map(t)


class TestLargeGrids:
    """Round trips at the edge of the 64-bit domain."""

    def test_largest_32_bit_grid(self):
        n = 2**15
        curve = HilbertCurve(n)
        assert curve.map(n * n - 1) == (n - 1, 0)
        for t in [0, 1, 12345, 2**29 + 7, n * n - 2]:
            x, y = curve.map(t)
            assert curve.map_inverse(x, y) == t

    def test_largest_64_bit_grid(self):
        n = 2**31
        curve = HilbertCurve64(n)
        assert curve.map(n * n - 1) == (n - 1, 0)
        assert curve.map_inverse(n - 1, 0) == n * n - 1
        for t in [0, 3, 2**40 + 11, 2**61 + 2**33 + 5, n * n - 2]:
            x, y = curve.map(t)
            assert 0 <= x < n and 0 <= y < n
            assert curve.map_inverse(x, y) == t

    def test_64_bit_rejects_index_past_end(self):
        n = 2**31
        with pytest.raises(OutOfRangeError):
            HilbertCurve64(n).map(n * n)

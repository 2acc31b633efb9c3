"""
Tests for grid-shape classification and the validation mixin.
"""

import numpy as np
import pytest
import torch

from hilbert_curves_pytorch import (
    GridTooLargeError,
    NotPositiveError,
    NotPowerOfThreeError,
    NotPowerOfTwoError,
    OutOfRangeError,
)
from hilbert_curves_pytorch.core.constants import (
    INT32_MAX,
    MAX_HILBERT64_N,
    MAX_HILBERT_N,
    MAX_PEANO64_N,
    MAX_PEANO_N,
    UINT64_MAX,
    largest_side,
)
from hilbert_curves_pytorch.utils.validation import (
    ValidationMixin,
    is_power_of_three,
    is_power_of_two,
)


class TestPowerOfThree:
    """Test power-of-three classification."""

    @pytest.mark.parametrize("n", [1, 3, 9, 27, 59049, 3**20, 3**40, 9.0, 1.0])
    def test_powers(self, n):
        assert is_power_of_three(n)

    @pytest.mark.parametrize(
        "n",
        [0, -1, -3, 2, 4, 6, 10, 3.1, 8.9999, 9.00001, 0.5, 3**20 + 1, 2 * 3**15]
        + [float("inf"), float("-inf"), float("nan")],
    )
    def test_non_powers(self, n):
        assert not is_power_of_three(n)

    def test_numpy_integers(self):
        assert is_power_of_three(np.int64(243))
        assert not is_power_of_three(np.int64(244))

    def test_booleans_rejected(self):
        assert not is_power_of_three(True)


class TestPowerOfTwo:
    """Test power-of-two classification."""

    @pytest.mark.parametrize("n", [1, 2, 4, 8, 16, 2**31, 2**62])
    def test_powers(self, n):
        assert is_power_of_two(n)

    @pytest.mark.parametrize("n", [0, -2, 3, 5, 6, 7, 12, 2**31 + 1])
    def test_non_powers(self, n):
        assert not is_power_of_two(n)


class TestValidationMixin:
    """Test the shared validation methods."""

    def test_grid_size_order_of_checks(self):
        with pytest.raises(NotPositiveError):
            ValidationMixin.validate_grid_size(0, 16, is_power_of_two, NotPowerOfTwoError)
        with pytest.raises(NotPowerOfTwoError):
            ValidationMixin.validate_grid_size(3, 16, is_power_of_two, NotPowerOfTwoError)
        with pytest.raises(GridTooLargeError, match="max N is 16"):
            ValidationMixin.validate_grid_size(32, 16, is_power_of_two, NotPowerOfTwoError)

    def test_grid_size_with_peano_error(self):
        with pytest.raises(NotPowerOfThreeError):
            ValidationMixin.validate_grid_size(4, 27, is_power_of_three, NotPowerOfThreeError)

    def test_grid_size_rejects_bool(self):
        with pytest.raises(TypeError):
            ValidationMixin.validate_grid_size(True, 16, is_power_of_two, NotPowerOfTwoError)

    def test_error_attributes(self):
        with pytest.raises(GridTooLargeError) as exc_info:
            ValidationMixin.validate_grid_size(64, 16, is_power_of_two, NotPowerOfTwoError)
        assert exc_info.value.n == 64
        assert exc_info.value.max_n == 16

    def test_index(self):
        ValidationMixin.validate_index(0, 4)
        ValidationMixin.validate_index(15, 4)
        with pytest.raises(OutOfRangeError, match=r"t=16 not in \[0, 16\)"):
            ValidationMixin.validate_index(16, 4)
        with pytest.raises(OutOfRangeError):
            ValidationMixin.validate_index(-1, 4)

    @pytest.mark.parametrize("t", [3.0, 3.5, "3", None, True])
    def test_index_must_be_integer(self, t):
        with pytest.raises(TypeError, match="t must be an integer"):
            ValidationMixin.validate_index(t, 4)

    def test_index_accepts_numpy_integers(self):
        ValidationMixin.validate_index(np.int64(15), 4)

    def test_coordinates(self):
        ValidationMixin.validate_coordinates(3, 3, 4)
        with pytest.raises(OutOfRangeError):
            ValidationMixin.validate_coordinates(4, 0, 4)
        with pytest.raises(OutOfRangeError):
            ValidationMixin.validate_coordinates(0, -1, 4)

    def test_coordinates_must_be_integers(self):
        with pytest.raises(TypeError, match="x must be an integer, got float"):
            ValidationMixin.validate_coordinates(1.0, 2, 4)
        with pytest.raises(TypeError, match="y must be an integer, got bool"):
            ValidationMixin.validate_coordinates(1, False, 4)

    def test_index_tensor(self):
        ValidationMixin.validate_index_tensor(torch.arange(16), 4)
        with pytest.raises(OutOfRangeError, match=r"values in \[0, 16\]"):
            ValidationMixin.validate_index_tensor(torch.arange(17), 4)
        with pytest.raises(ValueError, match="integer tensor"):
            ValidationMixin.validate_index_tensor(torch.tensor([True, False]), 4)

    def test_coordinate_tensor(self):
        ValidationMixin.validate_coordinate_tensor(torch.tensor([[0, 3], [3, 0]]), 4)
        with pytest.raises(OutOfRangeError):
            ValidationMixin.validate_coordinate_tensor(torch.tensor([[0, 4]]), 4)
        with pytest.raises(ValueError, match="trailing dimension"):
            ValidationMixin.validate_coordinate_tensor(torch.tensor(1), 4)


class TestIndexDomainLimits:
    """Test the maximum grid sizes derived from each index domain."""

    def test_largest_side(self):
        assert largest_side(2, 15) == 2
        assert largest_side(2, 16) == 4
        assert largest_side(3, 80) == 3
        assert largest_side(3, 81) == 9
        assert largest_side(2, 0) == 1

    @pytest.mark.parametrize(
        "max_n,base,index_max",
        [
            (MAX_HILBERT_N, 2, INT32_MAX),
            (MAX_HILBERT64_N, 2, UINT64_MAX),
            (MAX_PEANO_N, 3, INT32_MAX),
            (MAX_PEANO64_N, 3, UINT64_MAX),
        ],
    )
    def test_largest_grid_fits(self, max_n, base, index_max):
        assert max_n**2 <= index_max < (base * max_n) ** 2

    def test_known_values(self):
        assert MAX_HILBERT_N == 2**15
        assert MAX_HILBERT64_N == 2**31
        assert MAX_PEANO_N == 3**9
        assert MAX_PEANO64_N == 3**20

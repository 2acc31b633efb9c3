"""
Validation utilities for space-filling curve mappers.

This module provides a mixin class with the validation methods shared by all
curve variants, so grid sizes, indices and coordinates are checked the same
way everywhere.
"""

import math
from collections.abc import Callable
from numbers import Integral, Real

import torch

from ..core.errors import (
    GridTooLargeError,
    NotPositiveError,
    OutOfRangeError,
)


def is_power_of_two(n: int) -> bool:
    """Return True if n is a positive power of two."""
    return n > 0 and (n & (n - 1)) == 0


def is_power_of_three(n: Real) -> bool:
    """
    Return True if n is an exact power of three (1, 3, 9, 27, ...).

    Integers are divided exactly. Any other real number is converted to float
    and divided in floating point, so values that are merely close to a power
    of three (8.9999, 9.00001) are rejected.

    Args:
        n: Value to classify

    Returns:
        True if n is 3**k for some k >= 0
    """
    if isinstance(n, bool):
        return False

    if isinstance(n, Integral):
        n = int(n)
        while n >= 1:
            if n == 1:
                return True
            if n % 3 != 0:
                return False
            n //= 3
        return False

    value = float(n)
    if not math.isfinite(value):
        return False
    while value >= 1:
        if value == 1:
            return True
        value = value / 3
    return False


class ValidationMixin:
    """
    Mixin providing common validation methods for curve mappers.

    This class provides reusable validation logic that ensures:
    - Grid sizes are positive and have the shape the curve family needs
    - N*N fits the index domain of the variant
    - Indices and coordinates lie inside the grid
    """

    @staticmethod
    def validate_grid_size(
        n: int,
        max_n: int,
        is_valid_shape: Callable[[int], bool],
        shape_error: type[Exception],
    ) -> None:
        """
        Validate a grid side length at construction.

        Args:
            n: Grid side length
            max_n: Largest side length the index domain can hold
            is_valid_shape: Predicate for the curve family (power of two/three)
            shape_error: Exception raised when the predicate fails

        Raises:
            NotPositiveError: If n is zero or negative
            NotPowerOfTwoError / NotPowerOfThreeError: If n has the wrong shape
            GridTooLargeError: If N*N would overflow the index domain
        """
        if isinstance(n, bool) or not isinstance(n, Integral):
            raise TypeError(f"N must be an integer, got {type(n).__name__}")
        if n <= 0:
            raise NotPositiveError(n)
        if not is_valid_shape(n):
            raise shape_error(n)
        if n > max_n:
            raise GridTooLargeError(n, max_n)

    @staticmethod
    def validate_index(t: int, n: int) -> None:
        """
        Validate that a linear index lies in [0, n*n).

        Raises:
            TypeError: If t is not an integer
            OutOfRangeError: If t is negative or >= n*n
        """
        if isinstance(t, bool) or not isinstance(t, Integral):
            raise TypeError(f"t must be an integer, got {type(t).__name__}")
        if t < 0 or t >= n * n:
            raise OutOfRangeError(f"t={t} not in [0, {n * n})")

    @staticmethod
    def validate_coordinates(x: int, y: int, n: int) -> None:
        """
        Validate that a grid coordinate lies in [0, n) x [0, n).

        Raises:
            TypeError: If x or y is not an integer
            OutOfRangeError: If x or y is outside the grid
        """
        for name, value in (("x", x), ("y", y)):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
        if x < 0 or x >= n or y < 0 or y >= n:
            raise OutOfRangeError(f"({x}, {y}) not in [0, {n})x[0, {n})")

    @staticmethod
    def validate_index_tensor(t: torch.Tensor, n: int, name: str = "t") -> None:
        """
        Validate a tensor of linear indices for batched mapping.

        Args:
            t: Integer tensor of any shape
            n: Grid side length
            name: Name of the tensor for error messages

        Raises:
            ValueError: If the tensor is not an integer tensor
            OutOfRangeError: If any element lies outside [0, n*n)
        """
        if t.dtype.is_floating_point or t.dtype.is_complex or t.dtype == torch.bool:
            raise ValueError(f"{name} must be an integer tensor, got {t.dtype}")
        if t.numel() == 0:
            return

        lo = int(t.min())
        hi = int(t.max())
        if lo < 0 or hi >= n * n:
            raise OutOfRangeError(
                f"{name} has values in [{lo}, {hi}], expected [0, {n * n})"
            )

    @staticmethod
    def validate_coordinate_tensor(xy: torch.Tensor, n: int, name: str = "xy") -> None:
        """
        Validate a tensor of (x, y) pairs for batched inverse mapping.

        Args:
            xy: Integer tensor with a trailing dimension of size 2
            n: Grid side length
            name: Name of the tensor for error messages

        Raises:
            ValueError: If the tensor is not integer or the last dim is not 2
            OutOfRangeError: If any coordinate lies outside [0, n)
        """
        if xy.dtype.is_floating_point or xy.dtype.is_complex or xy.dtype == torch.bool:
            raise ValueError(f"{name} must be an integer tensor, got {xy.dtype}")
        if xy.dim() == 0 or xy.shape[-1] != 2:
            raise ValueError(
                f"{name} must have a trailing dimension of size 2, got shape {tuple(xy.shape)}"
            )
        if xy.numel() == 0:
            return

        lo = int(xy.min())
        hi = int(xy.max())
        if lo < 0 or hi >= n:
            raise OutOfRangeError(
                f"{name} has values in [{lo}, {hi}], expected [0, {n})"
            )

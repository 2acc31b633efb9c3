"""
Hilbert curve mapping for very large power-of-two grids.

Indices live in the unsigned 64-bit range. Negative values cannot be
represented in that domain and are reported as out of range.
"""

from dataclasses import dataclass

from torch import Tensor

from .core.constants import INDEX_DTYPE_64, MAX_HILBERT64_N
from .core.errors import NotPowerOfTwoError
from .utils.batch_mapping import hilbert_map_batch, hilbert_map_inverse_batch
from .utils.validation import ValidationMixin, is_power_of_two


@dataclass(frozen=True)
class HilbertCurve64(ValidationMixin):
    """
    A 2D Hilbert curve over an n x n grid with a 64-bit index domain.

    n*n must fit in an unsigned 64-bit integer, so the largest supported n
    is 2**31.

    Args:
        n: Width and height of the grid, a power of two
    """

    n: int

    def __post_init__(self) -> None:
        self.validate_grid_size(
            self.n, MAX_HILBERT64_N, is_power_of_two, NotPowerOfTwoError
        )

    def get_dimensions(self) -> tuple[int, int]:
        """Return the width and height of the 2D space."""
        return self.n, self.n

    def map(self, t: int) -> tuple[int, int]:
        """
        Map t in the range [0, n*n) to (x, y) on the curve, x and y in [0, n).

        Raises:
            OutOfRangeError: If t is outside [0, n*n)
        """
        self.validate_index(t, self.n)

        x = y = 0
        i = 1
        while i < self.n:
            rx = t & 2 == 2
            ry = t & 1 == 1
            if rx:
                ry = not ry

            x, y = self._rotate(i, x, y, rx, ry)

            if rx:
                x += i
            if ry:
                y += i

            t //= 4
            i *= 2

        return x, y

    def map_inverse(self, x: int, y: int) -> int:
        """
        Map (x, y) on the curve back to t.

        Raises:
            OutOfRangeError: If x or y is outside [0, n)
        """
        self.validate_coordinates(x, y, self.n)

        t = 0
        i = self.n // 2
        while i > 0:
            rx = (x & i) > 0
            ry = (y & i) > 0

            a = 3 if rx else 0
            t += i * i * (a ^ int(ry))

            x, y = self._rotate(i, x, y, rx, ry)
            i //= 2

        return t

    @staticmethod
    def _rotate(n: int, x: int, y: int, rx: bool, ry: bool) -> tuple[int, int]:
        """Rotate and flip the quadrant appropriately."""
        if not ry:
            if rx:
                x = n - 1 - x
                y = n - 1 - y

            x, y = y, x
        return x, y

    def map_batch(self, t: Tensor) -> Tensor:
        """Map a tensor of indices to an int64 tensor of shape [..., 2]."""
        self.validate_index_tensor(t, self.n)
        return hilbert_map_batch(self.n, t, dtype=INDEX_DTYPE_64)

    def map_inverse_batch(self, xy: Tensor) -> Tensor:
        """Map a tensor of (x, y) pairs to an int64 tensor of indices."""
        self.validate_coordinate_tensor(xy, self.n)
        return hilbert_map_inverse_batch(self.n, xy, dtype=INDEX_DTYPE_64)

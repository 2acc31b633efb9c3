"""
Hilbert curve mapping for power-of-two grids (signed 32-bit index range).

Converted from the iterative algorithm described in:
  * https://en.wikipedia.org/wiki/Hilbert_curve
  * http://bit-player.org/2013/mapping-the-hilbert-curve
"""

from dataclasses import dataclass

from torch import Tensor

from .core.constants import INDEX_DTYPE_32, MAX_HILBERT_N
from .core.errors import NotPowerOfTwoError
from .utils.batch_mapping import hilbert_map_batch, hilbert_map_inverse_batch
from .utils.validation import ValidationMixin, is_power_of_two


def _rotate(n: int, x: int, y: int, rx: int, ry: int) -> tuple[int, int]:
    """Rotate/flip a quadrant appropriately."""
    if ry == 0:
        if rx == 1:
            x = n - 1 - x
            y = n - 1 - y

        # Swap x and y
        x, y = y, x
    return x, y


@dataclass(frozen=True)
class HilbertCurve(ValidationMixin):
    """
    A 2D Hilbert curve over an n x n grid.

    Indices live in the signed 32-bit range, so n*n must not exceed 2**31 - 1
    and the largest supported n is 2**15.

    Args:
        n: Width and height of the grid, a power of two

    Example:
        >>> curve = HilbertCurve(16)
        >>> curve.map(96)
        (4, 12)
        >>> curve.map_inverse(4, 12)
        96
    """

    n: int

    def __post_init__(self) -> None:
        self.validate_grid_size(self.n, MAX_HILBERT_N, is_power_of_two, NotPowerOfTwoError)

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
            rx = 1 & (t // 2)
            ry = 1 & (t ^ rx)
            x, y = _rotate(i, x, y, rx, ry)

            x += i * rx
            y += i * ry
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
            rx = int((x & i) > 0)
            ry = int((y & i) > 0)
            t += i * i * ((3 * rx) ^ ry)
            x, y = _rotate(i, x, y, rx, ry)
            i //= 2

        return t

    def map_batch(self, t: Tensor) -> Tensor:
        """Map a tensor of indices to an int32 tensor of shape [..., 2]."""
        self.validate_index_tensor(t, self.n)
        return hilbert_map_batch(self.n, t, dtype=INDEX_DTYPE_32)

    def map_inverse_batch(self, xy: Tensor) -> Tensor:
        """Map a tensor of (x, y) pairs to an int32 tensor of indices."""
        self.validate_coordinate_tensor(xy, self.n)
        return hilbert_map_inverse_batch(self.n, xy, dtype=INDEX_DTYPE_32)

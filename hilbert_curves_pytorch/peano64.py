"""
Peano curve mapping for very large power-of-three grids.

Indices live in the unsigned 64-bit range.
"""

from dataclasses import dataclass

from torch import Tensor

from .core.constants import INDEX_DTYPE_64, MAX_PEANO64_N, PEANO_FLIPS
from .core.errors import NotPowerOfThreeError, PeanoInverseNotImplementedError
from .utils.batch_mapping import peano_map_batch
from .utils.validation import ValidationMixin, is_power_of_three


@dataclass(frozen=True)
class PeanoCurve64(ValidationMixin):
    """
    A 2D Peano curve over an n x n grid with a 64-bit index domain.

    n*n must fit in an unsigned 64-bit integer, so the largest supported n
    is 3**20. Batched mapping is limited to indices that fit in int64.

    Args:
        n: Width and height of the grid, a power of three
    """

    n: int

    def __post_init__(self) -> None:
        self.validate_grid_size(
            self.n, MAX_PEANO64_N, is_power_of_three, NotPowerOfThreeError
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
            s = t % 9

            rx = s // 3
            ry = s % 3
            if rx == 1:
                ry = 2 - ry

            if i > 1:
                x, y = self._rotate(i, x, y, s)

            x += rx * i
            y += ry * i

            t //= 9
            i *= 3

        return x, y

    @staticmethod
    def _rotate(n: int, x: int, y: int, s: int) -> tuple[int, int]:
        """Rotate the x and y coordinates depending on the current depth."""
        n = n - 1
        flip_x, flip_y = PEANO_FLIPS[s]
        return (n - x if flip_x else x), (n - y if flip_y else y)

    def map_inverse(self, x: int, y: int) -> int:
        """
        Validate (x, y), then fail: the Peano inverse is not available.

        Raises:
            OutOfRangeError: If x or y is outside [0, n)
            PeanoInverseNotImplementedError: For every in-range coordinate
        """
        self.validate_coordinates(x, y, self.n)
        raise PeanoInverseNotImplementedError()

    def map_batch(self, t: Tensor) -> Tensor:
        """Map a tensor of indices to an int64 tensor of shape [..., 2]."""
        self.validate_index_tensor(t, self.n)
        return peano_map_batch(self.n, t, dtype=INDEX_DTYPE_64)

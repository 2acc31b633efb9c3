"""
Peano curve mapping for power-of-three grids (signed 32-bit index range).

Each level of the curve walks a 3x3 block in a boustrophedon pattern; the
sub-blocks are flipped according to their position in the parent block so
consecutive cells stay adjacent.
"""

from dataclasses import dataclass

from torch import Tensor

from .core.constants import INDEX_DTYPE_32, MAX_PEANO_N, PEANO_FLIPS
from .core.errors import NotPowerOfThreeError, PeanoInverseNotImplementedError
from .utils.batch_mapping import peano_map_batch
from .utils.validation import ValidationMixin, is_power_of_three


def _rotate(n: int, x: int, y: int, s: int) -> tuple[int, int]:
    """Flip x and/or y within a block of side n according to digit s."""
    if n == 1:
        return x, y

    n = n - 1
    flip_x, flip_y = PEANO_FLIPS[s]
    if flip_x:
        x = n - x
    if flip_y:
        y = n - y
    return x, y


@dataclass(frozen=True)
class PeanoCurve(ValidationMixin):
    """
    A 2D Peano curve over an n x n grid.

    n*n must fit the signed 32-bit index range, so the largest supported n
    is 3**9. Only the forward mapping is available.

    Args:
        n: Width and height of the grid, a power of three
    """

    n: int

    def __post_init__(self) -> None:
        self.validate_grid_size(self.n, MAX_PEANO_N, is_power_of_three, NotPowerOfThreeError)

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

            # rx/ry are the coordinates in the 3x3 block
            rx = s // 3
            ry = s % 3
            if rx == 1:
                ry = 2 - ry

            if i > 1:
                x, y = _rotate(i, x, y, s)

            x += rx * i
            y += ry * i

            t //= 9
            i *= 3

        return x, y

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
        """Map a tensor of indices to an int32 tensor of shape [..., 2]."""
        self.validate_index_tensor(t, self.n)
        return peano_map_batch(self.n, t, dtype=INDEX_DTYPE_32)

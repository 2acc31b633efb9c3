"""
Capability interface shared by every curve variant.

Hilbert and Peano curves, in both index widths, expose the same methods so a
consumer can pick a variant at construction time and use it uniformly. The
interface is structural: the curve classes do not inherit from it.
"""

from typing import Protocol, runtime_checkable

from torch import Tensor


@runtime_checkable
class SpaceFillingCurve(Protocol):
    """
    A space-filling curve mapping one dimension to two.

    Attributes:
        n: Width and height of the square grid
    """

    n: int

    def get_dimensions(self) -> tuple[int, int]:
        """Return the width and height of the 2D space."""
        ...

    def map(self, t: int) -> tuple[int, int]:
        """Map t in [0, n*n) to (x, y) with x and y in [0, n)."""
        ...

    def map_inverse(self, x: int, y: int) -> int:
        """Map (x, y) on the curve back to t."""
        ...

    def map_batch(self, t: Tensor) -> Tensor:
        """Map a tensor of indices to a tensor of (x, y) pairs."""
        ...

"""
Exceptions raised by the space-filling curve mappers.

Every validation failure is reported with a dedicated exception type so callers
can tell an invalid grid size apart from an out-of-range index or coordinate.
All validation errors derive from ``ValueError``.
"""


class CurveError(ValueError):
    """Base class for curve validation errors."""


class NotPositiveError(CurveError):
    """Grid size is zero or negative."""

    def __init__(self, n: object):
        super().__init__(f"N must be greater than zero, got {n}")
        self.n = n


class NotPowerOfTwoError(CurveError):
    """Grid size for a Hilbert curve is not a power of two."""

    def __init__(self, n: object):
        super().__init__(f"N must be a power of two, got {n}")
        self.n = n


class NotPowerOfThreeError(CurveError):
    """Grid size for a Peano curve is not a power of three."""

    def __init__(self, n: object):
        super().__init__(f"N must be a power of three, got {n}")
        self.n = n


class GridTooLargeError(CurveError):
    """N*N does not fit in the index domain of the curve variant."""

    def __init__(self, n: int, max_n: int):
        super().__init__(
            f"N={n} is too large for this index width, N*N would overflow "
            f"(max N is {max_n})"
        )
        self.n = n
        self.max_n = max_n


class OutOfRangeError(CurveError):
    """Index or coordinate lies outside the grid."""

    def __init__(self, detail: str):
        super().__init__(f"value is out of range: {detail}")


class PeanoInverseNotImplementedError(NotImplementedError):
    """Mapping Peano coordinates back to an index is not available."""

    def __init__(self):
        super().__init__("MapInverse is not implemented for the Peano curve")

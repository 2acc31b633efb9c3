"""
Hilbert and Peano space-filling curves.

Maps a linear index t in [0, N*N) to the (x, y) cell visited at step t of the
curve, and back, for square grids whose side is a power of two (Hilbert) or a
power of three (Peano). Each curve comes in a 32-bit and a 64-bit index range.

Example::

    from hilbert_curves_pytorch import HilbertCurve

    curve = HilbertCurve(16)
    x, y = curve.map(96)          # (4, 12)
    t = curve.map_inverse(x, y)   # 96
"""

from .core import (
    CurveConfig,
    CurveError,
    CurvePatternCache,
    GridTooLargeError,
    NotPositiveError,
    NotPowerOfThreeError,
    NotPowerOfTwoError,
    OutOfRangeError,
    PatternCache,
    PeanoInverseNotImplementedError,
    SpaceFillingCurve,
    clear_global_cache,
    create_curve,
    get_global_pattern_cache,
    register_curve,
)
from .hilbert import HilbertCurve
from .hilbert64 import HilbertCurve64
from .peano import PeanoCurve
from .peano64 import PeanoCurve64
from .utils import (
    curve_coordinates,
    curve_order,
    is_power_of_three,
    is_power_of_two,
    verify_round_trip,
)

__version__ = "0.1.0"

__all__ = [
    # Curves
    "HilbertCurve",
    "HilbertCurve64",
    "PeanoCurve",
    "PeanoCurve64",
    "SpaceFillingCurve",
    # Errors
    "CurveError",
    "GridTooLargeError",
    "NotPositiveError",
    "NotPowerOfThreeError",
    "NotPowerOfTwoError",
    "OutOfRangeError",
    "PeanoInverseNotImplementedError",
    # Factory
    "CurveConfig",
    "create_curve",
    "register_curve",
    # Caching
    "CurvePatternCache",
    "PatternCache",
    "clear_global_cache",
    "get_global_pattern_cache",
    # Utilities
    "curve_coordinates",
    "curve_order",
    "is_power_of_three",
    "is_power_of_two",
    "verify_round_trip",
]

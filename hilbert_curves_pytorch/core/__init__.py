"""
Core components shared by all curve implementations.

This module provides the error types, the capability interface, constants,
configuration, the factory and the pattern cache.
"""

from .errors import (
    CurveError,
    GridTooLargeError,
    NotPositiveError,
    NotPowerOfThreeError,
    NotPowerOfTwoError,
    OutOfRangeError,
    PeanoInverseNotImplementedError,
)
from .constants import (
    INDEX_DTYPE_32,
    INDEX_DTYPE_64,
    INT32_MAX,
    MAX_HILBERT64_N,
    MAX_HILBERT_N,
    MAX_PEANO64_N,
    MAX_PEANO_N,
    UINT64_MAX,
)
from .base import SpaceFillingCurve
from .pattern_cache import (
    CurvePatternCache,
    PatternCache,
    clear_global_cache,
    get_global_pattern_cache,
)
from .config import CurveConfig
from .factory import create_curve, register_curve

__all__ = [
    # Errors
    "CurveError",
    "GridTooLargeError",
    "NotPositiveError",
    "NotPowerOfThreeError",
    "NotPowerOfTwoError",
    "OutOfRangeError",
    "PeanoInverseNotImplementedError",
    # Interface
    "SpaceFillingCurve",
    # Limits
    "INDEX_DTYPE_32",
    "INDEX_DTYPE_64",
    "INT32_MAX",
    "MAX_HILBERT_N",
    "MAX_HILBERT64_N",
    "MAX_PEANO_N",
    "MAX_PEANO64_N",
    "UINT64_MAX",
    # Caching
    "CurvePatternCache",
    "PatternCache",
    "clear_global_cache",
    "get_global_pattern_cache",
    # Configuration and factory
    "CurveConfig",
    "create_curve",
    "register_curve",
]

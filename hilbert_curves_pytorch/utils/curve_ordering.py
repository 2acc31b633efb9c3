"""
Whole-curve helpers built on the scalar mapping contract.

These walk a curve the way a renderer would: ask for the dimensions once,
then call ``map`` once per index.
"""

import warnings

import numpy as np

from ..core.base import SpaceFillingCurve
from ..core.constants import LARGE_GRID_WARNING_CELLS
from ..core.pattern_cache import get_global_pattern_cache


def curve_coordinates(curve: SpaceFillingCurve, use_cache: bool = True) -> np.ndarray:
    """
    Coordinates of every cell in curve order.

    Args:
        curve: Any curve variant
        use_cache: Whether to read and fill the global pattern cache

    Returns:
        Read-only int64 array of shape [n*n, 2] where row t is map(t)
    """
    if use_cache:
        cache = get_global_pattern_cache()
        cached = cache.get_coordinates(curve)
        if cached is not None:
            return cached

    width, height = curve.get_dimensions()
    total = width * height
    if total > LARGE_GRID_WARNING_CELLS:
        warnings.warn(
            f"Materialising {total} curve cells for a {width}x{height} grid. "
            f"This may use a lot of memory; consider map_batch on chunks instead."
        )

    coords = np.empty((total, 2), dtype=np.int64)
    for t in range(total):
        coords[t] = curve.map(t)

    if use_cache:
        get_global_pattern_cache().put_coordinates(curve, coords)
    else:
        coords.flags.writeable = False
    return coords


def curve_order(curve: SpaceFillingCurve) -> list[int]:
    """
    Row-major cell indices in curve order.

    Args:
        curve: Any curve variant

    Returns:
        List where entry t is y * n + x for (x, y) = map(t); a permutation of
        range(n * n)
    """
    width, _ = curve.get_dimensions()
    coords = curve_coordinates(curve)
    return (coords[:, 1] * width + coords[:, 0]).tolist()


def verify_round_trip(curve: SpaceFillingCurve) -> bool:
    """
    Check that map_inverse(map(t)) == t for every index of the curve.

    Raises:
        PeanoInverseNotImplementedError: For Peano curves
    """
    coords = curve_coordinates(curve)
    for t, (x, y) in enumerate(coords.tolist()):
        if curve.map_inverse(x, y) != t:
            return False
    return True

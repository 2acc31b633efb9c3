"""
Factory for creating curve mappers.

Callers pick a curve family and an index width at construction time and get
back an object satisfying the SpaceFillingCurve interface.
"""

import logging

from ..utils.validation import is_power_of_three, is_power_of_two
from .base import SpaceFillingCurve
from .config import CurveConfig
from .constants import MAX_HILBERT_N, MAX_PEANO_N
from .errors import CurveError

logger = logging.getLogger("hilbert_curves_pytorch.factory")


# Registry of curve implementations keyed by (curve type, index width)
_CURVE_REGISTRY: dict[tuple[str, int], type] = {}

# Largest n each family supports in the 32-bit index domain
_MAX_N_32 = {"hilbert": MAX_HILBERT_N, "peano": MAX_PEANO_N}

_registered = False


def register_curve(name: str, index_width: int, cls: type) -> None:
    """Register a curve implementation for a family and index width."""
    _CURVE_REGISTRY[(name, index_width)] = cls
    logger.debug(f"Registered {cls.__name__} as ({name}, {index_width})")


def create_curve(
    curve_type: str = "auto",
    n: int | None = None,
    index_width: int | None = None,
    config: CurveConfig | None = None,
) -> SpaceFillingCurve:
    """
    Create a curve mapper.

    Args:
        curve_type: Type of curve to create. Options:
            - "auto": Hilbert for powers of two, Peano for powers of three
            - "hilbert": Hilbert curve, n must be a power of two
            - "peano": Peano curve, n must be a power of three
        n: Width and height of the grid
        index_width: 32 or 64; None selects 32 when n*n fits, otherwise 64
        config: Complete configuration, overrides the other arguments

    Returns:
        Curve mapper

    Raises:
        ValueError: For unknown types/widths or an n fitting neither family
        NotPositiveError, NotPowerOfTwoError, NotPowerOfThreeError,
        GridTooLargeError: From the curve constructor

    Example:
        >>> curve = create_curve("hilbert", n=16)
        >>> curve.map(96)
        (4, 12)
    """
    _ensure_implementations_registered()

    if config is None:
        if n is None:
            raise ValueError("n must be given when no config is provided")
        config = CurveConfig(n=n, curve_type=curve_type, index_width=index_width)

    curve_type = config.curve_type
    if curve_type == "auto":
        curve_type = _select_curve_type(config.n)
        logger.info(f"Auto-selected {curve_type} curve for n={config.n}")

    index_width = config.index_width
    if index_width is None:
        index_width = _select_index_width(curve_type, config.n)

    key = (curve_type, index_width)
    if key not in _CURVE_REGISTRY:
        available = sorted(_CURVE_REGISTRY.keys())
        raise ValueError(f"No curve registered for {key}. Available: {available}")

    cls = _CURVE_REGISTRY[key]
    curve = cls(config.n)
    logger.debug(f"Created {cls.__name__} with n={config.n}")
    return curve


def _select_curve_type(n: int) -> str:
    """Pick the curve family whose grid shape n has."""
    if n <= 0 or is_power_of_two(n):
        # Non-positive sizes are rejected by the Hilbert constructor
        return "hilbert"
    if is_power_of_three(n):
        return "peano"
    raise CurveError(f"N must be a power of two or a power of three, got {n}")


def _select_index_width(curve_type: str, n: int) -> int:
    """Pick the narrowest index width able to hold n*n."""
    max_n = _MAX_N_32.get(curve_type)
    if max_n is not None and n > max_n:
        return 64
    return 32


def _register_implementations() -> None:
    """Register the built-in curve variants."""
    from ..hilbert import HilbertCurve
    from ..hilbert64 import HilbertCurve64
    from ..peano import PeanoCurve
    from ..peano64 import PeanoCurve64

    builtins = {
        ("hilbert", 32): HilbertCurve,
        ("hilbert", 64): HilbertCurve64,
        ("peano", 32): PeanoCurve,
        ("peano", 64): PeanoCurve64,
    }
    # Keep implementations registered by the user before first use
    for (name, index_width), cls in builtins.items():
        if (name, index_width) not in _CURVE_REGISTRY:
            register_curve(name, index_width, cls)


def _ensure_implementations_registered() -> None:
    """Ensure built-in implementations are registered (called lazily)."""
    global _registered
    if not _registered:
        _register_implementations()
        _registered = True

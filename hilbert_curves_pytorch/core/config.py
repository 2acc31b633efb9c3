"""
Configuration for selecting a curve variant.
"""

from dataclasses import dataclass

CURVE_TYPES = ("auto", "hilbert", "peano")
INDEX_WIDTHS = (32, 64)


@dataclass
class CurveConfig:
    """
    Which curve to build and for which grid.

    The grid size itself is validated by the curve class when the curve is
    created, so the same error types surface whether a curve is built
    directly or through the factory.

    Args:
        n: Width and height of the grid
        curve_type: "hilbert", "peano" or "auto" (default: "auto")
        index_width: 32, 64, or None to pick the narrowest that fits
            (default: None)

    Example:
        >>> config = CurveConfig(n=27, curve_type="peano", index_width=64)
    """

    n: int
    curve_type: str = "auto"
    index_width: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.curve_type = self.curve_type.lower()
        if self.curve_type not in CURVE_TYPES:
            raise ValueError(
                f"Unknown curve type '{self.curve_type}'. Available types: {list(CURVE_TYPES)}"
            )

        if self.index_width is not None and self.index_width not in INDEX_WIDTHS:
            raise ValueError(
                f"index_width must be one of {list(INDEX_WIDTHS)} or None, got {self.index_width}"
            )

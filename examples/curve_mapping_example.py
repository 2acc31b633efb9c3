#!/usr/bin/env python3
"""
Example demonstrating Hilbert and Peano curve mapping.

Shows scalar mapping in both directions, factory-based selection and batched
mapping of a whole grid with PyTorch.
"""

import torch

from hilbert_curves_pytorch import (
    HilbertCurve,
    PeanoCurve,
    PeanoInverseNotImplementedError,
    create_curve,
    curve_coordinates,
)


def example_1_scalar_mapping():
    """Example 1: Map an index to a cell and back."""
    print("Example 1: Scalar mapping on a 16x16 Hilbert curve")
    print("-" * 50)

    curve = HilbertCurve(16)
    x, y = curve.map(96)
    t = curve.map_inverse(x, y)

    print(f"x = {x}, y = {y}, t = {t}")
    print()


def example_2_factory():
    """Example 2: Let the factory pick the curve variant."""
    print("Example 2: Factory selection")
    print("-" * 50)

    for n in [16, 27, 2**16, 3**10]:
        curve = create_curve(n=n)
        print(f"n={n:>6}: {type(curve).__name__}")
    print()


def example_3_text_rendering():
    """Example 3: Print the visiting order of a small Peano curve."""
    print("Example 3: Visiting order of a 9x9 Peano curve")
    print("-" * 50)

    curve = PeanoCurve(9)
    width, height = curve.get_dimensions()
    grid = [[0] * width for _ in range(height)]
    for t, (x, y) in enumerate(curve_coordinates(curve).tolist()):
        grid[y][x] = t

    for row in reversed(grid):
        print(" ".join(f"{t:2d}" for t in row))

    try:
        curve.map_inverse(0, 0)
    except PeanoInverseNotImplementedError as e:
        print(f"map_inverse: {e}")
    print()


def example_4_batched():
    """Example 4: Map every index of a grid in one call."""
    print("Example 4: Batched mapping")
    print("-" * 50)

    curve = HilbertCurve(256)
    t = torch.arange(256 * 256)
    coords = curve.map_batch(t)
    recovered = curve.map_inverse_batch(coords)

    print(f"Coordinates: shape={tuple(coords.shape)}, dtype={coords.dtype}")
    print(f"Round trip exact: {torch.equal(recovered.long(), t)}")
    print()


if __name__ == "__main__":
    example_1_scalar_mapping()
    example_2_factory()
    example_3_text_rendering()
    example_4_batched()

"""
Vectorised curve mapping on integer tensors.

These functions apply the same per-level digit decomposition as the scalar
mappers, but to every element of a tensor at once. Inputs are expected to be
validated by the caller; all arithmetic happens in int64.
"""

import torch
from torch import Tensor

from ..core.constants import PEANO_FLIPS


def _hilbert_rotate(
    n: int, x: Tensor, y: Tensor, rx: Tensor, ry: Tensor
) -> tuple[Tensor, Tensor]:
    """Rotate/flip quadrants element-wise."""
    swap = ry == 0
    flip = swap & (rx == 1)
    x = torch.where(flip, n - 1 - x, x)
    y = torch.where(flip, n - 1 - y, y)
    return torch.where(swap, y, x), torch.where(swap, x, y)


def hilbert_map_batch(n: int, t: Tensor, dtype: torch.dtype = torch.int64) -> Tensor:
    """
    Map Hilbert indices to coordinates.

    Args:
        n: Grid side length, a power of two
        t: Integer tensor of indices in [0, n*n)
        dtype: Integer dtype of the result

    Returns:
        Tensor of shape [*t.shape, 2] with [..., 0] = x, [..., 1] = y
    """
    t = t.to(torch.int64)
    x = torch.zeros_like(t)
    y = torch.zeros_like(t)

    i = 1
    while i < n:
        rx = (t >> 1) & 1
        ry = (t ^ rx) & 1
        x, y = _hilbert_rotate(i, x, y, rx, ry)
        x = x + i * rx
        y = y + i * ry
        t = t >> 2
        i *= 2

    return torch.stack([x, y], dim=-1).to(dtype)


def hilbert_map_inverse_batch(
    n: int, xy: Tensor, dtype: torch.dtype = torch.int64
) -> Tensor:
    """
    Map Hilbert coordinates back to indices.

    Args:
        n: Grid side length, a power of two
        xy: Integer tensor of shape [..., 2] with coordinates in [0, n)
        dtype: Integer dtype of the result

    Returns:
        Tensor of shape xy.shape[:-1] holding the indices
    """
    xy = xy.to(torch.int64)
    x = xy[..., 0]
    y = xy[..., 1]
    t = torch.zeros_like(x)

    i = n // 2
    while i > 0:
        rx = ((x & i) > 0).to(torch.int64)
        ry = ((y & i) > 0).to(torch.int64)
        t = t + i * i * ((3 * rx) ^ ry)
        x, y = _hilbert_rotate(i, x, y, rx, ry)
        i //= 2

    return t.to(dtype)


def peano_map_batch(n: int, t: Tensor, dtype: torch.dtype = torch.int64) -> Tensor:
    """
    Map Peano indices to coordinates.

    Args:
        n: Grid side length, a power of three
        t: Integer tensor of indices in [0, n*n)
        dtype: Integer dtype of the result

    Returns:
        Tensor of shape [*t.shape, 2] with [..., 0] = x, [..., 1] = y
    """
    t = t.to(torch.int64)
    x = torch.zeros_like(t)
    y = torch.zeros_like(t)

    flips = torch.tensor(PEANO_FLIPS, dtype=torch.bool, device=t.device)

    i = 1
    while i < n:
        s = t % 9
        rx = s // 3
        ry = s % 3
        ry = torch.where(rx == 1, 2 - ry, ry)

        if i > 1:
            m = i - 1
            flip = flips[s]
            x = torch.where(flip[..., 0], m - x, x)
            y = torch.where(flip[..., 1], m - y, y)

        x = x + rx * i
        y = y + ry * i
        t = t // 9
        i *= 3

    return torch.stack([x, y], dim=-1).to(dtype)

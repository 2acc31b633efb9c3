"""
Index-width limits and dtype choices for the curve variants.
"""

import math

import torch

# Index domains
INT32_MAX = 2**31 - 1
UINT64_MAX = 2**64 - 1


def largest_side(base: int, index_max: int) -> int:
    """Largest power of base whose square is at most index_max."""
    limit = math.isqrt(index_max)
    side = 1
    while side * base <= limit:
        side *= base
    return side


# Largest grid side whose N*N still fits the index domain
MAX_HILBERT_N = largest_side(2, INT32_MAX)  # 2**15
MAX_HILBERT64_N = largest_side(2, UINT64_MAX)  # 2**31
MAX_PEANO_N = largest_side(3, INT32_MAX)  # 3**9
MAX_PEANO64_N = largest_side(3, UINT64_MAX)  # 3**20

# Tensor dtypes produced by batched mapping
INDEX_DTYPE_32 = torch.int32
INDEX_DTYPE_64 = torch.int64

# Peano rotation table: (flip_x, flip_y) keyed by the base-9 digit
PEANO_FLIPS = (
    (False, False),
    (True, False),
    (False, False),
    (False, True),
    (True, True),
    (False, True),
    (False, False),
    (True, False),
    (False, False),
)

# Materialising more cells than this emits a warning
LARGE_GRID_WARNING_CELLS = 2**22

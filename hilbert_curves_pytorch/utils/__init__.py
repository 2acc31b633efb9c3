"""
Utility modules for the curve mappers.

This package contains validation helpers, vectorised mapping on tensors and
whole-curve helpers built on the scalar mapping contract.
"""

from .validation import ValidationMixin, is_power_of_three, is_power_of_two
from .batch_mapping import (
    hilbert_map_batch,
    hilbert_map_inverse_batch,
    peano_map_batch,
)
from .curve_ordering import curve_coordinates, curve_order, verify_round_trip

__all__ = [
    # Validation
    "ValidationMixin",
    "is_power_of_two",
    "is_power_of_three",
    # Batched mapping
    "hilbert_map_batch",
    "hilbert_map_inverse_batch",
    "peano_map_batch",
    # Whole-curve helpers
    "curve_coordinates",
    "curve_order",
    "verify_round_trip",
]

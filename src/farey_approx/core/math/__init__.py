"""
Core math modules для farey_approx

Целочисленные и float примитивы с гарантией отсутствия молчаливых ошибок.
"""

from farey_approx.core.math.numerical_safeguards import (
    # Constants
    MACHINE_EPSILON,
    U64_BITS,
    U64_MAX,
    # Checked arithmetic
    checked_add,
    unsigned_limit,
    validate_unsigned,
    # Float checks and comparisons
    compare_float,
    is_valid_float,
    is_within_epsilon,
    # Validation
    validate_target,
)

__all__ = [
    # Constants
    "MACHINE_EPSILON",
    "U64_BITS",
    "U64_MAX",
    # Checked arithmetic
    "checked_add",
    "unsigned_limit",
    "validate_unsigned",
    # Float checks and comparisons
    "compare_float",
    "is_valid_float",
    "is_within_epsilon",
    # Validation
    "validate_target",
]

"""
Core math modules

Численные примитивы для вычисления мономов.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Powers
    real_pow,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    is_close,
    is_zero,
    # Validation
    validate_coefficient,
    validate_exponent,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Powers
    "real_pow",
    # NaN/Inf checks
    "is_valid_float",
    # Epsilon comparisons
    "is_close",
    "is_zero",
    # Validation
    "validate_coefficient",
    "validate_exponent",
]

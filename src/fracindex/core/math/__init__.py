"""
Core math modules для fracindex

Decimal-примитивы с гарантией строгого порядка после форматирования.
"""

# Decimal Safeguards
from fracindex.core.math.decimal_safeguards import (
    # Decimal context
    DECIMAL_CONTEXT,
    DECIMAL_PRECISION,
    ZERO,
    # Generation constants
    BETWEEN_PLACES,
    BOUNDARY_EPS,
    BOUNDARY_JITTER,
    BOUNDARY_PLACES,
    MIN_SAFE_GAP,
    RELOCATION_PLACES,
    STEP_SIZE,
    # Conversion
    decimal_places,
    to_decimal,
    # Formatting
    format_fixed,
    format_within,
    quantize_places,
    # Intervals
    exact_precision,
    is_inside_with_margin,
    is_strictly_between,
    midpoint,
    relocation_places,
    # Validation
    validate_in_range,
    validate_positive,
)

__all__ = [
    # Decimal context
    "DECIMAL_CONTEXT",
    "DECIMAL_PRECISION",
    "ZERO",
    # Generation constants
    "BETWEEN_PLACES",
    "BOUNDARY_EPS",
    "BOUNDARY_JITTER",
    "BOUNDARY_PLACES",
    "MIN_SAFE_GAP",
    "RELOCATION_PLACES",
    "STEP_SIZE",
    # Conversion
    "decimal_places",
    "to_decimal",
    # Formatting
    "format_fixed",
    "format_within",
    "quantize_places",
    # Intervals
    "exact_precision",
    "is_inside_with_margin",
    "is_strictly_between",
    "midpoint",
    "relocation_places",
    # Validation
    "validate_in_range",
    "validate_positive",
]

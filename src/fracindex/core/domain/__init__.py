"""
Domain models and ordering helpers.

Contains the FractionalIndex value object and the numeric ordering contract.
"""

from fracindex.core.domain.fractional_index import (
    DECIMAL_STRING_PATTERN,
    FractionalIndex,
    IndexLike,
    compare_indexes,
    index_sort_key,
    is_strictly_increasing,
    is_within_bounds,
    parse_bound,
    sort_indexes,
)

__all__ = [
    "DECIMAL_STRING_PATTERN",
    "FractionalIndex",
    "IndexLike",
    "compare_indexes",
    "index_sort_key",
    "is_strictly_increasing",
    "is_within_bounds",
    "parse_bound",
    "sort_indexes",
]

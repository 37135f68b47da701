"""
fracindex — order-preserving decimal fractional indexes.

Generates position values that let callers insert, append, or relocate items
in an ordered collection without renumbering existing items. Indexes are
fixed-point decimal strings ordered numerically (parse-and-compare).
"""

import logging

from fracindex.core.domain import (
    FractionalIndex,
    compare_indexes,
    index_sort_key,
    is_strictly_increasing,
    is_within_bounds,
    sort_indexes,
)
from fracindex.generator import (
    DEFAULT_CONFIG,
    GeneratorConfig,
    IndexGenerationResult,
    IndexStrategy,
    InvalidRange,
    JitterSource,
    generate_bulk,
    generate_index,
    generate_relocation,
    generate_single,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Operations
    "generate_single",
    "generate_bulk",
    "generate_relocation",
    "generate_index",
    # Types
    "FractionalIndex",
    "GeneratorConfig",
    "DEFAULT_CONFIG",
    "IndexGenerationResult",
    "IndexStrategy",
    "JitterSource",
    # Exceptions
    "InvalidRange",
    # Ordering
    "compare_indexes",
    "index_sort_key",
    "is_strictly_increasing",
    "is_within_bounds",
    "sort_indexes",
]

"""
Fractional index generators.

Relocation → (Bulk | равномерная сетка) → Single.
"""

from fracindex.generator.bulk import generate_bulk
from fracindex.generator.config import DEFAULT_CONFIG, GeneratorConfig
from fracindex.generator.jitter import JitterSource
from fracindex.generator.relocation import generate_relocation
from fracindex.generator.single import (
    IndexGenerationResult,
    IndexStrategy,
    InvalidRange,
    generate_index,
    generate_single,
)

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "GeneratorConfig",
    "JitterSource",
    # Exceptions
    "InvalidRange",
    # Results
    "IndexGenerationResult",
    "IndexStrategy",
    # Operations
    "generate_bulk",
    "generate_index",
    "generate_relocation",
    "generate_single",
]

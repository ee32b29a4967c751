"""Graph-theoretic helpers for outerplanarity and small minor searches.

Python 3.13+.
"""

from .minors import (
    augment_with_apex,
    find_k4_block,
    find_k23_block,
    find_k33_block,
    has_k4_minor,
    has_k23_minor,
    has_k33_minor,
    is_outerplanar,
    kuratowski_type,
    series_parallel_core,
)

__all__ = [
    "augment_with_apex",
    "find_k4_block",
    "find_k23_block",
    "find_k33_block",
    "has_k4_minor",
    "has_k23_minor",
    "has_k33_minor",
    "is_outerplanar",
    "kuratowski_type",
    "series_parallel_core",
]

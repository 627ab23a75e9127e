"""Source tree filtering for directory scans.

This module provides pathspec-based gitignore filtering using
the mature pathspec library.
"""

from arma_xgettext.filters.pathspec_filter import (
    PathspecFilter,
    DEFAULT_IGNORE_PATTERNS,
)

__all__ = [
    "PathspecFilter",
    "DEFAULT_IGNORE_PATTERNS",
]

"""Collection diffing.

Submodules:
    indexer -- Build keyed mappings by natural equality or by fingerprint.
    diff    -- Compute added/removed/equal partitions of two collections.
"""

from objutils.collection.diff import diff, get_diff, get_diff_any
from objutils.collection.indexer import default_fingerprint_provider, index_by_fingerprint, index_natural

__all__ = [
    "default_fingerprint_provider",
    "diff",
    "get_diff",
    "get_diff_any",
    "index_by_fingerprint",
    "index_natural",
]

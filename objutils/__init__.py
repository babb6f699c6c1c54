"""objutils -- collection diffing and field-path resolution helpers.

Exposes:
    get_diff / get_diff_any   -- Added/removed/equal partitions of two collections.
    resolve_from / resolve_path / resolve_with_type
                              -- Follow a chain of field names from a root object.
    collect_by_capability / flatten_lists_by_capability
                              -- Gather field values whose declared type satisfies a capability.
"""

from objutils.collection import (
    diff,
    get_diff,
    get_diff_any,
    index_by_fingerprint,
    index_natural,
)
from objutils.errors import AccessError, NullObjectError, ObjUtilsError, SerializationError
from objutils.models import Difference
from objutils.observability import setup_logging
from objutils.reflection import (
    collect_by_capability,
    flatten_lists_by_capability,
    get_field,
    resolve_from,
    resolve_path,
    resolve_with_type,
)

__version__ = "0.1.0"

__all__ = [
    "AccessError",
    "Difference",
    "NullObjectError",
    "ObjUtilsError",
    "SerializationError",
    "collect_by_capability",
    "diff",
    "flatten_lists_by_capability",
    "get_diff",
    "get_diff_any",
    "get_field",
    "index_by_fingerprint",
    "index_natural",
    "resolve_from",
    "resolve_path",
    "resolve_with_type",
    "setup_logging",
]

"""Path-based value resolution over declared fields.

Submodules:
    introspector -- Per-class declared-field schemas and field reads.
    resolver     -- Follow a dot-delimited chain of field names.
    aggregators  -- Collect or flatten field values by capability.
"""

from objutils.reflection.aggregators import collect_by_capability, flatten_lists_by_capability
from objutils.reflection.introspector import clear_schema_cache, get_field, read_field, schema_for
from objutils.reflection.resolver import resolve_from, resolve_path, resolve_with_type

__all__ = [
    "clear_schema_cache",
    "collect_by_capability",
    "flatten_lists_by_capability",
    "get_field",
    "read_field",
    "resolve_from",
    "resolve_path",
    "resolve_with_type",
    "schema_for",
]

"""Resolve a nested value by following a chain of field names.

Every lookup along the chain is made against one fixed class: the class
passed to ``resolve_with_type``, or the root object's class for the
path-only entry points. The class is not re-derived from the object
reached at each level, so a nested field is only found if the fixed class
declares a field of that name.

Resolution stops at the first segment that cannot be resolved (undeclared
field, unset attribute or ``None`` value) and returns the object reached
so far. Only a ``None`` root is an error.
"""

from __future__ import annotations

from collections.abc import Sequence

from objutils.errors import NullObjectError
from objutils.observability.logging import get_logger
from objutils.reflection.introspector import get_field
from objutils.strings import split_path

_logger = get_logger("reflection.resolver")


def resolve_from(obj: object, path: str | None) -> object:
    """Resolve a dot-delimited *path*, e.g. ``"spec.template.name"``, from *obj*.

    An empty or None path returns *obj* itself.

    Raises:
        NullObjectError: if *obj* is None.
    """
    if obj is None:
        raise NullObjectError()
    return resolve_with_type(obj, type(obj), split_path(path))


def resolve_path(obj: object, path: Sequence[str]) -> object:
    """Resolve a pre-split *path* from *obj*, starting from its runtime class.

    Raises:
        NullObjectError: if *obj* is None.
    """
    if obj is None:
        raise NullObjectError()
    return resolve_with_type(obj, type(obj), path)


def resolve_with_type(obj: object, owner: type, path: Sequence[str]) -> object:
    """Resolve *path* from *obj*, looking up every segment on *owner*.

    *path* is not modified.

    Raises:
        NullObjectError: if *obj* is None.
    """
    if obj is None:
        raise NullObjectError()

    current = obj
    for depth, segment in enumerate(path):
        value = get_field(current, owner, segment.strip())
        if value is None:
            _logger.debug(
                "path_resolution_stopped",
                owner=owner.__qualname__,
                segment=segment,
                depth=depth,
            )
            break
        current = value
    return current

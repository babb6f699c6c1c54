"""Read access to the fields a class declares itself.

A class's declared fields are its own annotations, in declaration order,
followed by any of its own ``__slots__`` that are not annotated. Inherited
fields are not part of a class's schema. Private double-underscore fields
are looked up by either their written name or their mangled storage name.

Reads use ``object.__getattribute__`` so instance-level attribute hooks
(``__getattr__``, overridden ``__getattribute__``) do not interfere. No
state is changed by a read.
"""

from __future__ import annotations

import inspect
import sys
import typing
from functools import lru_cache

from objutils.errors import AccessError
from objutils.models.fields import FieldDescriptor, TypeSchema
from objutils.observability.logging import get_logger

_logger = get_logger("reflection.introspector")

_MISSING = object()


def schema_for(owner: type) -> TypeSchema:
    """Return the cached declared-field schema of *owner*.

    Schemas are cached per class and the cache holds a strong reference to
    each class it has seen. Call ``clear_schema_cache`` to release classes
    created at runtime.
    """
    return _build_schema(owner)


def clear_schema_cache() -> None:
    _build_schema.cache_clear()


@lru_cache(maxsize=512)
def _build_schema(owner: type) -> TypeSchema:
    annotations = inspect.get_annotations(owner)

    attributes = list(annotations)
    attributes.extend(name for name in _own_slots(owner) if name not in annotations)

    descriptors = tuple(
        FieldDescriptor(
            name=_demangle(owner, attribute),
            attribute=attribute,
            owner=owner,
            declared_type=_resolve_annotation(owner, attribute, annotations.get(attribute)),
        )
        for attribute in attributes
    )
    _logger.debug("type_schema_built", owner=owner.__qualname__, fields=[d.name for d in descriptors])
    return TypeSchema(owner=owner, fields=descriptors)


def _resolve_annotation(owner: type, attribute: str, annotation: object) -> object | None:
    # Each annotation is resolved on its own so one unresolvable name
    # (e.g. a TYPE_CHECKING-only import) leaves only that field untyped.
    if annotation is None:
        return None
    if isinstance(annotation, str):
        module = sys.modules.get(owner.__module__)
        namespace = {**vars(owner), **(vars(module) if module is not None else {})}
        try:
            annotation = eval(annotation, namespace)  # noqa: S307
        except (NameError, AttributeError, TypeError, SyntaxError) as exc:
            _logger.debug(
                "annotation_unresolved",
                owner=owner.__qualname__,
                field=attribute,
                reason=str(exc),
            )
            return None
    if typing.get_origin(annotation) is typing.Annotated:
        return typing.get_args(annotation)[0]
    return annotation


def _own_slots(owner: type) -> list[str]:
    slots = owner.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [_mangle(owner, name) for name in slots if name not in ("__dict__", "__weakref__")]


def _mangle(owner: type, name: str) -> str:
    # __slots__ keeps private names as written; values live under the mangled name.
    if name.startswith("__") and not name.endswith("__"):
        return f"_{owner.__name__.lstrip('_')}{name}"
    return name


def _demangle(owner: type, attribute: str) -> str:
    prefix = f"_{owner.__name__.lstrip('_')}__"
    if attribute.startswith(prefix) and not attribute.endswith("__"):
        return "__" + attribute[len(prefix) :]
    return attribute


def read_field(obj: object, descriptor: FieldDescriptor, default: object = _MISSING) -> object:
    """Read *descriptor* from *obj*.

    An unset attribute returns *default* when one is given and raises
    ``AttributeError`` otherwise.

    Raises:
        AccessError: if the read fails for any reason other than the
            attribute being unset.
    """
    try:
        return object.__getattribute__(obj, descriptor.attribute)
    except AttributeError:
        if default is _MISSING:
            raise
        return default
    except Exception as exc:
        raise AccessError(descriptor.owner, descriptor.name, exc) from exc


def get_field(obj: object, owner: type, field_name: str) -> object | None:
    """Return the value of *field_name* declared directly on *owner*, read from *obj*.

    Returns None when *owner* does not declare the field, *obj* has no
    value for it, or the value cannot be read. *obj* need not be an
    instance of *owner*.
    """
    descriptor = schema_for(owner).find(field_name)
    if descriptor is None:
        return None
    try:
        return read_field(obj, descriptor, default=None)
    except AccessError as exc:
        _logger.debug("field_unreadable", owner=owner.__qualname__, field=field_name, reason=str(exc.cause))
        return None

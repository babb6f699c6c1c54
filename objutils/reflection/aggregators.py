"""Collect field values by capability.

A capability is any class (an ABC, a base class or a Protocol). A
field's declared type satisfies it when the type is a subclass. Protocols
that ``issubclass`` cannot check structurally (not runtime-checkable, or
with data members) match only classes that inherit from them explicitly.
``X | None`` is treated as ``X``, and other unions satisfy only if every
non-None member does.

Useful for generated models that spread values of a common interface
across many differently named fields.
"""

from __future__ import annotations

import types
import typing
from collections.abc import Sequence
from typing import TypeVar

from objutils.models.fields import FieldDescriptor
from objutils.reflection.introspector import read_field, schema_for

C = TypeVar("C")


def collect_by_capability(obj: object, capability: type[C]) -> list[C]:
    """Return the values of every field of *obj* whose declared type satisfies *capability*.

    Fields are visited in declaration order. Unset fields contribute None.

    Raises:
        AccessError: if a matching field cannot be read.
    """
    result: list[C] = []
    for descriptor in schema_for(type(obj)).fields:
        if _satisfies(descriptor.declared_type, capability):
            result.append(read_field(obj, descriptor, default=None))  # type: ignore[arg-type]
    return result


def flatten_lists_by_capability(obj: object, capability: type[C]) -> list[C]:
    """Concatenate every list-like field of *obj* whose element type satisfies *capability*.

    Fields are visited in declaration order and elements keep their list
    order. Unset or None fields contribute nothing.

    Raises:
        AccessError: if a matching field cannot be read.
    """
    result: list[C] = []
    for descriptor in schema_for(type(obj)).fields:
        element_type = _sequence_element_type(descriptor)
        if element_type is None or not _satisfies(element_type, capability):
            continue
        values = read_field(obj, descriptor, default=None)
        if values is None:
            continue
        result.extend(values)  # type: ignore[arg-type]
    return result


def _unwrap_optional(declared: object) -> list[object]:
    if typing.get_origin(declared) in (typing.Union, types.UnionType):
        return [arg for arg in typing.get_args(declared) if arg is not type(None)]
    return [declared]


def _satisfies(declared: object, capability: type) -> bool:
    if declared is None:
        return False
    members = _unwrap_optional(declared)
    if not members:
        return False
    for member in members:
        klass = typing.get_origin(member) or member
        if not isinstance(klass, type) or not _is_subclass(klass, capability):
            return False
    return True


def _is_subclass(klass: type, capability: type) -> bool:
    try:
        return issubclass(klass, capability)
    except TypeError:
        # Protocols that are not runtime-checkable, or that declare data
        # members, only match classes that inherit from them explicitly.
        return capability in klass.__mro__


def _sequence_element_type(descriptor: FieldDescriptor) -> object | None:
    if descriptor.declared_type is None:
        return None
    members = _unwrap_optional(descriptor.declared_type)
    if len(members) != 1:
        return None
    origin = typing.get_origin(members[0])
    if not isinstance(origin, type) or not issubclass(origin, Sequence):
        return None
    args = typing.get_args(members[0])
    return args[0] if args else None

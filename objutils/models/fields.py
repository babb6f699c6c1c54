"""Per-type field registry used by the introspector."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FieldDescriptor:
    """A field declared directly on a class."""

    name: str  # as written in the class body, e.g. "__secret"
    attribute: str  # storage name on the instance, e.g. "_Owner__secret"
    owner: type
    declared_type: object | None = None  # None when the annotation could not be resolved

    def matches(self, field_name: str) -> bool:
        return field_name in (self.name, self.attribute)


@dataclass(frozen=True)
class TypeSchema:
    """Ordered declared fields of a single class (inherited fields excluded)."""

    owner: type
    fields: tuple[FieldDescriptor, ...] = field(default_factory=tuple)

    def find(self, field_name: str) -> FieldDescriptor | None:
        for descriptor in self.fields:
            if descriptor.matches(field_name):
                return descriptor
        return None

    @property
    def names(self) -> list[str]:
        return [descriptor.name for descriptor in self.fields]

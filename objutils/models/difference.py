"""Result of diffing two collections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass
class Difference(Generic[V]):
    """Added, removed and equal partitions of two keyed collections.

    ``equal`` holds the value taken from the first collection for every key
    present in both. Each list follows the insertion order of the mapping it
    was read from.
    """

    added: list[V] = field(default_factory=list)
    removed: list[V] = field(default_factory=list)
    equal: list[V] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed)

    @property
    def summary(self) -> dict[str, int]:
        return {
            "added": len(self.added),
            "removed": len(self.removed),
            "equal": len(self.equal),
        }

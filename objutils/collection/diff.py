"""Set-like differences between two collections.

``get_diff`` compares elements by their own equality and hash.
``get_diff_any`` compares elements by content fingerprint, which is slower
but works for values that do not define usable ``__eq__``/``__hash__``.

Diffing is keyed, not deep-equal: two elements with the same key are
"equal" even if they differ in fields the key does not cover, and the
value reported in ``equal`` is always the one from the first collection.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import TypeVar

from objutils.collection.indexer import default_fingerprint_provider, index_by_fingerprint, index_natural
from objutils.fingerprint import FingerprintProvider
from objutils.models.difference import Difference
from objutils.observability.logging import get_logger

_logger = get_logger("collection.diff")

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def diff(first: Mapping[K, V], second: Mapping[K, V]) -> Difference[V]:
    """Partition two keyed mappings into added, removed and equal values.

    ``added`` and ``equal`` follow the key order of *second*; ``removed``
    follows the key order of *first*.
    """
    difference: Difference[V] = Difference()

    for key, value in second.items():
        if key in first:
            difference.equal.append(first[key])
        else:
            difference.added.append(value)

    for key, value in first.items():
        if key not in second:
            difference.removed.append(value)

    _logger.debug("diff_computed", **difference.summary)
    return difference


def get_diff(first: Iterable[H], second: Iterable[H]) -> Difference[H]:
    """Diff two collections of hashable elements using natural equality."""
    return diff(index_natural(first), index_natural(second))


def get_diff_any(
    first: Iterable[T],
    second: Iterable[T],
    provider: FingerprintProvider | None = None,
) -> Difference[T]:
    """Diff two collections of arbitrary elements using content fingerprints.

    Raises:
        SerializationError: if any element cannot be serialized.
    """
    if provider is None:
        provider = default_fingerprint_provider()
    return diff(
        index_by_fingerprint(first, provider),
        index_by_fingerprint(second, provider),
    )

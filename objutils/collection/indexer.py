"""Turn ordered sequences into keyed mappings for diffing.

Both modes fold duplicates: a later element overwrites an earlier one with
the same key, while the key keeps the position of its first insertion.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TypeVar

from objutils.config import load_fingerprint_config
from objutils.fingerprint import FingerprintProvider, build_fingerprint_provider

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def index_natural(items: Iterable[H]) -> dict[H, H]:
    """Key each item by itself.

    Items must be hashable; unhashable items raise ``TypeError``. Use
    ``index_by_fingerprint`` for values without usable equality.
    """
    indexed: dict[H, H] = {}
    for item in items:
        indexed[item] = item
    return indexed


def index_by_fingerprint(
    items: Iterable[T],
    provider: FingerprintProvider | None = None,
) -> dict[str, T]:
    """Key each item by the fingerprint of its serialized form.

    Raises:
        SerializationError: if any item cannot be serialized.
    """
    if provider is None:
        provider = default_fingerprint_provider()
    indexed: dict[str, T] = {}
    for item in items:
        indexed[provider.fingerprint(item)] = item
    return indexed


def default_fingerprint_provider() -> FingerprintProvider:
    """Provider selected by the OBJUTILS_FINGERPRINT_* environment."""
    return build_fingerprint_provider(load_fingerprint_config())

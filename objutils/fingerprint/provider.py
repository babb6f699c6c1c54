"""Content fingerprints for values that lack usable equality.

FingerprintProvider     -- ABC: serialize a value to canonical text and
                           digest that text to a 128-bit hex string.
JsonFingerprintProvider -- Canonical JSON serialization plus md5 or
                           16-byte blake2b digests.
"""

from __future__ import annotations

import dataclasses
import functools
import hashlib
import inspect
import json
from abc import ABC, abstractmethod
from datetime import date, datetime, time
from enum import Enum
from typing import Any

from objutils.errors import SerializationError
from objutils.models.config import FingerprintAlgorithm

_DIGEST_BYTES = 16


class FingerprintProvider(ABC):
    """Turns arbitrary values into fixed-length fingerprint strings.

    Fingerprints are equality keys only. They are not a security primitive.
    """

    @abstractmethod
    def serialize(self, value: object) -> str:
        """Return the canonical textual form of *value*.

        Raises:
            SerializationError: if *value* contains unsupported constructs.
        """

    @abstractmethod
    def digest(self, text: str) -> str:
        """Return a deterministic 32-character hex digest of *text*."""

    def fingerprint(self, value: object) -> str:
        return self.digest(self.serialize(value))


class JsonFingerprintProvider(FingerprintProvider):
    """Serializes values as key-sorted compact JSON.

    Beyond the JSON-native types, dataclasses, enums, sets, dates, bytes and
    plain objects (via ``__dict__`` or ``__slots__``) are encoded. Sets are
    ordered by the canonical form of their members so equal sets serialize
    identically. Functions, methods, partials, modules and classes are
    rejected.
    """

    def __init__(self, algorithm: FingerprintAlgorithm = FingerprintAlgorithm.MD5) -> None:
        self._algorithm = FingerprintAlgorithm(algorithm)

    @property
    def algorithm(self) -> FingerprintAlgorithm:
        return self._algorithm

    def serialize(self, value: object) -> str:
        try:
            return self._dumps(value)
        except (TypeError, ValueError, RecursionError) as exc:
            raise SerializationError(type(value), exc) from exc

    def digest(self, text: str) -> str:
        data = text.encode("utf-8")
        if self._algorithm == FingerprintAlgorithm.BLAKE2B:
            return hashlib.blake2b(data, digest_size=_DIGEST_BYTES).hexdigest()
        return hashlib.md5(data, usedforsecurity=False).hexdigest()

    def _dumps(self, value: object) -> str:
        return json.dumps(value, sort_keys=True, separators=(",", ":"), default=self._encode)

    def _encode(self, value: Any) -> Any:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, (set, frozenset)):
            return sorted(value, key=self._dumps)
        if isinstance(value, (datetime, date, time)):
            return value.isoformat()
        if isinstance(value, (bytes, bytearray)):
            return value.hex()
        if isinstance(value, type):
            raise TypeError(f"Classes are not serializable: {value.__qualname__}")
        if inspect.isroutine(value) or inspect.ismodule(value) or isinstance(value, functools.partial):
            raise TypeError(f"Object of type {type(value).__qualname__} is not serializable")
        if hasattr(value, "__dict__"):
            return dict(vars(value))
        slots = _slot_values(value)
        if slots is not None:
            return slots
        raise TypeError(f"Object of type {type(value).__qualname__} is not serializable")


def _slot_values(value: object) -> dict[str, object] | None:
    names: list[str] = []
    for klass in type(value).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(name for name in slots if name not in ("__dict__", "__weakref__"))
    if not names:
        return None
    return {name: getattr(value, name) for name in names if hasattr(value, name)}

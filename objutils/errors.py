"""Error kinds raised by objutils.

Absent fields and empty capability matches are not errors; they are
reported as ``None`` or an empty list by the functions that produce them.
"""

from __future__ import annotations


class ObjUtilsError(Exception):
    """Base class for every error raised by objutils."""


class NullObjectError(ObjUtilsError):
    """Raised when a path is resolved against a ``None`` root object."""

    def __init__(self, message: str = "Cannot resolve a path on a None object") -> None:
        super().__init__(message)


class SerializationError(ObjUtilsError):
    """Raised when a value cannot be turned into canonical text for fingerprinting."""

    def __init__(self, value_type: type, cause: Exception) -> None:
        super().__init__(f"Cannot serialize value of type '{value_type.__qualname__}': {cause}")
        self.value_type = value_type
        self.cause = cause


class AccessError(ObjUtilsError):
    """Raised when a declared field cannot be read from an instance."""

    def __init__(self, owner: type, field_name: str, cause: Exception) -> None:
        super().__init__(f"Cannot read field '{field_name}' of '{owner.__qualname__}': {cause}")
        self.owner = owner
        self.field_name = field_name
        self.cause = cause

"""String helpers used when splitting field paths."""

from __future__ import annotations

_PATH_DELIMITER = "."


def empty_if_null(value: str | None) -> str:
    return "" if value is None else value


def is_empty(value: str | None) -> bool:
    """Return True for ``None``, ``""`` and whitespace-only strings."""
    return value is None or not value.strip()


def split_path(path: str | None) -> list[str]:
    """Split a dot-delimited field path into trimmed, non-empty segments.

    ``None`` and ``""`` both yield an empty list, which resolves to the
    root object itself.
    """
    return [segment.strip() for segment in empty_if_null(path).split(_PATH_DELIMITER) if not is_empty(segment)]

"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class FingerprintAlgorithm(StrEnum):
    """128-bit digest algorithms available to the fingerprint provider."""

    MD5 = "md5"
    BLAKE2B = "blake2b"


class LogFormat(StrEnum):
    """Rendering used by setup_logging."""

    JSON = "json"
    CONSOLE = "console"


@dataclass
class FingerprintConfig:
    """Fingerprint provider configuration."""

    algorithm: FingerprintAlgorithm = FingerprintAlgorithm.MD5


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: LogFormat = LogFormat.JSON


@dataclass
class ObjUtilsConfig:
    """Top-level objutils configuration."""

    fingerprint: FingerprintConfig = field(default_factory=FingerprintConfig)
    log: LogConfig = field(default_factory=LogConfig)

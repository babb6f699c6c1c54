"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from objutils.models.config import (
    FingerprintAlgorithm,
    FingerprintConfig,
    LogConfig,
    LogFormat,
    ObjUtilsConfig,
)


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"OBJUTILS_{key}", default)


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_log_format(value: str) -> LogFormat:
    try:
        return LogFormat(value.lower())
    except ValueError:
        raise ValueError(f"Invalid log format: {value}. Must be one of {[f.value for f in LogFormat]}") from None


def _validate_algorithm(value: str) -> FingerprintAlgorithm:
    try:
        return FingerprintAlgorithm(value.lower())
    except ValueError:
        raise ValueError(
            f"Invalid fingerprint algorithm: {value}. Must be one of {[a.value for a in FingerprintAlgorithm]}"
        ) from None


def load_fingerprint_config() -> FingerprintConfig:
    """Load only the OBJUTILS_FINGERPRINT_* settings."""
    return FingerprintConfig(
        algorithm=_validate_algorithm(_env("FINGERPRINT_ALGORITHM", "md5")),
    )


def load_log_config() -> LogConfig:
    """Load only the OBJUTILS_LOG_* settings."""
    return LogConfig(
        level=_validate_log_level(_env("LOG_LEVEL", "info")),
        format=_validate_log_format(_env("LOG_FORMAT", "json")),
    )


def load_config() -> ObjUtilsConfig:
    """Load configuration from OBJUTILS_* environment variables."""
    return ObjUtilsConfig(
        fingerprint=load_fingerprint_config(),
        log=load_log_config(),
    )

"""Fingerprint provider for fingerprint-mode diffing.

Exports:
    FingerprintProvider       -- Abstract serialize + digest contract.
    JsonFingerprintProvider   -- Canonical JSON with a 128-bit digest.
    build_fingerprint_provider -- Factory driven by FingerprintConfig.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from objutils.fingerprint.provider import FingerprintProvider, JsonFingerprintProvider
from objutils.observability.logging import get_logger

if TYPE_CHECKING:
    from objutils.models.config import FingerprintConfig

_log = get_logger("fingerprint")

__all__ = [
    "FingerprintProvider",
    "JsonFingerprintProvider",
    "build_fingerprint_provider",
]


def build_fingerprint_provider(config: FingerprintConfig) -> FingerprintProvider:
    """Build the fingerprint provider selected by *config*."""
    provider = JsonFingerprintProvider(algorithm=config.algorithm)
    _log.debug("fingerprint_provider_built", algorithm=str(provider.algorithm))
    return provider

"""Core data structures for objutils."""

from objutils.models.config import (
    FingerprintAlgorithm,
    FingerprintConfig,
    LogConfig,
    LogFormat,
    ObjUtilsConfig,
)
from objutils.models.difference import Difference
from objutils.models.fields import FieldDescriptor, TypeSchema

__all__ = [
    "Difference",
    "FieldDescriptor",
    "FingerprintAlgorithm",
    "FingerprintConfig",
    "LogConfig",
    "LogFormat",
    "ObjUtilsConfig",
    "TypeSchema",
]

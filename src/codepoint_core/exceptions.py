"""Central exception hierarchy"""
from __future__ import annotations


class CodepointCoreError(Exception):
    """Base exception for all failures"""


class BufferLengthError(CodepointCoreError, ValueError):
    """Raised when a buffer cannot supply the requested number of code units"""


class UnitWidthError(CodepointCoreError, ValueError):
    """Raised when an integer sequence holds values wider than its code unit"""


class SequenceReleasedError(CodepointCoreError, RuntimeError):
    """Raised when a sequence is used after its final release"""


class ConfigError(CodepointCoreError, ValueError):
    """Raised when a configuration file fails validation"""


__all__ = [
    "BufferLengthError",
    "CodepointCoreError",
    "ConfigError",
    "SequenceReleasedError",
    "UnitWidthError",
]

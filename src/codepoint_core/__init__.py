"""Decode Unicode scalar values from borrowed UTF-8, UTF-16 and UTF-32 buffers."""
from .exceptions import (
    BufferLengthError,
    CodepointCoreError,
    ConfigError,
    SequenceReleasedError,
    UnitWidthError,
)
from .models import (
    CODEPOINT_FAULTY,
    CODEPOINT_INVALID,
    CODEPOINT_MAX,
    FAULTY,
    INVALID,
    Codepoint,
    Decoded,
    DecodeStatus,
    Encoding,
)
from .sequence import (
    CodepointSequence,
    create_with_utf8,
    create_with_utf16,
    create_with_utf32,
    get_codepoint_at,
    release,
    retain,
)
from .version import __version__

__all__ = [
    "BufferLengthError",
    "CODEPOINT_FAULTY",
    "CODEPOINT_INVALID",
    "CODEPOINT_MAX",
    "Codepoint",
    "CodepointCoreError",
    "CodepointSequence",
    "ConfigError",
    "DecodeStatus",
    "Decoded",
    "Encoding",
    "FAULTY",
    "INVALID",
    "SequenceReleasedError",
    "UnitWidthError",
    "__version__",
    "create_with_utf8",
    "create_with_utf16",
    "create_with_utf32",
    "get_codepoint_at",
    "release",
    "retain",
]

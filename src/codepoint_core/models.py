"""Shared domain models used across codepoint-core."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

CODEPOINT_MAX = 0x10FFFF
CODEPOINT_FAULTY = 0xFFFFFFFE
CODEPOINT_INVALID = 0xFFFFFFFF


class Encoding(str, Enum):
    UTF8 = "utf-8"
    UTF16 = "utf-16"
    UTF32 = "utf-32"

    @property
    def unit_format(self) -> str:
        return _UNIT_FORMATS[self]

    @property
    def unit_size(self) -> int:
        return _UNIT_SIZES[self]

    @property
    def max_unit(self) -> int:
        return (1 << (8 * _UNIT_SIZES[self])) - 1

    @classmethod
    def _missing_(cls, value: object) -> "Encoding | None":
        # Accept the spellings codecs accepts: "UTF8", "utf_16", "utf-32".
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "").replace("-", "")
            for member in cls:
                if member.value.replace("-", "") == key:
                    return member
        return None


_UNIT_FORMATS = {Encoding.UTF8: "B", Encoding.UTF16: "H", Encoding.UTF32: "I"}
_UNIT_SIZES = {Encoding.UTF8: 1, Encoding.UTF16: 2, Encoding.UTF32: 4}


class DecodeStatus(str, Enum):
    SCALAR = "SCALAR"
    FAULTY = "FAULTY"
    INVALID = "INVALID"


@dataclass(frozen=True, slots=True)
class Codepoint:
    """Result of a single decode attempt.

    ``value`` is only set for ``DecodeStatus.SCALAR``. ``int(codepoint)`` maps
    the two failure cases onto ``CODEPOINT_FAULTY`` and ``CODEPOINT_INVALID``.
    """

    status: DecodeStatus
    value: Optional[int] = None

    @classmethod
    def scalar(cls, value: int) -> "Codepoint":
        return cls(DecodeStatus.SCALAR, value)

    @property
    def is_scalar(self) -> bool:
        return self.status is DecodeStatus.SCALAR

    def __int__(self) -> int:
        if self.status is DecodeStatus.SCALAR:
            return self.value  # type: ignore[return-value]
        if self.status is DecodeStatus.FAULTY:
            return CODEPOINT_FAULTY
        return CODEPOINT_INVALID

    def label(self) -> str | None:
        if self.value is None:
            return None
        return f"U+{self.value:04X}"


FAULTY = Codepoint(DecodeStatus.FAULTY)
INVALID = Codepoint(DecodeStatus.INVALID)


@dataclass(frozen=True, slots=True)
class Decoded:
    codepoint: Codepoint
    consumed: int


NOT_DECODED = Decoded(INVALID, 0)


def is_scalar_value(value: object) -> bool:
    if not isinstance(value, int):
        return False
    return 0 <= value <= CODEPOINT_MAX and not 0xD800 <= value <= 0xDFFF


__all__ = [
    "CODEPOINT_FAULTY",
    "CODEPOINT_INVALID",
    "CODEPOINT_MAX",
    "Codepoint",
    "DecodeStatus",
    "Decoded",
    "Encoding",
    "FAULTY",
    "INVALID",
    "NOT_DECODED",
    "is_scalar_value",
]

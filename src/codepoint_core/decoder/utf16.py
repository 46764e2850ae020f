"""UTF-16 decoding of a single scalar value (native unit order)."""
from __future__ import annotations

from typing import Sequence

from ..models import FAULTY, Codepoint, Decoded

_FAULTY_STEP = Decoded(FAULTY, 1)


def _is_unit(unit: object) -> bool:
    return isinstance(unit, int) and 0 <= unit <= 0xFFFF


def decode_utf16(units: Sequence[int], index: int, length: int) -> Decoded:
    lead = units[index]
    if not _is_unit(lead):
        return _FAULTY_STEP

    if not 0xD800 <= lead <= 0xDFFF:
        return Decoded(Codepoint.scalar(lead), 1)

    # A low surrogate is never a valid lead unit.
    if lead <= 0xDBFF and length - index > 1:
        low = units[index + 1]
        if _is_unit(low) and 0xDC00 <= low <= 0xDFFF:
            value = (lead - 0xD800) * 0x400 + (low - 0xDC00) + 0x10000
            return Decoded(Codepoint.scalar(value), 2)

    return _FAULTY_STEP


__all__ = ["decode_utf16"]

"""UTF-32 decoding of a single scalar value (native unit order)."""
from __future__ import annotations

from typing import Sequence

from ..models import FAULTY, Codepoint, Decoded, is_scalar_value

_FAULTY_STEP = Decoded(FAULTY, 1)


def decode_utf32(units: Sequence[int], index: int, length: int) -> Decoded:
    value = units[index]
    if is_scalar_value(value):
        return Decoded(Codepoint.scalar(value), 1)
    return _FAULTY_STEP


__all__ = ["decode_utf32"]

"""UTF-8 decoding of a single scalar value.

Reference: https://en.wikipedia.org/wiki/UTF-8

    +======+=========+==========+=======+==========+==========+==========+==========+
    | Bits | First   | Last     | Bytes | Byte 1   | Byte 2   | Byte 3   | Byte 4   |
    +======+=========+==========+=======+==========+==========+==========+==========+
    |  7   | U+0000  | U+007F   |   1   | 0xxxxxxx |          |          |          |
    |  11  | U+0080  | U+07FF   |   2   | 110xxxxx | 10xxxxxx |          |          |
    |  16  | U+0800  | U+FFFF   |   3   | 1110xxxx | 10xxxxxx | 10xxxxxx |          |
    |  21  | U+10000 | U+1FFFFF |   4   | 11110xxx | 10xxxxxx | 10xxxxxx | 10xxxxxx |
    +------+---------+----------+-------+----------+----------+----------+----------+

Lead bytes 0xC0, 0xC1 and 0xF5-0xFF never start a sequence.
"""
from __future__ import annotations

from typing import Sequence

from ..models import FAULTY, Codepoint, Decoded

_FAULTY_STEP = Decoded(FAULTY, 1)


def _trail(byte: int) -> int:
    # Continuation payload, or a value above 0x3F for anything outside 0x80-0xBF.
    if isinstance(byte, int) and 0x80 <= byte <= 0xBF:
        return byte - 0x80
    return 0x100


def decode_utf8(units: Sequence[int], index: int, length: int) -> Decoded:
    """Decode the UTF-8 sequence starting at ``units[index]``.

    The caller guarantees ``0 <= index < length``. Malformed input yields
    ``FAULTY`` and a single consumed byte so that decoding can resynchronise on
    the next one.
    """

    remaining = length - index
    lead = units[index]
    if not isinstance(lead, int) or not 0 <= lead <= 0xFF:
        return _FAULTY_STEP

    if lead < 0x80:
        return Decoded(Codepoint.scalar(lead), 1)

    if 0xC2 <= lead <= 0xDF:
        if remaining > 1:
            byte2 = _trail(units[index + 1])
            if byte2 <= 0x3F:
                return Decoded(Codepoint.scalar(((lead & 0x1F) << 6) | byte2), 2)
    elif 0xE0 <= lead <= 0xEF:
        if remaining > 2:
            byte2 = _trail(units[index + 1])
            byte3 = _trail(units[index + 2])
            if byte2 <= 0x3F and byte3 <= 0x3F:
                value = ((lead & 0x0F) << 12) | (byte2 << 6) | byte3
                if value > 0x0800 and not 0xD800 <= value <= 0xDFFF:
                    return Decoded(Codepoint.scalar(value), 3)
    elif 0xF0 <= lead <= 0xF4:
        if remaining > 3:
            byte2 = _trail(units[index + 1])
            byte3 = _trail(units[index + 2])
            byte4 = _trail(units[index + 3])
            if byte2 <= 0x3F and byte3 <= 0x3F and byte4 <= 0x3F:
                value = ((lead & 0x07) << 18) | (byte2 << 12) | (byte3 << 6) | byte4
                if 0x10000 <= value <= 0x10FFFF:
                    return Decoded(Codepoint.scalar(value), 4)

    return _FAULTY_STEP


__all__ = ["decode_utf8"]

import pytest

from codepoint_core.decoder import decode_utf8
from codepoint_core.models import FAULTY, Decoded, DecodeStatus


def _decode(units, index=0):
    return decode_utf8(units, index, len(units))


@pytest.mark.parametrize(
    ("units", "expected", "consumed"),
    [
        ([0x41], 0x41, 1),
        ([0x00], 0x00, 1),
        ([0x7F], 0x7F, 1),
        ([0xC2, 0x80], 0x80, 2),
        ([0xC3, 0xA9], 0xE9, 2),
        ([0xD0, 0x80], 0x400, 2),
        ([0xDF, 0xBF], 0x7FF, 2),
        ([0xE0, 0xA0, 0x81], 0x801, 3),
        ([0xE2, 0x82, 0xAC], 0x20AC, 3),
        ([0xED, 0x9F, 0xBF], 0xD7FF, 3),
        ([0xEE, 0x80, 0x80], 0xE000, 3),
        ([0xEF, 0xBF, 0xBF], 0xFFFF, 3),
        ([0xF0, 0x90, 0x80, 0x80], 0x10000, 4),
        ([0xF0, 0x9F, 0x98, 0x80], 0x1F600, 4),
        ([0xF4, 0x8F, 0xBF, 0xBF], 0x10FFFF, 4),
    ],
)
def test_decodes_well_formed_sequences(units, expected, consumed):
    decoded = _decode(units)
    assert decoded.codepoint.status is DecodeStatus.SCALAR
    assert decoded.codepoint.value == expected
    assert decoded.consumed == consumed


@pytest.mark.parametrize(
    "units",
    [
        [0xC0, 0x80],  # overlong NUL
        [0xC1, 0xBF],
        [0x80],  # lone continuation
        [0xBF, 0x41],
        [0xF5, 0x80, 0x80, 0x80],
        [0xFF],
        [0xC3],  # truncated
        [0xE2, 0x82],
        [0xF0, 0x9F, 0x98],
        [0xC3, 0x41],  # bad continuation
        [0xE2, 0xC2, 0xAC],
        [0xF0, 0x9F, 0x98, 0x7F],
        [0xE0, 0x80, 0x80],  # overlong 3-byte
        [0xE0, 0x9F, 0xBF],
        [0xE0, 0xA0, 0x80],  # U+0800 itself is rejected by the strict lower bound
        [0xED, 0xA0, 0x80],  # encoded surrogate halves
        [0xED, 0xBF, 0xBF],
        [0xF0, 0x8F, 0xBF, 0xBF],  # overlong 4-byte
        [0xF4, 0x90, 0x80, 0x80],  # above U+10FFFF
    ],
)
def test_malformed_sequences_are_faulty_and_consume_one_byte(units):
    decoded = _decode(units)
    assert decoded.codepoint == FAULTY
    assert decoded.consumed == 1


def test_decoding_respects_index_and_length():
    units = [0x41, 0xE2, 0x82, 0xAC, 0x42]
    assert decode_utf8(units, 1, 5).codepoint.value == 0x20AC
    # A shortened length hides the trailing continuation byte.
    assert decode_utf8(units, 1, 3).codepoint == FAULTY
    assert decode_utf8(units, 4, 5).codepoint.value == 0x42


def test_resynchronises_after_bad_continuation():
    units = [0xC3, 0x41]
    first = _decode(units)
    second = _decode(units, first.consumed)
    assert first.codepoint == FAULTY
    assert second.codepoint.value == 0x41


@pytest.mark.parametrize(
    "units",
    [
        [0x141],
        [-1],
        [65.0],
        [0xC3, 0x1A9],  # trail wider than a byte
        [0xE2, 0x82, 172.0],
        [0xF0, 0x9F, 0x98, -0x80],
    ],
)
def test_units_outside_a_byte_are_faulty(units):
    assert _decode(units) == Decoded(FAULTY, 1)

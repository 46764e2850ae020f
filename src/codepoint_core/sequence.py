"""Codepoint sequences over borrowed UTF-8, UTF-16 and UTF-32 buffers."""
from __future__ import annotations

import threading
from collections.abc import Sequence as SequenceABC
from itertools import islice
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import structlog

from .decoder.registry import DEFAULT_REGISTRY, DecodeFunc, DecoderRegistry
from .exceptions import BufferLengthError, SequenceReleasedError, UnitWidthError
from .models import NOT_DECODED, Codepoint, Decoded, Encoding, INVALID

logger = structlog.get_logger(__name__)

BufferLike = Union[bytes, bytearray, memoryview, Sequence[int]]


_INTEGER_FORMATS = frozenset("bBhHiIlLqQnN")
_BYTE_FORMATS = frozenset("bBc")


def _unit_view(buffer: BufferLike, encoding: Encoding, length: Optional[int] = None) -> Sequence[int]:
    """Return a typed, non-copying view over the code units of ``buffer``.

    Byte buffers are reinterpreted as native-order units of the encoding's
    width; integer buffers must already have that width. Plain integer
    sequences are used as-is once the units that ``length`` exposes have been
    checked.
    """

    if isinstance(buffer, str):
        raise TypeError("CodepointSequence decodes code units, not str")
    try:
        view = memoryview(buffer)  # type: ignore[arg-type]
    except TypeError:
        if not isinstance(buffer, SequenceABC):
            raise
        max_unit = encoding.max_unit
        for position, unit in enumerate(islice(buffer, length)):
            if not isinstance(unit, int) or not 0 <= unit <= max_unit:
                raise UnitWidthError(
                    f"Unit {unit!r} at index {position} does not fit a {encoding.value} code unit"
                ) from None
        return buffer
    fmt = encoding.unit_format
    if view.format == fmt and view.ndim == 1:
        return view
    code = view.format.lstrip("@=<>!")
    if code not in _BYTE_FORMATS and (code not in _INTEGER_FORMATS or view.itemsize != encoding.unit_size):
        raise UnitWidthError(
            f"Buffer format {view.format!r} does not hold {encoding.value} code units"
        )
    if view.nbytes % encoding.unit_size:
        raise BufferLengthError(
            f"Buffer of {view.nbytes} bytes is not a whole number of {encoding.value} code units"
        )
    return view.cast("B").cast(fmt)


class CodepointSequence:
    """Reference counted handle decoding scalar values from a borrowed buffer.

    The handle never copies or frees the buffer it is given. Destroying the
    handle, which happens when the last reference is released, only drops the
    handle's own view of it.
    """

    __slots__ = ("_encoding", "_units", "_length", "_decoder", "_retain_count", "_lock")

    def __init__(
        self,
        encoding: Encoding,
        units: Sequence[int],
        length: int,
        decoder: DecodeFunc,
    ) -> None:
        self._encoding = encoding
        self._units: Optional[Sequence[int]] = units
        self._length = length
        self._decoder = decoder
        self._retain_count = 1
        self._lock = threading.Lock()

    @classmethod
    def create(
        cls,
        encoding: Encoding | str,
        buffer: Optional[BufferLike],
        length: Optional[int] = None,
        *,
        registry: DecoderRegistry | None = None,
    ) -> Optional["CodepointSequence"]:
        """Create a sequence over ``buffer`` or return ``None``.

        Parameters
        ----------
        encoding:
            Transfer encoding of ``buffer``.
        buffer:
            Code units to decode. ``bytes``-like objects are viewed as native
            order units; integer sequences are used directly.
        length:
            Number of code units to expose. Defaults to every unit in ``buffer``.

        Returns
        -------
        CodepointSequence | None
            ``None`` when ``buffer`` is absent or ``length`` is not positive.

        Raises
        ------
        BufferLengthError
            If ``length`` exceeds the units available in ``buffer`` or the
            buffer size is not a multiple of the unit width.
        UnitWidthError
            If the buffer holds units wider than the encoding allows.
        """

        if buffer is None:
            return None
        encoding = Encoding(encoding)
        if length is not None and length <= 0:
            return None
        units = _unit_view(buffer, encoding, length)
        available = len(units)
        if length is None:
            length = available
        if length <= 0:
            return None
        if length > available:
            raise BufferLengthError(
                f"Requested {length} {encoding.value} code units but buffer holds {available}"
            )
        decoder = (registry or DEFAULT_REGISTRY).get(encoding)
        sequence = cls(encoding, units, length, decoder)
        logger.debug("sequence.created", encoding=encoding.value, length=length)
        return sequence

    @classmethod
    def from_utf8(cls, buffer: Optional[BufferLike], length: Optional[int] = None) -> Optional["CodepointSequence"]:
        return cls.create(Encoding.UTF8, buffer, length)

    @classmethod
    def from_utf16(cls, buffer: Optional[BufferLike], length: Optional[int] = None) -> Optional["CodepointSequence"]:
        return cls.create(Encoding.UTF16, buffer, length)

    @classmethod
    def from_utf32(cls, buffer: Optional[BufferLike], length: Optional[int] = None) -> Optional["CodepointSequence"]:
        return cls.create(Encoding.UTF32, buffer, length)

    @property
    def encoding(self) -> Encoding:
        return self._encoding

    @property
    def length(self) -> int:
        return self._length

    @property
    def buffer(self) -> Sequence[int]:
        return self._live_units()

    @property
    def retain_count(self) -> int:
        return self._retain_count

    @property
    def released(self) -> bool:
        return self._units is None

    def retain(self) -> "CodepointSequence":
        with self._lock:
            self._live_units()
            self._retain_count += 1
        return self

    def release(self) -> None:
        with self._lock:
            self._live_units()
            self._retain_count -= 1
            destroyed = self._retain_count == 0
            if destroyed:
                self._units = None
        if destroyed:
            logger.debug("sequence.destroyed", encoding=self._encoding.value, length=self._length)

    def decode_at(self, index: Optional[int]) -> Decoded:
        """Decode the scalar value starting at code unit ``index``.

        An absent or out of range index yields ``INVALID`` with nothing
        consumed. Otherwise at least one unit is consumed, even when the units
        found there are malformed.
        """

        units = self._live_units()
        if index is None or index < 0 or index >= self._length:
            return NOT_DECODED
        return self._decoder(units, index, self._length)

    def iter_codepoints(self, start: int = 0) -> Iterator[Tuple[int, Decoded]]:
        index = start
        while 0 <= index < self._length:
            decoded = self.decode_at(index)
            yield index, decoded
            index += decoded.consumed

    def codepoints(self) -> List[Codepoint]:
        return [decoded.codepoint for _index, decoded in self.iter_codepoints()]

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Codepoint]:
        for _index, decoded in self.iter_codepoints():
            yield decoded.codepoint

    def __enter__(self) -> "CodepointSequence":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self.released else f"retain_count={self._retain_count}"
        return f"CodepointSequence(encoding={self._encoding.value!r}, length={self._length}, {state})"

    def _live_units(self) -> Sequence[int]:
        units = self._units
        if units is None:
            raise SequenceReleasedError("CodepointSequence used after its final release")
        return units


def create_with_utf8(buffer: Optional[BufferLike], length: Optional[int] = None) -> Optional[CodepointSequence]:
    return CodepointSequence.from_utf8(buffer, length)


def create_with_utf16(buffer: Optional[BufferLike], length: Optional[int] = None) -> Optional[CodepointSequence]:
    return CodepointSequence.from_utf16(buffer, length)


def create_with_utf32(buffer: Optional[BufferLike], length: Optional[int] = None) -> Optional[CodepointSequence]:
    return CodepointSequence.from_utf32(buffer, length)


def retain(sequence: Optional[CodepointSequence]) -> Optional[CodepointSequence]:
    if sequence is None:
        return None
    return sequence.retain()


def release(sequence: Optional[CodepointSequence]) -> None:
    if sequence is not None:
        sequence.release()


def get_codepoint_at(
    sequence: CodepointSequence, cursor: Optional[int]
) -> Tuple[Codepoint, Optional[int]]:
    """Decode at ``cursor`` and return the codepoint with the advanced cursor."""

    if cursor is None:
        return INVALID, None
    decoded = sequence.decode_at(cursor)
    return decoded.codepoint, cursor + decoded.consumed


__all__ = [
    "BufferLike",
    "CodepointSequence",
    "create_with_utf8",
    "create_with_utf16",
    "create_with_utf32",
    "get_codepoint_at",
    "release",
    "retain",
]

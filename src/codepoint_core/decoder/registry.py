"""Decoder registry mapping each encoding to its decode function."""
from __future__ import annotations

from typing import Callable, Dict, Mapping, Sequence

from ..models import Decoded, Encoding
from .utf8 import decode_utf8
from .utf16 import decode_utf16
from .utf32 import decode_utf32

DecodeFunc = Callable[[Sequence[int], int, int], Decoded]


class DecoderRegistry:
    """Runtime registry for per-encoding decoders."""

    def __init__(self) -> None:
        self._decoders: Dict[Encoding, DecodeFunc] = {}

    def register(self, encoding: Encoding, decoder: DecodeFunc, override: bool = False) -> None:
        if not override and encoding in self._decoders:
            raise ValueError(f"Decoder already registered: {encoding.value}")
        self._decoders[encoding] = decoder

    def get(self, encoding: Encoding) -> DecodeFunc:
        try:
            return self._decoders[encoding]
        except KeyError as exc:
            raise KeyError(f"No decoder for encoding: {encoding}") from exc

    def all(self) -> Mapping[Encoding, DecodeFunc]:
        return dict(self._decoders)


def load_builtin_decoders(registry: DecoderRegistry) -> DecoderRegistry:
    registry.register(Encoding.UTF8, decode_utf8)
    registry.register(Encoding.UTF16, decode_utf16)
    registry.register(Encoding.UTF32, decode_utf32)
    return registry


DEFAULT_REGISTRY = load_builtin_decoders(DecoderRegistry())


__all__ = ["DecodeFunc", "DecoderRegistry", "DEFAULT_REGISTRY", "load_builtin_decoders"]

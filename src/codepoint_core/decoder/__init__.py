"""Decoder package exports."""
from .registry import DEFAULT_REGISTRY, DecoderRegistry
from .utf8 import decode_utf8
from .utf16 import decode_utf16
from .utf32 import decode_utf32

__all__ = ["DEFAULT_REGISTRY", "DecoderRegistry", "decode_utf8", "decode_utf16", "decode_utf32"]

"""Decoder for ACBLscore bridge game files."""

from .decoder import decode_gamefile
from .errors import DecodeError, FormatError, OutOfBounds, UnknownCode
from .options import DecodeOptions

__all__ = [
    "decode_gamefile",
    "DecodeOptions",
    "DecodeError",
    "FormatError",
    "OutOfBounds",
    "UnknownCode",
]

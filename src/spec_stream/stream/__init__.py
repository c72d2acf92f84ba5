"""Mixed text/patch stream parsing and the consumer session."""

from .parser import LineKind, MixedStreamParser, ParserStats, classify_line, is_patch_shape
from .session import SpecStreamSession, compile_stream

__all__ = [
    "LineKind",
    "MixedStreamParser",
    "ParserStats",
    "classify_line",
    "is_patch_shape",
    "SpecStreamSession",
    "compile_stream",
]

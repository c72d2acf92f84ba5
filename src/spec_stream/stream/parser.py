"""
Mixed-stream parser.

Reassembles arbitrarily chunked text into lines and classifies each one as
a JSON patch or as prose, dispatching callbacks in arrival order.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..core.json import JSONParseError, decode_json_line
from ..core.logging_config import get_logger

logger = get_logger(__name__)

PatchCallback = Callable[[dict[str, Any]], None]
TextCallback = Callable[[str], None]


class LineKind(str, Enum):
    PATCH = "patch"
    TEXT = "text"


def is_patch_shape(obj: Any) -> bool:
    """An object with a string ``op`` is a patch; path checks happen at apply time."""
    return isinstance(obj, dict) and isinstance(obj.get("op"), str)


def classify_line(line: str) -> tuple[LineKind, Any] | None:
    """
    Classify one complete line.

    Returns:
        (PATCH, parsed_object), (TEXT, trimmed_line), or None for a blank line
    """
    trimmed = line.strip()
    if not trimmed:
        return None

    try:
        parsed = decode_json_line(trimmed)
    except JSONParseError:
        return LineKind.TEXT, trimmed

    if is_patch_shape(parsed):
        return LineKind.PATCH, parsed
    return LineKind.TEXT, trimmed


@dataclass
class ParserStats:
    """Track line statistics."""

    lines: int = 0
    patches: int = 0
    texts: int = 0
    blanks: int = 0

    def track(self, kind: LineKind | None) -> None:
        self.lines += 1
        if kind is LineKind.PATCH:
            self.patches += 1
        elif kind is LineKind.TEXT:
            self.texts += 1
        else:
            self.blanks += 1


@dataclass
class MixedStreamParser:
    """
    Line-reassembling parser for interleaved prose and JSONL patches.

    Feed chunks with ``push``; call ``flush`` once when the stream ends so a
    trailing line without a newline is not lost. Single producer, in order.
    """

    on_patch: PatchCallback
    on_text: TextCallback | None = None
    stats: ParserStats = field(default_factory=ParserStats)
    # Pieces of the current unterminated line, joined once its newline arrives
    _parts: list[str] = field(default_factory=list, init=False, repr=False)

    @property
    def pending(self) -> str:
        """Buffered partial line."""
        return "".join(self._parts)

    def push(self, chunk: str) -> None:
        """Append a chunk and dispatch every line it completes."""
        if not chunk:
            return

        start = 0
        while (newline := chunk.find("\n", start)) != -1:
            if self._parts:
                self._parts.append(chunk[start:newline])
                line = "".join(self._parts)
                self._parts.clear()
            else:
                line = chunk[start:newline]
            self._dispatch(line)
            start = newline + 1

        if start < len(chunk):
            self._parts.append(chunk[start:])

    def flush(self) -> None:
        """Dispatch the buffered partial line, if any, and clear the buffer."""
        if not self._parts:
            return
        line = "".join(self._parts)
        self._parts.clear()
        self._dispatch(line)

    def _dispatch(self, line: str) -> None:
        result = classify_line(line)
        self.stats.track(result[0] if result else None)
        if result is None:
            return

        kind, payload = result
        if kind is LineKind.PATCH:
            self.on_patch(payload)
        elif self.on_text is not None:
            self.on_text(payload)

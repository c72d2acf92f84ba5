"""
Stream session: parser + applicator consumer loop for one Spec.

One session owns one spec and is driven by a single sequential consumer:
read chunk, push, apply, snapshot. Separate sessions share nothing.
"""

import codecs
from collections.abc import AsyncIterable, Callable, Iterable
from typing import Any

from returns.result import Failure, Success

from ..core.config import Settings, get_settings
from ..core.logging_config import get_logger
from ..document.models import Spec
from ..patch.applicator import Applied, Skipped, try_apply_patch
from .parser import MixedStreamParser

logger = get_logger(__name__)

SpecListener = Callable[[Spec], None]
TextListener = Callable[[str], None]


class SpecStreamSession:
    """Applies a mixed text/patch stream to a spec as it arrives."""

    def __init__(
        self,
        spec: Spec | None = None,
        on_spec: SpecListener | None = None,
        on_text: TextListener | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.spec = spec if spec is not None else Spec.empty()
        self._on_spec = on_spec
        self._on_text = on_text
        self._start()

    def _start(self) -> None:
        self.applied: list[Applied] = []
        self.skipped: list[Skipped] = []
        self._lines: list[str] = []
        self._patch_events = 0
        self._parser = MixedStreamParser(on_patch=self._handle_patch, on_text=self._handle_text)
        self._decoder = codecs.getincrementaldecoder(self.settings.stream_encoding)(errors="replace")
        self._flushed = False

    @property
    def text(self) -> str:
        """Prose lines received so far, newline-joined."""
        return "\n".join(self._lines)

    @property
    def has_spec(self) -> bool:
        """True once any patch line has arrived, applied or skipped."""
        return self._patch_events > 0

    @property
    def parser(self) -> MixedStreamParser:
        return self._parser

    def _handle_patch(self, patch: dict[str, Any]) -> None:
        self._patch_events += 1
        match try_apply_patch(self.spec, patch, max_value_depth=self.settings.max_value_depth):
            case Success(applied):
                self.applied.append(applied)
                if self._on_spec is not None:
                    self._on_spec(self.spec.snapshot() if self.settings.snapshot_on_patch else self.spec)
            case Failure(skipped):
                self.skipped.append(skipped)

    def _handle_text(self, line: str) -> None:
        self._lines.append(line)
        if self._on_text is not None:
            self._on_text(line)

    def push(self, chunk: str) -> None:
        self._flushed = False
        self._parser.push(chunk)

    def push_bytes(self, data: bytes) -> None:
        """Push raw bytes; multi-byte characters split across chunks are reassembled."""
        self.push(self._decoder.decode(data))

    def _feed(self, chunk: str | bytes) -> None:
        if isinstance(chunk, bytes):
            self.push_bytes(chunk)
        else:
            self.push(chunk)

    def flush(self) -> Spec:
        """End of stream: dispatch any trailing line. Safe to call twice."""
        if not self._flushed:
            tail = self._decoder.decode(b"", final=True)
            if tail:
                self._parser.push(tail)
            self._parser.flush()
            self._flushed = True
            logger.debug(
                "stream_flushed",
                applied=len(self.applied),
                skipped=len(self.skipped),
                text_lines=len(self._lines),
            )
        return self.spec

    def reset(self) -> None:
        """Start over with an empty spec (e.g. the user cleared the session)."""
        self.spec = Spec.empty()
        self._start()

    def consume(self, chunks: Iterable[str | bytes]) -> Spec:
        """
        Drive the session from a synchronous source, then flush.

        If the source raises, the partial line is dropped and already
        applied patches stay applied.
        """
        for chunk in chunks:
            self._feed(chunk)
        return self.flush()

    async def aconsume(self, chunks: AsyncIterable[str | bytes]) -> Spec:
        """
        Drive the session from an async source, one awaited chunk at a time.

        Cancellation stops further pushes; there is no rollback.
        """
        async for chunk in chunks:
            self._feed(chunk)
        return self.flush()


def compile_stream(text: str, spec: Spec | None = None, settings: Settings | None = None) -> Spec:
    """Apply a complete mixed text/patch stream in one call."""
    session = SpecStreamSession(spec=spec, settings=settings)
    session.push(text)
    return session.flush()

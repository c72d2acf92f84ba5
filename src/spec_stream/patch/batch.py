"""
Structured Patch Adapter.

Applies a complete ``{patches: [...], summary?}`` payload (a tool-call
output rather than a text stream) in array order through the same
applicator the stream path uses. No rollback: a bad patch is skipped and
the ones before it stay applied.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from returns.result import Failure, Success

from ..core.config import Settings, get_settings
from ..core.errors import PayloadError
from ..core.json import JSONParseError, extract_json, validate_json_size
from ..core.logging_config import get_logger
from ..document.models import Spec
from .applicator import Applied, Skipped, try_apply_patch

logger = get_logger(__name__)


class PatchBatch(BaseModel):
    """Structured patch payload."""

    model_config = ConfigDict(extra="ignore")

    # Items stay raw: shape checking happens per patch in the applicator
    patches: list[Any] = Field(..., description="RFC 6902 style operations")
    summary: str | None = Field(default=None, description="Brief description of the changes")


@dataclass
class BatchReport:
    """Outcome of applying a batch."""

    applied: list[Applied] = field(default_factory=list)
    skipped: list[Skipped] = field(default_factory=list)
    summary: str | None = None

    @property
    def ok(self) -> bool:
        return not self.skipped

    @property
    def total(self) -> int:
        return len(self.applied) + len(self.skipped)


def load_patch_batch(
    payload: PatchBatch | Mapping[str, Any] | str | bytes,
    max_payload_size: int | None = None,
) -> PatchBatch:
    """
    Coerce a payload into a PatchBatch.

    Args:
        payload: Batch model, mapping, or JSON text
        max_payload_size: Size limit for JSON text payloads

    Raises:
        PayloadError: If the payload is too large or not batch-shaped
        JSONParseError: If JSON text cannot be decoded
    """
    if isinstance(payload, PatchBatch):
        return payload

    if isinstance(payload, (str, bytes)):
        text = payload.decode("utf-8") if isinstance(payload, bytes) else payload
        if max_payload_size is not None:
            try:
                validate_json_size(text, max_payload_size, "Patch payload")
            except JSONParseError as e:
                raise PayloadError(str(e)) from e
        payload = extract_json(text, repair=True)

    try:
        return PatchBatch.model_validate(payload)
    except ValidationError as e:
        raise PayloadError(f"Invalid patch payload: {e}") from e


def apply_patches(
    spec: Spec, patches: Iterable[Any], max_value_depth: int | None = None
) -> BatchReport:
    """Apply patches in order, skipping and recording the ones that fail."""
    report = BatchReport()
    for patch in patches:
        match try_apply_patch(spec, patch, max_value_depth=max_value_depth):
            case Success(applied):
                report.applied.append(applied)
            case Failure(skipped):
                report.skipped.append(skipped)
    return report


def apply_patch_batch(
    spec: Spec,
    payload: PatchBatch | Mapping[str, Any] | str | bytes,
    settings: Settings | None = None,
) -> BatchReport:
    """
    Apply a structured patch payload to a spec.

    Args:
        spec: Document to mutate in place
        payload: ``{"patches": [...], "summary"?: str}`` as model, mapping or JSON text
        settings: Limits; defaults to the environment settings

    Returns:
        BatchReport with applied and skipped patches

    Raises:
        PayloadError: If the payload itself is unusable (nothing is applied)
        JSONParseError: If JSON text cannot be decoded (nothing is applied)
    """
    settings = settings or get_settings()
    batch = load_patch_batch(payload, max_payload_size=settings.max_payload_size)

    report = apply_patches(spec, batch.patches, max_value_depth=settings.max_value_depth)
    report.summary = batch.summary

    logger.info(
        "patch_batch_applied",
        applied=len(report.applied),
        skipped=len(report.skipped),
        summary=batch.summary,
    )
    return report

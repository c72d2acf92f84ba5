"""
Section resolver: semantic role + free-text style -> concrete catalog variant.

Scoring per query token: +2 for an exact tag match, +1 when the token is a
substring of the entry's layout, +1 when it is a substring of the lowercased
label. The strictly highest score wins, earlier entries win ties, and a best
score of zero falls back to the role's default entry.
"""

import re
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, Field

from ..core.json import JSONParseError, extract_json_array
from ..core.logging_config import get_logger
from .catalog import DEFAULT_CATALOG, CatalogEntry, SectionRole, default_entry, entries_for_role

logger = get_logger(__name__)

_NON_WORD = re.compile(r"[^a-z0-9\s-]")

TAG_WEIGHT = 2
LAYOUT_WEIGHT = 1
LABEL_WEIGHT = 1


class SectionInput(BaseModel):
    """A requested section: element key, role and optional style text."""

    key: str
    role: SectionRole
    style: str | None = None


class ResolvedSection(BaseModel):
    """A section bound to a concrete block type and variant."""

    key: str
    block_type: str = Field(..., description="Element type")
    variant: str
    label: str


def tokenize(text: str) -> list[str]:
    """Lowercase, blank out everything but letters/digits/hyphens, split on whitespace."""
    return _NON_WORD.sub(" ", text.lower()).split()


def score_entry(entry: CatalogEntry, tokens: Iterable[str]) -> int:
    score = 0
    label = entry.label.lower()
    for token in tokens:
        if token in entry.tags:
            score += TAG_WEIGHT
        if entry.layout and token in entry.layout:
            score += LAYOUT_WEIGHT
        if token in label:
            score += LABEL_WEIGHT
    return score


def resolve_section(
    role: SectionRole | str,
    style: str | None = None,
    catalog: Sequence[CatalogEntry] = DEFAULT_CATALOG,
) -> CatalogEntry:
    """
    Pick the best catalog entry for a role and style description.

    Args:
        role: Section role
        style: Free-text style description, e.g. "floating dock sticky"
        catalog: Entries to choose from, in priority order

    Returns:
        The matching entry, or the role's default when nothing matches

    Raises:
        LookupError: If the catalog has no entry for the role
    """
    fallback = default_entry(role, catalog)
    if fallback is None:
        raise LookupError(f"No catalog entries for role {SectionRole(role).value!r}")

    if not style or not style.strip():
        return fallback

    tokens = tokenize(style)
    best: CatalogEntry | None = None
    best_score = -1
    for entry in entries_for_role(role, catalog):
        score = score_entry(entry, tokens)
        if score > best_score:
            best, best_score = entry, score

    if best is None or best_score == 0:
        return fallback
    return best


def resolve_sections(
    sections: Iterable[SectionInput], catalog: Sequence[CatalogEntry] = DEFAULT_CATALOG
) -> list[ResolvedSection]:
    """Resolve each requested section, preserving order."""
    resolved = []
    for section in sections:
        entry = resolve_section(section.role, section.style, catalog)
        resolved.append(
            ResolvedSection(
                key=section.key, block_type=entry.block_type, variant=entry.variant, label=entry.label
            )
        )
    return resolved


def format_page_structure(resolved: Iterable[ResolvedSection]) -> str:
    """Render resolved sections as a PAGE STRUCTURE block for a builder prompt."""
    lines = "\n".join(
        f'  - key="{s.key}", type={s.block_type}, variant={s.variant}' for s in resolved
    )
    return f"PAGE STRUCTURE (add ONLY these sections, in this order; do not add any others):\n{lines}"


def parse_sections(raw: str) -> list[SectionInput]:
    """
    Parse a model's section plan: a JSON array of ``{key, role, style?}``.

    Items with an unknown role or a non-string key are dropped; unparseable
    input yields an empty list.
    """
    try:
        items = extract_json_array(raw)
    except JSONParseError as e:
        logger.warning("section_plan_unparseable", error=str(e))
        return []

    sections = []
    for item in items:
        if not isinstance(item, dict) or not isinstance(item.get("key"), str):
            continue
        try:
            role = SectionRole(item.get("role"))
        except ValueError:
            continue
        style = item.get("style")
        sections.append(
            SectionInput(key=item["key"], role=role, style=style if isinstance(style, str) else None)
        )
    return sections


def section_element(section: ResolvedSection, props: dict[str, Any] | None = None) -> dict[str, Any]:
    """Element skeleton for a resolved section, ready to be added by a patch."""
    return {
        "type": section.block_type,
        "props": {"variant": section.variant, **(props or {})},
        "children": [],
    }

"""Style-to-variant resolution over a section catalog."""

from .catalog import CatalogEntry, DEFAULT_CATALOG, SectionRole, default_entry, entries_for_role
from .resolver import (
    ResolvedSection,
    SectionInput,
    format_page_structure,
    parse_sections,
    resolve_section,
    resolve_sections,
    score_entry,
    section_element,
    tokenize,
)

__all__ = [
    "CatalogEntry",
    "DEFAULT_CATALOG",
    "SectionRole",
    "default_entry",
    "entries_for_role",
    "ResolvedSection",
    "SectionInput",
    "format_page_structure",
    "parse_sections",
    "resolve_section",
    "resolve_sections",
    "score_entry",
    "section_element",
    "tokenize",
]

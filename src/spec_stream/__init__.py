"""
Spec Stream
Incremental JSON Patch engine for streamed, generated UI specs.
"""

from .core import (
    Settings,
    get_settings,
    configure_logging,
    get_logger,
    SpecPatchError,
    PatchError,
    PathError,
    MissingPathError,
    UnknownOpError,
    MalformedPatchError,
    PayloadError,
    DanglingReferenceWarning,
    JSONParseError,
)
from .document import Element, Spec, resolve, get_value, walk, section_ids, spec_to_react_code
from .patch import Applied, Skipped, BatchReport, apply_spec_patch, try_apply_patch, apply_patch_batch
from .stream import MixedStreamParser, SpecStreamSession, compile_stream
from .resolution import CatalogEntry, DEFAULT_CATALOG, SectionRole, resolve_section, resolve_sections
from .adapters import ToolCall, ToolCallReplayer

__version__ = "0.1.0"

__all__ = [
    # Config / logging
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Errors
    "SpecPatchError",
    "PatchError",
    "PathError",
    "MissingPathError",
    "UnknownOpError",
    "MalformedPatchError",
    "PayloadError",
    "DanglingReferenceWarning",
    "JSONParseError",
    # Document
    "Element",
    "Spec",
    "resolve",
    "get_value",
    "walk",
    "section_ids",
    "spec_to_react_code",
    # Patching
    "Applied",
    "Skipped",
    "BatchReport",
    "apply_spec_patch",
    "try_apply_patch",
    "apply_patch_batch",
    # Streaming
    "MixedStreamParser",
    "SpecStreamSession",
    "compile_stream",
    # Resolution
    "CatalogEntry",
    "DEFAULT_CATALOG",
    "SectionRole",
    "resolve_section",
    "resolve_sections",
    # Tool calls
    "ToolCall",
    "ToolCallReplayer",
]

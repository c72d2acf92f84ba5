"""Adapters that turn tool-call outputs into patches."""

from .tools import (
    DEFAULT_CSS_VARS,
    PAGE_ROOT_ID,
    PAGE_ROOT_TYPE,
    AddSectionOutput,
    ApplyThemeOutput,
    ToolCall,
    ToolCallReplayer,
    add_section_patches,
)

__all__ = [
    "DEFAULT_CSS_VARS",
    "PAGE_ROOT_ID",
    "PAGE_ROOT_TYPE",
    "AddSectionOutput",
    "ApplyThemeOutput",
    "ToolCall",
    "ToolCallReplayer",
    "add_section_patches",
]

"""Spec document model, pointer resolution and graph helpers."""

from .models import Element, Spec, EMPTY_ROOT, ROOT_SEGMENTS
from .pointer import APPEND, resolve, get_value, has_value, parse_path, join_path
from .graph import walk, dangling_references, section_ids
from .codegen import spec_to_react_code

__all__ = [
    "Element",
    "Spec",
    "EMPTY_ROOT",
    "ROOT_SEGMENTS",
    "APPEND",
    "resolve",
    "get_value",
    "has_value",
    "parse_path",
    "join_path",
    "walk",
    "dangling_references",
    "section_ids",
    "spec_to_react_code",
]

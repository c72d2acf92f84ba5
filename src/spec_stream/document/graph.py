"""Render-order traversal and reference checks over the element graph."""

import warnings
from collections.abc import Iterator
from typing import Any

from ..core.errors import DanglingReferenceWarning
from .models import Spec


def child_ids(element: Any) -> list[str]:
    if not isinstance(element, dict):
        return []
    children = element.get("children")
    if not isinstance(children, list):
        return []
    return [child for child in children if isinstance(child, str)]


def dangling_references(spec: Spec) -> list[tuple[str, str]]:
    """All (parent_id, child_id) pairs whose child has no element."""
    missing = []
    for parent_id, element in spec.elements.items():
        for child_id in child_ids(element):
            if child_id not in spec.elements:
                missing.append((parent_id, child_id))
    return missing


def section_ids(spec: Spec) -> list[str]:
    """Children of the root element that exist, in order."""
    root = spec.elements.get(spec.root) if spec.root else None
    return [child_id for child_id in child_ids(root) if child_id in spec.elements]


def walk(spec: Spec) -> Iterator[tuple[int, str, dict[str, Any]]]:
    """
    Depth-first traversal from the root in render order.

    Yields:
        (depth, element_id, element)

    Unknown child ids are skipped with a DanglingReferenceWarning. An id
    already on the current path is not entered again.
    """
    if not spec.root or not isinstance(spec.elements.get(spec.root), dict):
        return

    def visit(element_id: str, depth: int, path: tuple[str, ...]) -> Iterator[tuple[int, str, dict[str, Any]]]:
        element = spec.elements[element_id]
        yield depth, element_id, element
        for child_id in child_ids(element):
            if not isinstance(spec.elements.get(child_id), dict):
                warnings.warn(
                    f"Element {element_id!r} references missing child {child_id!r}",
                    DanglingReferenceWarning,
                    stacklevel=2,
                )
                continue
            if child_id in path:
                continue
            yield from visit(child_id, depth + 1, path + (child_id,))

    yield from visit(spec.root, 0, (spec.root,))

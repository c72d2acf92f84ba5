"""Spec to JSX source export."""

from typing import Any

from ..core.json import safe_json_dumps
from .graph import child_ids
from .models import Spec

EMPTY_SPEC_PLACEHOLDER = "// No UI spec yet. Describe a screen in the chat."


def format_prop_value(value: Any) -> str:
    """Format a prop value as a JSX attribute value."""
    if value is None:
        return "{null}"
    if isinstance(value, bool):
        return "{true}" if value else "{false}"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'
    return "{" + safe_json_dumps(value) + "}"


def _element_to_jsx(element_id: str, spec: Spec, indent: str, path: tuple[str, ...]) -> str:
    element = spec.elements[element_id]
    tag = element.get("type", "div")
    props = element.get("props")
    if not isinstance(props, dict):
        props = {}
    children = child_ids(element)

    attributes = "".join(f" {key}={format_prop_value(value)}" for key, value in props.items())
    if not children:
        return f"{indent}<{tag}{attributes} />"

    lines = []
    for child_id in children:
        if not isinstance(spec.elements.get(child_id), dict):
            lines.append(f"{indent}  {{/* missing: {child_id} */}}")
            continue
        if child_id in path:
            lines.append(f"{indent}  {{/* cycle: {child_id} */}}")
            continue
        lines.append(_element_to_jsx(child_id, spec, indent + "  ", path + (child_id,)))

    body = "\n".join(lines)
    return f"{indent}<{tag}{attributes}>\n{body}\n{indent}</{tag}>"


def spec_to_react_code(spec: Spec | None) -> str:
    """
    Render a spec as a single-component JSX source string.

    Missing children become ``{/* missing: id */}`` comments; an empty spec
    yields a placeholder comment.
    """
    if spec is None or not spec.root or not isinstance(spec.elements.get(spec.root), dict):
        return EMPTY_SPEC_PLACEHOLDER

    code = _element_to_jsx(spec.root, spec, "  ", (spec.root,))
    return f"function GeneratedUI() {{\n  return (\n{code}\n  );\n}}"

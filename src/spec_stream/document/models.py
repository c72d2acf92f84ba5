"""Spec document model."""

import copy
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from ..core.json import JSONParseError, decode_json_line, safe_json_dumps

EMPTY_ROOT = ""
ROOT_SEGMENTS = ("root", "elements", "state")


class Element(BaseModel):
    """One node of the UI tree. Unknown fields are kept as-is."""

    model_config = ConfigDict(extra="allow")

    type: str = Field(..., description="Component kind, opaque to the engine")
    props: dict[str, Any] = Field(default_factory=dict)
    children: list[str] = Field(default_factory=list)
    repeat: Any | None = Field(default=None, description="Data-array iteration binding")
    visible: Any | None = Field(default=None, description="Conditional render predicate")
    on: dict[str, Any] | None = Field(default=None, description="Event to action bindings")


class Spec:
    """
    A UI document: root id, element map and optional state.

    The whole document lives in one JSON-shaped dict (``data``) so that
    pointer paths like ``/elements/hero/props/title`` walk it directly.
    """

    __slots__ = ("data",)

    def __init__(
        self,
        root: str = EMPTY_ROOT,
        elements: dict[str, Any] | None = None,
        state: dict[str, Any] | None = None,
    ) -> None:
        self.data: dict[str, Any] = {
            "root": root,
            "elements": elements if elements is not None else {},
        }
        if state is not None:
            self.data["state"] = state

    @classmethod
    def empty(cls) -> "Spec":
        return cls()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Spec":
        """
        Build a spec from a received or hand-edited document.

        A non-string root becomes empty, non-mapping elements are dropped,
        every element gets a props mapping and a non-mapping state is
        discarded. The input is deep-copied.
        """
        root = raw.get("root")
        elements: dict[str, Any] = {}
        raw_elements = raw.get("elements")
        if isinstance(raw_elements, Mapping):
            for element_id, element in raw_elements.items():
                if not isinstance(element, Mapping):
                    continue
                normalized = copy.deepcopy(dict(element))
                if not isinstance(normalized.get("props"), dict):
                    normalized["props"] = {}
                elements[str(element_id)] = normalized

        state = raw.get("state")
        return cls(
            root=root if isinstance(root, str) else EMPTY_ROOT,
            elements=elements,
            state=copy.deepcopy(dict(state)) if isinstance(state, Mapping) else None,
        )

    @classmethod
    def from_json(cls, text: str) -> "Spec":
        """
        Parse and normalize a spec from JSON text.

        Raises:
            JSONParseError: If the text is not a JSON object
        """
        raw = decode_json_line(text.strip())
        if not isinstance(raw, dict):
            raise JSONParseError(f"Spec must be an object, got {type(raw).__name__}")
        return cls.from_dict(raw)

    @property
    def root(self) -> str:
        return self.data["root"]

    @root.setter
    def root(self, value: str) -> None:
        self.data["root"] = value

    @property
    def elements(self) -> dict[str, Any]:
        return self.data["elements"]

    @property
    def state(self) -> dict[str, Any] | None:
        return self.data.get("state")

    def is_empty(self) -> bool:
        return not self.root and not self.elements

    def element(self, element_id: str) -> Element | None:
        """Typed view of one element, or None if the id is unknown."""
        raw = self.elements.get(element_id)
        if not isinstance(raw, dict):
            return None
        return Element.model_validate(raw)

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self.data)

    def snapshot(self) -> "Spec":
        """Independent deep copy, unaffected by later patches."""
        clone = Spec.__new__(Spec)
        clone.data = copy.deepcopy(self.data)
        return clone

    def to_json(self, indent: int = 0) -> str:
        return safe_json_dumps(self.data, indent=indent)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Spec):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"Spec(root={self.root!r}, elements={len(self.elements)})"

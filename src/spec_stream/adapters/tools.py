"""
Tool-call replay.

Rebuilds a page spec from completed tool outputs (``addSection``,
``editPage``, ``applyTheme``) in order. Section additions are turned into
patches so every mutation goes through the same applicator as the stream
path.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.config import Settings, get_settings
from ..core.errors import PayloadError
from ..core.logging_config import get_logger
from ..document.models import Spec
from ..document.pointer import join_path
from ..patch.batch import BatchReport, apply_patch_batch, apply_patches

logger = get_logger(__name__)

PAGE_ROOT_ID = "page"
PAGE_ROOT_TYPE = "PageRoot"

DEFAULT_CSS_VARS: dict[str, str] = {
    "--primary": "oklch(0.205 0 0)",
    "--primary-foreground": "oklch(0.985 0 0)",
    "--radius": "0.625rem",
    "--container-max": "72rem",
    "--font-sans": "var(--font-dm-sans), sans-serif",
    "--font-display": "var(--font-dm-sans), sans-serif",
    "--shadow-sm": "0 1px 3px rgb(0 0 0/.1),0 1px 2px rgb(0 0 0/.06)",
    "--shadow-md": "0 4px 6px rgb(0 0 0/.07),0 2px 4px rgb(0 0 0/.06)",
    "--shadow-lg": "0 10px 15px rgb(0 0 0/.1),0 4px 6px rgb(0 0 0/.05)",
    "--shadow-xl": "0 20px 25px rgb(0 0 0/.1),0 10px 10px rgb(0 0 0/.04)",
}

# applyTheme field -> CSS variable
THEME_VARS: dict[str, str] = {
    "primary": "--primary",
    "primaryForeground": "--primary-foreground",
    "radius": "--radius",
    "fontDisplay": "--font-display",
    "background": "--background",
}


class ToolCall(BaseModel):
    """A completed tool invocation."""

    name: str = Field(..., description="Tool name")
    output: dict[str, Any] = Field(default_factory=dict, description="Tool output payload")


class AddSectionOutput(BaseModel):
    """Output of the addSection tool."""

    key: str
    type: str
    variant: str
    props: dict[str, Any] = Field(default_factory=dict)


class ApplyThemeOutput(BaseModel):
    """Output of the applyTheme tool."""

    model_config = ConfigDict(extra="ignore")

    primary: str | None = None
    primaryForeground: str | None = None
    radius: str | None = None
    fontDisplay: str | None = None
    background: str | None = None


def add_section_patches(section: AddSectionOutput, spec: Spec) -> list[dict[str, Any]]:
    """Patches that add a section element and append it to the page root."""
    patches: list[dict[str, Any]] = []
    if spec.root != PAGE_ROOT_ID:
        patches.append({"op": "add", "path": "/root", "value": PAGE_ROOT_ID})
    if PAGE_ROOT_ID not in spec.elements:
        patches.append(
            {
                "op": "add",
                "path": join_path("elements", PAGE_ROOT_ID),
                "value": {"type": PAGE_ROOT_TYPE, "props": {}, "children": []},
            }
        )
    patches.append(
        {
            "op": "add",
            "path": join_path("elements", section.key),
            "value": {
                "type": section.type,
                "props": {"variant": section.variant, **section.props},
                "children": [],
            },
        }
    )
    patches.append(
        {"op": "add", "path": join_path("elements", PAGE_ROOT_ID, "children", "-"), "value": section.key}
    )
    return patches


class ToolCallReplayer:
    """Replays tool outputs onto a page spec and a theme variable map."""

    def __init__(self, spec: Spec | None = None, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.spec = spec if spec is not None else Spec.empty()
        self.css_vars: dict[str, str] = dict(DEFAULT_CSS_VARS)
        self.reports: list[BatchReport] = []

    def add_section(self, output: dict[str, Any]) -> BatchReport:
        try:
            section = AddSectionOutput.model_validate(output)
        except ValidationError as e:
            raise PayloadError(f"Invalid addSection output: {e}") from e

        report = apply_patches(
            self.spec,
            add_section_patches(section, self.spec),
            max_value_depth=self.settings.max_value_depth,
        )
        self.reports.append(report)
        return report

    def edit_page(self, output: dict[str, Any]) -> BatchReport:
        report = apply_patch_batch(self.spec, output, settings=self.settings)
        self.reports.append(report)
        return report

    def apply_theme(self, output: dict[str, Any]) -> dict[str, str]:
        theme = ApplyThemeOutput.model_validate(output)
        for field_name, css_var in THEME_VARS.items():
            value = getattr(theme, field_name)
            if value:
                self.css_vars[css_var] = value
        return self.css_vars

    def replay(self, calls: Iterable[ToolCall | dict[str, Any]]) -> Spec:
        """
        Apply tool calls in order.

        A call whose output is unusable is logged and skipped; later calls
        still apply.
        """
        for raw in calls:
            try:
                call = raw if isinstance(raw, ToolCall) else ToolCall.model_validate(raw)
            except ValidationError as e:
                tool = raw.get("name") if isinstance(raw, dict) else None
                logger.warning("tool_call_skipped", tool=tool, reason=str(e))
                continue

            try:
                match call.name:
                    case "addSection":
                        self.add_section(call.output)
                    case "editPage":
                        self.edit_page(call.output)
                    case "applyTheme":
                        self.apply_theme(call.output)
                    case _:
                        logger.debug("tool_call_ignored", tool=call.name)
            except (PayloadError, ValidationError) as e:
                logger.warning("tool_call_skipped", tool=call.name, reason=str(e))
        return self.spec

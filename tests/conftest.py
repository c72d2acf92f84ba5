"""Pytest configuration and fixtures."""

import os

import pytest

from spec_stream.core import get_settings
from spec_stream.core.config import Settings
from spec_stream.document import Spec


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["SPEC_LOG_LEVEL"] = "DEBUG"
    os.environ["SPEC_MAX_VALUE_DEPTH"] = "20"


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def strict_settings():
    """Settings with tight limits."""
    return Settings(max_value_depth=3, max_payload_size=256)


# ============================================================================
# Spec Fixtures
# ============================================================================

@pytest.fixture
def empty_spec():
    """Empty spec."""
    return Spec.empty()


@pytest.fixture
def page_spec():
    """Spec with a page root and one hero section."""
    return Spec(
        root="page",
        elements={
            "page": {"type": "PageRoot", "props": {}, "children": ["hero"]},
            "hero": {
                "type": "HeroBlock",
                "props": {"title": "Welcome", "variant": "hero83"},
                "children": [],
            },
        },
    )


# ============================================================================
# Stream Fixtures
# ============================================================================

@pytest.fixture
def build_lines():
    """Four patch lines that build a page with a hero."""
    return [
        '{"op":"add","path":"/root","value":"page"}',
        '{"op":"add","path":"/elements/page","value":{"type":"PageRoot","props":{},"children":[]}}',
        '{"op":"add","path":"/elements/page/children/-","value":"hero"}',
        '{"op":"add","path":"/elements/hero","value":{"type":"HeroBlock","props":{"title":"Welcome"},"children":[]}}',
    ]


@pytest.fixture
def build_stream(build_lines):
    """The build lines as one newline-terminated stream."""
    return "\n".join(build_lines) + "\n"

"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import (
    SpecPatchError,
    PatchError,
    PathError,
    MissingPathError,
    UnknownOpError,
    MalformedPatchError,
    PayloadError,
    DanglingReferenceWarning,
)
from .logging_config import configure_logging, configure_from_settings, get_logger, LogContext
from .json import (
    decode_json_line,
    extract_json,
    extract_json_array,
    strip_code_fences,
    safe_json_dumps,
    JSONParseError,
    validate_json_size,
    validate_json_depth,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "SpecPatchError",
    "PatchError",
    "PathError",
    "MissingPathError",
    "UnknownOpError",
    "MalformedPatchError",
    "PayloadError",
    "DanglingReferenceWarning",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LogContext",
    # JSON
    "decode_json_line",
    "extract_json",
    "extract_json_array",
    "strip_code_fences",
    "safe_json_dumps",
    "JSONParseError",
    "validate_json_size",
    "validate_json_depth",
]

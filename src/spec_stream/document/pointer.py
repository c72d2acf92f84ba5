"""
JSON Pointer resolution over a Spec.

Paths are ``/``-delimited (RFC 6901 escaping: ``~1`` is ``/`` and ``~0`` is
``~``). The first token must be ``root``, ``elements`` or ``state``. Walking
stops one token short of the end: the last token is returned as the key to
mutate inside its parent container.
"""

from typing import Any

from ..core.errors import MissingPathError, PathError
from .models import ROOT_SEGMENTS, Spec

APPEND = "-"

_MISSING = object()


def unescape_token(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def escape_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def join_path(*tokens: Any) -> str:
    """Build a pointer path from raw tokens, e.g. ``join_path("elements", "hero")``."""
    return "".join("/" + escape_token(str(token)) for token in tokens)


def parse_path(path: Any) -> list[str]:
    """
    Split a pointer path into unescaped tokens.

    Raises:
        PathError: If the path is empty, not absolute, or has an unknown root segment
    """
    if not isinstance(path, str) or not path:
        raise PathError(f"Empty or non-string path: {path!r}")
    if not path.startswith("/"):
        raise PathError(f"Path must start with '/': {path!r}")

    tokens = [unescape_token(token) for token in path[1:].split("/")]
    if tokens[0] not in ROOT_SEGMENTS:
        raise PathError(f"Unknown root segment {tokens[0]!r} in {path!r}")
    return tokens


def parse_index(token: str, path: str) -> int:
    """
    Parse an array index token. No sign, no leading zeros.

    Raises:
        PathError: If the token is not a canonical non-negative integer
    """
    if not (token.isascii() and token.isdigit()) or (len(token) > 1 and token[0] == "0"):
        raise PathError(f"Invalid array index {token!r} in {path!r}")
    return int(token)


def resolve(spec: Spec, path: str, create: bool = False) -> tuple[dict | list, str | int]:
    """
    Resolve a path to its parent container and final key.

    Args:
        spec: Document to walk
        path: Pointer path
        create: Create missing intermediate mapping entries: an empty array
            when the final token is ``-`` or ``0`` right after it, otherwise
            an empty object

    Returns:
        (container, key) where key is an int index or ``"-"`` for arrays,
        and a string for mappings

    Raises:
        MissingPathError: If an intermediate segment is absent and create is False
        PathError: If the path cannot be walked
    """
    tokens = parse_path(path)
    container: Any = spec.data
    last = len(tokens) - 1

    for position, token in enumerate(tokens[:-1]):
        if isinstance(container, list):
            if token == APPEND:
                raise PathError(f"'-' can only be the last token: {path!r}")
            index = parse_index(token, path)
            if index >= len(container):
                raise MissingPathError(f"Index {index} out of range in {path!r}")
            container = container[index]
        elif isinstance(container, dict):
            if token not in container:
                if not create:
                    raise MissingPathError(f"No {token!r} in {path!r}")
                # An append or first-slot key as the final token starts a new array
                opens_array = position + 1 == last and tokens[last] in (APPEND, "0")
                container[token] = [] if opens_array else {}
            container = container[token]
        else:
            raise PathError(f"Cannot walk into {type(container).__name__} at {token!r} in {path!r}")

    key = tokens[-1]
    if isinstance(container, list):
        return container, key if key == APPEND else parse_index(key, path)
    if isinstance(container, dict):
        return container, key
    raise PathError(f"Parent of {key!r} is a {type(container).__name__}, not a container: {path!r}")


def get_value(spec: Spec, path: str, default: Any = _MISSING) -> Any:
    """
    Read the value at a path.

    Raises:
        PathError: If the path is invalid, or the target is missing and no default is given
    """
    try:
        container, key = resolve(spec, path)
        if isinstance(container, list):
            if key == APPEND or key >= len(container):
                raise MissingPathError(f"No element at {path!r}")
            return container[key]
        if key not in container:
            raise MissingPathError(f"No {key!r} at {path!r}")
        return container[key]
    except MissingPathError:
        if default is _MISSING:
            raise
        return default


def has_value(spec: Spec, path: str) -> bool:
    marker = object()
    return get_value(spec, path, marker) is not marker

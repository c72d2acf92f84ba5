"""
Patch Applicator.

Applies one ``{op, path, value?}`` operation to a Spec in place. ``add`` and
``replace`` share an upsert path so out-of-order generator output still
lands; ``remove`` of a missing target is a no-op.
"""

import copy
from dataclasses import dataclass
from typing import Any, Mapping

from returns.result import Failure, Result, Success

from ..core.errors import MalformedPatchError, MissingPathError, PatchError, PathError, UnknownOpError
from ..core.json import JSONParseError, validate_json_depth
from ..core.logging_config import get_logger
from ..document.models import EMPTY_ROOT, Spec
from ..document.pointer import APPEND, resolve

logger = get_logger(__name__)

OPS = ("add", "replace", "remove")

# Expected value type for each top-level document key
_TOP_LEVEL_TYPES: dict[str, type] = {"root": str, "elements": dict, "state": dict}


@dataclass(frozen=True)
class Applied:
    """A patch that was applied."""

    op: str
    path: str


@dataclass(frozen=True)
class Skipped:
    """A patch that was skipped (for Result pattern)."""

    reason: str
    patch: Any
    error: PatchError


def _check_top_level(key: str, value: Any, patch: Any) -> None:
    expected = _TOP_LEVEL_TYPES[key]
    if not isinstance(value, expected):
        raise MalformedPatchError(
            f"/{key} must be a {expected.__name__}, got {type(value).__name__}", patch
        )


def _upsert(spec: Spec, op: str, path: str, value: Any, patch: Any) -> None:
    container, key = resolve(spec, path, create=True)

    if container is spec.data:
        _check_top_level(key, value, patch)

    if isinstance(container, list):
        size = len(container)
        if key == APPEND:
            container.append(value)
        elif op == "add":
            if key > size:
                raise PathError(f"Index {key} beyond append position {size} in {path!r}", patch)
            container.insert(key, value)
        elif key < size:
            container[key] = value
        elif key == size:
            container.append(value)
        else:
            raise PathError(f"Index {key} beyond append position {size} in {path!r}", patch)
    else:
        container[key] = value


def _remove(spec: Spec, path: str) -> bool:
    try:
        container, key = resolve(spec, path)
    except MissingPathError:
        return False

    if isinstance(container, list):
        if key == APPEND or key >= len(container):
            return False
        del container[key]
        return True

    if key not in container:
        return False
    if container is spec.data and key == "root":
        spec.root = EMPTY_ROOT
    elif container is spec.data and key == "elements":
        spec.data["elements"] = {}
    else:
        del container[key]
    return True


def apply_spec_patch(
    spec: Spec, patch: Mapping[str, Any], max_value_depth: int | None = None
) -> Spec:
    """
    Apply one patch operation to a spec in place.

    Args:
        spec: Document to mutate
        patch: ``{"op": "add"|"replace"|"remove", "path": str, "value"?: any}``
        max_value_depth: Reject values nested deeper than this

    Returns:
        The same spec, for chaining

    Raises:
        MalformedPatchError: If the patch is not an object or lacks a value
        UnknownOpError: If op is not add/replace/remove
        PathError: If the path is empty, unknown or cannot be walked
    """
    if not isinstance(patch, Mapping):
        raise MalformedPatchError(f"Patch must be an object, got {type(patch).__name__}", patch)

    op = patch.get("op")
    if op not in OPS:
        raise UnknownOpError(f"Unsupported op {op!r}", patch)

    path = patch.get("path")
    if not isinstance(path, str) or not path:
        raise PathError(f"Patch has no usable path: {path!r}", patch)

    try:
        if op == "remove":
            removed = _remove(spec, path)
            logger.debug("patch_applied", op=op, path=path, removed=removed)
            return spec

        if "value" not in patch:
            raise MalformedPatchError(f"'{op}' patch for {path!r} has no value", patch)
        value = patch["value"]
        if max_value_depth is not None:
            try:
                validate_json_depth(value, max_value_depth)
            except JSONParseError as e:
                raise MalformedPatchError(str(e), patch) from e

        _upsert(spec, op, path, copy.deepcopy(value), patch)
    except PatchError as e:
        if e.patch is None:
            e.patch = patch
        raise

    logger.debug("patch_applied", op=op, path=path)
    return spec


def try_apply_patch(
    spec: Spec, patch: Any, max_value_depth: int | None = None
) -> Result[Applied, Skipped]:
    """
    Apply one patch (Result pattern version).

    Never raises for a bad patch: the failure comes back as ``Failure(Skipped)``
    and the spec is left as it was before this patch.

    Returns:
        Success(Applied) or Failure(Skipped)
    """
    try:
        apply_spec_patch(spec, patch, max_value_depth=max_value_depth)
    except PatchError as e:
        path = patch.get("path") if isinstance(patch, Mapping) else None
        logger.warning("patch_skipped", path=path, error=type(e).__name__, reason=str(e))
        return Failure(Skipped(reason=str(e), patch=patch, error=e))
    return Success(Applied(op=patch["op"], path=patch["path"]))

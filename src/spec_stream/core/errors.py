"""Error taxonomy for patch application and payload handling."""

from typing import Any


class SpecPatchError(Exception):
    """Base class for all engine errors."""

    pass


class PatchError(SpecPatchError):
    """A single patch could not be applied. Recoverable: skip it and continue."""

    def __init__(self, message: str, patch: Any = None) -> None:
        super().__init__(message)
        self.patch = patch


class PathError(PatchError):
    """Path is empty, has an unknown root segment, or cannot be walked."""

    pass


class MissingPathError(PathError):
    """An intermediate segment of the path does not exist yet."""

    pass


class UnknownOpError(PatchError):
    """Operation outside add/replace/remove."""

    pass


class MalformedPatchError(PatchError):
    """Patch is not an object, lacks a required value, or its value is too deep."""

    pass


class PayloadError(SpecPatchError):
    """Structured patch payload has the wrong shape or size."""

    pass


class DanglingReferenceWarning(UserWarning):
    """A children list names an id that has no element."""

    pass

"""Patch application: single operations and structured batches."""

from .applicator import OPS, Applied, Skipped, apply_spec_patch, try_apply_patch
from .batch import BatchReport, PatchBatch, apply_patch_batch, apply_patches, load_patch_batch

__all__ = [
    "OPS",
    "Applied",
    "Skipped",
    "apply_spec_patch",
    "try_apply_patch",
    "BatchReport",
    "PatchBatch",
    "apply_patch_batch",
    "apply_patches",
    "load_patch_batch",
]

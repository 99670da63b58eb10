"""Merge API domain: the three-pass check and merge pipeline."""

from .._output_schemas.merge import LinkErrorRecord, MergeCheckOutput, MergeContextOutput, MergeMergeOutput

__all__ = [
    "LinkErrorRecord",
    "MergeCheckOutput",
    "MergeContextOutput",
    "MergeMergeOutput",
]

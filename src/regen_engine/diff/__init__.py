"""Diff module — compute, apply, and rebase line-level hunks."""

from regen_engine.diff.apply import apply_exact, apply_fuzzy
from regen_engine.diff.engine import compute_hunks, split_lines, join_lines
from regen_engine.diff.hunks import CONTEXT_LINES, HUNKS_FORMAT, Hunk
from regen_engine.diff.patch import HunkPatch, LineDiffPatch, compute_line_diff, patch_from_record

__all__ = [
    "apply_exact",
    "apply_fuzzy",
    "compute_hunks",
    "split_lines",
    "join_lines",
    "CONTEXT_LINES",
    "HUNKS_FORMAT",
    "Hunk",
    "HunkPatch",
    "LineDiffPatch",
    "compute_line_diff",
    "patch_from_record",
]

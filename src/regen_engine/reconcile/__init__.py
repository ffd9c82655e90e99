"""Reconciliation — write generated files without losing user edits."""

from regen_engine.reconcile.compare import FileStatus, capture_changes, expected_content, inspect_file
from regen_engine.reconcile.prompt import Confirm, console_confirm
from regen_engine.reconcile.replay import replay_customizations
from regen_engine.reconcile.writer import (
    MERGED,
    SKIPPED,
    UNCHANGED,
    WRITTEN,
    WriteResult,
    write_generated,
)

__all__ = [
    "FileStatus",
    "capture_changes",
    "expected_content",
    "inspect_file",
    "Confirm",
    "console_confirm",
    "replay_customizations",
    "MERGED",
    "SKIPPED",
    "UNCHANGED",
    "WRITTEN",
    "WriteResult",
    "write_generated",
]

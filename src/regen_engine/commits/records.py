"""Commit record entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from regen_engine.diff.hunks import HUNKS_FORMAT, Hunk, hunks_to_list
from regen_engine.diff.patch import Patch, patch_from_record

STATUS_MODIFIED = "modified"


@dataclass
class FileChange:
    """One file's customizations inside a commit record."""

    file: str
    hunks: list[Hunk] = field(default_factory=list)
    base_hash: str | None = None
    result_hash: str | None = None
    status: str = STATUS_MODIFIED

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "status": self.status,
            "format": HUNKS_FORMAT,
            "baseHash": self.base_hash,
            "resultHash": self.result_hash,
            "hunks": hunks_to_list(self.hunks),
        }


@dataclass
class CommitEntry:
    """A file entry from the log, tagged with its record's creation time."""

    created_at: datetime
    file: str
    record: dict[str, Any]
    source: str = ""

    @property
    def status(self) -> str | None:
        return self.record.get("status")

    @property
    def base_hash(self) -> str | None:
        """Hash of the generated content the entry's patch applies to."""
        if self.record.get("format") == HUNKS_FORMAT:
            return self.record.get("baseHash")
        return self.record.get("newHash")

    def patch(self) -> Patch | None:
        """Decode the stored patch.

        Raises:
            ValueError: If the stored hunks are malformed.
        """
        return patch_from_record(self.record)

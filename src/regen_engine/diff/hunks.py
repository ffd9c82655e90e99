"""Hunk data model shared by the diff engine, registry and commit log."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Format tag written next to every stored hunk list
HUNKS_FORMAT = "hunks-v1"

# Unchanged lines captured on each side of a hunk for rebasing
CONTEXT_LINES = 3


@dataclass
class Hunk:
    """One contiguous edit region between an old and a new text.

    Offsets are zero-based line indexes. ``ctx_before_old`` and
    ``ctx_after_old`` are only consulted when rebasing onto a different
    base; exact application ignores them.
    """

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    old_content: list[str] = field(default_factory=list)
    new_content: list[str] = field(default_factory=list)
    ctx_before_old: list[str] = field(default_factory=list)
    ctx_after_old: list[str] = field(default_factory=list)

    @property
    def old_end(self) -> int:
        return self.old_start + self.old_lines

    def header(self) -> str:
        """Unified-diff style header with one-based starts."""
        return f"@@ -{self.old_start + 1},{self.old_lines} +{self.new_start + 1},{self.new_lines} @@"

    def to_dict(self) -> dict[str, Any]:
        return {
            "oldStart": self.old_start,
            "oldLines": self.old_lines,
            "newStart": self.new_start,
            "newLines": self.new_lines,
            "oldContent": list(self.old_content),
            "newContent": list(self.new_content),
            "ctxBeforeOld": list(self.ctx_before_old),
            "ctxAfterOld": list(self.ctx_after_old),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Hunk:
        """Decode a stored hunk.

        Raises:
            ValueError: If a required key is missing or the line counts
                disagree with the stored content.
        """
        if not isinstance(data, dict):
            raise ValueError(f"hunk must be a mapping, got {type(data).__name__}")
        try:
            hunk = cls(
                old_start=int(data["oldStart"]),
                old_lines=int(data["oldLines"]),
                new_start=int(data["newStart"]),
                new_lines=int(data["newLines"]),
                old_content=[str(s) for s in data.get("oldContent") or []],
                new_content=[str(s) for s in data.get("newContent") or []],
                ctx_before_old=[str(s) for s in data.get("ctxBeforeOld") or []],
                ctx_after_old=[str(s) for s in data.get("ctxAfterOld") or []],
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"malformed hunk: {e}") from e

        if len(hunk.old_content) != hunk.old_lines or len(hunk.new_content) != hunk.new_lines:
            raise ValueError(
                f"hunk {hunk.header()} line counts do not match its content "
                f"({len(hunk.old_content)} old, {len(hunk.new_content)} new)"
            )
        return hunk


def hunks_to_list(hunks: list[Hunk]) -> list[dict[str, Any]]:
    return [h.to_dict() for h in hunks]


def hunks_from_list(data: Any) -> list[Hunk]:
    if not isinstance(data, list):
        raise ValueError(f"hunk list must be a JSON array, got {type(data).__name__}")
    return [Hunk.from_dict(item) for item in data]

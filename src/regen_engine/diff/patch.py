"""Stored patch variants.

Commit records carry one of two encodings of the same thing, the user's
edits on top of a generated base:

- ``hunks-v1``: a structured hunk list (``HunkPatch``).
- the older whole-file line diff, one ``"<op> <line>"`` per line
  (``LineDiffPatch``). ``+`` lines belong to the generated base, ``-``
  lines are the user's.

Both resolve to a hunk list, so there is a single application algorithm.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from regen_engine.diff.apply import apply_exact, apply_fuzzy
from regen_engine.diff.engine import lcs_table, split_lines
from regen_engine.diff.hunks import CONTEXT_LINES, HUNKS_FORMAT, Hunk, hunks_from_list

LEGACY_OPS = (" ", "+", "-")


@dataclass
class HunkPatch:
    """A ``hunks-v1`` patch."""

    hunk_list: list[Hunk] = field(default_factory=list)
    base_hash: str | None = None
    format: str = HUNKS_FORMAT

    def hunks(self) -> list[Hunk]:
        return self.hunk_list


@dataclass
class LineDiffPatch:
    """A legacy whole-file line diff."""

    diff: str
    base_hash: str | None = None
    format: str = "line-diff"

    def hunks(self) -> list[Hunk]:
        return line_diff_to_hunks(self.diff)


Patch = Union[HunkPatch, LineDiffPatch]


def apply_patch(patch: Patch, base: str, exact: bool) -> str | None:
    """Apply either variant, positionally or by rebasing."""
    hunks = patch.hunks()
    return apply_exact(base, hunks) if exact else apply_fuzzy(base, hunks)


def patch_from_record(record: dict[str, Any]) -> Patch | None:
    """Pick the patch variant stored in a commit-record file entry.

    Returns None when the entry carries neither encoding.

    Raises:
        ValueError: If the stored hunk list is malformed.
    """
    if record.get("format") == HUNKS_FORMAT and record.get("hunks") is not None:
        return HunkPatch(hunks_from_list(record["hunks"]), record.get("baseHash"))
    if isinstance(record.get("diff"), str) and record["diff"]:
        # legacy entries keyed their generated base as newHash
        return LineDiffPatch(record["diff"], record.get("newHash"))
    return None


# ── Legacy line diff ─────────────────────────────────────────────────


def compute_line_diff(old_text: str, new_text: str) -> str:
    """Render a full line diff of ``old_text`` against ``new_text``.

    Lines only in ``old_text`` are ``-``, lines only in ``new_text`` are
    ``+``, shared lines are ``' '``.
    """
    a = split_lines(old_text)
    b = split_lines(new_text)
    dp = lcs_table(a, b)
    ops: list[str] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] == b[j]:
            ops.append(f"  {a[i]}")
            i += 1
            j += 1
        elif dp[i + 1][j] >= dp[i][j + 1]:
            ops.append(f"- {a[i]}")
            i += 1
        else:
            ops.append(f"+ {b[j]}")
            j += 1
    ops.extend(f"- {line}" for line in a[i:])
    ops.extend(f"+ {line}" for line in b[j:])
    return "\n".join(ops)


def parse_line_diff(diff: str) -> list[tuple[str, str]]:
    """Split a legacy diff into ``(op, line)`` pairs.

    Unknown op characters are read as context.
    """
    ops = []
    for raw in diff.replace("\r\n", "\n").split("\n"):
        op = raw[:1]
        line = raw[2:] if len(raw) > 1 and raw[1] == " " else raw[1:]
        ops.append((op if op in LEGACY_OPS else " ", line))
    return ops


def line_diff_to_hunks(diff: str) -> list[Hunk]:
    """Convert a legacy diff into hunks against its generated base."""
    base: list[str] = []
    hunks: list[Hunk] = []
    pending: Hunk | None = None
    result_index = 0

    for op, line in parse_line_diff(diff):
        if op == " ":
            if pending:
                hunks.append(pending)
                pending = None
            base.append(line)
            result_index += 1
            continue

        if pending is None:
            pending = Hunk(old_start=len(base), old_lines=0, new_start=result_index, new_lines=0)
        if op == "+":
            pending.old_lines += 1
            pending.old_content.append(line)
            base.append(line)
        else:
            pending.new_lines += 1
            pending.new_content.append(line)
            result_index += 1

    if pending:
        hunks.append(pending)

    for h in hunks:
        h.ctx_before_old = base[max(0, h.old_start - CONTEXT_LINES):h.old_start]
        h.ctx_after_old = base[h.old_end:h.old_end + CONTEXT_LINES]
    return hunks

"""Line-level diff via a longest-common-subsequence table.

The table is O(n*m) in time and memory, which is fine for source-file
sized inputs. Very large files are not a target.
"""

from __future__ import annotations

from regen_engine.diff.hunks import CONTEXT_LINES, Hunk


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only so that joining gives back the exact text."""
    return text.split("\n")


def join_lines(lines: list[str]) -> str:
    return "\n".join(lines)


def lcs_table(a: list[str], b: list[str]) -> list[list[int]]:
    """Suffix LCS lengths: ``dp[i][j]`` is the LCS of ``a[i:]`` and ``b[j:]``."""
    n, m = len(a), len(b)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = dp[i], dp[i + 1]
        for j in range(m - 1, -1, -1):
            if a[i] == b[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    return dp


def compute_hunks(old_text: str, new_text: str) -> list[Hunk]:
    """Compute the hunks that turn ``old_text`` into ``new_text``.

    Walks the LCS alignment from the start. When both "drop an old line"
    and "take a new line" keep the LCS length, the old line is dropped
    first, so a replaced region always lists its deletions before its
    insertions.

    Returns:
        Disjoint hunks in ascending ``old_start`` order. Applying them
        with :func:`regen_engine.diff.apply.apply_exact` to ``old_text``
        gives back ``new_text``.
    """
    a = split_lines(old_text)
    b = split_lines(new_text)
    dp = lcs_table(a, b)

    hunks: list[Hunk] = []
    pending: Hunk | None = None
    i = j = 0

    while i < len(a) and j < len(b):
        if a[i] == b[j]:
            if pending:
                hunks.append(pending)
                pending = None
            i += 1
            j += 1
            continue

        if pending is None:
            pending = Hunk(old_start=i, old_lines=0, new_start=j, new_lines=0)
        if dp[i + 1][j] >= dp[i][j + 1]:
            pending.old_lines += 1
            pending.old_content.append(a[i])
            i += 1
        else:
            pending.new_lines += 1
            pending.new_content.append(b[j])
            j += 1

    # Whatever is left on either side once one sequence runs out
    if i < len(a) or j < len(b):
        tail = Hunk(
            old_start=i,
            old_lines=len(a) - i,
            new_start=j,
            new_lines=len(b) - j,
            old_content=a[i:],
            new_content=b[j:],
        )
        if pending and pending.old_end == tail.old_start and pending.new_start + pending.new_lines == tail.new_start:
            pending.old_lines += tail.old_lines
            pending.new_lines += tail.new_lines
            pending.old_content.extend(tail.old_content)
            pending.new_content.extend(tail.new_content)
        else:
            if pending:
                hunks.append(pending)
            pending = tail

    if pending:
        hunks.append(pending)

    for h in hunks:
        h.ctx_before_old = a[max(0, h.old_start - CONTEXT_LINES):h.old_start]
        h.ctx_after_old = a[h.old_end:h.old_end + CONTEXT_LINES]
    return hunks

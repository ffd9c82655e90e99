"""Replay hunk lists onto a base text.

``apply_exact`` trusts the recorded offsets and only works on the very
text the hunks were computed from. ``apply_fuzzy`` rebases onto a
different text by searching for the replaced lines or their recorded
context.

Known limitation: the fuzzy search is a forward scan that takes the first
occurrence at or after the cursor. When a block or its context appears
more than once, the earliest one wins even if it is not the intended one.
No strategy ever places a hunk before the cursor; a block that only
survives in front of an earlier hunk's placement is a conflict.
"""

from __future__ import annotations

from regen_engine.diff.engine import join_lines, split_lines
from regen_engine.diff.hunks import Hunk


def find_block(
    haystack: list[str],
    needle: list[str],
    start: int = 0,
    stop: int | None = None,
) -> int:
    """Return the first index >= ``start`` where ``needle`` occurs in full.

    The match must end at or before ``stop`` (default: end of haystack).
    An empty needle matches at ``start``. Returns -1 when absent.
    """
    start = max(0, start)
    if not needle:
        return start
    end = len(haystack) if stop is None else min(stop, len(haystack))
    size = len(needle)
    head = needle[0]
    for i in range(start, end - size + 1):
        if haystack[i] == head and haystack[i:i + size] == needle:
            return i
    return -1


def apply_exact(base: str, hunks: list[Hunk]) -> str | None:
    """Apply hunks positionally to the text they were computed from.

    Returns:
        The patched text, or None if a hunk falls outside the text.
    """
    lines = split_lines(base)
    offset = 0
    for h in hunks:
        start = h.old_start + offset
        end = start + h.old_lines
        if start < 0 or end > len(lines):
            return None
        lines[start:end] = h.new_content
        offset += len(h.new_content) - h.old_lines
    return join_lines(lines)


def _locate_block(lines: list[str], h: Hunk, cursor: int) -> int:
    """Find where ``h.old_content`` sits in ``lines``, or -1."""
    idx = find_block(lines, h.old_content, cursor)
    if idx != -1:
        return idx

    if h.ctx_before_old:
        anchor = find_block(lines, h.ctx_before_old, cursor - len(h.ctx_before_old))
        if anchor != -1:
            candidate = anchor + len(h.ctx_before_old)
            if lines[candidate:candidate + h.old_lines] == h.old_content:
                return candidate

    if h.ctx_after_old:
        anchor = find_block(lines, h.ctx_after_old, cursor)
        if anchor != -1:
            window_start = max(cursor, anchor - h.old_lines - len(h.ctx_before_old))
            return find_block(lines, h.old_content, window_start, stop=anchor)

    return -1


def _insertion_point(lines: list[str], h: Hunk, cursor: int) -> int:
    """Pick the index at which a pure insertion goes."""
    if h.ctx_before_old:
        anchor = find_block(lines, h.ctx_before_old, cursor - len(h.ctx_before_old))
        if anchor != -1:
            return anchor + len(h.ctx_before_old)
    if h.ctx_after_old:
        anchor = find_block(lines, h.ctx_after_old, cursor)
        if anchor != -1:
            return anchor
    return min(max(h.new_start, 0), len(lines))


def apply_fuzzy(base: str, hunks: list[Hunk]) -> str | None:
    """Rebase hunks onto ``base`` by content search instead of offsets.

    Every hunk that replaces lines must find its old block (directly, after
    its leading context, or just before its trailing context). Pure
    insertions are anchored on context and otherwise fall back to their
    recorded position.

    Returns:
        The patched text, or None if any hunk could not be placed.
    """
    lines = split_lines(base)
    cursor = 0
    for h in hunks:
        if h.old_lines > 0:
            idx = _locate_block(lines, h, cursor)
            if idx == -1:
                return None
            lines[idx:idx + h.old_lines] = h.new_content
        else:
            idx = _insertion_point(lines, h, cursor)
            lines[idx:idx] = h.new_content
        cursor = idx + len(h.new_content)
    return join_lines(lines)

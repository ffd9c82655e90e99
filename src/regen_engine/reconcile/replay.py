"""Replay recorded customizations onto freshly generated content."""

from __future__ import annotations

import warnings
from pathlib import Path

from regen_engine.commits.records import CommitEntry
from regen_engine.commits.store import history_for
from regen_engine.config import ProjectConfig
from regen_engine.diff.patch import apply_patch
from regen_engine.registry.hashing import content_hash
from regen_engine.registry.store import GenerationRegistry


def _apply_entry(entry: CommitEntry, generated: str, exact: bool) -> str | None:
    try:
        patch = entry.patch()
    except ValueError as e:
        warnings.warn(f"Ignoring malformed patch for {entry.file} in {entry.source}: {e}")
        return None
    if patch is None:
        return None
    return apply_patch(patch, generated, exact=exact)


def replay_customizations(
    config: ProjectConfig,
    registry: GenerationRegistry,
    path: Path | str,
    generated: str,
) -> str | None:
    """Re-apply a file's recorded edits on top of ``generated``.

    Order of attempts:
    1. The registry's cached hunk snapshot, exactly when it was computed
       against this same generated content, otherwise by rebasing.
    2. The commit log: the newest entry recorded against this same
       generated content, applied exactly.
    3. The commit log: the newest entry overall, rebased.

    Returns:
        The merged content, or None if nothing applied cleanly.
    """
    rel = config.relpath(path)
    new_hash = content_hash(generated)

    entry = registry.get(rel)
    snapshot = entry.snapshot() if entry else None
    if snapshot is not None:
        merged = apply_patch(snapshot, generated, exact=snapshot.base_hash == new_hash)
        if merged is not None:
            return merged

    history = history_for(config, rel)
    same_base = [e for e in history if e.base_hash == new_hash]
    if same_base:
        merged = _apply_entry(same_base[-1], generated, exact=True)
        if merged is not None:
            return merged

    for candidate in reversed(history):
        if candidate.record.get("hunks") is not None or candidate.record.get("diff"):
            return _apply_entry(candidate, generated, exact=False)
    return None

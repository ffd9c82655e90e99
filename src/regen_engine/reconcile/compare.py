"""Compare generated content with what is on disk.

Whether a file counts as modified is decided only by the registry: a
file is modified when it has no entry or its on-disk hash differs from
the recorded baseline.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from pathlib import Path

from regen_engine.commits.records import FileChange
from regen_engine.config import ProjectConfig
from regen_engine.diff.apply import apply_exact
from regen_engine.diff.engine import compute_hunks
from regen_engine.diff.hunks import Hunk
from regen_engine.reconcile.writer import decode_text
from regen_engine.registry.hashing import content_hash
from regen_engine.registry.store import GenerationRegistry, RegistryEntry

CLEAN = "clean"
MODIFIED = "modified"
MISSING = "missing"


@dataclass
class FileStatus:
    file: str
    status: str
    hunks: list[Hunk] = field(default_factory=list)
    note: str = ""


def expected_content(entry: RegistryEntry | None, generated: str) -> tuple[str, str]:
    """Generated content with already-committed edits replayed on top.

    Only a snapshot computed against this exact generated content is
    replayed; anything else would be a guess.

    Returns:
        (expected content, note) where note is empty if nothing was replayed.
    """
    snapshot = entry.snapshot() if entry else None
    if snapshot is not None and snapshot.base_hash == content_hash(generated):
        applied = apply_exact(generated, snapshot.hunks())
        if applied is not None:
            return applied, "committed changes applied"
    return generated, ""


def is_user_modified(entry: RegistryEntry | None, current_hash: str) -> bool:
    return entry is None or entry.hash != current_hash


def inspect_file(
    config: ProjectConfig,
    registry: GenerationRegistry,
    path: Path | str,
    generated: str,
) -> FileStatus:
    """Classify one generated file as clean, modified, or missing.

    Modified files carry the hunks from the expected content (generated
    plus committed edits) to the on-disk content.
    """
    target = config.resolve(path)
    rel = config.relpath(target)
    if not target.is_file():
        return FileStatus(rel, MISSING)

    raw = target.read_bytes()
    current_hash = content_hash(raw)
    entry = registry.get(rel)

    if not is_user_modified(entry, current_hash):
        note = "" if content_hash(generated) == current_hash else "regeneration pending"
        return FileStatus(rel, CLEAN, note=note)

    current = decode_text(raw)
    if current is None:
        return FileStatus(rel, MODIFIED, note="not UTF-8 text")

    base, note = expected_content(entry, generated)
    hunks = compute_hunks(base, current)
    if not hunks:
        return FileStatus(rel, CLEAN, note=note or "matches generated content")
    return FileStatus(rel, MODIFIED, hunks=hunks, note=note)


def capture_changes(
    config: ProjectConfig,
    registry: GenerationRegistry,
    generated: dict[str, str],
    selection: set[str] | None = None,
) -> list[FileChange]:
    """Collect user edits to generated files as hunk sets.

    For every existing, user-modified output that differs from its
    generated content (and is in ``selection`` when one is given), the
    hunks from generated to on-disk content are cached in the registry and
    returned for a commit record.
    """
    changes: list[FileChange] = []
    for path, contents in generated.items():
        target = config.resolve(path)
        rel = config.relpath(target)
        if not target.is_file():
            continue

        raw = target.read_bytes()
        current_hash = content_hash(raw)
        if not is_user_modified(registry.get(rel), current_hash):
            continue
        new_hash = content_hash(contents)
        if new_hash == current_hash:
            continue
        if selection is not None and rel not in selection:
            continue
        current = decode_text(raw)
        if current is None:
            warnings.warn(f"Skipping {rel}: not UTF-8 text")
            continue

        hunks = compute_hunks(contents, current)
        registry.record_snapshot(rel, hunks, new_hash, current_hash)
        changes.append(FileChange(file=rel, hunks=hunks, base_hash=new_hash, result_hash=current_hash))
    return changes

"""Write generated files, preserving edits made since the last generation.

Outcomes per file:
    written  : new file, untouched file, forced or confirmed overwrite
    merged   : user edits replayed onto the new content and written
    unchanged: on-disk content already matches
    skipped  : drifted file left alone (conflict skipped or declined)

Only filesystem errors escape; every other case is an outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from regen_engine.config import ProjectConfig
from regen_engine.reconcile.prompt import Confirm, console_confirm
from regen_engine.reconcile.replay import replay_customizations
from regen_engine.registry.hashing import content_hash
from regen_engine.registry.store import GenerationRegistry

WRITTEN = "written"
MERGED = "merged"
UNCHANGED = "unchanged"
SKIPPED = "skipped"


@dataclass
class WriteResult:
    path: str
    action: str
    created: bool = False

    @property
    def written(self) -> bool:
        return self.action in (WRITTEN, MERGED)


def decode_text(raw: bytes) -> str | None:
    """Decode on-disk bytes as UTF-8, or None if they are not valid UTF-8.

    Line endings are kept as they are, so the text hashes like the bytes.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return None


def write_text(path: Path, contents: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(contents)


def write_generated(
    config: ProjectConfig,
    path: Path | str,
    contents: str,
    registry: GenerationRegistry | None = None,
    force: bool = False,
    skip_on_conflict: bool = False,
    confirm: Confirm = console_confirm,
) -> WriteResult:
    """Write one generated file.

    Args:
        config: Project configuration.
        path: Target path, absolute or relative to the project root.
        contents: Freshly generated content for the path.
        registry: Registry to consult and update (default: the project's).
        force: Overwrite drifted files without replaying edits or asking.
        skip_on_conflict: Leave drifted files alone instead of asking when
            their edits cannot be replayed.
        confirm: Asked once when a drifted file would be overwritten.

    Returns:
        WriteResult with the file's registry key and outcome.
    """
    registry = registry or GenerationRegistry(config)
    target = config.resolve(path)
    rel = config.relpath(target)
    new_hash = content_hash(contents)

    if not target.exists():
        write_text(target, contents)
        registry.record_baseline(rel, new_hash)
        return WriteResult(rel, WRITTEN, created=True)

    raw = target.read_bytes()
    current_hash = content_hash(raw)
    if current_hash == new_hash:
        return WriteResult(rel, UNCHANGED)

    entry = registry.get(rel)
    user_modified = entry is None or entry.hash != current_hash

    if user_modified and not force:
        # edits that are not UTF-8 text cannot be merged
        merged = None
        if decode_text(raw) is not None:
            merged = replay_customizations(config, registry, rel, contents)
        if merged is not None:
            if content_hash(merged) == current_hash:
                # edits already sit on top of this content; only the baseline moves
                if entry is None or entry.hash != new_hash:
                    registry.record_baseline(rel, new_hash)
                return WriteResult(rel, UNCHANGED)
            write_text(target, merged)
            registry.record_baseline(rel, new_hash)
            return WriteResult(rel, MERGED)

        if skip_on_conflict:
            return WriteResult(rel, SKIPPED)
        if not confirm(f"File modified since last generation: {rel}. Overwrite?"):
            return WriteResult(rel, SKIPPED)

    write_text(target, contents)
    registry.record_baseline(rel, new_hash)
    return WriteResult(rel, WRITTEN)

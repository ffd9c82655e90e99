"""Append-only commit log.

Each commit action writes one new JSON file into the commits directory.
Existing files are never rewritten or deleted; reading the whole
directory in ``createdAt`` order replays the history of every file.
"""

from __future__ import annotations

import json
import re
import warnings
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from regen_engine.commits.records import STATUS_MODIFIED, CommitEntry, FileChange
from regen_engine.config import ProjectConfig

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# commit-2024-05-01T10-20-30-123456+00-00.json
_NAME_RE = re.compile(
    r"^commit-(\d{4}-\d{2}-\d{2})T(\d{2})-(\d{2})-(\d{2})(?:-(\d+))?(?:[+-]\d{2}-\d{2}|Z)?(?:-\d+)?\.json$"
)


def _parse_iso(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _timestamp_from_name(name: str) -> datetime | None:
    match = _NAME_RE.match(name)
    if not match:
        return None
    day, hh, mm, ss, frac = match.groups()
    text = f"{day}T{hh}:{mm}:{ss}"
    if frac:
        text += "." + frac[:6].ljust(6, "0")
    return _parse_iso(text)


def commit_file_name(created_at: datetime) -> str:
    stamp = created_at.isoformat().replace(":", "-").replace(".", "-")
    return f"commit-{stamp}.json"


def create_commit(
    config: ProjectConfig,
    changes: list[FileChange],
    created_at: datetime | None = None,
) -> Path:
    """Append a new commit record.

    Args:
        config: Project configuration.
        changes: Per-file hunk sets to record.
        created_at: Record timestamp (default: now, UTC).

    Returns:
        Path to the new commit file.
    """
    created = created_at or datetime.now(timezone.utc)
    commits_dir = config.commits_dir
    commits_dir.mkdir(parents=True, exist_ok=True)

    payload = {
        "createdAt": created.isoformat(),
        "files": [c.to_dict() for c in changes],
    }

    name = commit_file_name(created)
    target = commits_dir / name
    suffix = 1
    while True:
        try:
            # exclusive create: an existing record is never replaced
            with open(target, "x", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
                f.write("\n")
            return target
        except FileExistsError:
            target = commits_dir / f"{name[:-len('.json')]}-{suffix}.json"
            suffix += 1


def _read_record(path: Path) -> dict | None:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        warnings.warn(f"Skipping unreadable commit record {path.name}: {e}")
        return None
    if not isinstance(data, dict) or not isinstance(data.get("files"), list):
        warnings.warn(f"Skipping commit record {path.name}: no 'files' list")
        return None
    return data


def _record_time(path: Path, data: dict) -> datetime:
    return _parse_iso(data.get("createdAt")) or _timestamp_from_name(path.name) or EPOCH


def load_all(config: ProjectConfig) -> list[CommitEntry]:
    """Read every commit record, flattened to per-file entries.

    Corrupt records are skipped with a warning; the scan continues.

    Returns:
        Entries sorted ascending by their record's ``createdAt``. Entries
        with equal timestamps keep file-name order.
    """
    commits_dir = config.commits_dir
    if not commits_dir.is_dir():
        return []

    entries: list[CommitEntry] = []
    for path in sorted(commits_dir.glob("*.json")):
        data = _read_record(path)
        if data is None:
            continue
        created = _record_time(path, data)
        for rec in data["files"]:
            if not isinstance(rec, dict) or not isinstance(rec.get("file"), str):
                continue
            entries.append(CommitEntry(created_at=created, file=rec["file"], record=rec, source=path.name))

    entries.sort(key=lambda e: e.created_at)
    return entries


def history_for(config: ProjectConfig, rel: str) -> list[CommitEntry]:
    """Modified-status entries for one file, oldest first."""
    return [e for e in load_all(config) if e.file == rel and e.status == STATUS_MODIFIED]


def list_commits(config: ProjectConfig) -> list[dict[str, Any]]:
    """Summaries of every readable commit record, oldest first."""
    commits_dir = config.commits_dir
    if not commits_dir.is_dir():
        return []

    summaries = []
    for path in sorted(commits_dir.glob("*.json")):
        data = _read_record(path)
        if data is None:
            continue
        summaries.append({
            "name": path.name,
            "created_at": _record_time(path, data),
            "files": [rec.get("file") for rec in data["files"] if isinstance(rec, dict)],
        })
    summaries.sort(key=lambda s: s["created_at"])
    return summaries

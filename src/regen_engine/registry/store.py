"""Path-keyed registry of generated baselines.

Every entry describes content this engine wrote itself. It is never
derived from edits made outside the generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from regen_engine.config import ProjectConfig
from regen_engine.diff.hunks import HUNKS_FORMAT, Hunk, hunks_from_list, hunks_to_list
from regen_engine.diff.patch import HunkPatch
from regen_engine.registry.loader import load_registry, save_registry


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class RegistryEntry:
    """Baseline hash for one artifact, plus an optional hunk snapshot."""

    hash: str
    updated_at: str = ""
    diff_format: str | None = None
    diff_base_hash: str | None = None
    diff_result_hash: str | None = None
    diff_hunks: list[Hunk] | None = None
    diff_updated_at: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    _KEYS = {
        "hash", "updatedAt", "diffFormat", "diffBaseHash",
        "diffResultHash", "diffHunks", "diffUpdatedAt",
    }

    @property
    def has_snapshot(self) -> bool:
        return self.diff_format == HUNKS_FORMAT and self.diff_hunks is not None

    def snapshot(self) -> HunkPatch | None:
        """The cached hunk set as a patch, if one is stored."""
        if not self.has_snapshot:
            return None
        return HunkPatch(list(self.diff_hunks or []), self.diff_base_hash)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data["hash"] = self.hash
        data["updatedAt"] = self.updated_at
        if self.diff_format is not None:
            data["diffFormat"] = self.diff_format
            data["diffBaseHash"] = self.diff_base_hash
            data["diffResultHash"] = self.diff_result_hash
            data["diffHunks"] = hunks_to_list(self.diff_hunks or [])
            data["diffUpdatedAt"] = self.diff_updated_at
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RegistryEntry:
        hunks = None
        diff_format = data.get("diffFormat")
        if diff_format == HUNKS_FORMAT and data.get("diffHunks") is not None:
            try:
                hunks = hunks_from_list(data["diffHunks"])
            except ValueError:
                # an unreadable snapshot is dropped; the baseline hash still stands
                diff_format = None
        return cls(
            hash=str(data.get("hash", "")),
            updated_at=str(data.get("updatedAt", "")),
            diff_format=diff_format,
            diff_base_hash=data.get("diffBaseHash"),
            diff_result_hash=data.get("diffResultHash"),
            diff_hunks=hunks,
            diff_updated_at=data.get("diffUpdatedAt"),
            extra={k: v for k, v in data.items() if k not in cls._KEYS},
        )


class GenerationRegistry:
    """Lazy view over the registry document of one project.

    ``get``/``set``/``persist`` are the primitive operations. The
    ``record_*`` helpers each run a full load, modify, persist cycle so
    the file on disk is always current after a write.
    """

    def __init__(self, config: ProjectConfig):
        self.config = config
        self._data: dict[str, dict] | None = None

    @property
    def path(self) -> Path:
        return self.config.registry_path

    def _loaded(self) -> dict[str, dict]:
        if self._data is None:
            self._data = load_registry(self.path)
        return self._data

    def reload(self) -> None:
        self._data = load_registry(self.path)

    def get(self, path: Path | str) -> RegistryEntry | None:
        """Entry for ``path``; a legacy absolute key is used if no relative one exists."""
        data = self._loaded()
        raw = data.get(self.config.relpath(path))
        if raw is None:
            raw = data.get(self.config.abskey(path))
        return RegistryEntry.from_dict(raw) if raw is not None else None

    def set(self, path: Path | str, entry: RegistryEntry) -> None:
        """Store ``entry`` under the relative key, dropping any absolute key."""
        data = self._loaded()
        data[self.config.relpath(path)] = entry.to_dict()
        data.pop(self.config.abskey(path), None)

    def persist(self) -> None:
        save_registry(self._loaded(), self.path)

    def entries(self) -> list[tuple[str, RegistryEntry]]:
        return [(key, RegistryEntry.from_dict(raw)) for key, raw in sorted(self._loaded().items())]

    def record_baseline(self, path: Path | str, baseline_hash: str) -> RegistryEntry:
        """Point the entry for ``path`` at newly written generated content."""
        self.reload()
        entry = self.get(path) or RegistryEntry(hash=baseline_hash)
        entry.hash = baseline_hash
        entry.updated_at = _now()
        self.set(path, entry)
        self.persist()
        return entry

    def record_snapshot(
        self,
        path: Path | str,
        hunks: list[Hunk],
        base_hash: str,
        result_hash: str,
    ) -> RegistryEntry:
        """Cache the latest hunk set for ``path`` next to its baseline."""
        self.reload()
        entry = self.get(path) or RegistryEntry(hash="")
        entry.diff_format = HUNKS_FORMAT
        entry.diff_hunks = list(hunks)
        entry.diff_base_hash = base_hash
        entry.diff_result_hash = result_hash
        entry.diff_updated_at = _now()
        self.set(path, entry)
        self.persist()
        return entry

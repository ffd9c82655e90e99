"""Explicit project configuration.

A single ``ProjectConfig`` is built at process start and handed to every
registry, commit-log and writer call. Nothing in the engine keeps its own
notion of the project root.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from regen_engine import paths


@dataclass(frozen=True)
class ProjectConfig:
    """Where a project's generated artifacts and tracking data live."""

    root: Path
    registry_file: str = paths.DEFAULT_REGISTRY_FILE
    commits_dirname: str = paths.DEFAULT_COMMITS_DIR
    manifest_file: str = paths.DEFAULT_MANIFEST_FILE

    @classmethod
    def from_env(
        cls,
        root: Path | str | None = None,
        manifest: Path | str | None = None,
    ) -> ProjectConfig:
        """Build a config from CLI overrides, then environment, then defaults."""
        resolved = Path(root).expanduser().resolve() if root else paths.project_root().resolve()
        return cls(
            root=resolved,
            registry_file=paths.registry_file_name(),
            commits_dirname=paths.commits_dir_name(),
            manifest_file=str(manifest) if manifest else paths.manifest_file_name(),
        )

    @property
    def registry_path(self) -> Path:
        return self.root / self.registry_file

    @property
    def commits_dir(self) -> Path:
        return self.root / self.commits_dirname

    @property
    def manifest_path(self) -> Path:
        return self.resolve(self.manifest_file)

    def resolve(self, path: Path | str) -> Path:
        """Map a project-relative key (or an absolute path) to an absolute path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self.root / p

    def relpath(self, path: Path | str) -> str:
        """Return the registry key for ``path``: root-relative, forward slashes."""
        absolute = os.path.abspath(self.resolve(path))
        rel = os.path.relpath(absolute, self.root)
        return rel.replace(os.sep, "/")

    def abskey(self, path: Path | str) -> str:
        """Return the legacy absolute-path key for ``path``."""
        return os.path.abspath(self.resolve(path))

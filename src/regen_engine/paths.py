"""Project path resolution.

Resolves the default locations of the generation registry and commit log.
Uses environment variables when available, falls back to conventional
defaults.

Environment variables:
    REGEN_PROJECT_DIR — project root (default: current working directory)
    REGEN_REGISTRY_FILE — registry file name under the root (default: registry.json)
    REGEN_COMMITS_DIR — commit log directory under the root (default: commits)
    REGEN_MANIFEST_FILE — generation manifest under the root (default: regen.yaml)
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_REGISTRY_FILE = "registry.json"
DEFAULT_COMMITS_DIR = "commits"
DEFAULT_MANIFEST_FILE = "regen.yaml"


def project_root() -> Path:
    """Return the project root directory."""
    return Path(os.environ.get("REGEN_PROJECT_DIR", os.getcwd()))


def registry_file_name() -> str:
    """Return the registry file name, relative to the project root."""
    return os.environ.get("REGEN_REGISTRY_FILE", DEFAULT_REGISTRY_FILE)


def commits_dir_name() -> str:
    """Return the commit log directory name, relative to the project root."""
    return os.environ.get("REGEN_COMMITS_DIR", DEFAULT_COMMITS_DIR)


def manifest_file_name() -> str:
    """Return the generation manifest file name."""
    return os.environ.get("REGEN_MANIFEST_FILE", DEFAULT_MANIFEST_FILE)

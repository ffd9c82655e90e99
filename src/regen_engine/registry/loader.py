"""Load and save the generation registry document."""

from __future__ import annotations

import json
import warnings
from pathlib import Path


def load_registry(path: Path | str) -> dict:
    """Load the registry from disk.

    A missing file is an empty registry. A malformed one is also read as
    empty, with a warning: only tracking metadata is lost, never source.

    Args:
        path: Path to the registry JSON file.

    Returns:
        Mapping of artifact key to raw entry dict.
    """
    registry_path = Path(path)
    if not registry_path.is_file():
        return {}
    try:
        with open(registry_path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        warnings.warn(f"Ignoring unreadable registry {registry_path}: {e}")
        return {}

    if not isinstance(data, dict):
        warnings.warn(f"Ignoring registry {registry_path}: top level is not an object")
        return {}
    return {k: v for k, v in data.items() if isinstance(v, dict)}


def save_registry(data: dict, path: Path | str) -> None:
    """Rewrite the whole registry document with consistent formatting.

    Args:
        data: Mapping of artifact key to raw entry dict.
        path: Path to write to.
    """
    registry_path = Path(path)
    registry_path.parent.mkdir(parents=True, exist_ok=True)
    with open(registry_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")

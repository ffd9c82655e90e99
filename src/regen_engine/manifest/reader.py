"""Parse and validate regen.yaml manifests.

A manifest lists the files a generation pass produces::

    outputs:
      - path: src/models/user.py
        template: templates/model.py.tmpl
        vars:
          name: User
      - path: VERSION
        content: "1.0.0\\n"
"""

from pathlib import Path

import yaml


class ManifestError(ValueError):
    """The generation manifest is malformed."""


def load_manifest(path: Path | str) -> dict:
    """Read and parse a manifest file.

    Args:
        path: Path to regen.yaml.

    Returns:
        Parsed manifest dict.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ManifestError: If the YAML is malformed or not a mapping.
    """
    manifest_path = Path(path)
    with open(manifest_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ManifestError(f"{manifest_path}: invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"{manifest_path} is not a YAML mapping")

    return data


def output_entries(manifest: dict) -> list[dict]:
    """Validated ``outputs`` entries of a manifest.

    Raises:
        ManifestError: On a missing path, a duplicate path, or an entry
            with neither (or both) ``content`` and ``template``.
    """
    outputs = manifest.get("outputs", []) or []
    if not isinstance(outputs, list):
        raise ManifestError("'outputs' must be a list")

    seen: set[str] = set()
    entries = []
    for i, entry in enumerate(outputs):
        if not isinstance(entry, dict) or not entry.get("path"):
            raise ManifestError(f"outputs[{i}]: missing 'path'")
        path = str(entry["path"])
        if path in seen:
            raise ManifestError(f"outputs[{i}]: duplicate path '{path}'")
        seen.add(path)

        has_content = "content" in entry
        has_template = "template" in entry
        if has_content == has_template:
            raise ManifestError(f"{path}: needs exactly one of 'content' or 'template'")
        vars_ = entry.get("vars", {}) or {}
        if not isinstance(vars_, dict):
            raise ManifestError(f"{path}: 'vars' must be a mapping")
        entries.append(entry)
    return entries

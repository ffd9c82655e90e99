"""Render manifest outputs to in-memory content."""

from __future__ import annotations

from string import Template

from regen_engine.config import ProjectConfig
from regen_engine.manifest.reader import ManifestError, output_entries


def render_entry(config: ProjectConfig, entry: dict) -> str:
    """Produce the content for one manifest entry.

    Literal ``content`` is taken as is; a ``template`` file is read from the
    project and filled with ``vars`` via ``string.Template``.
    """
    if "content" in entry:
        return str(entry["content"])

    template_path = config.resolve(str(entry["template"]))
    with open(template_path, encoding="utf-8", newline="") as f:
        template = Template(f.read())
    values = {str(k): str(v) for k, v in (entry.get("vars") or {}).items()}
    try:
        return template.substitute(values)
    except KeyError as e:
        raise ManifestError(f"{entry['path']}: template variable {e} has no value") from e
    except ValueError as e:
        raise ManifestError(f"{entry['path']}: {e}") from e


def render_outputs(config: ProjectConfig, manifest: dict) -> dict[str, str]:
    """Render every output, keyed by project-relative path, in manifest order.

    Raises:
        ManifestError: If two entries name the same file (``a.txt`` and
            ``./a.txt`` count as the same).
    """
    rendered: dict[str, str] = {}
    for entry in output_entries(manifest):
        rel = config.relpath(str(entry["path"]))
        if rel in rendered:
            raise ManifestError(f"{entry['path']}: duplicate output for '{rel}'")
        rendered[rel] = render_entry(config, entry)
    return rendered

"""Generation manifest — the declarative list of files to generate."""

from regen_engine.manifest.reader import ManifestError, load_manifest, output_entries
from regen_engine.manifest.render import render_outputs

__all__ = ["ManifestError", "load_manifest", "output_entries", "render_outputs"]

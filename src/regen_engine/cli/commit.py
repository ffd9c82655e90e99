"""Commit CLI command."""

import argparse

from regen_engine.commits import create_commit
from regen_engine.config import ProjectConfig
from regen_engine.manifest import ManifestError, load_manifest, render_outputs
from regen_engine.reconcile import capture_changes
from regen_engine.registry.store import GenerationRegistry


def cmd_commit(args: argparse.Namespace) -> int:
    config = ProjectConfig.from_env(args.root, args.manifest)
    try:
        outputs = render_outputs(config, load_manifest(config.manifest_path))
    except (ManifestError, FileNotFoundError) as e:
        print(f"ERROR: {e}")
        return 1

    selection = {config.relpath(f) for f in args.files} if args.files else None
    registry = GenerationRegistry(config)
    changes = capture_changes(config, registry, outputs, selection)
    commit_path = create_commit(config, changes)

    for change in changes:
        print(f"  {change.file}: {len(change.hunks)} hunk(s)")
    print(
        f"Saved diff summary with {len(changes)} modified file(s) "
        f"to {config.relpath(commit_path)}"
    )
    return 0

"""Generate CLI command."""

import argparse

from regen_engine.config import ProjectConfig
from regen_engine.manifest import ManifestError, load_manifest, render_outputs
from regen_engine.reconcile import MERGED, SKIPPED, UNCHANGED, write_generated
from regen_engine.reconcile.prompt import console_confirm
from regen_engine.registry.store import GenerationRegistry

_LABELS = {
    "created": "Generated",
    "written": "Updated",
    MERGED: "Updated (with commits)",
    SKIPPED: "Skipped",
}


def cmd_generate(args: argparse.Namespace) -> int:
    config = ProjectConfig.from_env(args.root, args.manifest)
    try:
        outputs = render_outputs(config, load_manifest(config.manifest_path))
    except (ManifestError, FileNotFoundError) as e:
        print(f"ERROR: {e}")
        return 1

    registry = GenerationRegistry(config)
    counts = {"created": 0, "written": 0, MERGED: 0, UNCHANGED: 0, SKIPPED: 0}

    # one file at a time: at most one prompt pending, output stays ordered
    for rel, contents in outputs.items():
        result = write_generated(
            config,
            rel,
            contents,
            registry=registry,
            force=args.force,
            skip_on_conflict=args.skip_conflicts,
            confirm=console_confirm,
        )
        key = "created" if result.created else result.action
        counts[key] += 1
        if key != UNCHANGED:
            print(f"  {_LABELS[key]} {result.path}")

    print("\nGeneration Results")
    print("─" * 40)
    print(f"  Generated: {counts['created']}")
    print(f"  Updated:   {counts['written']}")
    print(f"  Merged:    {counts[MERGED]}")
    print(f"  Unchanged: {counts[UNCHANGED]}")
    print(f"  Skipped:   {counts[SKIPPED]}")
    return 0

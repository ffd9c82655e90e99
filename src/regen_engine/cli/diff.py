"""Diff CLI command."""

import argparse

from regen_engine.config import ProjectConfig
from regen_engine.manifest import ManifestError, load_manifest, render_outputs
from regen_engine.reconcile.compare import MISSING, MODIFIED, inspect_file
from regen_engine.registry.store import GenerationRegistry


def _selected(rel: str, prefixes: list[str]) -> bool:
    if not prefixes:
        return True
    return any(rel == p or rel.startswith(p.rstrip("/") + "/") for p in prefixes)


def cmd_diff(args: argparse.Namespace) -> int:
    config = ProjectConfig.from_env(args.root, args.manifest)
    try:
        outputs = render_outputs(config, load_manifest(config.manifest_path))
    except (ManifestError, FileNotFoundError) as e:
        print(f"ERROR: {e}")
        return 1

    prefixes = [config.relpath(p) for p in args.paths]
    registry = GenerationRegistry(config)
    results = [
        inspect_file(config, registry, rel, contents)
        for rel, contents in outputs.items()
        if _selected(rel, prefixes)
    ]

    if not results:
        print("No files to compare.")
        return 0

    print("\nCurrent diffs (compared to generated):")
    for r in results:
        note = f"  ({r.note})" if r.note else ""
        print(f"\n[{r.status}] {r.file}{note}")
        if r.status != MODIFIED:
            continue
        for h in r.hunks:
            print(h.header())
            for line in h.old_content:
                print(f"- {line}")
            for line in h.new_content:
                print(f"+ {line}")

    modified = sum(1 for r in results if r.status == MODIFIED)
    missing = sum(1 for r in results if r.status == MISSING)
    print(f"\n  {len(results)} file(s), {modified} modified, {missing} missing")
    return 0

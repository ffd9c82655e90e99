"""Registry CLI commands."""

import argparse

from regen_engine.config import ProjectConfig
from regen_engine.registry.store import GenerationRegistry


def cmd_registry_show(args: argparse.Namespace) -> int:
    config = ProjectConfig.from_env(args.root, args.manifest)
    registry = GenerationRegistry(config)
    rel = config.relpath(args.path)
    entry = registry.get(rel)
    if entry is None:
        print(f"ERROR: '{rel}' is not tracked in the registry")
        return 1

    print(f"\n  {rel}")
    print(f"  {'─' * max(len(rel), 40)}")
    print(f"  {'hash:':<20}{entry.hash}")
    print(f"  {'updatedAt:':<20}{entry.updated_at}")
    if entry.has_snapshot:
        print(f"  {'diffFormat:':<20}{entry.diff_format}")
        print(f"  {'diffBaseHash:':<20}{entry.diff_base_hash}")
        print(f"  {'diffResultHash:':<20}{entry.diff_result_hash}")
        print(f"  {'diffHunks:':<20}{len(entry.diff_hunks or [])}")
        print(f"  {'diffUpdatedAt:':<20}{entry.diff_updated_at}")
    print()
    return 0


def cmd_registry_list(args: argparse.Namespace) -> int:
    config = ProjectConfig.from_env(args.root, args.manifest)
    entries = GenerationRegistry(config).entries()
    if not entries:
        print("Registry is empty.")
        return 0

    print(f"\n  {'Path':<50} {'Hash':<14} {'Snapshot':<8}")
    print(f"  {'─' * 74}")
    for key, entry in entries:
        snap = "yes" if entry.has_snapshot else "-"
        print(f"  {key:<50} {entry.hash[:12]:<14} {snap:<8}")
    print(f"\n  {len(entries)} file(s)")
    return 0

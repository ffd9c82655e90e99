"""Commit log CLI commands."""

import argparse

from regen_engine.commits import list_commits
from regen_engine.config import ProjectConfig


def cmd_commits_list(args: argparse.Namespace) -> int:
    config = ProjectConfig.from_env(args.root, args.manifest)
    summaries = list_commits(config)
    if not summaries:
        print("No commits recorded.")
        return 0

    print(f"\n  {'Created':<34} {'Files':>5}  Record")
    print(f"  {'─' * 76}")
    for s in summaries:
        print(f"  {s['created_at'].isoformat():<34} {len(s['files']):>5}  {s['name']}")
        for f in s["files"]:
            print(f"      {f}")
    print(f"\n  {len(summaries)} commit(s)")
    return 0

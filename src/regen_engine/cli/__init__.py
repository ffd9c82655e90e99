"""Unified CLI for regen-engine.

Usage:
    regen generate [--force] [--skip-conflicts]
    regen diff [PATH ...]
    regen commit [FILE ...]
    regen commits list
    regen registry show <path>
    regen registry list
"""

import argparse
import sys

from regen_engine.cli.commit import cmd_commit
from regen_engine.cli.commits import cmd_commits_list
from regen_engine.cli.diff import cmd_diff
from regen_engine.cli.generate import cmd_generate
from regen_engine.cli.registry import cmd_registry_list, cmd_registry_show


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regen",
        description="Regenerate derived files without losing hand-written edits",
    )
    parser.add_argument(
        "--root", default=None,
        help="Project root (default: $REGEN_PROJECT_DIR or current directory)",
    )
    parser.add_argument(
        "--manifest", default=None,
        help="Generation manifest, relative to the root (default: regen.yaml)",
    )
    sub = parser.add_subparsers(dest="command")

    # generate
    gen = sub.add_parser("generate", help="Write generated files, replaying user edits")
    gen.add_argument(
        "--force", action="store_true",
        help="Overwrite modified files without replaying edits",
    )
    gen.add_argument(
        "--skip-conflicts", action="store_true",
        help="Skip modified files whose edits cannot be replayed instead of asking",
    )

    # diff
    dif = sub.add_parser("diff", help="Show edits relative to generated content")
    dif.add_argument("paths", nargs="*", help="Only files at or under these paths")

    # commit
    com = sub.add_parser("commit", help="Record current edits to generated files")
    com.add_argument("files", nargs="*", help="Only these files (default: all modified)")

    # commits
    cms = sub.add_parser("commits", help="Commit log operations")
    cms_sub = cms.add_subparsers(dest="subcommand")
    cms_sub.add_parser("list", help="List commit records in chronological order")

    # registry
    reg = sub.add_parser("registry", help="Registry operations")
    reg_sub = reg.add_subparsers(dest="subcommand")
    show = reg_sub.add_parser("show", help="Show the registry entry of a file")
    show.add_argument("path")
    reg_sub.add_parser("list", help="List tracked files")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("commits", "list"): cmd_commits_list,
        ("registry", "show"): cmd_registry_show,
        ("registry", "list"): cmd_registry_list,
    }

    # Handle top-level commands (no subcommand)
    if args.command == "generate":
        return cmd_generate(args)
    if args.command == "diff":
        return cmd_diff(args)
    if args.command == "commit":
        return cmd_commit(args)

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Commit log — immutable, timestamped records of user customizations."""

from regen_engine.commits.records import CommitEntry, FileChange
from regen_engine.commits.store import create_commit, history_for, list_commits, load_all

__all__ = [
    "CommitEntry",
    "FileChange",
    "create_commit",
    "history_for",
    "list_commits",
    "load_all",
]

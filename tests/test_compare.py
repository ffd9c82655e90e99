"""Tests for diff inspection and change capture."""

import pytest

from regen_engine.reconcile.compare import (
    CLEAN,
    MISSING,
    MODIFIED,
    capture_changes,
    expected_content,
    inspect_file,
)
from regen_engine.reconcile.writer import write_generated
from regen_engine.registry.hashing import content_hash
from regen_engine.registry.store import GenerationRegistry

GEN = "a\nb\nc"


def _generate(project, rel, contents):
    write_generated(project, rel, contents, registry=GenerationRegistry(project), skip_on_conflict=True)


class TestInspectFile:
    def test_missing(self, project, registry):
        assert inspect_file(project, registry, "a.txt", GEN).status == MISSING

    def test_clean(self, project):
        _generate(project, "a.txt", GEN)
        status = inspect_file(project, GenerationRegistry(project), "a.txt", GEN)
        assert status.status == CLEAN
        assert status.note == ""

    def test_clean_but_stale(self, project):
        _generate(project, "a.txt", GEN)
        status = inspect_file(project, GenerationRegistry(project), "a.txt", GEN + "\nd")
        assert status.status == CLEAN
        assert status.note == "regeneration pending"

    def test_modified_shows_hunks(self, project):
        _generate(project, "a.txt", GEN)
        (project.root / "a.txt").write_text("a\nB\nc")
        status = inspect_file(project, GenerationRegistry(project), "a.txt", GEN)
        assert status.status == MODIFIED
        [h] = status.hunks
        assert h.old_content == ["b"]
        assert h.new_content == ["B"]

    def test_committed_edits_are_not_reported(self, project):
        _generate(project, "a.txt", GEN)
        (project.root / "a.txt").write_text("a\nB\nc")
        registry = GenerationRegistry(project)
        capture_changes(project, registry, {"a.txt": GEN})

        status = inspect_file(project, registry, "a.txt", GEN)
        assert status.status == CLEAN
        assert status.note == "committed changes applied"

    def test_only_uncommitted_edits_are_reported(self, project):
        _generate(project, "a.txt", GEN)
        (project.root / "a.txt").write_text("a\nB\nc")
        registry = GenerationRegistry(project)
        capture_changes(project, registry, {"a.txt": GEN})
        (project.root / "a.txt").write_text("a\nB\nc\nmore")

        status = inspect_file(project, registry, "a.txt", GEN)
        assert status.status == MODIFIED
        [h] = status.hunks
        assert h.new_content == ["more"]

    def test_non_utf8_file_is_modified_without_hunks(self, project):
        _generate(project, "a.txt", GEN)
        (project.root / "a.txt").write_bytes(b"a\n\xff\nc")
        status = inspect_file(project, GenerationRegistry(project), "a.txt", GEN)
        assert status.status == MODIFIED
        assert status.hunks == []
        assert status.note == "not UTF-8 text"


class TestExpectedContent:
    def test_without_entry(self):
        assert expected_content(None, GEN) == (GEN, "")

    def test_snapshot_on_other_base_is_ignored(self, project, registry):
        registry.record_snapshot("a.txt", [], "other", "r")
        assert expected_content(registry.get("a.txt"), GEN) == (GEN, "")


class TestCaptureChanges:
    def test_skips_untouched_and_missing(self, project):
        _generate(project, "a.txt", GEN)
        changes = capture_changes(project, GenerationRegistry(project), {"a.txt": GEN, "gone.txt": "x"})
        assert changes == []

    def test_captures_modified_and_stores_snapshot(self, project):
        _generate(project, "a.txt", GEN)
        (project.root / "a.txt").write_text("a\nB\nc")
        registry = GenerationRegistry(project)
        [change] = capture_changes(project, registry, {"a.txt": GEN})

        assert change.file == "a.txt"
        assert change.base_hash == content_hash(GEN)
        assert change.result_hash == content_hash("a\nB\nc")
        entry = GenerationRegistry(project).get("a.txt")
        assert entry.hash == content_hash(GEN)
        assert entry.diff_base_hash == content_hash(GEN)
        assert entry.snapshot().hunks() == change.hunks

    def test_selection_limits_files(self, project):
        for name in ("a.txt", "b.txt"):
            _generate(project, name, GEN)
            (project.root / name).write_text("edited")
        changes = capture_changes(project, GenerationRegistry(project), {"a.txt": GEN, "b.txt": GEN}, {"b.txt"})
        assert [c.file for c in changes] == ["b.txt"]

    def test_drifted_file_equal_to_generated_is_skipped(self, project):
        (project.root / "a.txt").write_text(GEN)
        assert capture_changes(project, GenerationRegistry(project), {"a.txt": GEN}) == []

    def test_non_utf8_file_is_skipped_with_warning(self, project):
        _generate(project, "a.txt", GEN)
        (project.root / "a.txt").write_bytes(b"a\n\xff\nc")
        registry = GenerationRegistry(project)
        with pytest.warns(UserWarning, match="not UTF-8"):
            changes = capture_changes(project, registry, {"a.txt": GEN})
        assert changes == []
        assert not registry.get("a.txt").has_snapshot

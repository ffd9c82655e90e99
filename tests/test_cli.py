"""Tests for the unified CLI.

Covers:
- Parser construction and --help for every command group
- generate / diff / commit end to end on a temporary project
- registry and commit log listings
"""

import argparse
import json
from unittest.mock import patch

import pytest

from regen_engine.cli import build_parser, main

MANIFEST = """\
outputs:
  - path: src/service.py
    template: templates/service.tmpl
    vars:
      name: Orders
"""


@pytest.fixture
def workspace(tmp_path):
    (tmp_path / "templates").mkdir()
    (tmp_path / "templates" / "service.tmpl").write_text(
        "class ${name}Service:\n    def list(self):\n        return []\n"
    )
    (tmp_path / "regen.yaml").write_text(MANIFEST)
    return tmp_path


def run(workspace, *argv):
    return main(["--root", str(workspace), *argv])


class TestParserConstruction:
    def test_build_parser_returns_parser(self):
        assert isinstance(build_parser(), argparse.ArgumentParser)

    def test_no_args_shows_help(self, capsys):
        with patch("sys.argv", ["regen"]):
            rc = main()
        assert rc == 0
        assert "regen" in capsys.readouterr().out

    @pytest.mark.parametrize("cmd", [
        ["--help"],
        ["generate", "--help"],
        ["diff", "--help"],
        ["commit", "--help"],
        ["commits", "--help"],
        ["registry", "--help"],
    ])
    def test_help_exits_zero(self, cmd):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(cmd)
        assert exc_info.value.code == 0

    def test_generate_flags(self):
        args = build_parser().parse_args(["generate", "--force", "--skip-conflicts"])
        assert args.force and args.skip_conflicts


class TestGenerate:
    def test_first_run_generates(self, workspace, capsys):
        assert run(workspace, "generate") == 0
        out = capsys.readouterr().out
        assert "Generated src/service.py" in out
        assert "class OrdersService:" in (workspace / "src" / "service.py").read_text()
        assert "src/service.py" in json.loads((workspace / "registry.json").read_text())

    def test_second_run_is_unchanged(self, workspace, capsys):
        run(workspace, "generate")
        capsys.readouterr()
        run(workspace, "generate")
        out = capsys.readouterr().out
        assert "Unchanged: 1" in out

    def test_missing_manifest(self, tmp_path, capsys):
        assert run(tmp_path, "generate") == 1
        assert "ERROR" in capsys.readouterr().out

    def test_modified_file_skipped(self, workspace, capsys):
        run(workspace, "generate")
        (workspace / "src" / "service.py").write_text("mine")
        (workspace / "regen.yaml").write_text(MANIFEST.replace("Orders", "Invoices"))
        assert run(workspace, "generate", "--skip-conflicts") == 0
        assert "Skipped src/service.py" in capsys.readouterr().out
        assert (workspace / "src" / "service.py").read_text() == "mine"


class TestDiffAndCommit:
    def _customize(self, workspace):
        run(workspace, "generate")
        target = workspace / "src" / "service.py"
        target.write_text(target.read_text().replace("return []", "return self.repo.all()"))
        return target

    def test_diff_reports_modification(self, workspace, capsys):
        self._customize(workspace)
        capsys.readouterr()
        assert run(workspace, "diff") == 0
        out = capsys.readouterr().out
        assert "[modified] src/service.py" in out
        assert "@@ -3,1 +3,1 @@" in out
        assert "-         return []" in out
        assert "+         return self.repo.all()" in out

    def test_diff_path_filter(self, workspace, capsys):
        self._customize(workspace)
        capsys.readouterr()
        run(workspace, "diff", "docs")
        assert "No files to compare." in capsys.readouterr().out

    def test_commit_then_regenerate_keeps_edit(self, workspace, capsys):
        target = self._customize(workspace)
        assert run(workspace, "commit") == 0
        out = capsys.readouterr().out
        assert "Saved diff summary with 1 modified file(s)" in out
        assert len(list((workspace / "commits").glob("commit-*.json"))) == 1

        (workspace / "templates" / "service.tmpl").write_text(
            "import repo\n\nclass ${name}Service:\n    def list(self):\n        return []\n"
        )
        assert run(workspace, "generate", "--skip-conflicts") == 0
        assert "Updated (with commits) src/service.py" in capsys.readouterr().out
        assert target.read_text() == (
            "import repo\n\nclass OrdersService:\n    def list(self):\n        return self.repo.all()\n"
        )

    def test_commits_list(self, workspace, capsys):
        self._customize(workspace)
        run(workspace, "commit")
        capsys.readouterr()
        assert run(workspace, "commits", "list") == 0
        out = capsys.readouterr().out
        assert "1 commit(s)" in out
        assert "src/service.py" in out


class TestRegistryCommands:
    def test_show(self, workspace, capsys):
        run(workspace, "generate")
        capsys.readouterr()
        assert run(workspace, "registry", "show", "src/service.py") == 0
        assert "hash:" in capsys.readouterr().out

    def test_show_untracked(self, workspace, capsys):
        assert run(workspace, "registry", "show", "nope.py") == 1

    def test_list_empty(self, workspace, capsys):
        assert run(workspace, "registry", "list") == 0
        assert "Registry is empty." in capsys.readouterr().out

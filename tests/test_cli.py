"""Tests for quire.cli — CLI entrypoint and subcommands."""

from pathlib import Path

import pytest

from quire.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["serve", "candidates", "resolve", "index", "check"])
    def test_subcommand_help_exits_zero(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "quire" in captured.out

    def test_unknown_command_exits_two(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["publish"])
        assert exc_info.value.code == 2


class TestCandidates:
    def test_prints_candidates_in_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["candidates", "guides/building"])
        assert capsys.readouterr().out.splitlines() == [
            "guides/building.mdx",
            "guides/building.md",
            "guides/building/index.mdx",
            "guides/building/index.md",
        ]

    def test_empty_slug_uses_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["candidates"])
        assert capsys.readouterr().out.splitlines()[0] == "getting-started.mdx"


class TestResolve:
    def test_found(self, docs_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "guides/configuration", "--docs", str(docs_dir)])
        out = capsys.readouterr().out
        assert "guides/configuration -> guides/configuration/index.md (Configuration)" in out

    def test_not_found_exits_one(
        self, docs_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "nope", "--docs", str(docs_dir)])
        assert exc_info.value.code == 1
        assert "Document not found: nope" in capsys.readouterr().err

    def test_missing_docs_dir(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "x", "--docs", str(tmp_path / "absent")])
        assert exc_info.value.code == 1
        assert "Docs directory not found" in capsys.readouterr().err


class TestIndex:
    def test_lists_identifiers(self, docs_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["index", "--docs", str(docs_dir)])
        assert capsys.readouterr().out.splitlines() == [
            "getting-started.mdx",
            "guides/building.md",
            "guides/configuration/index.md",
            "installation.md",
        ]


class TestCheck:
    def test_reports_missing_entry(
        self, docs_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "--docs", str(docs_dir)])
        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "MISSING  guides (Guides / Guides Overview)" in out
        assert "4/5 navigation entries resolve" in out

    def test_passes_when_all_resolve(
        self, docs_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (docs_dir / "guides" / "index.md").write_text("# Guides\n", encoding="utf-8")
        main(["check", "--docs", str(docs_dir)])
        assert "5/5 navigation entries resolve" in capsys.readouterr().out

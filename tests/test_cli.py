"""Tests for the command-line interface."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from chaindict.cli import main
from chaindict.cli.get_cmd import get_cmd


class TestGetCommand:
    """Test the get subcommand."""

    def test_pairs_file(self, tmp_path: Path) -> None:
        csv_file = tmp_path / "codes.csv"
        csv_file.write_text("code,reason\n200,OK\n404,Not Found\n")

        result = CliRunner().invoke(get_cmd, ["404", "500", "--pairs", str(csv_file)])

        assert result.exit_code == 0
        assert "Not Found" in result.output
        assert "(absent)" in result.output

    def test_later_file_wins(self, tmp_path: Path) -> None:
        first = tmp_path / "first.csv"
        first.write_text("k,v\na,old\nb,kept\n")
        second = tmp_path / "second.csv"
        second.write_text("k,v\na,new\n")

        result = CliRunner().invoke(
            get_cmd, ["a", "b", "--pairs", str(first), "--pairs", str(second)]
        )

        assert result.exit_code == 0
        assert "new" in result.output
        assert "old" not in result.output
        assert "kept" in result.output

    def test_sample(self) -> None:
        result = CliRunner().invoke(get_cmd, ["--sample", "418", "451", "306"])

        assert result.exit_code == 0
        assert "I'm a teapot" in result.output
        assert "Client Error" in result.output
        assert "(absent)" in result.output

    def test_default_and_remove(self) -> None:
        result = CliRunner().invoke(
            get_cmd, ["--default", "fallback", "--remove", "gone", "gone", "here"]
        )

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert any("gone" in line and "(absent)" in line for line in lines)
        assert any("here" in line and "fallback" in line for line in lines)

    def test_upper(self) -> None:
        result = CliRunner().invoke(get_cmd, ["--sample", "--upper", "404"])

        assert result.exit_code == 0
        assert "NOT FOUND" in result.output

    def test_stdin(self) -> None:
        result = CliRunner().invoke(
            get_cmd, ["x", "--pairs", "-"], input="k,v\nx,from-stdin\n"
        )

        assert result.exit_code == 0
        assert "from-stdin" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(get_cmd, ["a", "--pairs", str(tmp_path / "nope.csv")])

        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_bad_csv(self, tmp_path: Path) -> None:
        csv_file = tmp_path / "one.csv"
        csv_file.write_text("only\n1\n")

        result = CliRunner().invoke(get_cmd, ["a", "--pairs", str(csv_file)])

        assert result.exit_code == 1
        assert "at least 2 columns" in result.output

    def test_requires_keys(self) -> None:
        result = CliRunner().invoke(get_cmd, [])
        assert result.exit_code == 2


class TestMainGroup:
    """Test the top-level group."""

    def test_verbose_get(self) -> None:
        result = CliRunner().invoke(main, ["-v", "get", "--sample", "200"])

        assert result.exit_code == 0
        assert "OK" in result.output

    def test_repl_preloaded(self) -> None:
        with patch("chaindict.cli.repl_cmd.run_repl") as run:
            result = CliRunner().invoke(main, ["repl", "--sample"])

        assert result.exit_code == 0
        assert "Preloaded: depth" in result.output
        session = run.call_args.args[0]
        assert session.current.get(404) == "Not Found"


class TestGetInputHandling:
    """Test keys and files that need care."""

    def test_mixed_key_column(self, tmp_path: Path) -> None:
        csv_file = tmp_path / "p.csv"
        csv_file.write_text("code,text\n404,nf\nabc,letters\n")

        result = CliRunner().invoke(get_cmd, ["404", "abc", "--pairs", str(csv_file)])

        assert result.exit_code == 0
        assert "nf" in result.output
        assert "letters" in result.output
        assert "(absent)" not in result.output

    def test_undecodable_file(self, tmp_path: Path) -> None:
        csv_file = tmp_path / "bad.csv"
        csv_file.write_bytes(b"k,v\n\xff\xfe,1\n")

        result = CliRunner().invoke(get_cmd, ["a", "--pairs", str(csv_file)])

        assert result.exit_code == 1
        assert "Cannot parse CSV" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

# this_file: python/tests/test_cli.py

"""Tests for the autofit-pdf command line."""

import json

import pytest

from autofit import cli


class TestParseArgs:
    """Test argument defaults."""

    def test_defaults(self):
        """Defaults reproduce the 2x3 char grid with automatic engine."""
        args = cli.parse_args([])
        assert args.text is None
        assert (args.rows, args.cols) == (2, 3)
        assert args.split == "char"
        assert args.engine == "auto"
        assert args.no_shrink is False

    def test_policy_choices(self):
        """Unknown policies are rejected by argparse."""
        with pytest.raises(SystemExit):
            cli.parse_args(["--policy", "stretch"])


class TestMain:
    """Test the end-to-end entry point."""

    def test_renders_default_text(self, tmp_path, capsys):
        """Without text the demo string is rendered and summarized."""
        pytest.importorskip("cairo")
        output = tmp_path / "out.pdf"

        code = cli.main(["-o", str(output), "--engine", "cairo"])

        summary = json.loads(capsys.readouterr().out)
        assert output.read_bytes().startswith(b"%PDF")
        assert summary["cells"] == 6
        assert code == (1 if summary["failed"] else 0)

    def test_summary_names_resolved_engine(self, tmp_path, capsys, monkeypatch):
        """With the automatic engine the summary names the engine actually used."""
        pytest.importorskip("cairo")
        monkeypatch.delenv("AUTOFIT_ENGINE", raising=False)

        cli.main(["A", "-o", str(tmp_path / "auto.pdf"), "--engine", "auto"])

        summary = json.loads(capsys.readouterr().out)
        assert summary["engine"] == "cairo"

    def test_line_mode_from_file(self, tmp_path, capsys):
        """Line mode reads bytes from a file and fills one cell per line."""
        pytest.importorskip("cairo")
        source = tmp_path / "in.txt"
        source.write_bytes("first\r\nsecond\rthird".encode("utf-8"))
        output = tmp_path / "lines.pdf"

        cli.main(
            [
                "--input", str(source),
                "-o", str(output),
                "--split", "line",
                "--rows", "3",
                "--cols", "1",
                "--policy", "font-size-plus-scale",
            ]
        )

        summary = json.loads(capsys.readouterr().out)
        assert summary["cells"] == 3
        assert summary["dropped"] == 0

    def test_invalid_grid(self, tmp_path):
        """An empty grid exits with code 2."""
        assert cli.main(["--rows", "0", "-o", str(tmp_path / "x.pdf")]) == 2

    def test_missing_input_file(self, tmp_path):
        """An unreadable input file exits with code 2."""
        assert cli.main(["--input", str(tmp_path / "missing.txt")]) == 2

    def test_unknown_engine(self, tmp_path):
        """An unknown engine exits with code 2."""
        assert cli.main(["--engine", "postscript", "-o", str(tmp_path / "x.pdf")]) == 2

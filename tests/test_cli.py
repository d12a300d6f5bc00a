"""Tests for the command-line driver."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from when_present.cli import main, parse_args
from when_present.config import EXIT_DIRECTIVE_ERROR, EXIT_OK, EXIT_USAGE_ERROR
from when_present.exceptions import UsageError
from when_present.utils.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """configure_logging replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "source.c"
    path.write_text(text)
    return path


class TestParseArgs:
    """Tests for parse_args function."""

    def test_collects_lines_in_order(self) -> None:
        args = parse_args(["--lines", "4", "2", "--file", "a.c"])

        assert args.file == "a.c"
        assert args.lines == [4, 2]

    def test_repeated_lines_flags_accumulate(self) -> None:
        args = parse_args(["--file", "a.c", "--lines", "3", "--lines", "1", "3"])

        assert args.lines == [3, 1, 3]

    @pytest.mark.parametrize(
        ("argv", "message"),
        [
            (["--lines", "1"], "Must specify file path"),
            (["--file", "a.c"], "Must specify line number"),
            (["--file", "a.c", "--file", "b.c", "--lines", "1"], "more than once"),
            (["--file", "a.c", "--lines", "0"], "Invalid line number '0'"),
            (["--file", "a.c", "--lines", "abc"], "Invalid line number 'abc'"),
            (["--file", "a.c", "--lines", "1", "--bogus"], "unrecognized arguments"),
            (["--file", "a.c", "--lines"], "--lines"),
            (["--file"], "--file"),
            (["--fil", "a.c", "--lines", "1"], "unrecognized arguments"),
            (["--file", "a.c", "--li", "3"], "unrecognized arguments"),
            (["--file", "a.c", "--lines", "1", "--form", "json"], "unrecognized arguments"),
            (["--file", "", "--lines", "1"], "Must specify file path"),
        ],
    )
    def test_rejects_bad_arguments(self, argv: list[str], message: str) -> None:
        with pytest.raises(UsageError, match=message):
            parse_args(argv)

    def test_tree_without_lines_is_allowed(self) -> None:
        args = parse_args(["--file", "a.c", "--tree"])

        assert args.tree
        assert args.lines == []


class TestMain:
    """Tests for main function."""

    def test_prints_reports(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, "#if A\nx;\n#else\ny;\n#endif\n")

        status = main(["--file", str(path), "--lines", "4", "5"])

        assert status == EXIT_OK
        assert capsys.readouterr().out == (
            "Requirements for line 4 being included in the translation unit:\n"
            "REQUIRES FALSE (   1): #if A\n"
            "REQUIRES TRUE (   3):  #else\n"
            "\n"
            "Requirements for line 5 being included in the translation unit:\n"
            "REQUIRES FALSE (   1): #if A\n"
            "REQUIRES FALSE (   3): #else\n"
            "\n"
        )

    def test_json_output(self, platform_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        status = main(["--file", str(platform_file), "--lines", "11", "--format", "json"])

        assert status == EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert [entry["requirement"] for entry in payload[0]["entries"]] == ["false", "false", "true"]

    def test_tree_output(self, platform_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        status = main(["--file", str(platform_file), "--tree"])

        assert status == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("Conditionals:\n    [2-12]\n")
        assert "Requirements for line" not in out

    def test_help_returns_zero_without_reading_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        status = main(["--help", "--file", str(tmp_path / "missing.c")])

        assert status == EXIT_OK
        out = capsys.readouterr().out
        assert "--lines <value>... --file <path>" in out
        assert "Calculates and displays" in out

    def test_argument_error_prints_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        status = main(["--lines", "1"])

        assert status == EXIT_USAGE_ERROR
        err = capsys.readouterr().err
        assert "ERROR: Must specify file path" in err
        assert "usage:" in err

    def test_unreadable_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        missing = tmp_path / "missing.c"

        status = main(["--file", str(missing), "--lines", "1"])

        assert status == EXIT_USAGE_ERROR
        assert f'Failed to open file "{missing}"' in capsys.readouterr().err

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("#endif\n", "Encountered '#endif' with no matching conditional"),
            ("#else\n", "Encountered else outside of a conditional"),
            ("#if A\nx;\n", "Reached end of file with an active conditional block"),
        ],
    )
    def test_structural_errors(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str], text: str, message: str
    ) -> None:
        path = _write(tmp_path, text)

        status = main(["--file", str(path), "--lines", "1"])

        assert status == EXIT_DIRECTIVE_ERROR
        captured = capsys.readouterr()
        assert message in captured.err
        assert captured.out == ""

    def test_verbose_enables_debug_logging(self, platform_file: Path) -> None:
        status = main(["--file", str(platform_file), "--lines", "1", "-v"])

        assert status == EXIT_OK
        assert logging.getLogger().level == logging.DEBUG


class TestConfigureLogging:
    """Tests for configure_logging function."""

    @pytest.mark.parametrize(("level", "expected"), [("info", logging.INFO), (logging.ERROR, logging.ERROR)])
    def test_sets_root_level(self, level: str | int, expected: int) -> None:
        configure_logging(level)

        assert logging.getLogger().level == expected

    def test_unknown_name_falls_back_to_warning(self) -> None:
        configure_logging("chatty")

        assert logging.getLogger().level == logging.WARNING

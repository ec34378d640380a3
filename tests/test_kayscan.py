# =============================================================================
# test_kayscan.py - kayscan CLI Tests
# =============================================================================
# Tests for the kayscan command-line driver: output format, --strict exit
# codes and error reporting.
# =============================================================================

import pytest
from click.testing import CliRunner

from kay.cli.errors import ExitCode
from kay.cli.kayscan import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def program(tmp_path):
    """A small, well-formed KAY program."""
    path = tmp_path / "prog1.kay"
    path.write_text("main() {\n    x := 5; // set x\n}\n")
    return path


class TestKayscanCLI:
    """Tests for the kayscan CLI tool."""

    def test_cli_help(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Print the token stream" in result.output

    def test_cli_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_cli_prints_tokens(self, runner, program):
        result = runner.invoke(main, [str(program)])

        assert result.exit_code == ExitCode.SUCCESS
        assert result.output.splitlines() == [
            "Token 1 - Type: Keyword - Value: main",
            "Token 2 - Type: Separator - Value: (",
            "Token 3 - Type: Separator - Value: )",
            "Token 4 - Type: Separator - Value: {",
            "Token 5 - Type: Identifier - Value: x",
            "Token 6 - Type: Operator - Value: :=",
            "Token 7 - Type: Literal - Value: 5",
            "Token 8 - Type: Separator - Value: ;",
            "Token 9 - Type: Separator - Value: }",
        ]

    def test_cli_empty_file(self, runner, tmp_path):
        path = tmp_path / "empty.kay"
        path.write_text("")

        result = runner.invoke(main, [str(path)])

        assert result.exit_code == ExitCode.SUCCESS
        assert result.output == ""

    def test_cli_reports_other_tokens_without_failing(self, runner, tmp_path):
        path = tmp_path / "bad.kay"
        path.write_text("31 3a")

        result = runner.invoke(main, [str(path)])

        assert result.exit_code == ExitCode.SUCCESS
        assert "Token 2 - Type: Other - Value: 3a" in result.output

    def test_cli_strict_fails_on_other_tokens(self, runner, tmp_path):
        path = tmp_path / "bad.kay"
        path.write_text("x := 3a @;")

        result = runner.invoke(main, ["--strict", str(path)])

        assert result.exit_code == ExitCode.LEXICAL_ERROR
        assert "2 malformed lexeme(s)" in result.output

    def test_cli_strict_passes_clean_program(self, runner, program):
        result = runner.invoke(main, ["--strict", str(program)])

        assert result.exit_code == ExitCode.SUCCESS

    def test_cli_verbose_summary(self, runner, program):
        result = runner.invoke(main, ["-v", str(program)])

        assert result.exit_code == ExitCode.SUCCESS
        assert "Scanned 9 tokens (0 malformed)" in result.output

    def test_cli_encoding(self, runner, tmp_path):
        path = tmp_path / "latin.kay"
        path.write_bytes("café".encode("latin-1"))

        result = runner.invoke(main, ["--encoding", "latin-1", str(path)])

        assert result.exit_code == ExitCode.SUCCESS
        assert "Type: Identifier - Value: café" in result.output

    def test_cli_encoding_from_env(self, runner, tmp_path):
        path = tmp_path / "latin.kay"
        path.write_bytes("café".encode("latin-1"))

        result = runner.invoke(main, [str(path)], env={"KAY_ENCODING": "latin-1"})

        assert result.exit_code == ExitCode.SUCCESS
        assert "Value: café" in result.output

    def test_cli_unknown_encoding(self, runner, program):
        result = runner.invoke(main, ["--encoding", "no-such-codec", str(program)])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "cannot open source file" in result.output

    def test_cli_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "missing.kay")])

        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_cli_undecodable_byte_is_reported(self, runner, tmp_path):
        path = tmp_path / "bad.kay"
        path.write_bytes(b"x := 5; \xff")

        result = runner.invoke(main, ["--strict", str(path)])

        assert result.exit_code == ExitCode.LEXICAL_ERROR
        assert "Token 1 - Type: Identifier - Value: x" in result.output
        assert "Token 5 - Type: Other - Value: \ufffd" in result.output

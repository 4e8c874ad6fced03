"""
Tests for the bflong command-line tool
======================================

These tests drive the Click commands through CliRunner.
"""

import pytest
from click.testing import CliRunner

from bflong import __version__
from bflong.cli.bflong import main
from bflong.cli.errors import ExitCode


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "prog.bf"
    path.write_text("+++. add two +.+.\n")
    return path


# =============================================================================
# General Options
# =============================================================================

class TestGeneral:
    """Help and version output."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "compile" in result.output
        assert "replay" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# =============================================================================
# Compile Command
# =============================================================================

class TestCompileCommand:
    """Tests for `bflong compile`."""

    def test_default_output(self, runner, source_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(main, ["compile", str(source_file)])

        assert result.exit_code == ExitCode.SUCCESS
        assert (tmp_path / "dist" / "compiled.long").read_text() == "3+1+1+"
        assert "compiled.long" in result.output

    def test_output_dir_and_names(self, runner, source_file, tmp_path):
        out = tmp_path / "build"
        result = runner.invoke(main, [
            "compile", str(source_file), "-o", str(out), "-n", "one", "-n", "two",
        ])

        assert result.exit_code == 0
        assert (out / "one.long").read_text() == "3+1+1+"
        assert (out / "two.long").read_text() == "3+1+1+"

    def test_stdout(self, runner, source_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(main, ["compile", str(source_file), "--stdout"])

        assert result.exit_code == 0
        assert result.output.strip() == "3+1+1+"
        assert not (tmp_path / "dist").exists()

    def test_verbose(self, runner, source_file, tmp_path):
        result = runner.invoke(main, [
            "compile", str(source_file), "-o", str(tmp_path / "out"), "-v",
        ])

        assert result.exit_code == 0
        assert "Tokenized: 8 instructions" in result.output
        assert "Simulated: 3 outputs" in result.output

    def test_invalid_utf8_comment(self, runner, tmp_path):
        path = tmp_path / "latin1.bf"
        path.write_bytes(b"caf\xe9 +++.\n")

        result = runner.invoke(main, ["compile", str(path), "--stdout"])

        assert result.exit_code == ExitCode.SUCCESS
        assert result.output.strip() == "3+"

    def test_missing_input(self, runner, tmp_path):
        result = runner.invoke(main, ["compile", str(tmp_path / "missing.bf")])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_unwritable_output(self, runner, source_file, tmp_path):
        blocker = tmp_path / "dist"
        blocker.write_text("in the way")

        result = runner.invoke(main, [
            "compile", str(source_file), "-o", str(blocker / "nested"),
        ])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "cannot create output directory" in result.output
        assert "hint: Try deleting the dist directory" in result.output


# =============================================================================
# Replay Command
# =============================================================================

class TestReplayCommand:
    """Tests for `bflong replay`."""

    def test_values(self, runner, tmp_path):
        path = tmp_path / "prog.long"
        path.write_text("3+1+4-\n")

        result = runner.invoke(main, ["replay", str(path)])

        assert result.exit_code == 0
        assert result.output.split() == ["3", "4", "0"]

    def test_text(self, runner, tmp_path):
        path = tmp_path / "hi.long"
        path.write_text("72+33+")

        result = runner.invoke(main, ["replay", "--text", str(path)])

        assert result.exit_code == 0
        assert result.output == "Hi"

    def test_compile_then_replay(self, runner, source_file, tmp_path):
        out = tmp_path / "out"
        runner.invoke(main, ["compile", str(source_file), "-o", str(out)])

        result = runner.invoke(main, ["replay", str(out / "compiled.long")])

        assert result.output.split() == ["3", "4", "5"]

    def test_malformed(self, runner, tmp_path):
        path = tmp_path / "bad.long"
        path.write_text("3+x")

        result = runner.invoke(main, ["replay", str(path)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "unexpected character 'x'" in result.output

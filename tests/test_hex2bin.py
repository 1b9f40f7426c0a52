"""
hex2bin CLI Tests
=================

Tests for the hex2bin command-line tool, driven through click's CliRunner.
"""

import pytest
from click.testing import CliRunner

from hexbin.cli.errors import ExitCode
from hexbin.cli.hex2bin import main


EOF_LINE = ":00000001FF"
DATA_0102_LINE = ":020000000102FB"


@pytest.fixture
def runner(monkeypatch):
    for name in ("HEXBIN_TYPE_POLICY", "HEXBIN_OUTPUT_FORMAT",
                 "HEXBIN_ENCODING", "HEXBIN_EXTENSIONS"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


@pytest.fixture
def hex_file(tmp_path):
    path = tmp_path / "firmware.hex"
    path.write_text(f"{DATA_0102_LINE}\n{EOF_LINE}\n")
    return path


class TestHex2BinCLI:
    """Tests for the hex2bin CLI tool."""

    def test_cli_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Convert an Intel HEX file" in result.output

    def test_cli_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_default_output(self, runner, hex_file):
        """Without -o the image is written next to the input."""
        result = runner.invoke(main, [str(hex_file)])
        assert result.exit_code == 0
        assert hex_file.with_suffix(".bin").read_bytes() == b"\x01\x02"
        assert "2 bytes" in result.output

    def test_output_option(self, runner, hex_file, tmp_path):
        output = tmp_path / "image.bin"
        result = runner.invoke(main, [str(hex_file), "-o", str(output)])
        assert result.exit_code == 0
        assert output.read_bytes() == b"\x01\x02"

    def test_decimal_format(self, runner, hex_file, tmp_path):
        output = tmp_path / "image.txt"
        result = runner.invoke(main, [str(hex_file), "-o", str(output), "-f", "decimal"])
        assert result.exit_code == 0
        assert output.read_text() == "1\n2\n"

    def test_format_from_env(self, runner, hex_file, tmp_path, monkeypatch):
        monkeypatch.setenv("HEXBIN_OUTPUT_FORMAT", "decimal")
        output = tmp_path / "image.txt"
        result = runner.invoke(main, [str(hex_file), "-o", str(output)])
        assert result.exit_code == 0
        assert output.read_text() == "1\n2\n"

    def test_verbose(self, runner, hex_file, tmp_path):
        output = tmp_path / "image.bin"
        result = runner.invoke(main, [str(hex_file), "-o", str(output), "-v"])
        assert result.exit_code == 0
        assert "Image size: 2 bytes" in result.output

    def test_checksum_error(self, runner, tmp_path):
        path = tmp_path / "bad.hex"
        path.write_text(":020000000102FA\n:00000001FF\n")
        result = runner.invoke(main, [str(path), "-o", str(tmp_path / "bad.bin")])
        assert result.exit_code == ExitCode.CONVERSION_ERROR
        assert "checksum mismatch" in result.output
        assert not (tmp_path / "bad.bin").exists()

    def test_wrong_extension(self, runner, tmp_path):
        path = tmp_path / "firmware.txt"
        path.write_text(f"{EOF_LINE}\n")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.CONVERSION_ERROR
        assert "not a hex file" in result.output

    def test_undecodable_input(self, runner, tmp_path):
        path = tmp_path / "binary.hex"
        path.write_bytes(b":00000001FF\n\xff\xfe\n")
        result = runner.invoke(main, [str(path), "-o", str(tmp_path / "binary.bin")])
        assert result.exit_code == ExitCode.CONVERSION_ERROR
        assert "not utf-8 text" in result.output

    def test_missing_input(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "missing.hex")])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_strict_and_lenient(self, runner, tmp_path):
        """Undefined record types fail either way; only the stage differs."""
        path = tmp_path / "odd.hex"
        path.write_text(":00000006FA\n:00000001FF\n")
        for flag in ("--strict", "--lenient"):
            result = runner.invoke(main, [str(path), flag, "-o", str(tmp_path / "odd.bin")])
            assert result.exit_code == ExitCode.CONVERSION_ERROR
            assert "record type 0x06 not supported" in result.output

    def test_lenient_ignores_records_after_end(self, runner, tmp_path):
        path = tmp_path / "tail.hex"
        path.write_text(f"{DATA_0102_LINE}\n{EOF_LINE}\n:00000006FA\n")
        output = tmp_path / "tail.bin"

        result = runner.invoke(main, [str(path), "--lenient", "-o", str(output)])
        assert result.exit_code == 0
        assert output.read_bytes() == b"\x01\x02"

        result = runner.invoke(main, [str(path), "--strict", "-o", str(output)])
        assert result.exit_code == ExitCode.CONVERSION_ERROR

"""Tests for the chunk command-line interface."""

from __future__ import annotations

import zlib
from pathlib import Path

from click.testing import CliRunner

from pngchunk.cli import main

MESSAGE = "This is where your secret message will be!"
EXPECTED_HEX = (
    (42).to_bytes(4, "big") + b"RuSt" + MESSAGE.encode("ascii") + (2882656334).to_bytes(4, "big")
).hex()


def test_build_prints_hex() -> None:
    result = CliRunner().invoke(main, ["build", "RuSt", MESSAGE])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == EXPECTED_HEX


def test_build_rejects_invalid_type() -> None:
    result = CliRunner().invoke(main, ["build", "Ru1t", MESSAGE])
    assert result.exit_code == 1
    assert "invalid as a chunk type" in result.output


def test_build_rejects_wrong_length() -> None:
    result = CliRunner().invoke(main, ["build", "RuStX", MESSAGE])
    assert result.exit_code == 1
    assert "expected 4 bytes but got 5" in result.output


def test_build_writes_file_and_inspect_reads_it(tmp_path: Path) -> None:
    runner = CliRunner()
    target = tmp_path / "chunk.bin"
    result = runner.invoke(main, ["build", "ruSt", "hidden", "--output", str(target)])
    assert result.exit_code == 0, result.output
    assert target.read_bytes().hex() == CliRunner().invoke(main, ["build", "ruSt", "hidden"]).output.strip()

    result = runner.invoke(main, ["inspect", "--input", str(target)])
    assert result.exit_code == 0, result.output
    assert "ruSt" in result.output
    assert "ancillary" in result.output
    assert "private" in result.output
    assert "Data : hidden" in result.output


def test_inspect_hex() -> None:
    result = CliRunner().invoke(main, ["--log-level", "debug", "inspect", EXPECTED_HEX])
    assert result.exit_code == 0, result.output
    assert "RuSt" in result.output
    assert "critical" in result.output
    assert "2882656334" in result.output
    assert MESSAGE in result.output


def test_inspect_reports_trailing_bytes() -> None:
    result = CliRunner().invoke(main, ["inspect", EXPECTED_HEX + "00ff"])
    assert result.exit_code == 0, result.output
    assert "2 trailing bytes ignored" in result.output


def test_inspect_binary_payload_placeholder() -> None:
    blob = (2).to_bytes(4, "big") + b"RuSt" + b"\xff\xfe"
    blob += (zlib.crc32(b"RuSt\xff\xfe") & 0xFFFFFFFF).to_bytes(4, "big")
    result = CliRunner().invoke(main, ["inspect", blob.hex()])
    assert result.exit_code == 0, result.output
    assert "[data]" in result.output


def test_inspect_crc_mismatch() -> None:
    corrupted = EXPECTED_HEX[:-2] + "4f"
    result = CliRunner().invoke(main, ["inspect", corrupted])
    assert result.exit_code == 1
    assert "CRC mismatch" in result.output


def test_inspect_truncated() -> None:
    result = CliRunner().invoke(main, ["inspect", EXPECTED_HEX[:20]])
    assert result.exit_code == 1
    assert "truncated input" in result.output


def test_inspect_bad_hex() -> None:
    result = CliRunner().invoke(main, ["inspect", "zz"])
    assert result.exit_code == 2


def test_inspect_requires_input() -> None:
    result = CliRunner().invoke(main, ["inspect"])
    assert result.exit_code == 2


def test_build_rejects_unencodable_message() -> None:
    result = CliRunner().invoke(main, ["build", "RuSt", "a\udcff"])
    assert result.exit_code == 2
    assert "message is not valid UTF-8" in result.output

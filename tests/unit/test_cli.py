from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from title_parser.app.typer_cli import app

runner = CliRunner()


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_cues_command_renders_table(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("TITLE_PARSER_ENCODING", raising=False)
    input_path = _write(
        tmp_path, "sample.vtt", "WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nhello\n"
    )

    result = runner.invoke(app, ["cues", str(input_path)])

    assert result.exit_code == 0
    assert "00:00:01.000" in result.output
    assert "hello" in result.output


def test_cues_command_json_output(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("TITLE_PARSER_ENCODING", raising=False)
    input_path = _write(
        tmp_path, "sample.srt", "1\n00:00:01,000 --> 00:00:02,000\n- hi\n"
    )

    result = runner.invoke(app, ["cues", str(input_path), "--format", "json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["cues"][0]["text"] == "hi"
    assert payload["cues"][0]["end_ms"] == 2_000
    assert payload["failures"] == []


def test_cues_command_writes_output_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("TITLE_PARSER_ENCODING", raising=False)
    input_path = _write(tmp_path, "sample.srt", "00:00:01,000 --> 00:00:02,000\nhi\n")
    output_path = tmp_path / "out" / "cues.json"

    result = runner.invoke(
        app, ["cues", str(input_path), "--output-path", str(output_path)]
    )

    assert result.exit_code == 0
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["cues"][0]["start"] == "00:00:01,000"


def test_cues_command_reports_skipped_blocks(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("TITLE_PARSER_ENCODING", raising=False)
    input_path = _write(
        tmp_path,
        "sample.srt",
        "00:00:01,000 --> 00:00:02,000\nhi\n\nbroken block\n",
    )

    lenient = runner.invoke(app, ["cues", str(input_path)])
    strict = runner.invoke(app, ["cues", str(input_path), "--strict"])

    assert lenient.exit_code == 0
    assert "[skipped] block 1" in lenient.output
    assert strict.exit_code == 2


def test_cues_command_fails_without_cues(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("TITLE_PARSER_ENCODING", raising=False)
    input_path = _write(tmp_path, "empty.vtt", "WEBVTT\n")

    result = runner.invoke(app, ["cues", str(input_path)])

    assert result.exit_code == 2
    assert "No subtitle cues found" in result.output


def test_cues_command_rejects_missing_input(tmp_path: Path) -> None:
    result = runner.invoke(app, ["cues", str(tmp_path / "missing.srt")])
    assert result.exit_code == 2


def test_cues_command_rejects_unknown_format(tmp_path: Path) -> None:
    input_path = _write(tmp_path, "sample.srt", "00:00:01,000 --> 00:00:02,000\nhi\n")
    result = runner.invoke(app, ["cues", str(input_path), "--format", "xml"])
    assert result.exit_code == 2


def test_timecode_command() -> None:
    result = runner.invoke(app, ["timecode", "01:02:03.004"])

    assert result.exit_code == 0
    assert "- total seconds: 3723" in result.output
    assert "- milliseconds: 4" in result.output


def test_timecode_command_rejects_invalid_value() -> None:
    result = runner.invoke(app, ["timecode", "01:60:03.004"])
    assert result.exit_code == 2


def test_sanitize_command() -> None:
    result = runner.invoke(app, ["sanitize", "<i>Hi</i> there&nbsp;"])

    assert result.exit_code == 0
    assert result.output.strip() == "Hi there"


def test_cues_command_verbose_keeps_lenient_exit(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("TITLE_PARSER_ENCODING", raising=False)
    input_path = _write(
        tmp_path,
        "sample.srt",
        "00:00:01,000 --> 00:00:02,000\nhi\n\nbroken block\n",
    )

    result = runner.invoke(app, ["cues", str(input_path), "-v"])

    assert result.exit_code == 0
    assert "[skipped] block 1" in result.output

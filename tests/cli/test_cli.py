from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from tessera.cli import build_parser, main, run_cli


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TESSERA_CONFIG", raising=False)


def test_date_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["date", "YYYY-MM-DD hh:mm:ss A", "--at", "2024-03-05T14:05:09"]) == 0
    assert capsys.readouterr().out == "2024-03-05 02:05:09 PM\n"


def test_date_command_default_template(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["date", "--at", "2024-03-05T09:08:07"]) == 0
    assert capsys.readouterr().out == "2024-03-05 09:08:07\n"


def test_calendar_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["calendar", "--at", "2023-01-01"]) == 0
    out = capsys.readouterr().out
    assert "Weekday:     Sunday" in out
    assert "Month:       January" in out
    assert "ISO week:    52" in out
    assert "Quarter:     1" in out
    assert "Day of year: 1" in out


def test_invalid_timestamp_is_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["date", "--at", "yesterday"])
    assert excinfo.value.code == 2


def test_read_command_prints_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "data.json").write_text('{"b": [1, 2], "a": "x"}', encoding="utf-8")

    assert main(["read", "data.json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"b": [1, 2], "a": "x"}


def test_read_command_raw(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "notes.txt").write_text("plain text\n", encoding="utf-8")

    assert main(["read", "notes.txt", "--raw"]) == 0
    assert capsys.readouterr().out == "plain text\n"


def test_read_command_missing_file_exits() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["read", "missing.json"])
    assert excinfo.value.code == 1


def test_read_command_missing_file_no_exit(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["read", "missing.json", "--no-exit"]) == 1
    out = capsys.readouterr().out
    assert "File does not exist at missing.json." in out
    assert "No content read from missing.json (not_found)" in out


def test_run_cli_maps_failures_to_exit_codes() -> None:
    args = argparse.Namespace()

    def boom(_: argparse.Namespace) -> int:
        raise RuntimeError("boom")

    def interrupted(_: argparse.Namespace) -> int:
        raise KeyboardInterrupt

    assert run_cli(boom, args) == 1
    assert run_cli(interrupted, args) == 130
    assert run_cli(lambda _: 0, args) == 0

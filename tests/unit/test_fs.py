from __future__ import annotations

from pathlib import Path

import pytest

from tessera.base.fs import NotFoundError, exists, is_directory, is_file


def test_exists_returns_joined_path(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "file.txt"
    target.parent.mkdir()
    target.write_text("x", encoding="utf-8")

    assert exists(tmp_path, "nested", "file.txt") == target


def test_exists_relative_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "data.json").write_text("{}", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert exists("data.json") == Path("data.json")


def test_exists_falls_back_to_expanded_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / "settings.json").write_text("{}", encoding="utf-8")

    assert exists("~", "settings.json") == (tmp_path / "settings.json").resolve()


def test_exists_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        exists(tmp_path, "missing.txt")
    assert "missing.txt" in str(excinfo.value)
    assert isinstance(excinfo.value, FileNotFoundError)


def test_is_file_and_is_directory(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")

    assert is_file(tmp_path, "a.txt")
    assert not is_file(tmp_path)
    assert is_directory(tmp_path)
    assert not is_directory(tmp_path, "a.txt")
    assert not is_file(tmp_path, "nope")
    assert not is_directory(tmp_path, "nope")

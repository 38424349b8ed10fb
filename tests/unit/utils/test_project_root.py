from __future__ import annotations

from pathlib import Path

import pytest

from strata.core.exceptions import ProjectRootError
from strata.core.utils.paths import PROJECT_ROOT_ENV, find_marked_root, resolve_project_root


def test_explicit_root_wins_over_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    other = tmp_path / "other"
    other.mkdir()
    monkeypatch.setenv(PROJECT_ROOT_ENV, str(other))

    assert resolve_project_root(tmp_path) == tmp_path.resolve()


def test_env_root_is_used(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(PROJECT_ROOT_ENV, str(tmp_path))
    assert resolve_project_root() == tmp_path.resolve()


def test_env_root_must_exist(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(PROJECT_ROOT_ENV, str(tmp_path / "missing"))
    with pytest.raises(ProjectRootError):
        resolve_project_root()


def test_manifest_marks_root_from_nested_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "cdk.json").write_text("{}", encoding="utf-8")
    nested = tmp_path / "src" / "app"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert resolve_project_root() == tmp_path.resolve()


def test_find_marked_root_returns_none_without_markers(tmp_path: Path) -> None:
    assert find_marked_root(tmp_path, markers=("no-such-marker.json",)) is None

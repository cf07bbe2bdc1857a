"""Tests for config file walk-up discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from datespin.config.discovery import CONFIG_ENV_VAR, find_config, read_config_table


class TestFindConfig:
    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "datespin.toml").write_text("", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == (tmp_path / "datespin.toml").resolve()

    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_defaults_to_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "datespin.toml").write_text("", encoding="utf-8")
        assert find_config() == (tmp_path / "datespin.toml").resolve()

    def test_datespin_toml_wins_over_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.datespin]\n", encoding="utf-8")
        (tmp_path / "datespin.toml").write_text("", encoding="utf-8")
        assert find_config(tmp_path) == (tmp_path / "datespin.toml").resolve()

    def test_pyproject_without_table_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert find_config(tmp_path) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text("", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "datespin.toml").write_text("", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.toml"))
        assert find_config(tmp_path) is None


class TestReadConfigTable:
    def test_pyproject_returns_tool_table(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n[tool.datespin.spinner]\nunit = "d"\n')
        assert read_config_table(path) == {"spinner": {"unit": "d"}}

    def test_plain_file_returned_whole(self, tmp_path: Path) -> None:
        path = tmp_path / "datespin.toml"
        path.write_text("[plugins]\nenabled = false\n")
        assert read_config_table(path) == {"plugins": {"enabled": False}}

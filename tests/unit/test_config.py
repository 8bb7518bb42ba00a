"""Unit tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from localhub.config import (
    LocalHubConfig,
    RemoteDefaults,
    get_user_config_path,
    load_config,
)
from localhub.exceptions import ConfigError


@pytest.fixture
def user_config(isolated_home: Path) -> Path:
    path = isolated_home / ".config" / "localhub" / "config.yaml"
    path.parent.mkdir(parents=True)
    return path


class TestDefaults:
    def test_defaults(self, clean_env: None) -> None:
        config = load_config()

        assert config.hub_path is None
        assert config.remotes.hub_remote_name == "local-hub"
        assert config.remotes.push_remote_name == "origin"
        assert config.verbosity == "warning"

    def test_user_config_path(self, isolated_home: Path) -> None:
        assert get_user_config_path() == isolated_home / ".config" / "localhub" / "config.yaml"


class TestUserConfig:
    def test_loaded(self, clean_env: None, user_config: Path, tmp_path: Path) -> None:
        user_config.write_text(
            f"hub_path: {tmp_path / 'hub'}\n"
            "remotes:\n"
            "  hub_remote_name: backup\n"
        )

        config = load_config()

        assert config.hub_path == tmp_path / "hub"
        assert config.remotes.hub_remote_name == "backup"
        assert config.remotes.push_remote_name == "origin"

    def test_empty_file_uses_defaults(self, clean_env: None, user_config: Path) -> None:
        user_config.write_text("")
        assert load_config().verbosity == "warning"

    def test_invalid_yaml(self, clean_env: None, user_config: Path) -> None:
        user_config.write_text("hub_path: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config()

    def test_non_mapping(self, clean_env: None, user_config: Path) -> None:
        user_config.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_config()


class TestConfigFile:
    def test_overrides_user_config(
        self, clean_env: None, user_config: Path, tmp_path: Path
    ) -> None:
        user_config.write_text("verbosity: info\n")
        custom = tmp_path / "custom.yaml"
        custom.write_text("verbosity: debug\n")

        assert load_config(custom).verbosity == "debug"

    def test_missing_file(self, clean_env: None, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.yaml")

        assert exc_info.value.field == "config"
        assert "Config file not found" in exc_info.value.message


class TestEnvironment:
    def test_env_beats_files(
        self,
        clean_env: None,
        user_config: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        user_config.write_text("verbosity: info\n")
        custom = tmp_path / "custom.yaml"
        custom.write_text("verbosity: debug\n")
        monkeypatch.setenv("LOCALHUB_VERBOSITY", "error")

        assert load_config(custom).verbosity == "error"

    def test_nested_remote_name(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOCALHUB_REMOTES__PUSH_REMOTE_NAME", "upstream")
        assert load_config().remotes.push_remote_name == "upstream"

    def test_hub_path(
        self, clean_env: None, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOCALHUB_HUB_PATH", str(tmp_path))
        assert load_config().hub_path == tmp_path


class TestValidation:
    def test_bad_verbosity(self, clean_env: None, tmp_path: Path) -> None:
        custom = tmp_path / "custom.yaml"
        custom.write_text("verbosity: loud\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(custom)

        assert exc_info.value.field == "verbosity"
        assert exc_info.value.value == "loud"

    def test_blank_remote_name(self) -> None:
        with pytest.raises(ValueError, match="blank"):
            RemoteDefaults(hub_remote_name="  ")

    def test_direct_construction(self, clean_env: None, tmp_path: Path) -> None:
        config = LocalHubConfig(hub_path=tmp_path)
        assert config.hub_path == tmp_path


def test_user_config_skipped_without_home(
    clean_env: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    def no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(no_home))

    assert get_user_config_path() is None
    assert load_config().hub_path is None

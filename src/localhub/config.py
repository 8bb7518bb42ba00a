from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from localhub.exceptions import ConfigError
from localhub.logging import get_logger
from localhub.remote.manager import DEFAULT_HUB_REMOTE_NAME, DEFAULT_PUSH_REMOTE_NAME

__all__ = [
    "LocalHubConfig",
    "RemoteDefaults",
    "load_config",
    "get_user_config_path",
]

logger = get_logger(__name__)


class RemoteDefaults(BaseModel):
    """Default remote names used when ``--remote-name`` is omitted.

    Attributes:
        hub_remote_name: Remote created by ``add-remote``.
        push_remote_name: Remote extended by ``add-push-url``.
    """

    hub_remote_name: str = DEFAULT_HUB_REMOTE_NAME
    push_remote_name: str = DEFAULT_PUSH_REMOTE_NAME

    @field_validator("hub_remote_name", "push_remote_name")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("remote name cannot be blank")
        return v


def _read_yaml(yaml_file: Path) -> dict[str, Any]:
    try:
        with open(yaml_file) as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            message=f"Invalid YAML in {yaml_file}: {e}",
            field=None,
            value=None,
        ) from e
    except OSError as e:
        raise ConfigError(message=f"Cannot read config file {yaml_file}: {e}") from e

    if loaded is None:
        logger.warning(f"Config file {yaml_file} is empty, using defaults.")
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(
            message=f"Config file {yaml_file} must contain a mapping",
            value=type(loaded).__name__,
        )
    return loaded


class YamlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from YAML files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            self._config_data = _read_yaml(yaml_file)

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get value for a specific field from the YAML config."""
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the complete config data."""
        return self._config_data


class LocalHubConfig(BaseSettings):
    """Root configuration object containing all localhub settings.

    Attributes:
        hub_path: Hub root directory. None means ``~/.local-git-hub``.
        remotes: Default remote names.
        verbosity: Log level used when neither ``-v`` nor ``-q`` is given.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOCALHUB_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    hub_path: Path | None = None
    remotes: RemoteDefaults = Field(default_factory=RemoteDefaults)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Environment variables (LOCALHUB_*)
        2. Init settings (the file passed with ``--config``)
        3. User YAML config (~/.config/localhub/config.yaml)
        4. Field defaults
        """
        return (
            env_settings,
            init_settings,
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


def get_user_config_path() -> Path | None:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/localhub/config.yaml, or None when the home
        directory cannot be determined.
    """
    try:
        home = Path.home()
    except (KeyError, RuntimeError):
        logger.debug("user_config_skipped", reason="home directory unavailable")
        return None
    return home / ".config" / "localhub" / "config.yaml"


def load_config(config_path: Path | None = None) -> LocalHubConfig:
    """Load configuration with hierarchy: defaults -> user -> file -> env.

    Args:
        config_path: Optional config file given on the command line. It must
            exist when given.

    Returns:
        LocalHubConfig instance with merged configuration

    Raises:
        ConfigError: If the file is missing or the configuration is invalid
    """
    overrides: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(
                message=f"Config file not found: {config_path}",
                field="config",
                value=str(config_path),
            )
        overrides = _read_yaml(config_path)

    try:
        return LocalHubConfig(**overrides)
    except ValidationError as e:
        # Extract first error for ConfigError
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e

"""Unified settings: CLI flags, env vars, and ``postrail.toml`` in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``POSTRAIL_*`` prefix, ``__`` for nested sections
  3. TOML file    — the ``config_path`` the settings were built with
  4. Code defaults — baked into the section models

:meth:`PostrailSettings.from_cli` decides which TOML file that is:
``--config``, else ``$POSTRAIL_CONFIG``, else the nearest ``postrail.toml``
walking up from the project root (or the working directory).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from postrail.config.models import DatabaseConfig, ServerConfig

CONFIG_FILENAME = "postrail.toml"
CONFIG_ENV_VAR = "POSTRAIL_CONFIG"


def discover_config(start: Path | None = None) -> Path | None:
    """Locate the project's ``postrail.toml``, or None.

    ``$POSTRAIL_CONFIG`` wins when it names an existing file; when it names
    a missing one, no config is used at all. Otherwise the search walks up
    from *start* (default: cwd) the way git looks for ``.git/``.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    start_dir = (start or Path.cwd()).resolve()
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings from one TOML file; an absent path contributes nothing."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = _read_toml(toml_path) if toml_path and toml_path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class PostrailSettings(BaseSettings):
    """Unified settings for the CLI and the HTTP app.

    Attributes:
        project_root: Directory relative database paths resolve against
            (parent of ``postrail.toml``, or CWD if no config found).
        config_path: The TOML file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "POSTRAIL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @property
    def database_path(self) -> Path:
        """Absolute path of the SQLite database file."""
        path = self.database.path
        return path if path.is_absolute() else self.project_root / path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # The TOML file is whatever config_path the caller passed in.
        init_kwargs = getattr(init_settings, "init_kwargs", {})
        toml_path = init_kwargs.get("config_path")
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, Path(toml_path) if toml_path else None),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        database_path: str | None = None,
        **cli_flags: Any,
    ) -> PostrailSettings:
        """Construct settings the way the ``postrail`` command does.

        An explicit *config_path* that does not exist means no TOML file.
        *project_root* defaults to the config file's directory, else CWD.
        """
        if config_path:
            toml_path = Path(config_path) if Path(config_path).is_file() else None
        else:
            toml_path = discover_config(project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        if database_path is not None:
            cli_flags["database"] = DatabaseConfig(path=Path(database_path))

        return cls(project_root=project_root, config_path=toml_path, **cli_flags)

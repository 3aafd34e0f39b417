"""TrainSettings — CLI flags, environment, and ``trainctl.toml`` merged.

Highest priority first:

1. keyword arguments (the CLI flags Click parsed)
2. ``TRAINCTL_*`` environment variables, ``__`` between nested names
   (``TRAINCTL_STORAGE__BACKEND=memory``)
3. the TOML file found by :func:`~trainctl.config.discovery.find_config`
4. defaults on the section models
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from trainctl.config.discovery import find_config, read_toml
from trainctl.config.models import LifecycleConfig, StorageConfig

# The TOML file for the settings object currently being built by from_cli.
_toml_in_use: ContextVar[Path | None] = ContextVar("trainctl_toml_in_use", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one parsed TOML document."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = read_toml(toml_path) if toml_path and toml_path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


class TrainSettings(BaseSettings):
    """Everything a trainctl invocation needs to know about its environment.

    ``project_root`` anchors relative paths such as ``storage.data_dir``:
    the directory holding the config file, or the working directory when
    there is none.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TRAINCTL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    storage: StorageConfig = Field(default_factory=StorageConfig)
    lifecycle: LifecycleConfig = Field(default_factory=LifecycleConfig)

    @property
    def data_dir(self) -> Path:
        """Directory holding the SQLite database."""
        path = Path(self.storage.data_dir)
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
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _toml_in_use.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> TrainSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist is ignored rather
        than treated as an error, matching an absent ``trainctl.toml``.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        token = _toml_in_use.set(toml_path)
        try:
            return cls(project_root=project_root, config_path=toml_path, **cli_flags)
        finally:
            _toml_in_use.reset(token)

"""GunghapSettings: CLI flags, ``GUNGHAP_*`` env vars and ``gunghap.toml``.

Priority, highest first: CLI flags, env vars, the TOML file, then the
defaults baked into the section models. Nested env vars use ``__``,
e.g. ``GUNGHAP_VALIDATION__MAX_NAME_LENGTH=5``.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, InitSettingsSource, PydanticBaseSettingsSource

from gunghap.config.discovery import find_config
from gunghap.config.models import DisplayConfig, ValidationConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings read from one TOML file; empty when *toml_path* is None."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None:
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


def _describe(exc: ValidationError) -> str:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'settings'}: {err['msg']}"
        for err in exc.errors()
    )
    return f"Invalid configuration: {problems}"


class GunghapSettings(BaseSettings):
    """Frozen settings for one CLI invocation.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GUNGHAP_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read the TOML file named by the ``config_path`` init argument."""
        toml_path = None
        if isinstance(init_settings, InitSettingsSource):
            toml_path = init_settings.init_kwargs.get("config_path")
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
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> GunghapSettings:
        """Build settings for a CLI run.

        Uses *config_path* when given, otherwise discovers ``gunghap.toml``
        from *start_dir*. Out-of-range values from any source are reported
        as a :class:`click.ClickException`.
        """
        toml_path = find_config(start_dir, explicit=config_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            raise click.ClickException(_describe(exc)) from exc

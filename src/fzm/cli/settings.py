"""Runtime settings read from the process environment.

Settings are read once at startup and passed down explicitly; nothing
re-reads the environment per write.

Variables
---------
``NO_COLOR``
    Present and non-empty (any value) suppresses colour under the
    ``auto`` policy.
``FZM_COLOR``
    ``always``, ``never`` or ``auto`` (default).
``FZM_LOG_LEVEL``
    Standard logging level name; defaults to ``WARNING``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, EnvSettingsSource, SettingsConfigDict

from fzm.exceptions import ConfigurationError
from fzm.infra.colour_stream import UseColour

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_LOG_LEVEL: LogLevel = "WARNING"

_HINTS: dict[str, str] = {
    "color": "Use one of: " + ", ".join(policy.value for policy in UseColour),
    "log_level": "Use one of: DEBUG, INFO, WARNING, ERROR, CRITICAL",
}


class _MappingEnvSource(EnvSettingsSource):
    """Environment source reading an explicit mapping instead of ``os.environ``."""

    def __init__(self, settings_cls: type[BaseSettings], environ: Mapping[str, str]) -> None:
        super().__init__(settings_cls)
        self.env_vars = {key.lower(): value for key, value in environ.items()}


class Settings(BaseSettings):
    """Immutable snapshot of the environment-driven configuration."""

    model_config = SettingsConfigDict(env_prefix="FZM_", frozen=True, extra="ignore")

    color: UseColour = UseColour.AUTO
    log_level: LogLevel = DEFAULT_LOG_LEVEL
    no_color: bool = Field(default=False, validation_alias="NO_COLOR")

    @field_validator("color", mode="before")
    @classmethod
    def parse_color(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower() or UseColour.AUTO
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper() or DEFAULT_LOG_LEVEL
        return v

    @field_validator("no_color", mode="before")
    @classmethod
    def parse_no_color(cls, v: object) -> object:
        # Any non-empty value counts, "0" and "false" included.
        if isinstance(v, str):
            return v != ""
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (``os.environ`` by default).

        Raises
        ------
        ConfigurationError
            When ``FZM_COLOR`` or ``FZM_LOG_LEVEL`` holds an unknown value.
        """
        try:
            if environ is None:
                return cls()
            return cls.model_validate(_MappingEnvSource(cls, environ)())
        except ValidationError as exc:
            field = str(exc.errors()[0]["loc"][0])
            raise ConfigurationError(
                f"Invalid FZM_{field.upper()} value: {exc.errors()[0].get('input')!r}",
                hint=_HINTS.get(field),
            ) from exc

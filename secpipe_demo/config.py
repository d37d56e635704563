"""Application configuration

Settings are read from the environment once and frozen. The only variable
the deployment contract names is PORT; everything else is optional and
carries the SECPIPE_ prefix.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from secpipe_demo.exceptions import ConfigurationError

# Project-specific prefix
_ENV_PREFIX = "SECPIPE_"

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


class ServerSettings(BaseSettings):
    """Listening address of the HTTP service."""

    model_config = SettingsConfigDict(
        env_prefix=_ENV_PREFIX,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    host: str = Field(default=DEFAULT_HOST, description="Interface to bind")
    port: int = Field(
        default=DEFAULT_PORT,
        ge=0,
        le=65535,
        validation_alias="PORT",
        description="Port to bind, from the unprefixed PORT variable",
    )

    @field_validator("port", mode="before")
    @classmethod
    def _empty_port_is_default(cls, value: Any) -> Any:
        if value is None or value == "":
            return DEFAULT_PORT
        return value


class ReflectSettings(BaseSettings):
    """Behaviour of the /reflect route."""

    model_config = SettingsConfigDict(
        env_prefix=f"{_ENV_PREFIX}REFLECT_",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    # Off by default: the route is a target for dynamic scanners
    escape_html: bool = Field(default=False, description="HTML-escape the reflected message")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    server: ServerSettings = Field(default_factory=ServerSettings)
    reflect: ReflectSettings = Field(default_factory=ReflectSettings)


def _configuration_error(error: PydanticValidationError) -> ConfigurationError:
    return ConfigurationError(
        f"Invalid configuration: {len(error.errors())} error(s)",
        details={
            "errors": [
                {"field": ".".join(str(loc) for loc in err["loc"]), "message": err["msg"]}
                for err in error.errors()
            ]
        },
    )


def resolve_port() -> int:
    """Port from PORT, falling back to 3000 when it is absent or empty.

    Raises:
        ConfigurationError: If PORT is set but not a valid port number
    """
    try:
        return ServerSettings().port
    except PydanticValidationError as e:
        raise _configuration_error(e) from e


def load_settings() -> Settings:
    """Build Settings from the process environment.

    Raises:
        ConfigurationError: If any variable holds an unusable value
    """
    try:
        return Settings(server=ServerSettings(), reflect=ReflectSettings())
    except PydanticValidationError as e:
        raise _configuration_error(e) from e


_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    """Get or create the process-wide Settings instance."""
    global _settings
    if _settings is None or reload:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None


__all__ = [
    "DEFAULT_PORT",
    "DEFAULT_HOST",
    "Settings",
    "ServerSettings",
    "ReflectSettings",
    "resolve_port",
    "load_settings",
    "get_settings",
    "reset_settings",
]

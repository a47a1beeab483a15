from __future__ import annotations

from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


class SnipKeepConfig(BaseSettings):
    """
    Main snipkeep configuration based on Pydantic Settings.

    - Reads environment variables and `.env` automatically.
    - Performs type conversion and clear validation.
    """

    # Search UI
    HIGHLIGHT_COLOR: str = Field(
        default="#3f3f3f",
        description="Background color of the highlighted line in the search window",
    )
    HIGHLIGHT_THEME: str = Field(
        default="monokai", description="Pygments style used to highlight code"
    )

    # Logging
    LOG_LEVEL: str = Field(default="WARNING", description="Minimal log level")
    LOG_FORMAT: str = Field(
        default="console", description="structlog renderer: console | json"
    )

    # Storage
    MONGODB_URL: Optional[str] = Field(
        default=None,
        description="MongoDB connection string; in-memory store when unset",
    )
    DATABASE_NAME: str = Field(default="snipkeep", description="MongoDB database name")
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = Field(
        default=3_000,
        ge=100,
        le=600_000,
        description="MongoDB server selection timeout in ms (serverSelectionTimeoutMS)",
    )

    # Clipboard
    CLIPBOARD_COMMAND: str = Field(
        default="",
        description='Explicit clipboard command line, e.g. "xclip -selection clipboard"; autodetected when empty',
    )
    CLIPBOARD_TIMEOUT: float = Field(
        default=5.0, gt=0, le=60, description="Clipboard command timeout in seconds"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_FORMAT")
    @classmethod
    def _validate_log_format(cls, v: str) -> str:
        value = (v or "").strip().lower()
        if value not in {"console", "json"}:
            raise ValueError("LOG_FORMAT must be 'console' or 'json'")
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Chain .env files: .env.local first, then .env, on top of environment variables."""
        return (
            init_settings,
            env_settings,
            DotEnvSettingsSource(settings_cls, env_file=".env.local", case_sensitive=True),
            DotEnvSettingsSource(settings_cls, env_file=".env", case_sensitive=True),
            file_secret_settings,
        )

    @field_validator("MONGODB_URL")
    @classmethod
    def _validate_mongodb_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(
                "MONGODB_URL must start with mongodb:// or mongodb+srv://"
            )
        return v


def load_config(**overrides) -> SnipKeepConfig:
    """
    Load the configuration and return a SnipKeepConfig instance.

    Validation errors are raised as ValueError.
    """
    try:
        return SnipKeepConfig(**overrides)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc

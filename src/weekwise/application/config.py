from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from weekwise.domain.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    REFRESH_INTERVAL_SECONDS,
    STORAGE_KEY,
)


def config_file_candidates() -> list[Path]:
    return [
        Path.home() / ".config/weekwise/config.toml",
        Path.home() / ".weekwise.toml",
    ]


class AppConfig(BaseSettings):
    """
    Configuration model for weekwise.
    Supports loading from:
    1. Config file (~/.config/weekwise/config.toml or ~/.weekwise.toml)
    2. Environment variables (WEEKWISE_*)
    3. Manual overrides (CLI)
    """

    model_config = SettingsConfigDict(
        env_prefix="WEEKWISE_",
        extra="ignore",
    )

    # Storage
    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".local/share/weekwise", validate_default=True
    )
    storage_key: str = Field(default=STORAGE_KEY, pattern=r"^[A-Za-z0-9_-][A-Za-z0-9_.-]*$")
    backend: Literal["file", "memory"] = "file"

    # Presentation
    refresh_interval_seconds: int = Field(default=REFRESH_INTERVAL_SECONDS, ge=1)
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    verbose: int = 1

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        from pydantic_settings import TomlConfigSettingsSource

        # First source wins, so CLI overrides beat env, env beats the file.
        toml_file = next((f for f in config_file_candidates() if f.exists()), None)

        if toml_file:
            return (
                init_settings,
                env_settings,
                TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            )
        return (
            init_settings,
            env_settings,
        )

    @field_validator("data_dir", mode="before")
    @classmethod
    def resolve_data_dir(cls, v: Any) -> Path:
        return Path(v).expanduser().resolve()


def resolve_config(cli_overrides: dict[str, Any] | None = None) -> AppConfig:
    """
    Multi-layered configuration resolution.
    1. Defaults in AppConfig
    2. ~/.config/weekwise/config.toml (if exists)
    3. Environment variables (WEEKWISE_*)
    4. cli_overrides (passed from Typer)
    """
    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    return AppConfig(**overrides)

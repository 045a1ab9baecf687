"""Typed runtime settings for the status boundary."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "rpc-status" / "rpc-status.yaml"
DEFAULT_MAX_UNWRAP_DEPTH = 100


class LoggingSettings(BaseModel):
    """Stdout logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "rpc-status"
    environment: str = "dev"


class ConverterSettings(BaseModel):
    """Status converter tuning."""

    max_unwrap_depth: int = Field(default=DEFAULT_MAX_UNWRAP_DEPTH, gt=0)


class StatusSettings(BaseSettings):
    """Root settings resolved from init, env, then YAML sources."""

    model_config = SettingsConfigDict(
        env_prefix="RPC_STATUS_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
        yaml_file=DEFAULT_CONFIG_PATH,
        yaml_file_encoding="utf-8",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    status: ConverterSettings = Field(default_factory=ConverterSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )

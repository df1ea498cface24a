"""Configuration using pydantic-settings for typed environment loading."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from monerokit.models import LogLevel, NetworkType


class MonerokitConfig(BaseSettings):
    """Wallet manager configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MONEROKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    network_type: NetworkType = NetworkType.MAINNET
    # "package.module:factory" returning a WalletEngine
    engine: str | None = None
    # Node descriptor, see monerokit.nodes
    daemon: str | None = None
    log_level: str = "INFO"
    log_file: Path | None = None
    engine_log_level: LogLevel = LogLevel.WARN

    @field_validator("network_type", mode="before")
    @classmethod
    def _lower_network(cls, value: object) -> object:
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator("engine_log_level", mode="before")
    @classmethod
    def _parse_engine_level(cls, value: object) -> object:
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return int(text)
            try:
                return LogLevel[text.upper()]
            except KeyError as e:
                raise ValueError(f"Unknown engine log level: {value}") from e
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


class Settings:
    """Root settings aggregating all configuration sections."""

    def __init__(self) -> None:
        self.monerokit = MonerokitConfig()


# Global settings instance - lazily loaded
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access reloads them."""
    global _settings
    _settings = None

"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGERBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Ledgerboard"
    app_version: str = "0.1.0"

    # Server bind address for the ``ledgerboard`` command
    host: str = "127.0.0.1"
    port: int = 8001

    log_level: str = "INFO"
    # Optional file that receives a copy of the log
    log_file: Optional[Path] = None

    # Timezone used for "now" and for localizing naive timestamps
    timezone: str = "UTC"
    currency: str = "USD"

    # Optional JSON snapshot file; in-memory only when unset
    data_file: Optional[Path] = None

    # Reporting
    balance_sample_days: int = 15
    recent_transactions_limit: int = 5

    def get_data_file(self) -> Optional[Path]:
        """Get the snapshot file path, creating its directory if needed."""
        if self.data_file is None:
            return None
        self.data_file.parent.mkdir(parents=True, exist_ok=True)
        return self.data_file


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None

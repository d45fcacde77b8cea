"""Application settings and configuration."""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory (relative to the working directory)."""
    return Path("var") / "data"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Stock Portfolio Dashboard"
    app_version: str = "0.1.0"

    # Data directory (portfolio file and SQLite cache live here)
    data_dir: Optional[Path] = None

    # Holdings source (derived from data_dir if not set explicitly)
    portfolio_path: Optional[Path] = None

    # Quote provider
    quote_provider: Literal["alpha_vantage", "stub"] = "alpha_vantage"
    alpha_vantage_key: str = "demo"
    alpha_vantage_url: str = "https://www.alphavantage.co/query"
    request_timeout_seconds: float = 10.0

    # Quote fetching and caching (free tier allows 5 requests per minute)
    quote_cache_backend: Literal["memory", "sqlite"] = "memory"
    database_url: Optional[str] = None
    quote_cache_ttl_seconds: int = 300
    quote_batch_size: int = 5
    quote_batch_delay_seconds: float = 2.0

    # Dashboard HTTP Basic credentials
    dashboard_username: str = "admin"
    dashboard_password: str = "admin123"

    log_level: str = "INFO"

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_portfolio_path(self) -> Path:
        """Get the holdings file path, deriving from data_dir if not set."""
        if self.portfolio_path:
            return self.portfolio_path
        return self.get_data_dir() / "portfolio.json"

    def get_database_url(self) -> str:
        """Get database URL for the SQLite quote cache."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "quote_cache.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Replace the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload from the environment."""
    global _settings
    _settings = None

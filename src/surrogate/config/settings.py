"""Application settings and configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Surrogate Remote Subject"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Remote adapter
    remote_host: str = "127.0.0.1"
    remote_port: int = 3030
    remote_timeout_seconds: float = 5.0
    startup_timeout_seconds: float = 5.0

    # Overrides the OS login name used by protection proxies
    caller_identity: Optional[str] = None

    # Timestamping writers (strftime pattern; ISO-8601 when unset)
    timestamp_format: Optional[str] = None
    frozen_time: Optional[str] = None

    # Account served by the entrypoint
    starting_balance: int = 100

    def get_remote_uri(self) -> str:
        """Get the endpoint URI of the configured remote server."""
        return f"http://{self.remote_host}:{self.remote_port}"


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

"""
Configuration management for the Space Trips backend
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SPACETRIPS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./spacetrips.sqlite"
    database_pool_size: int = 10
    database_max_overflow: int = 20
    sql_echo: bool = False

    # Launch provider (SpaceX REST API)
    launch_api_url: str = "https://api.spacexdata.com/v2/"
    launch_api_timeout: float = 10.0

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"


# Global settings instance
settings = Settings()

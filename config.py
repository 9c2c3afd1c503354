"""Configuration settings for the trigex.moe portfolio site."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Site
    site_name: str = "trigex.moe"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Bundled directories (None means the copies shipped with the package)
    static_dir: Optional[Path] = None
    templates_dir: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TRIGEX_",
        extra="ignore",
    )


settings = Settings()

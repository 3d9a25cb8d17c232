"""Application configuration."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings from env."""

    # Interactive search probes with HEAD, batch downloads with GET
    search_timeout_seconds: float = 3.0
    download_timeout_seconds: float = 5.0
    search_user_agent: str = "LogoDownloader/2.0"
    download_user_agent: str = "LogoDownloader/1.0"

    max_logos: int = 8  # interactive cap
    download_count: int = 5  # batch cap
    output_dir: str = "./logos"

    max_workers: int = 10
    debounce_seconds: float = 0.5

    # Optional JSON file replacing the built-in source registry
    source_catalog_path: str = ""

    class Config:
        env_file = ".env"
        extra = "ignore"

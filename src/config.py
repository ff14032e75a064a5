"""Configuration settings for the todo service."""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    cors_origins: list = ["*"]

    # Single-page UI served for everything outside the API routes
    static_dir: str = "static"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str = ""  # Empty means log to the console only

    class Config:
        env_prefix = "TODO_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

"""
Configuration management for CV Chat.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # LLM
    deepseek_api_key: str = ""
    llm_model: str = "deepseek-chat"
    llm_base_url: str = ""  # OpenAI-compatible endpoint, empty = provider default
    llm_temperature: float = 0.7
    llm_max_tokens: int = 500
    llm_timeout: float = 30.0

    # Database (empty = in-memory SQLite)
    database_url: str = ""
    default_profile_id: str = "default-profile"

    # API
    cors_origins: str = "http://localhost:5173"
    chat_rate_limit: str = "10/minute"
    parse_rate_limit: str = "5/minute"
    max_upload_size: int = 5 * 1024 * 1024  # 5 MB

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()

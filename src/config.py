"""Configuration settings for ChronoPeek."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False
    
    # Preview
    default_run_count: int = 5
    max_run_count: int = 50
    search_limit_minutes: int = 2 * 366 * 24 * 60  # about two years
    
    # Logging
    log_level: str = "INFO"
    log_file: str = ""  # Empty disables file logging
    
    class Config:
        env_prefix = "CHRONOPEEK_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

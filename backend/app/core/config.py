from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    log_level: str = "INFO"
    max_document_chars: int = 200_000
    parse_debounce_ms: int = 150
    image_extensions: List[str] = ["jpg", "jpeg", "png", "gif"]
    cors_origins: List[str] = ["*"]

    model_config = {
        "env_file": ".env",
        "env_prefix": "COOK_",
        "extra": "ignore",
    }

@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()

"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Validator settings loaded from VOICECHECK_* environment variables."""

    # Logging
    LOG_LEVEL: str = "warning"
    LOG_JSON: bool = False

    # Detail line truncation
    DESCRIPTION_MAX_LENGTH: int = 60
    DESCRIPTION_SHORT_LENGTH: int = 50

    # Tools every agent should carry
    RECOMMENDED_TOOLS: list[str] = ["end_call", "language_detection"]

    # Reporter
    DEBUG_GUIDE: str = "ELEVENLABS_AGENT_DEBUG.md"
    COLOR: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = {"env_prefix": "VOICECHECK_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Configuration management and environment variable loading."""

import os
from pathlib import Path
from dotenv import load_dotenv

from yt2clips.errors import ConfigurationError

# Load environment variables from .env file (don't override existing env vars)
load_dotenv(override=False)


class Config:
    """Application configuration."""

    # Simple class attributes - read from environment
    DEEPSEEK_API_KEY: str = os.getenv("DEEPSEEK_API_KEY", "")
    LLM_BASE_URL: str = os.getenv("LLM_BASE_URL", "https://api.deepseek.com/v1")
    LLM_MODEL: str = os.getenv("LLM_MODEL", "deepseek-coder")
    LLM_TIMEOUT: float = float(os.getenv("LLM_TIMEOUT", "300"))
    DEFAULT_CLIP_COUNT: int = int(os.getenv("DEFAULT_CLIP_COUNT", "5"))
    OUT_DIR: Path = Path(os.getenv("OUT_DIR", "./out")).resolve()

    @classmethod
    def validate(cls) -> None:
        """Validate that required configuration is present."""
        if not cls.DEEPSEEK_API_KEY:
            raise ConfigurationError(
                "DEEPSEEK_API_KEY is required. Please set it in your .env file or environment variables."
            )

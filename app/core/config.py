from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Denylist for custom answers. Matched against the lowercased text.
DEFAULT_SAFETY_PATTERNS = [
    r"run (them|the students|the kids|my class|students|kids) over",
    r"run.*over.*(student|students|kid|kids|class)",
    r"kill",
    r"murder",
    r"shoot",
    r"stab",
    r"burn",
    r"set.*on fire",
    r"light.*on fire",
    r"hit",
    r"punch",
    r"beat up",
    r"hurt.*(student|students|kid|kids|child|children)",
]


class Settings(BaseSettings): # load all key=value pairs from .env
    """ Process wide configuration, built once at startup"""
    OPENAI_API_KEY: str
    TEXT_MODEL: str = "gpt-4.1-mini"
    IMAGE_MODEL: str = "gpt-image-1"
    IMAGE_SIZE: str = "1536x1024"
    IMAGES_ENABLED: bool = True

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "app_errors.log" # empty string disables the error file

    SAFETY_PATTERNS: List[str] = DEFAULT_SAFETY_PATTERNS

    model_config = SettingsConfigDict(
        env_file = BASE_DIR/".env",
        env_file_encoding = "utf-8",
        extra = "ignore",
        frozen = True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()

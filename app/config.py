# app/config.py
import os
from dataclasses import dataclass
from typing import List

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash-preview-09-2025"

def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}

def _env_csv(name: str, default: str = "*") -> List[str]:
    raw = os.getenv(name, default)
    return [x.strip() for x in raw.split(",") if x.strip()]

@dataclass(frozen=True)
class Config:
    # Gemini
    gemini_api_key: str
    gemini_model: str
    # API / CORS
    allowed_origins: List[str]
    # Logging
    log_level: str
    # Validate model output against StoryResult before returning it
    strict_story_schema: bool

def load_config() -> Config:
    return Config(
        gemini_api_key = os.getenv("GEMINI_API_KEY", ""),
        gemini_model = os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        allowed_origins = _env_csv("ALLOWED_ORIGINS", "*"),
        log_level = os.getenv("LOG_LEVEL", "INFO"),
        strict_story_schema = _env_bool("STRICT_STORY_SCHEMA", False),
    )

# Load once
config = load_config()

import logging
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env from project root
load_dotenv()

GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_DEFAULT_MODEL = "gemini-1.5-flash"
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_ALLOWED_ORIGINS = "http://localhost:3000,http://localhost:3001"
DEFAULT_TIMEOUT_SECONDS = 30.0

# Sampling parameters sent with every completion request (Gemini naming).
GENERATION_CONFIG = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.9,
    "maxOutputTokens": 300,
}


@dataclass(frozen=True)
class Settings:
    llm_provider: str = "gemini"
    gemini_api_key: str = ""
    gemini_base_url: str = GEMINI_DEFAULT_BASE_URL
    gemini_model: str = GEMINI_DEFAULT_MODEL
    openai_api_key: str = ""
    openai_model: str = OPENAI_DEFAULT_MODEL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    allowed_origins: List[str] = field(default_factory=lambda: DEFAULT_ALLOWED_ORIGINS.split(","))
    environment: str = "development"
    log_level: str = "INFO"

    @property
    def api_key(self) -> str:
        """Credential for the configured provider (empty when unset)."""
        if self.llm_provider == "openai":
            return self.openai_api_key
        return self.gemini_api_key


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def _timeout_seconds(value: str) -> float:
    try:
        timeout = float(value)
    except ValueError:
        timeout = 0.0
    if timeout <= 0:
        logger.warning("Invalid LLM_TIMEOUT_SECONDS %r, using %s", value, DEFAULT_TIMEOUT_SECONDS)
        return DEFAULT_TIMEOUT_SECONDS
    return timeout


def get_settings() -> Settings:
    """
    Read settings from the environment.
    Called per request rather than cached so a changed environment (or a test's
    monkeypatch) takes effect without restarting the app.
    """
    return Settings(
        llm_provider=os.getenv("LLM_PROVIDER", "gemini").strip().lower(),
        gemini_api_key=os.getenv("GEMINI_API_KEY", "").strip(),
        gemini_base_url=os.getenv("GEMINI_API_BASE_URL", GEMINI_DEFAULT_BASE_URL).rstrip("/"),
        gemini_model=os.getenv("GEMINI_MODEL", GEMINI_DEFAULT_MODEL),
        openai_api_key=os.getenv("OPENAI_API_KEY", "").strip(),
        openai_model=os.getenv("OPENAI_MODEL", OPENAI_DEFAULT_MODEL),
        timeout_seconds=_timeout_seconds(os.getenv("LLM_TIMEOUT_SECONDS", "30")),
        allowed_origins=_split_origins(os.getenv("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)),
        environment=os.getenv("APP_ENV", "development"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # App
    APP_NAME: str = "BFHL API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Identity returned in every response envelope
    OFFICIAL_EMAIL: str = ""

    # Rate limiting (per client IP)
    RATE_LIMIT_REQUESTS_PER_MINUTE: int = 60
    RATE_LIMIT_WINDOW_SECONDS: float = 60.0
    RATE_LIMIT_IDLE_TTL_SECONDS: float = 600.0
    RATE_LIMIT_MAX_CLIENTS: int = 10_000

    # AI (Google Gemini generateContent)
    GEMINI_API_KEY: str = ""
    GEMINI_API_URL: str = "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"
    AI_TIMEOUT_SECONDS: float = 15.0
    AI_MAX_QUESTION_LENGTH: int = 500

    # Operations
    FIBONACCI_MAX_TERMS: int = 1000

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

@lru_cache()
def get_settings() -> Settings:
    return Settings()

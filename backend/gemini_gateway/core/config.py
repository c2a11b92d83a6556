# gemini_gateway/core/config.py
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

class Settings(BaseSettings):
    SERVICE_NAME: str = "Gemini Integration API"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS: comma-separated origins, "*" allows any
    CORS_ALLOW_ORIGINS: str = "*"

    # =========================
    # Gemini
    # =========================
    # No upfront validation; a missing key fails the first generation call.
    API_KEY: str | None = None

    # Used when the caller does not name a model
    GEMINI_MODEL: str = "gemini-3-flash-preview"

    # Observability
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

settings = Settings()

from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum
from typing import List, Optional

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "lexis"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "lexis"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- Languages ---
    # Codes exposed by the language registry. Empty means every registered model.
    # From the environment: ENABLED_LANGUAGES='["lat","grc"]'
    ENABLED_LANGUAGES: List[str] = []

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()

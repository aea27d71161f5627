import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Environment-driven settings.

    Values that tests or operators may flip at runtime (``APP_ENV``) are read
    on access rather than cached at import time.
    """

    APP_NAME = "Wedding Guest Manager API"
    APP_VERSION = "1.0.0"

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./wedding.db")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def environment(self) -> str:
        return os.getenv("APP_ENV", "development").strip().lower()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def cors_origins(self) -> List[str]:
        raw = os.getenv(
            "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
        )
        return [origin.strip() for origin in raw.split(",") if origin.strip()]


settings = Settings()

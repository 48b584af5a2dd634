"""Configuration settings for the workout plan ingestor."""
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"

    # Uploads
    MAX_UPLOAD_BYTES: int = DEFAULT_MAX_UPLOAD_BYTES

    # CORS
    CORS_ORIGINS: List[str] = []

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        # Uploads
        try:
            self.MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES))
        except ValueError:
            self.MAX_UPLOAD_BYTES = DEFAULT_MAX_UPLOAD_BYTES

        # CORS
        origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]


settings = Settings()

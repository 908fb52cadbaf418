import os
from typing import List, Optional

from dotenv import load_dotenv


class ConfigurationError(RuntimeError):
    """Raised when the process cannot start with the current environment."""


class Settings:
    """
    Environment-driven settings.
        - DATABASE_URL the SQLAlchemy connection string (required)
        - PORT / X_ZOHO_CATALYST_LISTEN_PORT the listen port (default 2000)
        - CORS_ORIGINS comma-separated list of allowed origins (default "*")
        - ROOM_CODE_MAX_ATTEMPTS how many candidate codes room creation may try
    """

    def __init__(self):
        # Load environment variables from the .env file
        load_dotenv()

        self.DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL") or None
        self.API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
        self.PORT: int = int(
            os.getenv("PORT") or os.getenv("X_ZOHO_CATALYST_LISTEN_PORT") or 2000
        )
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.CORS_ORIGINS: List[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.ROOM_CODE_MAX_ATTEMPTS: int = int(os.getenv("ROOM_CODE_MAX_ATTEMPTS", 10))

    def require_database_url(self) -> str:
        if not self.DATABASE_URL:
            raise ConfigurationError("Missing DATABASE_URL in environment variables")
        return self.DATABASE_URL


settings = Settings()

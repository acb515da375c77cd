"""
Configuration module

Configuration for the career guidance API. Values are read from environment
variables once at import time; a local .env file is loaded first so that
development setups do not need exported variables.

@version 1.0.0
"""

import os
import logging
from typing import List, Optional

from dotenv import load_dotenv

# Load variables from .env
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_ACCESS_SECRET = "dev-access-secret"
DEFAULT_REFRESH_SECRET = "dev-refresh-secret"


class Settings:
    """
    Application settings taken from the environment
    """

    def __init__(self):
        self.supabase_url: str = os.getenv("SUPABASE_URL", "http://localhost:54321").rstrip("/")
        self.supabase_key: str = os.getenv("SUPABASE_KEY", "")
        self.supabase_timeout: Optional[float] = _float_or_none(os.getenv("SUPABASE_TIMEOUT", "10"))

        self.jwt_secret: str = os.getenv("JWT_SECRET", DEFAULT_ACCESS_SECRET)
        self.jwt_refresh_secret: str = os.getenv("JWT_REFRESH_SECRET", DEFAULT_REFRESH_SECRET)
        self.jwt_algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
        self.refresh_token_expire_days: int = int(os.getenv("REFRESH_TOKEN_EXPIRE_DAYS", "7"))

        self.password_reset_redirect_url: str = os.getenv(
            "PASSWORD_RESET_REDIRECT_URL", "http://localhost:3000/reset-password"
        )
        self.cors_origins: List[str] = [
            origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
        ]
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.port: int = int(os.getenv("PORT", "3001"))

    def warn_on_defaults(self) -> None:
        """
        Log a warning for every signing secret still set to its development value.
        """
        if self.jwt_secret == DEFAULT_ACCESS_SECRET:
            logger.warning("JWT_SECRET is not set; using the development access secret")
        if self.jwt_refresh_secret == DEFAULT_REFRESH_SECRET:
            logger.warning("JWT_REFRESH_SECRET is not set; using the development refresh secret")


def _float_or_none(value: Optional[str]) -> Optional[float]:
    # empty or "none" disables the timeout
    if value is None or value.strip().lower() in ("", "none"):
        return None
    return float(value)


settings = Settings()

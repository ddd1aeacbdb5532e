"""
Application configuration for apmc-relay.

Centralizes environment variables using python-dotenv.

Note:
- HASURA_URL and HASURA_ADMIN_SECRET are required; the app refuses to start
  without them (see Settings.require_backend).
- Values are read once at import time and treated as read-only afterwards.
"""

import os
from dotenv import load_dotenv

from core.domain.errors import ConfigurationError

load_dotenv()


class Settings:
    """
    Configuration settings for the apmc-relay service.
    """

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    APP_NAME: str = os.getenv("APP_NAME", "apmc-relay")

    # HTTP server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3001"))

    # Hasura backend
    HASURA_URL: str = os.getenv("HASURA_URL", "")
    HASURA_ADMIN_SECRET: str = os.getenv("HASURA_ADMIN_SECRET", "")
    HASURA_TIMEOUT_S: float = float(os.getenv("HASURA_TIMEOUT_S", "20"))

    def require_backend(self) -> None:
        """
        Fail fast when the backend endpoint or credential is not configured.
        """
        missing = [
            name
            for name in ("HASURA_URL", "HASURA_ADMIN_SECRET")
            if not str(getattr(self, name) or "").strip()
        ]
        if missing:
            raise ConfigurationError(f"missing required environment variable(s): {', '.join(missing)}")


settings = Settings()

"""Application settings loaded from the environment"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

MEMORY_STORE = "memory"
MONGO_STORE = "mongo"


class Settings:
    """
    Application settings loaded from environment variables.

    A `.env` file next to the project root is read first; variables already
    present in the environment take precedence.
    """

    def __init__(self) -> None:
        self.app_name: str = os.getenv("APP_NAME", "Noteful Users API")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Persistence
        self.user_store: str = os.getenv("USER_STORE", MEMORY_STORE).lower()
        self.mongo_uri: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: str = os.getenv("MONGO_DB_NAME", "noteful")

        # Password hashing
        self.bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # Server
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "8000"))


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get application settings, loading them on first use"""
    global _settings
    if _settings is None:
        load_dotenv(Path(__file__).resolve().parent.parent / ".env")
        _settings = Settings()
    return _settings

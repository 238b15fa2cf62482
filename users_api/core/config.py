# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables; the defaults match the
    fixed values of the original deployment (port 3000, local "mtec" database).
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "mtec")
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")

        # Repository backend: "mongodb" | "inmemory"
        self.user_repository: Final[str] = os.getenv("USER_REPOSITORY", "mongodb").lower()

        # Startup behaviour
        self.seed_on_startup: Final[bool] = _env_bool("SEED_ON_STARTUP", "true")

        # Static frontend, served at "/" only when the directory exists
        self.static_directory: Final[str] = os.getenv("STATIC_DIRECTORY", "public")

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

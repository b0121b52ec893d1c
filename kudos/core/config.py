# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/Berlin")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "kudos")

        # Collection Names
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")
        self.teams_collection: Final[str] = os.getenv("TEAMS_COLLECTION", "teams")
        self.comments_collection: Final[str] = os.getenv("COMMENTS_COLLECTION", "comments")
        self.reactions_collection: Final[str] = os.getenv("REACTIONS_COLLECTION", "reactions")
        self.kudos_cards_collection: Final[str] = os.getenv("KUDOS_CARDS_COLLECTION", "kudos_cards")
        self.categories_collection: Final[str] = os.getenv("CATEGORIES_COLLECTION", "categories")
        self.counters_collection: Final[str] = os.getenv("COUNTERS_COLLECTION", "counters")

        # HTTP Configuration
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]


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

# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    Built once at process start (see get_settings) and handed to the token
    service, the password hasher and the database layer. Business logic never
    reads the environment directly.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "coursehub")

        # JWT Configuration (one signing key per principal class)
        self.jwt_user_secret: Final[str] = os.getenv(
            "JWT_USER_SECRET", "change_this_user_secret_in_production_0001"
        )
        self.jwt_admin_secret: Final[str] = os.getenv(
            "JWT_ADMIN_SECRET", "change_this_admin_secret_in_production_0002"
        )
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")

        # Password hashing (bcrypt cost factor)
        self.password_hash_rounds: Final[int] = int(os.getenv("PASSWORD_HASH_ROUNDS", "5"))

        # HTTP server
        self.server_host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.server_port: Final[int] = int(os.getenv("PORT", "3000"))

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # CORS
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ALLOW_ORIGINS",
                "http://localhost:5173,http://localhost:3000",
            ).split(",")
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

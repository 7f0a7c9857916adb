"""Application configuration with environment-based settings."""
import os
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Order system variants
    PAYMENT_METHOD: str = os.getenv("PAYMENT_METHOD", "credit_card")
    NOTIFICATION_CHANNEL: str = os.getenv("NOTIFICATION_CHANNEL", "email")

    # File pipeline storage
    STORAGE_TYPE: str = os.getenv("STORAGE_TYPE", "filesystem")
    FILE_ENCODING: str = os.getenv("FILE_ENCODING", "utf-8")

    SUPPORTED_PAYMENT_METHODS = ("credit_card", "paypal")
    SUPPORTED_NOTIFICATION_CHANNELS = ("email",)
    SUPPORTED_STORAGE_TYPES = ("filesystem", "memory")

    @classmethod
    def validate(cls) -> None:
        """Validate configured variant names."""
        checks = [
            ("PAYMENT_METHOD", cls.PAYMENT_METHOD, cls.SUPPORTED_PAYMENT_METHODS),
            ("NOTIFICATION_CHANNEL", cls.NOTIFICATION_CHANNEL, cls.SUPPORTED_NOTIFICATION_CHANNELS),
            ("STORAGE_TYPE", cls.STORAGE_TYPE, cls.SUPPORTED_STORAGE_TYPES),
        ]

        invalid = [
            f"{name}={value!r}"
            for name, value, supported in checks
            if value.lower() not in supported
        ]
        if invalid:
            raise ValueError(f"Invalid configuration values: {', '.join(invalid)}")


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    STORAGE_TYPE = "memory"  # Keep tests off the disk


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("APP_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)

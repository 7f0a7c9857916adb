"""SOLID design exercises with dependency injection."""
import logging
import sys
from typing import Optional

from solid_exercises.config.settings import Config, get_config
from solid_exercises.infrastructure.service_container import ServiceContainer


def create_system(config_class: Optional[type[Config]] = None) -> ServiceContainer:
    """
    Create and configure the service container.

    Args:
        config_class: Optional configuration class (for testing)

    Returns:
        Configured ServiceContainer

    Raises:
        ValueError: If the configuration names an unsupported variant
    """
    _logger = logging.getLogger(__name__)

    config = config_class or get_config()
    configure_logging(config)

    try:
        config.validate()
    except ValueError as e:
        _logger.error(f"Configuration validation failed: {e}")
        raise

    container = ServiceContainer(config_class=config)
    _logger.info(f"Service container ready ({config.__name__})")
    return container


def configure_logging(config: type[Config] = Config) -> None:
    """Configure application logging."""
    level = logging.DEBUG if config.DEBUG else getattr(logging, config.LOG_LEVEL, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True
    )


__all__ = ["create_system", "configure_logging", "ServiceContainer"]

"""Factories for creating provider instances (Factory Pattern)."""

from solid_exercises.infrastructure.factories.provider_factory import ProviderFactory

__all__ = [
    "ProviderFactory",
]

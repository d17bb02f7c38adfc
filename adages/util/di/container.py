"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from adages.config import Settings
from adages.util.di import ProdConfigProvider, build_providers


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the production container.

    The persistence variant comes from ``settings.persistence.backend``.
    Settings are loaded from environment variables when not given.

    Args:
        settings: Application settings

    Returns:
        Configured DI container
    """
    settings = settings or Settings()
    providers = build_providers(
        {"persistence": settings.persistence.backend},
        ProdConfigProvider(settings),
    )
    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(*providers, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)

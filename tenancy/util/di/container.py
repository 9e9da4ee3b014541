"""Production dishka container for the tenancy API."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from tenancy.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container that serves requests in production.

    Persistence resolves to the PostgreSQL unit of work factory; settings
    come from the environment.

    Returns:
        Container with every production provider plus FastAPI's request
        context
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Attach the container to the app so routes can use ``FromDishka``."""
    setup_dishka(container, app)

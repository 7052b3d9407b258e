"""Container construction and FastAPI integration."""

from typing import Iterable

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from qanda.util.di import Component, build_providers


def create_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build the application container.

    Production runs with every component real; tests pass the components to
    replace with in-memory implementations.

    Args:
        mocked: Components to back with their test implementation

    Returns:
        Container exposing Request alongside the application providers
    """
    return make_async_container(*build_providers(mocked), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container so DishkaRoute handlers can resolve dependencies.

    Args:
        app: FastAPI application
        container: Container built by create_container
    """
    setup_dishka(container, app)

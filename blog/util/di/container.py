"""Production container assembly."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from blog.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with every component on its production provider."""
    providers = [get_provider(entry)() for entry in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    setup_dishka(container, app)

"""Dependency injection container."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.util.di import PROVIDERS, Component, get_provider, mockable_components


def build_container(mock: Collection[Component] = ()) -> AsyncContainer:
    """Build a container, swapping the named components for their mocks.

    The same container serves FastAPI requests, the deletion sweep and
    tests, so FastapiProvider is always included.

    Args:
        mock: Components to replace with mock implementations

    Raises:
        ValueError: If an unknown component is named
    """
    unknown = set(mock) - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(base, use_mock=base.__mock_component__ in mock)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def create_container() -> AsyncContainer:
    """Build the production container; settings come from the environment."""
    return build_container()


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so routes can use FromDishka."""
    setup_dishka(container, app)

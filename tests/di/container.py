"""Test container builder with selective unmocking."""

from dishka import AsyncContainer

from forum.util.di import Component, mockable_components
from forum.util.di.container import build_container


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked by default.

    Integration tests that unmock persistence assume PostgreSQL is reachable
    at DATABASE__URL with migrations applied.

    Args:
        unmock: Components to use production implementations for

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit and E2E tests - in-memory persistence
        container = build_test_container()

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return build_container(mock=mockable_components() - unmock)

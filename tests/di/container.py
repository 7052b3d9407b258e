"""Test container builder with selective unmocking."""

from dishka import AsyncContainer

from qanda.util.di import Component, components
from qanda.util.di.container import create_container

# Registers the in-memory implementation as a PersistenceProvider subclass
from tests.di.persistence import MockPersistenceProvider  # noqa: F401


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container with in-memory components unless unmocked.

    Args:
        unmock: Components to keep on their production implementation

    Returns:
        Container usable directly or behind the FastAPI app

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # In-memory persistence
        container = build_test_container()

        # Real PostgreSQL, assumes DATABASE__URL points at a migrated database
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return create_container(mocked=components() - unmock)

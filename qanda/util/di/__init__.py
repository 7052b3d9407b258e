"""Dependency injection wiring.

Providers come in two kinds. Concrete providers (settings, domain services,
use cases) are always used as they are. Component providers, persistence
for now, are abstract bases with a production subclass and a test subclass,
told apart by ``__is_mock__``.
"""

from typing import Iterable, Type

from qanda.util.di.application import ProdApplicationProvider
from qanda.util.di.base import Component, ProviderBase
from qanda.util.di.core import ProdConfigProvider
from qanda.util.di.domain import ProdDomainProvider
from qanda.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def components() -> set[Component]:
    """Names of the components that have swappable implementations."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for one entry of PROVIDERS.

    Args:
        base: Entry of PROVIDERS
        use_mock: Pick the test implementation of a component

    Returns:
        The base itself for concrete providers, otherwise the matching subclass

    Raises:
        ValueError: If the component has no implementation of the requested kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "test" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


def build_providers(mocked: Iterable[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per entry of PROVIDERS.

    Args:
        mocked: Components to back with their test implementation

    Raises:
        ValueError: If a component name is unknown
    """
    mocked = set(mocked)
    unknown = mocked - components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "components",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]

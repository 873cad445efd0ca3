"""Provider base class and implementation selection."""

from collections.abc import Collection
from typing import ClassVar, Literal, get_args

from dishka import Provider

# Infrastructure that has an in-memory stand-in
Component = Literal["persistence"]
COMPONENTS: frozenset[Component] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider that declares `__mock_component__` is a swappable component:
    its subclasses are the implementations, told apart by `__is_mock__`.
    A provider without subclasses is used as-is.

    Attributes:
        __mock_component__: Component name (None for concrete providers)
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def resolve_provider(
    base: type[ProviderBase], mocked: Collection[Component] = ()
) -> type[ProviderBase]:
    """Pick the implementation of a provider base.

    Args:
        base: Provider base class
        mocked: Components that should use their mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the wanted implementation has not been defined
            (mocks live in the test package and register on import)
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    use_mock = base.__mock_component__ in mocked
    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")

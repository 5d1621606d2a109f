"""
Structural roles a store satisfies.

These are typing protocols for collaborator signatures, not runtime entities:
a UI component that only dispatches can depend on Dispatcher instead of Store.
"""

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

S_co = TypeVar("S_co", covariant=True)


@runtime_checkable
class StateReading(Protocol[S_co]):
    """Provides hot snapshots of the current state."""

    def get_state(self) -> S_co:
        ...


@runtime_checkable
class Dispatcher(Protocol):
    """Knows how to dispatch actions (and thunks)."""

    def dispatch(self, action: Any) -> Any:
        ...


@runtime_checkable
class Publisher(Protocol):
    """Adds handlers called in response to state changes."""

    def subscribe(self, subscription: Any) -> Callable[[], None]:
        ...

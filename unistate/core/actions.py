"""
Action model.

Actions are immutable descriptors of **what** state change is intended.
They carry no behavior; the reducer decides what they mean.
"""

from typing import Any, Callable

# Injected dispatch handle: (action_or_thunk) -> result
DispatchFn = Callable[[Any], Any]

# Injected state accessor: () -> state
GetStateFn = Callable[[], Any]


class Action:
    """
    Marker base class for mutation descriptors.

    Subclass it (usually as a frozen dataclass) to declare an action:

        @dataclass(frozen=True)
        class IncrementAction(Action):
            amount: int

    Instances are always treated as actions by Store.dispatch, even if they
    happen to be callable.
    """

    __slots__ = ()


def is_thunk(value: Any) -> bool:
    """
    Decide whether a dispatched value is a thunk rather than an action.

    A thunk is any callable that is not an Action instance.

    Raises:
        TypeError: If value is an Action class instead of an instance
    """
    if isinstance(value, type) and issubclass(value, Action):
        raise TypeError(
            f"Dispatched the action class {value.__name__}; dispatch an instance instead"
        )
    return callable(value) and not isinstance(value, Action)

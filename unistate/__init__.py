"""
Unidirectional State Container

Single-state store with pure reducers, synchronous subscribers, projections and thunk dispatch.
"""

__version__ = "0.1.0"

from .core import (
    Action,
    ActionReducer,
    Connection,
    Dispatcher,
    InvalidTransitionError,
    Projection,
    Publisher,
    StateReading,
    Store,
    Subscriber,
    UnistateError,
)

__all__ = [
    "__version__",
    "Action",
    "ActionReducer",
    "Connection",
    "Dispatcher",
    "InvalidTransitionError",
    "Projection",
    "Publisher",
    "StateReading",
    "Store",
    "Subscriber",
    "UnistateError",
]

"""
Core state container primitives.

This module provides the foundational abstractions for unidirectional data flow:
- Action: Marker base for mutation descriptors
- Reducer: Pure (state, action) -> state functions, ActionReducer registry
- Store: Current state, dispatch, subscribe
- Subscriber / Projection / Connection: Derived-value observers
- Thunks: Deferred or conditional dispatch sequences
- Capabilities: StateReading, Dispatcher, Publisher protocols
"""

from .actions import Action, is_thunk
from .reducer import ActionReducer
from .store import Store
from .projection import Subscriber, Projection, Connection
from .registry import SubscriptionRegistry
from .thunk import run_thunk
from .capabilities import StateReading, Dispatcher, Publisher
from .canonical import canonicalize, canonical_json_str
from .ids import stable_id
from .errors import UnistateError, InvalidTransitionError, InvalidOperationError

__all__ = [
    "Action",
    "is_thunk",
    "ActionReducer",
    "Store",
    "Subscriber",
    "Projection",
    "Connection",
    "SubscriptionRegistry",
    "run_thunk",
    "StateReading",
    "Dispatcher",
    "Publisher",
    "canonicalize",
    "canonical_json_str",
    "stable_id",
    "UnistateError",
    "InvalidTransitionError",
    "InvalidOperationError",
]

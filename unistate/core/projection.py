"""
Subscriber projections and store connections.

A Subscriber narrows the full state to a derived value (select) and is handed
only that value (receive). A Connection binds one subscriber to one store so
a UI component can hold a single handle for reading, dispatching and
subscribing.

By default receive() fires on every dispatch, even when the selected value is
unchanged. Set distinct = True to skip equal consecutive selections.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from .capabilities import Dispatcher, Publisher, StateReading

_UNSET = object()


class Subscriber(ABC):
    """
    Observer interested in a derived slice of state.

    Usage:
        class CounterLabel(Subscriber):
            def select(self, state):
                return state.counter

            def receive(self, selection):
                self.text = str(selection)

        unsubscribe = store.subscribe(CounterLabel())
    """

    # Opt-in: skip receive() when the selection equals the last delivered one
    distinct: bool = False

    connection: Optional["Connection"] = None

    @abstractmethod
    def select(self, state: Any) -> Any:
        """Derive the value this subscriber cares about from the full state."""
        ...

    @abstractmethod
    def receive(self, selection: Any) -> None:
        """Handle a newly selected value."""
        ...

    def bind(self) -> Callable[[Any], None]:
        """
        Build the state callback registered with the store.

        Each call returns an independent callback, so one subscriber can be
        registered with several stores without sharing dedup memory.
        """
        if not self.distinct:

            def deliver(state: Any) -> None:
                self.receive(self.select(state))

            return deliver

        last = [_UNSET]

        def deliver_distinct(state: Any) -> None:
            selection = self.select(state)
            if last[0] is not _UNSET and last[0] == selection:
                return
            last[0] = selection
            self.receive(selection)

        return deliver_distinct

    def connect(self, store: Any) -> "Connection":
        """Bind this subscriber to store; the connection is kept on self.connection."""
        self.connection = Connection(store, self)
        return self.connection


class Projection(Subscriber):
    """
    Subscriber built from a selector function and a receiver function.

    Usage:
        store.subscribe(Projection(lambda s: s.counter, label.set_text))
    """

    def __init__(
        self,
        select: Callable[[Any], Any],
        receive: Callable[[Any], None],
        distinct: bool = False,
    ) -> None:
        self._select = select
        self._receive = receive
        self.distinct = distinct

    def select(self, state: Any) -> Any:
        return self._select(state)

    def receive(self, selection: Any) -> None:
        self._receive(selection)


class Connection:
    """
    A subscriber bound to a store.

    Holds only the store reference and the subscriber. subscribe() returns the
    store's own unsubscribe handle. As a context manager it subscribes on
    entry and releases every subscription it made on exit:

        with CounterLabel().connect(store) as conn:
            conn.dispatch(IncrementAction(1))
    """

    def __init__(self, store: Any, subscriber: Subscriber) -> None:
        if not all(isinstance(store, role) for role in (Dispatcher, Publisher, StateReading)):
            raise TypeError(f"Cannot connect to {type(store).__name__}: not a store")
        self._store = store
        self._subscriber = subscriber
        self._handles: List[Callable[[], None]] = []

    @property
    def store(self) -> Any:
        return self._store

    @property
    def subscriber(self) -> Subscriber:
        return self._subscriber

    def subscribe(self) -> Callable[[], None]:
        unsubscribe = self._store.subscribe(self._subscriber)
        self._handles.append(unsubscribe)
        return unsubscribe

    def dispatch(self, action: Any) -> Any:
        return self._store.dispatch(action)

    def get_state(self) -> Any:
        return self._store.get_state()

    def close(self) -> None:
        """Release every subscription made through this connection."""
        handles, self._handles = self._handles, []
        for unsubscribe in handles:
            unsubscribe()

    def __enter__(self) -> "Connection":
        self.subscribe()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

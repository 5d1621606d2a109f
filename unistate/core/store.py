"""
Store: single source of truth for application state.

The store holds one state value, replaces it only through the reducer, and
notifies subscribers synchronously after every dispatch:

    caller -> dispatch(action) -> reducer(state, action) -> new state
           -> snapshot of subscribers -> callback(new_state) for each

Everything runs on the caller's thread. There is no internal locking and no
scheduling; thunks are the only way asynchronous work reaches the store.
"""

import weakref
from contextlib import contextmanager
from typing import Any, Callable, Generic, Iterator, List, TypeVar, Union

from .. import metrics
from ..logging_config import get_logger
from .actions import is_thunk
from .ids import next_store_id
from .projection import Subscriber
from .reducer import ReducerFn
from .registry import SubscriptionRegistry
from .thunk import run_thunk

S = TypeVar("S")

Unsubscribe = Callable[[], None]


class Store(Generic[S]):
    """
    Holds application state, allows controlled mutation through dispatched
    actions, and notifies interested parties that subscribe to state changes.

    Usage:
        store = Store(CounterState(), counter_reducer)
        unsubscribe = store.subscribe(lambda state: print(state.counter))  # prints 0
        store.dispatch(IncrementAction(amount=5))                          # prints 5
        unsubscribe()

    Reentrancy:
        A subscriber may dispatch from its callback. The nested dispatch
        reduces and notifies everyone before the outer notification round
        resumes with the remaining subscribers.

    Errors:
        Exceptions raised by the reducer propagate out of dispatch(). The
        state keeps its previous value and no subscriber is notified.

        A subscriber that raises does not cut the round short: the remaining
        subscribers still receive the new state, and the first error is then
        re-raised from dispatch(). A callback that raises on its initial
        snapshot is not registered.
    """

    def __init__(self, initial_state: S, reducer: ReducerFn) -> None:
        """
        Initialize a Store.

        Args:
            initial_state: The initial value of the application state
            reducer: Root pure function (state, action) -> new_state
        """
        self._reduce = reducer
        self._state = initial_state
        self._id = next_store_id()
        self._subscribers = SubscriptionRegistry(self._id)
        self._log = get_logger(__name__, trace_id=self._id)
        # Live entry count shared with the finalizer, which must not hold callbacks
        self._live = [0]
        weakref.finalize(self, _release_live_subscribers, self._live)

    @property
    def id(self) -> str:
        return self._id

    @property
    def state(self) -> S:
        """Current state (read-only)."""
        return self._state

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def get_state(self) -> S:
        """Return the current state snapshot."""
        return self._state

    def dispatch(self, action: Any) -> Any:
        """
        Perform the state change described by action, or run a thunk.

        Args:
            action: The descriptor of **what** the state change is, or a
                thunk: a callable taking (dispatch) or (dispatch, get_state)

        Returns:
            None for actions; the thunk's return value for thunks
        """
        if is_thunk(action):
            with metrics.track_dispatch("thunk"):
                self._log.debug("Running thunk %s", getattr(action, "__qualname__", action))
                return run_thunk(action, self.dispatch, self.get_state)

        with metrics.track_dispatch("action"):
            new_state = self._reduce(self._state, action)
            self._state = new_state
            self._log.debug(
                "Dispatched %s to %d subscribers", type(action).__name__, len(self._subscribers)
            )
            self._publish(new_state)
        return None

    def subscribe(self, subscription: Union[Callable[[S], None], Subscriber]) -> Unsubscribe:
        """
        Register a handler that's called when state changes.

        The handler is called once immediately with the current state, before
        subscribe() returns.

        Args:
            subscription: Callable receiving the new state, or a Subscriber
                whose select() result is passed to its receive()

        Returns:
            A closure that removes exactly this subscription. Calling it
            again, or after the store is gone, does nothing.
        """
        if isinstance(subscription, Subscriber):
            callback = subscription.bind()
        else:
            callback = subscription

        token = self._subscribers.add(callback)
        self._live[0] += 1
        metrics.subscriber_added()
        self._log.debug("Subscriber added, total %d", len(self._subscribers))

        try:
            callback(self._state)
        except BaseException:
            # No handle is returned, so the entry must not outlive this call
            self._unsubscribe(token)
            raise

        store_ref = weakref.ref(self)

        def unsubscribe() -> None:
            store = store_ref()
            if store is not None:
                store._unsubscribe(token)

        return unsubscribe

    @contextmanager
    def subscription(
        self, subscription: Union[Callable[[S], None], Subscriber]
    ) -> Iterator[Unsubscribe]:
        """
        Scoped subscribe: active inside the with-block, removed on exit.

        Usage:
            with store.subscription(render):
                store.dispatch(IncrementAction(1))
        """
        unsubscribe = self.subscribe(subscription)
        try:
            yield unsubscribe
        finally:
            unsubscribe()

    def _unsubscribe(self, token: str) -> None:
        if self._subscribers.remove(token):
            self._live[0] -= 1
            metrics.subscriber_removed()
            self._log.debug("Subscriber removed, total %d", len(self._subscribers))

    def _publish(self, new_state: S) -> None:
        # Every subscriber in the round sees new_state; the first failure is
        # re-raised once the round is over.
        first_error = None
        for _, callback in self._subscribers.snapshot():
            try:
                callback(new_state)
            except Exception as e:
                self._log.exception("Subscriber %s failed", getattr(callback, "__qualname__", callback))
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error


def _release_live_subscribers(live: List[int]) -> None:
    metrics.subscribers_released(live[0])

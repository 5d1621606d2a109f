"""
Tests for subscriber projections and store connections.
"""

import pytest

from unistate.core import Connection, Projection, Store, Subscriber
from unistate.counter import CounterState, IncrementAction, counter_reducer


class CounterSubscriber(Subscriber):
    def __init__(self, counter: int) -> None:
        self.counter = counter
        self.received = []

    def select(self, state):
        return state.counter

    def receive(self, selection):
        self.counter = selection
        self.received.append(selection)


class ParitySubscriber(Subscriber):
    distinct = True

    def __init__(self) -> None:
        self.received = []

    def select(self, state):
        return "even" if state.counter % 2 == 0 else "odd"

    def receive(self, selection):
        self.received.append(selection)


def test_subscriber_integration():
    store = Store(CounterState(), counter_reducer)
    subscriber = CounterSubscriber(counter=-1)

    unsubscribe = store.subscribe(subscriber)
    assert subscriber.counter == 0

    store.dispatch(IncrementAction(2))
    assert subscriber.counter == 2

    unsubscribe()
    store.dispatch(IncrementAction(3))
    assert subscriber.counter == 2


def test_receive_fires_even_when_selection_unchanged():
    """No implicit memoization: one receive per dispatch."""
    store = Store(CounterState(), counter_reducer)
    received = []

    store.subscribe(Projection(lambda s: s.counter > 100, received.append))
    store.dispatch(IncrementAction(1))
    store.dispatch(IncrementAction(1))

    assert received == [False, False, False]


def test_distinct_projection_skips_equal_selections():
    store = Store(CounterState(), counter_reducer)
    received = []

    store.subscribe(Projection(lambda s: s.counter > 1, received.append, distinct=True))
    for _ in range(4):
        store.dispatch(IncrementAction(1))

    assert received == [False, True]


def test_distinct_subscriber_class_attribute():
    store = Store(CounterState(), counter_reducer)
    parity = ParitySubscriber()

    store.subscribe(parity)
    for amount in (2, 1, 2, 2, 1):
        store.dispatch(IncrementAction(amount))

    # counters: 0, 2, 3, 5, 7, 8
    assert parity.received == ["even", "odd", "even"]


def test_distinct_memory_is_per_subscription():
    first = Store(CounterState(), counter_reducer)
    second = Store(CounterState(), counter_reducer)
    parity = ParitySubscriber()

    first.subscribe(parity)
    second.subscribe(parity)

    # Initial snapshot is delivered for each store
    assert parity.received == ["even", "even"]


def test_state_connections():
    store = Store(CounterState(), counter_reducer)

    subscriber = CounterSubscriber(counter=-1)
    subscriber.connect(store)
    assert isinstance(subscriber.connection, Connection)

    unsubscribe = subscriber.connection.subscribe()

    subscriber.connection.dispatch(IncrementAction(3))
    assert subscriber.counter == 3

    unsubscribe()
    subscriber.connection.dispatch(IncrementAction(3))
    assert subscriber.counter == 3
    assert subscriber.connection.get_state().counter == 6


def test_connection_dispatches_thunks():
    store = Store(CounterState(), counter_reducer)
    conn = CounterSubscriber(counter=-1).connect(store)

    conn.dispatch(lambda dispatch, get_state: dispatch(IncrementAction(get_state().counter + 4)))

    assert conn.get_state().counter == 4


def test_connection_context_manager():
    """Scoped acquisition: subscribed inside the block, released on exit."""
    store = Store(CounterState(), counter_reducer)
    subscriber = CounterSubscriber(counter=-1)

    with subscriber.connect(store) as conn:
        assert store.subscriber_count == 1
        conn.dispatch(IncrementAction(1))

    assert store.subscriber_count == 0
    store.dispatch(IncrementAction(1))
    assert subscriber.received == [0, 1]


def test_connection_close_is_idempotent():
    store = Store(CounterState(), counter_reducer)
    conn = Connection(store, CounterSubscriber(counter=-1))

    conn.subscribe()
    conn.close()
    conn.close()

    assert store.subscriber_count == 0
    assert conn.store is store


def test_subscriber_requires_select_and_receive():
    class Incomplete(Subscriber):
        def select(self, state):
            return state

    with pytest.raises(TypeError):
        Incomplete()


def test_connection_requires_store_capabilities():
    with pytest.raises(TypeError, match="not a store"):
        Connection(object(), CounterSubscriber(counter=-1))

"""
Tests for the counter domain helpers.
"""

import pytest

from unistate.core.errors import InvalidOperationError
from unistate.counter import (
    CounterState,
    DecrementAction,
    IncrementAction,
    counter_store,
    parse_operation,
)


@pytest.mark.parametrize(
    "op, expected",
    [
        ("+5", IncrementAction(5)),
        ("-2", DecrementAction(2)),
        (" +10 ", IncrementAction(10)),
        ("-0", DecrementAction(0)),
    ],
)
def test_parse_operation(op, expected):
    assert parse_operation(op) == expected


@pytest.mark.parametrize("op", ["5", "+", "++1", "+x", "inc 1", ""])
def test_parse_operation_rejects_garbage(op):
    with pytest.raises(InvalidOperationError):
        parse_operation(op)


def test_counter_store_start_value():
    store = counter_store(start=10)
    store.dispatch(parse_operation("-3"))

    assert store.get_state() == CounterState(counter=7)
    assert store.get_state().to_dict() == {"counter": 7}
    assert CounterState.initial() == CounterState(counter=0)

"""
Counter domain: the reference state, actions and reducer.

All handlers are pure and deterministic.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict

from .core.actions import Action
from .core.errors import InvalidOperationError
from .core.reducer import ActionReducer
from .core.store import Store


@dataclass(frozen=True)
class CounterState:
    counter: int = 0

    @staticmethod
    def initial() -> "CounterState":
        return CounterState()

    def to_dict(self) -> Dict[str, Any]:
        return {"counter": self.counter}


@dataclass(frozen=True)
class IncrementAction(Action):
    amount: int = 1


@dataclass(frozen=True)
class DecrementAction(Action):
    amount: int = 1


def on_increment(state: CounterState, action: IncrementAction) -> CounterState:
    return CounterState(counter=state.counter + action.amount)


def on_decrement(state: CounterState, action: DecrementAction) -> CounterState:
    return CounterState(counter=state.counter - action.amount)


def register_handlers(reducer: ActionReducer) -> None:
    reducer.register(IncrementAction, on_increment)
    reducer.register(DecrementAction, on_decrement)


def build_reducer(strict: bool = False) -> ActionReducer:
    reducer = ActionReducer(strict=strict)
    register_handlers(reducer)
    return reducer


counter_reducer = build_reducer()


def counter_store(start: int = 0) -> Store:
    return Store(CounterState(counter=start), counter_reducer)


_OP_RE = re.compile(r"^([+-])(\d+)$")


def parse_operation(op: str) -> Action:
    """
    Parse a textual operation into an action.

    "+5" -> IncrementAction(5), "-2" -> DecrementAction(2).

    Raises:
        InvalidOperationError: If op is not a sign followed by digits
    """
    match = _OP_RE.match(op.strip())
    if match is None:
        raise InvalidOperationError(f"Invalid operation: {op!r} (expected +N or -N)")
    sign, digits = match.groups()
    amount = int(digits)
    if sign == "+":
        return IncrementAction(amount)
    return DecrementAction(amount)

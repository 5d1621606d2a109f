"""
Thunk invocation.

A thunk is a callable handed the store's dispatch (and optionally its state
accessor) so it can sequence, defer or branch dispatches. The store knows
nothing about executors; a thunk that schedules work elsewhere simply calls
the injected dispatch later.

    store.dispatch(lambda dispatch: dispatch(IncrementAction(1)))

    def load(dispatch, get_state):
        if get_state().counter < 10:
            executor.submit(dispatch, IncrementAction(5))

    store.dispatch(load)
"""

import inspect
from typing import Any, Callable

from .actions import DispatchFn, GetStateFn

Thunk = Callable[..., Any]


def wants_state(thunk: Thunk) -> bool:
    """
    True if the thunk accepts a second positional argument (the state accessor).

    Callables whose signature cannot be inspected get the single-argument form.
    """
    try:
        sig = inspect.signature(thunk)
    except (TypeError, ValueError):
        return False

    positional = 0
    for param in sig.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return True
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            positional += 1
    return positional >= 2


def run_thunk(thunk: Thunk, dispatch: DispatchFn, get_state: GetStateFn) -> Any:
    """
    Invoke thunk synchronously, exactly once, with the injected capabilities.

    Returns:
        Whatever the thunk returns (e.g. a Future it scheduled)
    """
    if wants_state(thunk):
        return thunk(dispatch, get_state)
    return thunk(dispatch)

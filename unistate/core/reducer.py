"""
Reducer: Pure state transition functions.

A reducer is any callable (state, action) -> new_state. It must be:
- Pure (no side effects, no I/O)
- Deterministic (same input -> same output)
- Non-mutating (returns a new state instead of editing the old one)

ActionReducer builds such a callable from per-action-class handlers.
"""

from typing import Any, Callable, Dict, Type, TypeVar

from .errors import InvalidTransitionError

S = TypeVar("S")

# Reducer signature: (current_state, action) -> new_state
ReducerFn = Callable[[S, Any], S]

# Handler signature: (current_state, action) -> new_state
Handler = Callable[[Any, Any], Any]


class ActionReducer:
    """
    Registry of action handlers, usable directly as a store reducer.

    Usage:
        reducer = ActionReducer()
        reducer.register(IncrementAction, handle_increment)
        store = Store(CounterState(), reducer)

    Handlers are looked up by the action's class, then by its base classes,
    so one handler can serve a family of actions.

    Actions without a handler leave state unchanged, unless the reducer is
    strict, in which case InvalidTransitionError is raised (and propagates
    out of Store.dispatch).
    """

    def __init__(self, strict: bool = False) -> None:
        self._handlers: Dict[type, Handler] = {}
        self.strict = strict

    def register(self, action_type: Type[Any], handler: Handler) -> None:
        """
        Register action handler.

        Args:
            action_type: Action class the handler applies to
            handler: Pure function (current_state, action) -> new_state
        """
        self._handlers[action_type] = handler

    def on(self, action_type: Type[Any]) -> Callable[[Handler], Handler]:
        """Decorator form of register()."""

        def deco(handler: Handler) -> Handler:
            self.register(action_type, handler)
            return handler

        return deco

    def handles(self, action: Any) -> bool:
        return self._lookup(type(action)) is not None

    def _lookup(self, action_type: type):
        for klass in action_type.__mro__:
            handler = self._handlers.get(klass)
            if handler is not None:
                return handler
        return None

    def __call__(self, state: Any, action: Any) -> Any:
        """
        Apply action to state using the registered handler.

        Returns:
            New state with the action applied (or the same state if unhandled)

        Raises:
            InvalidTransitionError: If strict and no handler is registered
        """
        handler = self._lookup(type(action))
        if handler is None:
            if self.strict:
                raise InvalidTransitionError(
                    f"No handler for action type: {type(action).__name__}"
                )
            return state
        return handler(state, action)

"""
Exception types for the state container.

The store itself raises nothing of its own: reducer errors propagate untouched.
"""


class UnistateError(Exception):
    """Base class for errors raised by unistate."""
    pass


class InvalidTransitionError(UnistateError):
    """Raised by a strict ActionReducer when no handler is registered for an action."""
    pass


class InvalidOperationError(UnistateError):
    """Raised when a textual counter operation cannot be parsed."""
    pass

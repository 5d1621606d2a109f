"""
Subscription registry: token -> callback mapping owned by a store.
"""

from typing import Any, Callable, Dict, Iterator, List, Tuple

from .ids import subscription_token

Callback = Callable[[Any], None]


class SubscriptionRegistry:
    """
    Keyed collection of subscriber callbacks.

    Tokens come from a per-registry sequence and are never reused, so a stale
    unsubscribe handle can never remove a newer entry.
    """

    def __init__(self, owner_id: str) -> None:
        self._owner_id = owner_id
        self._seq = 0
        self._entries: Dict[str, Callback] = {}

    def add(self, callback: Callback) -> str:
        """Store callback under a fresh token and return the token."""
        self._seq += 1
        token = subscription_token(self._owner_id, self._seq)
        self._entries[token] = callback
        return token

    def remove(self, token: str) -> bool:
        """
        Remove the entry for token.

        Returns:
            True if an entry was removed, False if it was already gone
        """
        return self._entries.pop(token, None) is not None

    def snapshot(self) -> List[Tuple[str, Callback]]:
        """
        Stable copy of the current entries.

        Notification rounds iterate this copy, so callbacks may subscribe or
        unsubscribe while a round is in progress.
        """
        return list(self._entries.items())

    def __contains__(self, token: object) -> bool:
        return token in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

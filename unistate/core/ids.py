"""
Stable identifier generation.

Store ids and subscription tokens are derived from inputs, not randomness.
"""

import hashlib
import itertools

_store_seq = itertools.count(1)


def stable_id(*parts: str, length: int = 64) -> str:
    """
    Generate stable ID derived from inputs (no randomness).

    Args:
        *parts: String parts to combine into ID
        length: Number of hex characters to keep

    Returns:
        Truncated SHA-256 hash as hex string

    Example:
        stable_id("store-1", "3") -> "9c1f..." (64 hex chars)
    """
    raw = "|".join(parts).encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:length]


def next_store_id() -> str:
    """Process-unique store identifier, used as the logging trace id."""
    return f"store-{next(_store_seq)}"


def subscription_token(store_id: str, seq: int) -> str:
    """
    Token for the seq-th subscription of a store.

    Sequences are never reused within a store, so tokens are unique for the
    store's whole lifetime.
    """
    return stable_id(store_id, str(seq))

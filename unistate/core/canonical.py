"""
Canonical serialization of state snapshots.

Used wherever a state has to be shown or compared as text (CLI --json output,
test assertions): the same state always yields the same bytes.
"""

import dataclasses
import json
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested state to canonical form.

    Rules:
    - dataclass instances become dicts of their fields
    - dict keys sorted alphabetically
    - tuples converted to lists
    - recursive normalization
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_str(obj: Any, indent: Any = None) -> str:
    """
    Deterministic JSON string.

    Guarantees:
    - sort_keys=True (secondary safety)
    - compact separators unless indent is given
    - ensure_ascii=False keeps UTF-8 stable
    """
    canon = canonicalize(obj)
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        canon, sort_keys=True, separators=separators, ensure_ascii=False, indent=indent
    )

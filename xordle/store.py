"""
In-memory store
Holds round state in a dict, keyed the same way the DB store is.
Values are kept as JSON text so both stores behave identically.
"""

import base64
import json
from threading import RLock
from typing import Any, Dict, Iterator, Tuple

from .round import check_stored_guesses, check_stored_status, parse_round_id


class MemoryStorage:
    def __init__(self) -> None:
        self._items: Dict[str, str] = {}
        self._lock = RLock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            raw = self._items.get(key)
        if raw is None:
            return default
        return json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._items[key] = json.dumps(value)

    def update(self, values: Dict[str, Any]) -> None:
        encoded = {key: json.dumps(value) for key, value in values.items()}
        with self._lock:
            self._items.update(encoded)

    def items(self, prefix: str = "") -> Iterator[Tuple[str, Any]]:
        with self._lock:
            snapshot = [(key, raw) for key, raw in self._items.items() if key.startswith(prefix)]
        for key, raw in sorted(snapshot):
            yield key, json.loads(raw)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()


# --- Moving history between devices ---

def export_code(storage) -> str:
    """Every stored key/value as one copy-pasteable base64 string."""
    payload = json.dumps(dict(storage.items()), sort_keys=True)
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def _check_entry(key: Any, value: Any) -> None:
    # Only round state lives in storage: game-<round id> and guesses-<round id>
    kind, _, round_id = str(key).partition("-")
    try:
        parse_round_id(round_id)
    except ValueError:
        raise ValueError(f"Unexpected key in import code: {key!r}")
    if kind == "game":
        check_stored_status(value)
    elif kind == "guesses":
        check_stored_guesses(value)
    else:
        raise ValueError(f"Unexpected key in import code: {key!r}")


def import_code(storage, code: str) -> int:
    """
    Restore an export_code() string into storage.
    Every entry is checked first and then all of them are written in one go,
    so a bad code (or a failed write) leaves storage as it was.
    Returns how many keys were written.
    """
    try:
        payload = json.loads(base64.b64decode(code.strip(), validate=True).decode("utf-8"))
    except ValueError:  # every decoding error here is a ValueError
        raise ValueError("That import code is not valid.")
    if not isinstance(payload, dict):
        raise ValueError("That import code is not valid.")

    for key, value in payload.items():
        _check_entry(key, value)

    storage.update(payload)
    return len(payload)

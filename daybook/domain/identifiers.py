"""Time-based record identifiers.

Ids are milliseconds since the epoch rendered as decimal strings. Within one
process they strictly increase: a second id requested in the same
millisecond is bumped past the previous one.
"""

import time
from threading import Lock

_lock = Lock()
_last_issued = 0


def new_id() -> str:
    """Return a fresh, strictly increasing time-based id."""
    global _last_issued
    with _lock:
        candidate = time.time_ns() // 1_000_000
        if candidate <= _last_issued:
            candidate = _last_issued + 1
        _last_issued = candidate
        return str(candidate)

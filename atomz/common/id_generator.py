"""Process-wide unique identifier supply.

The counter starts at 0 when the module is imported and is never reset.
Allocation is guarded by a lock so concurrent callers never observe the
same value.
"""

from __future__ import annotations

import itertools
import threading

# Type used for all kinds of unique identifier.
Id = int

_counter = itertools.count()
_lock = threading.Lock()


def new_id() -> Id:
    """Return a new identifier, unique within this process."""
    with _lock:
        return next(_counter)

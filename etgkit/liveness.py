"""Tracking of which game objects are still alive."""

from __future__ import annotations

import threading
import weakref
from typing import Any

_live: "weakref.WeakSet[GameClass]" = weakref.WeakSet()
_lock = threading.Lock()


class GameClass:
    """Base for every game class; instances are live until released."""

    def __init__(self) -> None:
        with _lock:
            _live.add(self)

    def release(self) -> None:
        """Mark this object as no longer alive."""
        with _lock:
            _live.discard(self)


def is_valid(obj: Any) -> bool:
    """Tell whether ``obj`` is a live game object."""
    if obj is None:
        return False
    with _lock:
        return obj in _live
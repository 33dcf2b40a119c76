"""Multicast events with handle-based listener management."""

from __future__ import annotations

from typing import Any, Callable

INVALID_HANDLE = -1

Callback = Callable[..., Any]


class EventDelegate:
    """A list of callbacks invoked together, in the order they were added."""

    def __init__(self) -> None:
        self._listeners: dict[int, Callback] = {}
        self._next_handle = 0

    def add_listener(self, callback: Callback) -> int:
        """Register ``callback`` and return a handle that can remove it later."""
        handle = self._next_handle
        self._next_handle += 1
        self._listeners[handle] = callback
        return handle

    def remove_listener(self, handle: int) -> None:
        """Remove the listener with ``handle``; unknown handles are ignored."""
        self._listeners.pop(handle, None)

    def broadcast(self, *args: Any) -> None:
        """Call every listener with ``args``."""
        for callback in list(self._listeners.values()):
            callback(*args)

    def clear(self) -> None:
        """Remove every listener."""
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)
"""A countdown timer component that fires an event when it runs out."""

from __future__ import annotations

from .events import EventDelegate
from .gameobject import Component


class Timer(Component):
    """Counts elapsed time up to a total and broadcasts ``on_finished`` once."""

    def __init__(self, total_time: float) -> None:
        super().__init__()
        self.total_time = float(total_time)
        self.current_time = 0.0
        self.is_running = False
        self.is_finished = False
        self.on_finished = EventDelegate()

    def update(self, dt: float) -> None:  # type: ignore[override]
        """Advance the timer by ``dt`` seconds while it is running."""
        if not self.is_running or self.is_finished:
            return
        self.current_time += dt
        if self.current_time >= self.total_time:
            self.current_time = self.total_time
            self.is_finished = True
            self.is_running = False
            self.on_finished.broadcast()

    def start(self) -> None:
        self.is_running = True

    def stop(self) -> None:
        self.is_running = False

    def reset(self) -> None:
        """Clear the elapsed time and the finished flag; running state is kept."""
        self.current_time = 0.0
        self.is_finished = False

    def restart(self) -> None:
        self.reset()
        self.start()

    @property
    def remaining_time(self) -> float:
        return self.total_time - self.current_time

    @property
    def elapsed_time(self) -> float:
        return self.current_time

    @property
    def progress(self) -> float:
        """Fraction of the total time that has elapsed."""
        if self.total_time == 0:
            return 1.0
        return self.current_time / self.total_time

    def set_duration(self, total_time: float) -> None:
        """Change the total time; a running timer already past it finishes now."""
        self.total_time = float(total_time)
        if self.current_time >= self.total_time and self.is_running:
            self.is_finished = True
            self.is_running = False
            self.on_finished.broadcast()
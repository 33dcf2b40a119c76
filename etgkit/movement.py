"""Accelerated movement with timed knockback forces."""

from __future__ import annotations

import math

from .events import EventDelegate
from .gameobject import Component, Vector2


def _length(v: Vector2) -> float:
    return math.hypot(v.x, v.y)


def _normalize(v: Vector2) -> Vector2:
    length = _length(v)
    if length == 0:
        return Vector2()
    return v / length


def _interval_lerp(start: float, end: float, interval: float, elapsed: float) -> float:
    if interval <= 0:
        return end
    t = min(max(elapsed / interval, 0.0), 1.0)
    return start + (end - start) * t


class MoveComponent(Component):
    """Moves an owner with acceleration, deceleration and a speed cap."""

    def __init__(self, max_speed: float, acceleration: float, deceleration: float = 8000.0) -> None:
        super().__init__()
        self.max_speed = float(max_speed)
        self.acceleration = float(acceleration)
        self.deceleration = float(deceleration)
        self.velocity = Vector2()

        self.force_speed = 1.0
        self.force_magnitude = 0.0
        self.force_timer = 0.0
        self.force_max_duration = 0.0
        self.force_direction = Vector2()
        self.is_being_forced = False

        self.on_force_start = EventDelegate()
        self.on_force_end = EventDelegate()

    def update(self, dt: float) -> None:  # type: ignore[override]
        self.update_force(dt)

    def update_movement(self, input_dir: Vector2, position: Vector2, dt: float) -> Vector2:
        """Update velocity from ``input_dir`` and return the moved ``position``."""
        if self.is_being_forced:
            return position

        if input_dir != Vector2():
            self.velocity = self.velocity + _normalize(input_dir) * self.acceleration * dt
            if _length(self.velocity) > self.max_speed:
                self.velocity = _normalize(self.velocity) * self.max_speed
        else:
            speed = _length(self.velocity)
            dec_amount = self.deceleration * dt
            if dec_amount > speed:
                self.velocity = Vector2()
            else:
                self.velocity = self.velocity - _normalize(self.velocity) * dec_amount

        return position + self.velocity * dt

    def apply_force(self, direction: Vector2, magnitude: float, duration: float) -> None:
        """Start pushing the owner along ``direction`` for ``duration`` seconds."""
        self.force_direction = direction
        self.force_magnitude = float(magnitude)
        self.force_max_duration = float(duration)
        self.force_timer = 0.0
        self.is_being_forced = True
        self.on_force_start.broadcast()

    def update_force(self, dt: float) -> None:
        """Move the owner by the fading force, or end the force when its time is up."""
        if not self.is_being_forced or self.owner is None:
            return

        self.force_timer += dt
        if self.force_timer < self.force_max_duration:
            current = _interval_lerp(
                self.force_magnitude * self.force_speed, 0.0, self.force_max_duration, self.force_timer
            )
            self.owner.position = self.owner.position + self.force_direction * current * dt
        else:
            self.is_being_forced = False
            self.on_force_end.broadcast()
            self.velocity = Vector2()
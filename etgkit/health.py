"""Health with damage feedback, invulnerability and life events."""

from __future__ import annotations

from typing import Optional

from .events import EventDelegate
from .gameobject import Component, GameObject
from .timer import Timer


class HealthComponent(Component):
    """Tracks health and broadcasts damage, heal and death events."""

    def __init__(self, max_health: float = 100.0) -> None:
        super().__init__()
        self.max_health = float(max_health)
        self.current_health = float(max_health)
        self.invulnerability_enabled = False
        self.invulnerability_duration = 0.75
        self.damaged_visual_feedback_duration = 0.2
        self.is_damaged = False

        self.on_damage_taken = EventDelegate()
        self.on_healed = EventDelegate()
        self.on_death = EventDelegate()

        self.damage_feedback_timer: Optional[Timer] = None
        self.invulnerability_timer: Optional[Timer] = None
        self.initialize()

    def initialize(self) -> None:
        """Restore full health and create the feedback and invulnerability timers."""
        super().initialize()
        if not hasattr(self, "max_health"):
            return
        self.current_health = self.max_health

        self.damage_feedback_timer = Timer(self.damaged_visual_feedback_duration)
        self.damage_feedback_timer.owner = self
        self.invulnerability_timer = Timer(self.invulnerability_duration)
        self.invulnerability_timer.owner = self

        self.invulnerability_timer.on_finished.add_listener(self._end_invulnerability)
        self.damage_feedback_timer.on_finished.add_listener(self._end_damage_feedback)

    def _end_invulnerability(self) -> None:
        self.invulnerability_enabled = False

    def _end_damage_feedback(self) -> None:
        self.is_damaged = False

    def update(self, dt: float) -> None:  # type: ignore[override]
        super().update()
        assert self.damage_feedback_timer is not None and self.invulnerability_timer is not None
        self.damage_feedback_timer.update(dt)
        self.invulnerability_timer.update(dt)

    @property
    def is_dead(self) -> bool:
        return self.current_health <= 0.0

    @property
    def health_percent(self) -> float:
        """Current health as a fraction of maximum health."""
        return self.current_health / self.max_health

    def is_showing_damage_feedback(self) -> bool:
        assert self.damage_feedback_timer is not None
        return self.is_damaged and not self.damage_feedback_timer.is_finished

    def apply_damage(
        self,
        damage: float,
        force_magnitude: float,
        instigator: Optional[GameObject] = None,
    ) -> bool:
        """Subtract ``damage``; return whether it was applied."""
        if self.is_dead or damage <= 0:
            return False

        assert self.damage_feedback_timer is not None and self.invulnerability_timer is not None
        if self.invulnerability_enabled:
            self.invulnerability_timer.start()
            return False

        previous = self.current_health
        self.current_health = max(0.0, self.current_health - damage)

        self.is_damaged = True
        self.damage_feedback_timer.reset()
        self.damage_feedback_timer.start()

        self.on_damage_taken.broadcast(damage, force_magnitude, instigator)

        if previous > 0 and self.current_health <= 0:
            self.on_death.broadcast(instigator)
        return True

    def heal(self, amount: float, instigator: Optional[GameObject] = None) -> bool:
        """Add ``amount`` up to maximum health; return whether healing happened."""
        if self.is_dead or amount <= 0:
            return False
        self.current_health = min(self.max_health, self.current_health + amount)
        self.on_healed.broadcast(amount, instigator)
        return True
"""Axis-aligned collision detection with enter, stay and exit events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .events import EventDelegate
from .gameobject import Color, Component, FloatRect, GameObject, Vector2

YELLOW: Color = (255, 255, 0, 255)


@dataclass(frozen=True)
class CollisionEvent:
    """What a collision listener receives."""

    owner: Optional[GameObject]
    other: Optional[GameObject]
    other_component: "CollisionComponent"
    impact_point: Vector2


class CollisionWorld:
    """The set of collision components that can collide with each other."""

    def __init__(self) -> None:
        self._components: list[CollisionComponent] = []

    def add(self, component: CollisionComponent) -> None:
        if component not in self._components:
            self._components.append(component)

    def remove(self, component: CollisionComponent) -> None:
        if component in self._components:
            self._components.remove(component)

    def __iter__(self) -> Iterator[CollisionComponent]:
        return iter(list(self._components))

    def __len__(self) -> int:
        return len(self._components)


DEFAULT_WORLD = CollisionWorld()


class CollisionComponent(Component):
    """Tracks overlaps of its owner's bounds with other components in a world."""

    def __init__(self, world: Optional[CollisionWorld] = None) -> None:
        super().__init__()
        self.world = world if world is not None else DEFAULT_WORLD
        self.collision_radius = 0.0
        self.show_collision_bounds = False
        self.collision_visualization_color: Color = YELLOW
        self.draw_collision_line_between_centers = False
        self.draw_impact_point = True

        self.on_collision_enter = EventDelegate()
        self.on_collision_stay = EventDelegate()
        self.on_collision_exit = EventDelegate()

        self.expanded_bounds = FloatRect(0.0, 0.0, 0.0, 0.0)
        self.current_collisions: dict[CollisionComponent, bool] = {}
        self._collision_enabled = False
        self.world.add(self)

    @property
    def collision_bounds(self) -> FloatRect:
        """The owner's bounds grown by the collision radius."""
        return self.expanded_bounds

    @property
    def is_collision_enabled(self) -> bool:
        return self._collision_enabled

    def initialize(self) -> None:
        super().initialize()
        if hasattr(self, "world"):
            self.update_bounds()

    def _event_with(self, other: CollisionComponent) -> CollisionEvent:
        return CollisionEvent(self.owner, other.owner, other, self.impact_point(other))

    def update(self) -> None:  # type: ignore[override]
        """Refresh bounds and broadcast enter, stay and exit events."""
        if not self._collision_enabled or self.owner is None:
            return

        self.update_bounds()
        still_colliding: dict[CollisionComponent, bool] = {}
        reported_exit: set[CollisionComponent] = set()

        for other in self.world:
            if other is self or not other.is_collision_enabled or other.owner is None:
                continue

            was_colliding = other in self.current_collisions
            if self.check_collision(other):
                still_colliding[other] = True
                if was_colliding:
                    self.on_collision_stay.broadcast(self._event_with(other))
                else:
                    self.on_collision_enter.broadcast(self._event_with(other))
            elif was_colliding:
                reported_exit.add(other)
                self.on_collision_exit.broadcast(self._event_with(other))

        for other in list(self.current_collisions):
            if other in still_colliding or other in reported_exit:
                continue
            if other.owner is not None:
                self.on_collision_exit.broadcast(self._event_with(other))

        self.current_collisions = still_colliding

    def update_bounds(self) -> None:
        """Recompute the expanded bounds from the owner's bounds."""
        if self.owner is None:
            return
        base = self.owner.bounds()
        radius = self.collision_radius
        self.expanded_bounds = FloatRect(
            base.left - radius,
            base.top - radius,
            base.width + 2 * radius,
            base.height + 2 * radius,
        )

    def check_collision(self, other: Optional[CollisionComponent]) -> bool:
        """Tell whether this component's bounds overlap ``other``'s."""
        if other is None:
            raise ValueError("cannot check collision against a missing component")
        return self.expanded_bounds.intersects(other.collision_bounds)

    def impact_point(self, other: CollisionComponent) -> Vector2:
        """Centre of the overlap with ``other``, or the zero vector if none."""
        overlap = self.expanded_bounds.intersection(other.collision_bounds)
        if overlap is None:
            return Vector2()
        return overlap.center

    def set_collision_enabled(self, enabled: bool) -> None:
        """Turn collisions on or off; turning off ends every current collision."""
        if self._collision_enabled == enabled:
            return
        self._collision_enabled = enabled
        if not enabled:
            for other in list(self.current_collisions):
                if other.owner is not None:
                    self.on_collision_exit.broadcast(self._event_with(other))
            self.current_collisions.clear()

    def detach(self) -> None:
        """Leave the world so no other component sees this one any more."""
        self.world.remove(self)
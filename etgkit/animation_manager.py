"""A keyed collection of animations that remembers which one played last."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Optional

from PIL import Image

from .animation import Animation
from .gameobject import Vector2
from .liveness import GameClass


class AnimationManager(GameClass):
    """Holds animations by key and plays whichever key is asked for.

    Keys may be any hashable value: strings, integers or enum members.
    Members of different enum types never compare equal, so they never clash.
    """

    def __init__(self) -> None:
        super().__init__()
        self.animations: dict[Hashable, Animation] = {}
        self.last_key: Hashable = ""
        self.current_anim: Optional[Animation] = None
        self.last_texture: Any = None

    def add(self, key: Hashable, animation: Animation) -> None:
        """Store ``animation`` under ``key`` and make it the last used key."""
        self.animations[key] = animation
        self.last_key = key

    def update(self, key: Hashable, dt: float) -> None:
        """Advance the animation under ``key`` by ``dt`` seconds.

        An unknown key restarts the animation that was used last instead.
        """
        animation = self.animations.get(key)
        if animation is not None:
            self.current_anim = animation
            self.last_texture = animation.texture
            animation.update(dt)
            self.last_key = key
            return
        last = self.animations.setdefault(self.last_key, Animation())
        last.restart()
        self.current_anim = last

    def set_origin(self, key: Hashable, origin: Vector2) -> None:
        """Set the drawing origin of the animation under ``key``, if there is one."""
        animation = self.animations.get(key)
        if animation is not None:
            animation.origin = origin

    def current_frame_image(self) -> Optional[Image.Image]:
        """The current frame of the last used animation."""
        animation = self.animations.get(self.last_key)
        if animation is None:
            raise KeyError(f"Failed to find current frame's texture. Last key: {self.last_key!r}")
        return animation.current_frame_image()

    def current_animation(self) -> Optional[Animation]:
        """The last used animation, or None if its key holds nothing."""
        return self.animations.get(self.last_key)

    def is_finished(self) -> bool:
        """Whether the last used animation shows its last frame; True if there is none."""
        animation = self.animations.get(self.last_key)
        if animation is None:
            return True
        return animation.is_finished()
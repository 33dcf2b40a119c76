"""A component that drives an owner's texture from per-state animation sets."""

from __future__ import annotations

import enum
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, Optional

from PIL import Image

from .animation import Animation, IntRect
from .animation_manager import AnimationManager
from .gameobject import Component, Vector2


class FlipAxis(enum.Enum):
    """Which scale axes a flip touches."""

    X = "x"
    Y = "y"
    BOTH = "both"


def _frame_center(animation: Animation) -> Vector2:
    first = animation.frame_rects[0]
    return Vector2(first.width / 2, first.height / 2)


class AnimComponent(Component):
    """Keeps one animation manager per state and feeds the owner its current frame."""

    def __init__(self) -> None:
        super().__init__()
        self.anim_manager_dict: dict[Hashable, AnimationManager] = {}
        self.current_state: Optional[Hashable] = None
        self.current_anim_state_key: Hashable = ""
        self.current_tex: Optional[Image.Image] = None
        self.curr_tex_rect = IntRect()

    def initialize(self) -> None:
        """Register this component as its owner's animation source."""
        super().initialize()
        if self.owner is None:
            raise RuntimeError(
                "Owner cannot be empty. Every animation should have an owner game object."
            )
        self.owner.anim_interface = self

    def add_animations_for_state(
        self,
        state: Hashable,
        keys: Iterable[Hashable],
        animations: Sequence[Animation],
    ) -> None:
        """Pair ``keys`` with ``animations`` into a fresh manager for ``state``.

        Extra keys or animations beyond the shorter of the two are ignored.
        Each animation's origin is centred on its first frame.
        """
        manager = AnimationManager()
        for key, animation in zip(keys, animations):
            manager.add(key, animation)
            if animation.frame_rects:
                manager.set_origin(key, _frame_center(animation))
        self.anim_manager_dict[state] = manager

    def add_gun_animation_for_state(
        self,
        state: Hashable,
        animation: Animation,
        origin: Optional[Vector2] = None,
    ) -> None:
        """Store ``animation`` keyed by ``state`` itself.

        The origin is ``origin`` when given, else the centre of the first frame.
        """
        manager = AnimationManager()
        manager.add(state, animation)
        if animation.frame_rects:
            manager.set_origin(state, origin if origin is not None else _frame_center(animation))
        self.anim_manager_dict[state] = manager

    def update(self, state: Hashable, key: Hashable, dt: float) -> None:  # type: ignore[override]
        """Play ``key`` of ``state`` and copy its frame and origin to the owner."""
        self.current_state = state
        self.current_anim_state_key = key

        manager = self.anim_manager_dict.setdefault(state, AnimationManager())
        manager.update(key, dt)

        animation = manager.animations.get(key)
        if animation is not None:
            self.curr_tex_rect = animation.curr_rect
            self.current_tex = animation.current_frame_image()
            origin = animation.origin
        else:
            self.curr_tex_rect = IntRect()
            self.current_tex = None
            origin = Vector2()

        if self.owner is not None:
            self.owner.texture = self.current_tex
            self.owner.origin = origin

        self.change_anim_state_if_required(key)

    def change_anim_state_if_required(self, key: Hashable) -> None:
        """Switch to ``key`` and restart its animation when it differs from the current key."""
        if key == self.current_anim_state_key:
            return
        self.current_anim_state_key = key
        manager = self.anim_manager_dict.setdefault(self.current_state, AnimationManager())
        animation = manager.animations.get(key)
        if animation is not None:
            animation.restart()

    def current_animation(self) -> Optional[Animation]:
        """The animation currently playing for the current state."""
        return self.anim_manager_dict[self.current_state].current_animation()

    def current_texture_rect(self) -> IntRect:
        """The frame rectangle shown after the last update."""
        return self.curr_tex_rect

    @staticmethod
    def is_facing_right(direction: Any) -> bool:
        """Whether the name of ``direction`` mentions right."""
        name = getattr(direction, "name", str(direction))
        return "Right" in name or "right" in name

    def flip_sprites(self, direction: Any, axis: FlipAxis, *args: Any) -> None:
        """Make the scale of each object positive when facing right, negative otherwise."""
        if self.current_state not in self.anim_manager_dict:
            raise KeyError("current state not found in the animation managers")

        facing_right = self.is_facing_right(direction)
        flip_x = axis in (FlipAxis.X, FlipAxis.BOTH)
        flip_y = axis in (FlipAxis.Y, FlipAxis.BOTH)

        for obj in args:
            x, y = obj.scale.x, obj.scale.y
            if flip_x:
                x = abs(x) if facing_right else -abs(x)
            if flip_y:
                y = abs(y) if facing_right else -abs(y)
            obj.scale = Vector2(x, y)

    def flip_sprites_x(self, direction: Any, *args: Any) -> None:
        self.flip_sprites(direction, FlipAxis.X, *args)

    def flip_sprites_y(self, direction: Any, *args: Any) -> None:
        self.flip_sprites(direction, FlipAxis.Y, *args)
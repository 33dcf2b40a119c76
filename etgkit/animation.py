"""Frame-based sprite animations built from sprite sheets."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

from .gameobject import Vector2
from .liveness import GameClass

_PAUSED_TIME = 9999999.0


class AnimationError(RuntimeError):
    """Raised when an animation is in a state it cannot be played from."""


@dataclass(frozen=True)
class IntRect:
    """An integer rectangle given by its top-left corner and size."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


class Animation(GameClass):
    """A row of frames cut from one texture, played at a fixed frame interval."""

    def __init__(
        self,
        texture: Optional[Image.Image] = None,
        frame_interval: float = 0.0,
        frame_x: int = 0,
        frame_y: int = 0,
        row: int = 1,
    ) -> None:
        super().__init__()
        self.frame_x = frame_x
        self.frame_y = frame_y
        self.frame_interval = float(frame_interval)
        self.anim_time_left = self.frame_interval
        self.current_frame = 0
        self.texture = texture
        self.anim_path_name = ""
        self.curr_rect = IntRect()
        self.origin = Vector2()
        self.frame_rects: list[IntRect] = []
        self.is_valid = True
        self.flip_x = 1.0
        self.active = True
        self._original_frame_interval = 0.0
        self._on_last_frame = False
        self._texture_cache: dict[int, Image.Image] = {}

        if texture is None:
            return
        if frame_x <= 0 or frame_y <= 0:
            raise ValueError("an animation needs at least one frame in each direction")

        width, height = texture.size
        frame_width = width // frame_x
        frame_height = height // frame_y
        top = (row - 1) * frame_height
        self.frame_rects = [
            IntRect(i * frame_width, top, frame_width, frame_height) for i in range(frame_x)
        ]

    def update(self, dt: float) -> None:
        """Count down the frame timer by ``dt`` and advance to the next frame when due."""
        if not self.active or self.texture is None or self.texture.size[0] == 0:
            raise AnimationError("animation has no usable texture or is inactive")
        if self.anim_time_left > _PAUSED_TIME or self.anim_time_left < -1000:
            raise AnimationError("animation time is out of range")

        if self._on_last_frame:
            return

        self.anim_time_left -= dt
        if self.anim_time_left <= 0:
            self.current_frame += 1
            if self.current_frame >= self.frame_x:
                self.current_frame = 0
            self.anim_time_left = self.frame_interval

        self.curr_rect = self.frame_rects[self.current_frame]

    def restart(self) -> None:
        """Go back to the first frame with a full frame interval."""
        self.current_frame = 0
        self.anim_time_left = self.frame_interval

    def is_finished(self) -> bool:
        """Tell whether the last frame is showing."""
        return self.current_frame == self.frame_x - 1

    def total_time(self) -> float:
        """Time one full pass through all frames takes."""
        return self.frame_x * self.frame_interval

    def play_only_last_frame(self) -> None:
        """Jump to the last frame and stay there."""
        if self._on_last_frame:
            return
        self._original_frame_interval = self.frame_interval
        self.current_frame = self.frame_x - 1
        self.anim_time_left = _PAUSED_TIME
        self.curr_rect = self.frame_rects[self.current_frame]
        self._on_last_frame = True

    def stop_playing_last_frame(self) -> None:
        """Resume normal playback after :meth:`play_only_last_frame`."""
        if not self._on_last_frame:
            return
        self.frame_interval = self._original_frame_interval
        self.anim_time_left = self.frame_interval
        self._on_last_frame = False

    @property
    def is_playing_last_frame(self) -> bool:
        return self._on_last_frame

    def current_frame_image(self) -> Optional[Image.Image]:
        """The current frame cut out of the texture, cached per frame."""
        if self.texture is None:
            return None
        cached = self._texture_cache.get(self.current_frame)
        if cached is None or cached.size[0] == 0:
            rect = self.frame_rects[self.current_frame]
            cached = self.texture.crop(
                (rect.left, rect.top, rect.left + rect.width, rect.top + rect.height)
            )
            self._texture_cache[self.current_frame] = cached
        return cached

    @classmethod
    def create_sprite_sheet(
        cls,
        resource_root: str | os.PathLike[str],
        relative_path: str,
        file_name: str,
        extension: str,
        frame_interval: float,
        single_sprite: bool = False,
    ) -> Animation:
        """Join numbered image files side by side into one animation.

        A ``file_name`` ending in a digit names the first frame; the digit is the
        starting counter and following frames count up from it.
        """
        base_path = str(Path(resource_root) / relative_path / file_name)
        counter = 0
        if base_path[-1].isdigit() and base_path[-1] in "0123456789":
            counter = int(base_path[-1])
            base_path = base_path[:-1]
            file_path = f"{base_path}{counter}.{extension}"
        else:
            file_path = f"{base_path}.{extension}"

        if not os.path.exists(file_path):
            raise FileNotFoundError(f"File not found at: {file_path}")

        images: list[Image.Image] = []
        while True:
            if single_sprite:
                file_path = f"{base_path}.{extension}"
            else:
                file_path = f"{base_path}{counter}.{extension}"
            if not os.path.exists(file_path):
                break
            try:
                with Image.open(file_path) as opened:
                    images.append(opened.convert("RGBA"))
            except OSError as exc:
                raise AnimationError(f"Failed to load image: {file_path}") from exc
            counter += 1
            if single_sprite:
                break

        total_width = sum(image.size[0] for image in images)
        max_height = max((image.size[1] for image in images), default=0)
        sheet = Image.new("RGBA", (total_width, max_height), (0, 0, 0, 0))

        rects: list[IntRect] = []
        x_offset = 0
        for image in images:
            sheet.paste(image, (x_offset, 0))
            rects.append(IntRect(x_offset, 0, image.size[0], image.size[1]))
            x_offset += image.size[0]

        animation = cls(sheet, frame_interval, len(images), 1)
        animation.frame_rects = rects
        animation.anim_path_name = relative_path + file_name
        return animation
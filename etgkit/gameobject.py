"""Game objects, their draw properties, naming and the object registry."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Protocol, TypeVar

from .liveness import GameClass
from .typeid import TYPE_IDS

Color = tuple[int, int, int, int]
WHITE: Color = (255, 255, 255, 255)
RED: Color = (255, 0, 0, 255)

T = TypeVar("T", bound="GameObject")


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector2:
        return Vector2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def scaled(self, other: Vector2) -> Vector2:
        """Component-wise product."""
        return Vector2(self.x * other.x, self.y * other.y)


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def center(self) -> Vector2:
        return Vector2(self.left + self.width / 2, self.top + self.height / 2)

    def intersection(self, other: FloatRect) -> Optional[FloatRect]:
        """Return the overlapping rectangle, or None when they do not overlap."""
        left = max(min(self.left, self.left + self.width), min(other.left, other.left + other.width))
        top = max(min(self.top, self.top + self.height), min(other.top, other.top + other.height))
        right = min(max(self.left, self.left + self.width), max(other.left, other.left + other.width))
        bottom = min(max(self.top, self.top + self.height), max(other.top, other.top + other.height))
        if left < right and top < bottom:
            return FloatRect(left, top, right - left, bottom - top)
        return None

    def intersects(self, other: FloatRect) -> bool:
        return self.intersection(other) is not None


@dataclass
class DrawProperties:
    """The final values a renderer uses to draw an object."""

    position: Vector2 = field(default_factory=Vector2)
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))
    origin: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    depth: float = 0.0
    color: Color = WHITE
    texture: Any = None


class Renderer(Protocol):
    """What a game object needs from whatever draws it."""

    def draw(self, props: DrawProperties) -> None: ...

    def draw_rect_outline(self, rect: FloatRect, color: Color, thickness: float, depth: float) -> None: ...

    def draw_pixel(self, position: Vector2, size: tuple[int, int], rotation: float) -> None: ...


class ObjectRegistry:
    """Scene objects by name, plus the order in which they were registered."""

    def __init__(self, scene: Optional[GameObject] = None) -> None:
        self.objects: dict[str, GameObject] = {}
        self.ordered: list[GameObject] = []
        self.scene = scene

    def register(self, name: str, obj: GameObject) -> None:
        self.objects[name] = obj
        self.ordered.append(obj)

    def unregister(self, name: str) -> None:
        """Remove the object named ``name`` from both the map and the ordered list."""
        obj = self.objects.pop(name, None)
        if obj is None:
            return
        self.ordered = [item for item in self.ordered if item is not obj]

    def __contains__(self, name: object) -> bool:
        return name in self.objects

    def __len__(self) -> int:
        return len(self.objects)


class GameObject(GameClass):
    """Base of every positioned, drawable object in the game."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in cls.__bases__:
            if base is not object:
                TYPE_IDS.register_base_class(cls, base)

    def __init__(self) -> None:
        super().__init__()
        self.position = Vector2()
        self.scale = Vector2(1.0, 1.0)
        self.rotation = 0.0
        self.origin = Vector2()
        self.color: Color = WHITE
        self.depth = 0.0
        self.pending_destroy = False
        self.anim_interface: Any = None

        self.relative_pos = Vector2()
        self.relative_scale = Vector2(1.0, 1.0)
        self.relative_rotation = 0.0
        self.relative_origin = Vector2()

        self.draw_properties = DrawProperties()
        self.type_name = ""
        self.type_id = TYPE_IDS.get_id(type(self))

        self.owner: Optional[GameObject] = None
        self.draw_bound = False
        self.draw_origin_point = False
        self.ui_specified = False
        self.object_name = "Default"
        self.texture: Any = None
        self.is_visible = True

        GameObject.initialize(self)

    def initialize(self) -> None:
        """Centre the origin on the texture, if any, and refresh draw properties."""
        if self.texture is not None:
            width, height = self.texture.size
            self.origin = Vector2(float(int(width) // 2), float(int(height) // 2))
        self.compute_draw_properties()

    def update(self) -> None:
        self.compute_draw_properties()

    def draw(self, batch: Renderer) -> None:
        if not self.is_visible:
            return
        self.visualize_origin(batch)
        self.draw_bounds(batch)
        batch.draw(self.draw_properties)

    def visualize_origin(self, batch: Renderer) -> None:
        if self.draw_origin_point:
            batch.draw_pixel(self.draw_properties.position, (1, 1), self.rotation)

    def draw_bounds(self, batch: Renderer, color: Color = RED) -> None:
        if self.draw_bound:
            batch.draw_rect_outline(self.bounds(), color, 1.0, 0)

    def compute_draw_properties(self) -> None:
        """Combine base values with relative offsets into the final draw values."""
        self.draw_properties = DrawProperties(
            position=self.position + self.relative_pos,
            scale=self.scale.scaled(self.relative_scale),
            origin=self.origin + self.relative_origin,
            rotation=self.rotation + self.relative_rotation,
            depth=self.depth,
            color=self.color,
            texture=self.texture,
        )

    def bounds(self) -> FloatRect:
        """Rectangle centred on the position, sized by the animation frame or texture."""
        if self.anim_interface is not None:
            rect = self.anim_interface.current_texture_rect()
            width, height = rect.width, rect.height
        elif self.texture is not None:
            width, height = self.texture.size
        else:
            return FloatRect(self.position.x - 5.0, self.position.y - 5.0, 10.0, 10.0)
        return FloatRect(
            self.position.x - width / 2.0,
            self.position.y - height / 2.0,
            float(width),
            float(height),
        )

    def set_name_to_class_name(self, registry: ObjectRegistry) -> str:
        """Name the object after its class, numbered to be unique in ``registry``."""
        self.object_name = type(self).__name__
        self.type_name = type(self).__name__
        self.increment_name(registry)
        return self.object_name

    def increment_name(self, registry: ObjectRegistry) -> None:
        """Append one more than the highest numeric suffix already taken."""
        base_name = self.object_name
        if base_name not in registry:
            return
        suffixes = [1]
        for name in registry.objects:
            if name == base_name or not name.startswith(base_name):
                continue
            suffix = name[len(base_name):]
            if suffix and all(ch in string.digits for ch in suffix):
                suffixes.append(int(suffix))
        self.object_name = f"{base_name}{max(suffixes) + 1}"

    def set_type_info(self, cls: type) -> None:
        self.type_id = TYPE_IDS.get_id(cls)

    def mark_for_destroy(self) -> None:
        self.pending_destroy = True

    def is_a(self, cls: type) -> bool:
        return TYPE_IDS.is_base_of(self.type_id, TYPE_IDS.get_id(cls))

    def as_type(self, cls: type[T]) -> Optional[T]:
        return self if self.is_a(cls) else None  # type: ignore[return-value]

    def has_owner_of_type(self, cls: type, levels: int = 1) -> bool:
        """Look up to ``levels`` owners up the chain for one of type ``cls``."""
        if levels <= 0 or self.owner is None:
            return False
        if self.owner.is_a(cls):
            return True
        return levels > 1 and self.owner.has_owner_of_type(cls, levels - 1)


TYPE_IDS.register_base_class(GameObject, GameClass)


class Component(GameObject):
    """A game object that belongs to another game object."""


def create_game_object(
    cls: type[T],
    owner: Optional[GameObject],
    registry: ObjectRegistry,
    *args: Any,
    **kwargs: Any,
) -> T:
    """Construct ``cls``, attach it to ``owner`` (or the scene), name and register it."""
    obj = cls(*args, **kwargs)
    obj.owner = owner if owner is not None else registry.scene
    obj.set_type_info(cls)
    name = obj.set_name_to_class_name(registry)
    registry.register(name, obj)
    return obj


def destroy_game_object(obj: Optional[GameObject], registry: ObjectRegistry) -> None:
    """Remove ``obj`` from ``registry`` and mark it as no longer alive."""
    if obj is None:
        return
    registry.unregister(obj.object_name)
    obj.release()
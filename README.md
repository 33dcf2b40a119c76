# etgkit

A small core for 2D action games: the objects, components and animation
playback a game loop is built from. Everything that changes over time takes
the frame's delta time explicitly (`timer.update(dt)`, `animation.update(dt)`),
so the game loop decides which clock to use.

## Modules

- `etgkit.events` – `EventDelegate`: listeners are added with `add_listener()`,
  which returns a handle for `remove_listener()`; `broadcast(*args)` calls them in
  the order they were added; `clear()` removes them all.
- `etgkit.typeid` – `TypeIds` hands out one integer per class (`get_id()`), records
  inheritance with `register_base_class()` and answers `is_base_of()` through the
  whole recorded chain. `TYPE_IDS` is the shared instance.
- `etgkit.liveness` – `GameClass` instances are live from construction until
  `release()`; `is_valid(obj)` tells them apart.
- `etgkit.gameobject` – `Vector2`, `FloatRect` (with `intersects()` and
  `intersection()`), `DrawProperties`, `GameObject`, `Component` and
  `ObjectRegistry`. `create_game_object(cls, owner, registry, *args, **kwargs)`
  constructs an object, attaches it to `owner` (or the registry's `scene` when
  `owner` is `None`), names it after its class and registers it. Names are made
  unique by numbering: `Timer`, `Timer2`, `Timer3`, …
  `destroy_game_object(obj, registry)` unregisters and releases it.
  `GameObject.is_a()`, `as_type()` and `has_owner_of_type()` use the type ids.
- `etgkit.timer` – `Timer` counts up to its total time and broadcasts
  `on_finished` once; `start()`, `stop()`, `reset()`, `restart()`,
  `set_duration()`, and the `remaining_time`, `elapsed_time` and `progress`
  properties.
- `etgkit.health` – `HealthComponent` with `apply_damage()`, `heal()`, the
  `on_damage_taken`, `on_healed` and `on_death` events, a short damage-feedback
  window (`is_showing_damage_feedback()`) and an invulnerability switch that
  swallows damage while on.
- `etgkit.movement` – `MoveComponent`: `update_movement(input_dir, position, dt)`
  accelerates, clamps to `max_speed` or decelerates and returns the new position;
  `apply_force()` starts a knock-back that fades to zero over its duration and
  moves the owner during `update(dt)`, with `on_force_start` and `on_force_end`.
- `etgkit.collision` – `CollisionWorld`, `CollisionComponent` and
  `CollisionEvent`. A component grows its owner's bounds by `collision_radius`
  and, on `update()`, broadcasts `on_collision_enter`, `on_collision_stay` and
  `on_collision_exit` against every other enabled component in its world.
  Components start disabled: call `set_collision_enabled(True)`. Components
  without a world argument share `DEFAULT_WORLD`; `detach()` leaves the world.
- `etgkit.animation` – `IntRect` and `Animation`, a row of frames cut from one
  Pillow image. `Animation.create_sprite_sheet()` joins numbered image files
  (`walk_001.png`, `walk_002.png`, …) side by side into one animation and raises
  `FileNotFoundError` when the first file is missing. `play_only_last_frame()`
  holds the last frame until `stop_playing_last_frame()`. `update()` raises
  `AnimationError` for an inactive animation or one without a texture.
- `etgkit.animation_manager` – `AnimationManager` keeps animations under any
  hashable key (strings, integers, enum members) and remembers the last one
  played; an unknown key restarts the last animation instead.
- `etgkit.anim_component` – `AnimComponent` keeps one animation manager per
  state, copies the current frame and origin onto its owner, and flips owners'
  scales by facing direction (`flip_sprites()` with a `FlipAxis`,
  `flip_sprites_x()`, `flip_sprites_y()`).

## Install

```
pip install etgkit
```

For running the tests:

```
pip install "etgkit[test]"
pytest
```

## Example

```python
from etgkit.gameobject import GameObject, ObjectRegistry, create_game_object
from etgkit.health import HealthComponent

registry = ObjectRegistry()
player = create_game_object(GameObject, None, registry)
health = create_game_object(HealthComponent, player, registry, 4.0)

health.on_death.add_listener(lambda instigator: print("down"))
health.apply_damage(4.0, 150.0, None)   # prints "down"
```

Playing an animation cut from an in-memory image:

```python
from PIL import Image
from etgkit.animation import Animation

sheet = Image.new("RGBA", (64, 16))
walk = Animation(sheet, 0.1, 4, 1)   # four 16x16 frames, 0.1 s each
walk.update(0.1)
print(walk.current_frame)             # 1
frame = walk.current_frame_image()    # a 16x16 Pillow image
```

## What it does not do

There is no window, renderer, input handling or game loop here. `GameObject.draw()`
hands its `DrawProperties` to any object with `draw()`, `draw_rect_outline()` and
`draw_pixel()` methods that you supply, and collision bounds are not drawn at all.
The package has no characters, weapons, enemies, items, user interface or
scene contents; it is the layer those are built on.
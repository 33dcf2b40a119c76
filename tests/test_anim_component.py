import enum

import pytest
from PIL import Image

from etgkit.anim_component import AnimComponent, FlipAxis
from etgkit.animation import Animation
from etgkit.gameobject import GameObject, Vector2


class State(enum.Enum):
    IDLE = 0
    RUN = 1


class Direction(enum.Enum):
    Right = 0
    Left = 1
    BackDiagonalRight = 2


def make_anim(frames=4, frame_size=10, interval=0.1):
    texture = Image.new("RGBA", (frames * frame_size, frame_size))
    return Animation(texture, interval, frames, 1)


def make_component():
    owner = GameObject()
    comp = AnimComponent()
    comp.owner = owner
    comp.initialize()
    return comp, owner


def test_initialize_without_owner_raises():
    with pytest.raises(RuntimeError):
        AnimComponent().initialize()


def test_initialize_registers_with_owner():
    comp, owner = make_component()
    assert owner.anim_interface is comp


def test_add_animations_centres_origin():
    comp, _ = make_component()
    anim = make_anim(frame_size=10)
    comp.add_animations_for_state(State.IDLE, [Direction.Right], [anim])
    assert anim.origin == Vector2(5.0, 5.0)
    assert comp.anim_manager_dict[State.IDLE].animations[Direction.Right] is anim


def test_add_animations_uses_shorter_sequence():
    comp, _ = make_component()
    anims = [make_anim(), make_anim()]
    comp.add_animations_for_state(State.RUN, [Direction.Right, Direction.Left, Direction.BackDiagonalRight], anims)
    assert set(comp.anim_manager_dict[State.RUN].animations) == {Direction.Right, Direction.Left}


def test_gun_animation_manual_and_default_origin():
    comp, _ = make_component()
    manual = make_anim()
    comp.add_gun_animation_for_state(State.IDLE, manual, Vector2(1.0, 2.0))
    assert manual.origin == Vector2(1.0, 2.0)
    centred = make_anim(frame_size=10)
    comp.add_gun_animation_for_state(State.RUN, centred)
    assert centred.origin == Vector2(5.0, 5.0)
    assert comp.anim_manager_dict[State.RUN].animations[State.RUN] is centred


def test_update_feeds_owner_texture_and_origin():
    comp, owner = make_component()
    anim = make_anim(frame_size=10)
    comp.add_animations_for_state(State.IDLE, [Direction.Right], [anim])
    comp.update(State.IDLE, Direction.Right, 0.1)
    assert owner.texture.size == (10, 10)
    assert owner.origin == anim.origin
    assert comp.current_texture_rect() == anim.frame_rects[1]
    assert comp.current_animation() is anim


def test_owner_bounds_follow_frame_rect():
    comp, owner = make_component()
    comp.add_animations_for_state(State.IDLE, [Direction.Right], [make_anim(frame_size=10)])
    comp.update(State.IDLE, Direction.Right, 0.1)
    bounds = owner.bounds()
    assert (bounds.width, bounds.height) == (10.0, 10.0)


def test_update_with_unknown_key_clears_owner_texture():
    comp, owner = make_component()
    comp.add_animations_for_state(State.IDLE, [Direction.Right], [make_anim()])
    comp.update(State.IDLE, Direction.Left, 0.1)
    assert owner.texture is None
    assert owner.origin == Vector2()


def test_change_anim_state_restarts_new_animation():
    comp, _ = make_component()
    right, left = make_anim(), make_anim()
    comp.add_animations_for_state(State.RUN, [Direction.Right, Direction.Left], [right, left])
    comp.update(State.RUN, Direction.Right, 0.01)
    left.current_frame = 2
    comp.change_anim_state_if_required(Direction.Left)
    assert comp.current_anim_state_key == Direction.Left
    assert left.current_frame == 0


def test_current_animation_missing_state_raises():
    comp, _ = make_component()
    with pytest.raises(KeyError):
        comp.current_animation()


@pytest.mark.parametrize(
    "direction, expected",
    [(Direction.Right, True), (Direction.BackDiagonalRight, True), (Direction.Left, False)],
)
def test_is_facing_right(direction, expected):
    assert AnimComponent.is_facing_right(direction) is expected


def test_flip_x_only_changes_x():
    comp, _ = make_component()
    comp.add_animations_for_state(State.IDLE, [Direction.Right], [make_anim()])
    comp.update(State.IDLE, Direction.Right, 0.01)
    target = GameObject()
    target.scale = Vector2(2.0, 3.0)
    comp.flip_sprites_x(Direction.Left, target)
    assert target.scale == Vector2(-2.0, 3.0)
    comp.flip_sprites_x(Direction.Right, target)
    assert target.scale == Vector2(2.0, 3.0)


def test_flip_y_and_both():
    comp, _ = make_component()
    comp.add_animations_for_state(State.IDLE, [Direction.Right], [make_anim()])
    comp.update(State.IDLE, Direction.Right, 0.01)
    first, second = GameObject(), GameObject()
    comp.flip_sprites_y(Direction.Left, first)
    assert first.scale == Vector2(1.0, -1.0)
    comp.flip_sprites(Direction.Left, FlipAxis.BOTH, second)
    assert second.scale == Vector2(-1.0, -1.0)


def test_flip_without_current_state_raises():
    comp, owner = make_component()
    with pytest.raises(KeyError):
        comp.flip_sprites_x(Direction.Left, owner)
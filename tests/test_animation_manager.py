import pytest
from PIL import Image

from etgkit.animation import Animation
from etgkit.animation_manager import AnimationManager
from etgkit.gameobject import Vector2


def make_anim(frames=4, frame_size=10, interval=0.1):
    texture = Image.new("RGBA", (frames * frame_size, frame_size))
    return Animation(texture, interval, frames, 1)


def test_add_sets_last_key_and_current_animation():
    manager = AnimationManager()
    anim = make_anim()
    manager.add("walk", anim)
    assert manager.last_key == "walk"
    assert manager.current_animation() is anim


def test_update_existing_key_advances_frame():
    manager = AnimationManager()
    anim = make_anim()
    manager.add("walk", anim)
    manager.update("walk", 0.1)
    assert anim.current_frame == 1
    assert manager.current_anim is anim
    assert manager.last_texture is anim.texture


def test_update_switches_last_key():
    manager = AnimationManager()
    first, second = make_anim(), make_anim()
    manager.add("a", first)
    manager.add("b", second)
    manager.update("a", 0.01)
    assert manager.last_key == "a"
    assert manager.current_animation() is first


def test_update_missing_key_restarts_last_animation():
    manager = AnimationManager()
    anim = make_anim()
    manager.add("walk", anim)
    manager.update("walk", 0.1)
    manager.update("missing", 0.1)
    assert anim.current_frame == 0
    assert manager.current_anim is anim
    assert manager.last_key == "walk"


def test_update_missing_key_on_empty_manager_creates_default():
    manager = AnimationManager()
    manager.update("missing", 0.1)
    assert "" in manager.animations
    assert manager.current_anim is manager.animations[""]


def test_set_origin_only_for_existing_keys():
    manager = AnimationManager()
    anim = make_anim()
    manager.add("walk", anim)
    manager.set_origin("walk", Vector2(3.0, 4.0))
    manager.set_origin("run", Vector2(7.0, 7.0))
    assert anim.origin == Vector2(3.0, 4.0)
    assert "run" not in manager.animations


def test_current_frame_image_has_frame_size():
    manager = AnimationManager()
    manager.add("walk", make_anim(frames=3, frame_size=8))
    image = manager.current_frame_image()
    assert image.size == (8, 8)


def test_current_frame_image_without_animation_raises():
    with pytest.raises(KeyError):
        AnimationManager().current_frame_image()


def test_is_finished_empty_manager_is_true():
    assert AnimationManager().is_finished() is True


def test_is_finished_after_reaching_last_frame():
    manager = AnimationManager()
    manager.add("walk", make_anim(frames=3))
    assert manager.is_finished() is False
    manager.update("walk", 0.1)
    manager.update("walk", 0.1)
    assert manager.is_finished() is True


def test_enum_keys_are_distinct_per_type():
    import enum

    class A(enum.Enum):
        ONE = 1

    class B(enum.Enum):
        ONE = 1

    manager = AnimationManager()
    first, second = make_anim(), make_anim()
    manager.add(A.ONE, first)
    manager.add(B.ONE, second)
    assert manager.animations[A.ONE] is first
    assert manager.animations[B.ONE] is second
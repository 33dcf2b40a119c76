import pytest

from etgkit.gameobject import GameObject
from etgkit.health import HealthComponent


def test_default_health_is_full():
    health = HealthComponent()
    assert health.current_health == 100.0
    assert health.health_percent == 1.0
    assert not health.is_dead


def test_damage_reduces_health_and_broadcasts():
    health = HealthComponent(4.0)
    source = GameObject()
    seen = []
    health.on_damage_taken.add_listener(lambda d, f, i: seen.append((d, f, i)))
    assert health.apply_damage(1.0, 150.0, source) is True
    assert health.current_health == 3.0
    assert seen == [(1.0, 150.0, source)]


def test_non_positive_damage_is_ignored():
    health = HealthComponent(4.0)
    assert health.apply_damage(0.0, 10.0) is False
    assert health.apply_damage(-1.0, 10.0) is False
    assert health.current_health == 4.0


def test_death_fires_once_and_health_clamps_at_zero():
    health = HealthComponent(2.0)
    deaths = []
    health.on_death.add_listener(deaths.append)
    assert health.apply_damage(5.0, 0.0, None)
    assert health.current_health == 0.0
    assert health.is_dead
    assert health.apply_damage(1.0, 0.0) is False
    assert deaths == [None]


def test_invulnerability_blocks_damage_until_timer_ends():
    health = HealthComponent(4.0)
    health.invulnerability_enabled = True
    assert health.apply_damage(1.0, 0.0) is False
    assert health.current_health == 4.0
    health.update(health.invulnerability_duration)
    assert health.invulnerability_enabled is False
    assert health.apply_damage(1.0, 0.0) is True


def test_damage_feedback_lasts_for_its_duration():
    health = HealthComponent(4.0)
    health.apply_damage(1.0, 0.0)
    assert health.is_showing_damage_feedback()
    health.update(health.damaged_visual_feedback_duration / 2)
    assert health.is_showing_damage_feedback()
    health.update(health.damaged_visual_feedback_duration)
    assert not health.is_showing_damage_feedback()


def test_heal_clamps_to_max_and_broadcasts():
    health = HealthComponent(4.0)
    healed = []
    health.on_healed.add_listener(lambda a, i: healed.append(a))
    health.apply_damage(1.0, 0.0)
    assert health.heal(3.0) is True
    assert health.current_health == health.max_health
    assert healed == [3.0]


def test_heal_rejected_when_dead_or_non_positive():
    health = HealthComponent(1.0)
    assert health.heal(0.0) is False
    health.apply_damage(1.0, 0.0)
    assert health.heal(1.0) is False
    assert health.current_health == 0.0


def test_health_percent_tracks_damage():
    health = HealthComponent(4.0)
    health.apply_damage(1.0, 0.0)
    assert health.health_percent == pytest.approx(health.current_health / health.max_health)
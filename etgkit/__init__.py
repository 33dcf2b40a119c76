"""Game-object core: events, type ids, liveness, game objects, timers, health, movement, collision and animation."""

__version__ = "0.1.0"
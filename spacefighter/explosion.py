"""Animated explosions played when objects are destroyed."""

from __future__ import annotations

import math
import random
from typing import Any

from spacefighter.gameobject import GameTime
from spacefighter.particles import WHITE
from spacefighter.vector2 import Vector2


class Explosion:
    """An explosion animation with an optional sound.

    The animation must offer ``update(game_time)``, ``frame(index)`` returning
    an object with a ``center``, a ``loop_count`` attribute, ``play()`` and
    ``is_playing()``. The sound, if any, must offer ``play()``.
    """

    def __init__(self, animation: Any = None, sound: Any = None) -> None:
        self.animation = animation
        self.sound = sound
        self.position: Vector2 = Vector2.ZERO
        self.rotation: float = 0.0
        self.scale: float = 1.0

    def update(self, game_time: GameTime) -> None:
        """Advance the animation."""
        if self.animation is not None:
            self.animation.update(game_time)

    def draw(self, sprite_batch: Any) -> None:
        """Draw the current frame while the explosion is playing."""
        if not self.is_active():
            return
        center = self.animation.frame(0).center
        sprite_batch.draw(
            self.animation,
            self.position,
            WHITE,
            center,
            Vector2.ONE * self.scale,
            self.rotation,
        )

    def activate(self, position: Vector2, scale: float = 1.0) -> None:
        """Start the explosion at a position with a random rotation."""
        if self.animation is None:
            raise RuntimeError("explosion has no animation")
        self.position = position
        self.scale = scale
        self.rotation = random.random() * 2 * math.pi
        self.animation.loop_count = 0
        self.animation.play()
        if self.sound is not None:
            self.sound.play()

    def is_active(self) -> bool:
        """Return True while the animation is playing."""
        return self.animation is not None and self.animation.is_playing()
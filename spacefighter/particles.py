"""Simple particle system: particles, initializers, updaters, renderers and emitters."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from spacefighter.vector2 import Vector2

logger = logging.getLogger(__name__)

Color = tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)


class _GameTime(Protocol):
    elapsed_time: float


class _ParticlePool(Protocol):
    def inactive_particle(self) -> Optional["Particle"]: ...


class Particle:
    """A particle that moves at constant velocity and fades out over its life span."""

    def __init__(self) -> None:
        self.position: Vector2 = Vector2.ZERO
        self.velocity: Vector2 = Vector2.ZERO
        self.color: Color = WHITE
        self.scale: float = 1.0
        self.life_span: float = 0.0
        self.life_remaining: float = 0.0
        self._life_percentage: float = 0.0

    def is_active(self) -> bool:
        """Return True while the particle has life remaining."""
        return self.life_remaining > 0

    @property
    def life_percentage(self) -> float:
        """Fraction of the life span left after the last update."""
        return self._life_percentage

    def initialize(self, position: Vector2) -> None:
        """Place the particle and restore its full life."""
        self.position = position
        self.life_remaining = self.life_span

    def update(self, game_time: _GameTime) -> None:
        """Age the particle and move it by its velocity."""
        elapsed = float(game_time.elapsed_time)
        self.life_remaining = max(self.life_remaining - elapsed, 0.0)
        if self.life_span > 0:
            self._life_percentage = self.life_remaining / self.life_span
        else:
            self._life_percentage = 0.0
        self.position = self.position + self.velocity * elapsed


class ParticleInitializer:
    """Gives particles a fixed life span, velocity, scale and color."""

    def __init__(self, color: Color = WHITE, scale: float = 1.0) -> None:
        self.color = color
        self.scale = scale
        self.life_span = 0.5
        self.velocity = Vector2.UNIT_Y * 50

    def initialize(self, particle: Particle, position: Vector2) -> None:
        """Configure the particle and start it at position."""
        particle.life_span = self.life_span
        particle.velocity = self.velocity
        particle.scale = self.scale
        particle.color = self.color
        particle.initialize(position)


class ParticleUpdater:
    """Advances particles by letting them update themselves."""

    def update(self, particle: Particle, game_time: _GameTime) -> None:
        """Update one particle."""
        particle.update(game_time)


class ParticleRenderer:
    """Draws particles with a single texture, centred on their position."""

    def __init__(self, texture: Any = None) -> None:
        self.texture = texture

    def draw(self, particle: Particle, sprite_batch: Any) -> None:
        """Draw the particle; nothing is drawn while no texture is set."""
        if self.texture is None:
            logger.warning("No texture set for particle renderer!")
            return
        sprite_batch.draw(
            self.texture,
            particle.position,
            particle.color,
            self.texture.center,
            Vector2.ONE * particle.scale,
        )


class ParticleEmitter:
    """Takes inactive particles from a pool and starts them at its position."""

    def __init__(self, initializer: ParticleInitializer) -> None:
        self.initializer = initializer
        self.position: Vector2 = Vector2.ZERO
        self.max_particles_per_second: int = 100
        self.remaining_particles: float = 0.0
        self.pool: Optional[_ParticlePool] = None

    def emit(self, amount: float, game_time: _GameTime) -> None:
        """Emit particles; amount in [0, 1] scales the maximum rate."""
        exact = amount * self.max_particles_per_second * float(game_time.elapsed_time)
        count = int(exact)
        self.remaining_particles += exact - count
        if count and self.pool is None:
            raise RuntimeError("particle emitter has no particle pool")
        while count:
            particle = self.pool.inactive_particle()
            if particle is None:
                self.remaining_particles += count
                return
            self.initializer.initialize(particle, self.position)
            count -= 1
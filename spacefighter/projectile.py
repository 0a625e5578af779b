"""Projectiles fired by weapons."""

from __future__ import annotations

from typing import Any, ClassVar

from spacefighter.flags import CollisionType
from spacefighter.gameobject import GameObject, GameTime
from spacefighter.particles import WHITE
from spacefighter.vector2 import Vector2


class Projectile(GameObject):
    """A shot that travels in a straight line until it leaves the screen."""

    texture: ClassVar[Any] = None

    def __init__(self) -> None:
        super().__init__()
        self.direction: Vector2 = -Vector2.UNIT_Y
        self.collision_radius = 9
        self.speed: float = 500.0
        self.damage: float = 1.0
        self.was_shot_by_player: bool = True

    @staticmethod
    def set_texture(texture: Any) -> None:
        """Set the texture shared by all projectiles."""
        Projectile.texture = texture

    def update(self, game_time: GameTime) -> None:
        """Move the projectile and deactivate it once it is off the screen."""
        if self.is_active():
            self.translate_position(self.direction * self.speed * game_time.elapsed_time)
            position = self.position
            texture = Projectile.texture
            size = texture.size if texture is not None else Vector2.ZERO
            screen = GameObject.viewport
            if (
                position.y < -size.y
                or position.x < -size.x
                or position.y > screen.height + size.y
                or position.x > screen.width + size.x
            ):
                self.deactivate()
        super().update(game_time)

    def draw(self, sprite_batch: Any) -> None:
        """Draw the projectile centred on its position, faded by the level's alpha."""
        if not self.is_active():
            return
        level = GameObject.current_level
        alpha = level.alpha if level is not None else 1.0
        texture = Projectile.texture
        color = tuple(component * alpha for component in WHITE)
        sprite_batch.draw(texture, self.position, color, texture.center)

    def activate(self, position: Vector2, was_shot_by_player: bool = True) -> None:
        """Place the projectile and make it active."""
        self.was_shot_by_player = was_shot_by_player
        self.set_position(position)
        super().activate()

    def collision_type(self) -> CollisionType:
        """Player or enemy projectile, depending on who fired it."""
        owner = CollisionType.PLAYER if self.was_shot_by_player else CollisionType.ENEMY
        return owner | CollisionType.PROJECTILE

    def __str__(self) -> str:
        return ("Player" if self.was_shot_by_player else "Enemy") + " Projectile"
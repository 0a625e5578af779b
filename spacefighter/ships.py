"""Ships: the shared ship base, the player's ship, enemy ships and the boss."""

from __future__ import annotations

import logging
import math
from abc import abstractmethod
from typing import Any, Optional, Union

from spacefighter.flags import CollisionType, TriggerType
from spacefighter.gameobject import Attachable, Attachment, GameObject, GameTime
from spacefighter.input import Key
from spacefighter.particles import WHITE
from spacefighter.projectile import Projectile
from spacefighter.vector2 import Vector2
from spacefighter.weapons import Blaster, Weapon

logger = logging.getLogger(__name__)

_DIAGONAL = math.sqrt(0.5)
_SCREEN_PADDING = 4
_WEAPON_OFFSET = Vector2.UNIT_Y * -20


def _faded(alpha: float) -> tuple[float, ...]:
    return tuple(component * alpha for component in WHITE)


def _level_alpha() -> float:
    level = GameObject.current_level
    return level.alpha if level is not None else 1.0


class Ship(GameObject, Attachable):
    """A game object with hit points that carries attachments such as weapons."""

    def __init__(self) -> None:
        super().__init__()
        self.set_position(0, 0)
        self.collision_radius = 10
        self.speed: float = 300.0
        self.max_hit_points: float = 3.0
        self.hit_points: float = self.max_hit_points
        self.invulnerable: bool = False
        self._attachments: dict[str, Attachment] = {}

    def _sorted_attachments(self) -> list[Attachment]:
        return [self._attachments[key] for key in sorted(self._attachments)]

    def update(self, game_time: GameTime) -> None:
        """Update every attachment, then the ship itself."""
        for attachment in self._sorted_attachments():
            attachment.update(game_time)
        super().update(game_time)

    @abstractmethod
    def draw(self, sprite_batch: Any) -> None:
        """Render the ship."""

    def hit(self, damage: float) -> None:
        """Take damage; at zero hit points the ship is destroyed and explodes."""
        if self.invulnerable:
            return
        self.hit_points -= damage
        if self.hit_points > 0:
            return
        self.deactivate()
        level = GameObject.current_level
        if level is not None:
            level.spawn_explosion(self)

    def attach_item(self, item: Optional[Attachment], position: Vector2) -> None:
        """Attach an item at an offset from the ship's centre, keyed by the item's key."""
        if item is None:
            return
        item.attach_to(self, position)
        self._attachments[item.key] = item

    def get_attachment(self, key: Union[str, int]) -> Optional[Attachment]:
        """Return the attachment with a key, or at an index in key order, or None."""
        if isinstance(key, str):
            return self._attachments.get(key)
        ordered = self._sorted_attachments()
        if 0 <= key < len(ordered):
            return ordered[key]
        return None

    def initialize(self) -> None:
        """Restore the ship's hit points to the maximum."""
        self.hit_points = self.max_hit_points

    def fire_weapons(self, trigger_type: TriggerType = TriggerType.ALL) -> None:
        """Fire every attached weapon with the given trigger."""
        for attachment in self._sorted_attachments():
            if attachment.attachment_type != "Weapon":
                continue
            attachment.fire(trigger_type)

    def weapon(self, key: str) -> Optional[Weapon]:
        """Return the attached weapon with a key, or None."""
        attachment = self._attachments.get(key)
        return attachment if isinstance(attachment, Weapon) else None

    def __str__(self) -> str:
        return "Ship"


class PlayerShip(Ship):
    """The ship steered by the player."""

    def __init__(self, texture_type: Optional[type] = None, sound_type: Optional[type] = None) -> None:
        super().__init__()
        self.texture_type = texture_type
        self.sound_type = sound_type
        self.texture: Any = None
        self.desired_direction: Vector2 = Vector2.ZERO
        self.velocity: Vector2 = Vector2.ZERO
        self._responsiveness: float = 0.0
        self.confined_to_screen: bool = False

    @property
    def responsiveness(self) -> float:
        """How quickly the velocity follows the desired direction, in [0, 1]."""
        return self._responsiveness

    @responsiveness.setter
    def responsiveness(self, value: float) -> None:
        self._responsiveness = min(max(value, 0.0), 1.0)

    def load_content(self, resource_manager: Any) -> None:
        """Load the ship's texture and fire sound and place it near the bottom of the screen."""
        if self.texture_type is None or self.sound_type is None:
            raise RuntimeError("player ship needs a texture type and a sound type to load content")
        self.confine_to_screen()
        self.responsiveness = 0.1
        self.texture = resource_manager.load(self.texture_type, "Textures\\PlayerShip.png")
        sound = resource_manager.load(self.sound_type, "Audio\\Effects\\Laser.wav")
        sound.volume = 0.5
        blaster = self.weapon("Main Blaster")
        if blaster is not None:
            blaster.fire_sound = sound
        self.set_position(GameObject.viewport.center + Vector2.UNIT_Y * 300)

    def handle_input(self, input_state: Any) -> None:
        """Steer from the arrow keys and fire the primary trigger with space."""
        if not self.is_active():
            return
        dx = dy = 0.0
        if input_state.is_key_down(Key.DOWN):
            dy += 1
        if input_state.is_key_down(Key.UP):
            dy -= 1
        if input_state.is_key_down(Key.RIGHT):
            dx += 1
        if input_state.is_key_down(Key.LEFT):
            dx -= 1
        direction = Vector2(dx, dy)
        if dx != 0 and dy != 0:
            direction = direction * _DIAGONAL

        trigger = TriggerType.NONE
        if input_state.is_key_down(Key.SPACE):
            trigger |= TriggerType.PRIMARY

        self.set_desired_direction(direction)
        if trigger != TriggerType.NONE:
            self.fire_weapons(trigger)

    def update(self, game_time: GameTime) -> None:
        """Ease the velocity toward the desired direction, move, and keep on screen."""
        target = self.desired_direction * self.speed * game_time.elapsed_time
        self.velocity = Vector2.lerp(self.velocity, target, self.responsiveness)
        self.translate_position(self.velocity)

        if self.confined_to_screen:
            screen = GameObject.viewport
            left = top = _SCREEN_PADDING
            right = screen.width - _SCREEN_PADDING
            bottom = screen.height - _SCREEN_PADDING
            half = self.half_dimensions()
            if self.position.x - half.x < left:
                self.set_position(left + half.x, self.position.y)
                self.velocity = Vector2(0.0, self.velocity.y)
            if self.position.x + half.x > right:
                self.set_position(right - half.x, self.position.y)
                self.velocity = Vector2(0.0, self.velocity.y)
            if self.position.y - half.y < top:
                self.set_position(self.position.x, top + half.y)
                self.velocity = Vector2(self.velocity.x, 0.0)
            if self.position.y + half.y > bottom:
                self.set_position(self.position.x, bottom - half.y)
                self.velocity = Vector2(self.velocity.x, 0.0)

        super().update(game_time)

    def draw(self, sprite_batch: Any) -> None:
        """Draw the ship centred on its position, faded by the level's alpha."""
        if not self.is_active():
            return
        sprite_batch.draw(self.texture, self.position, _faded(_level_alpha()), self.texture.center)

    def half_dimensions(self) -> Vector2:
        """Half the texture's size, or the collision radius while no texture is loaded."""
        if self.texture is None:
            return super().half_dimensions()
        return self.texture.center

    def set_desired_direction(self, direction: Vector2) -> None:
        """Set the direction the player wants to move in."""
        self.desired_direction = direction

    def confine_to_screen(self, confined: bool = True) -> None:
        """Keep the ship from leaving the screen, or allow it again."""
        self.confined_to_screen = confined

    def collision_type(self) -> CollisionType:
        return CollisionType.PLAYER | CollisionType.SHIP

    def __str__(self) -> str:
        return "Player Ship"


class EnemyShip(Ship):
    """An enemy ship that becomes active after a delay and leaves once off screen."""

    def __init__(self) -> None:
        super().__init__()
        self.max_hit_points = 1.0
        self.collision_radius = 20
        self.delay_seconds: float = 0.0
        self.activation_seconds: float = 0.0
        self._enemy_projectiles: list[Projectile] = []

    def update(self, game_time: GameTime) -> None:
        """Count down the activation delay, retire the ship once it has left the screen."""
        if self.delay_seconds > 0:
            self.delay_seconds -= game_time.elapsed_time
            if self.delay_seconds <= 0:
                GameObject.activate(self)

        if self.is_active():
            self.activation_seconds += game_time.elapsed_time
            if self.activation_seconds > 2 and not self.is_on_screen():
                self.deactivate()

        super().update(game_time)

    def initialize(self, position: Vector2, delay_seconds: float) -> None:
        """Arm the ship, place it, and set the delay before it activates."""
        blaster = Blaster("Enemy Blaster")
        blaster.projectile_pool = self._enemy_projectiles
        self.attach_item(blaster, _WEAPON_OFFSET)
        self.set_position(position)
        self.delay_seconds = delay_seconds
        Ship.initialize(self)

    def fire(self, trigger_type: TriggerType) -> None:
        """Fire the ship's weapons with the given trigger."""
        self.fire_weapons(trigger_type)

    def collision_type(self) -> CollisionType:
        return CollisionType.ENEMY | CollisionType.SHIP

    def __str__(self) -> str:
        return "Enemy Ship"


class BioEnemyShip(EnemyShip):
    """An enemy that weaves from side to side as it descends, firing every few seconds."""

    def __init__(self) -> None:
        super().__init__()
        self.speed = 150.0
        self.max_hit_points = 1.0
        self.collision_radius = 20
        self.texture: Any = None
        self.time_between_shots: float = 2.0
        self.time_since_last_shot: float = 0.0
        self.projectiles: list[Projectile] = [Projectile() for _ in range(100)]

    def update(self, game_time: GameTime) -> None:
        """Weave down the screen and rearm and fire once enough time has passed."""
        elapsed = game_time.elapsed_time
        if self.is_active():
            x = math.sin(game_time.total_time * math.pi + self.index)
            x *= self.speed * elapsed * 1.4
            self.translate_position(x, self.speed * elapsed)
            if not self.is_on_screen():
                self.deactivate()

        self.time_since_last_shot += elapsed
        if self.time_since_last_shot > self.time_between_shots:
            blaster = Blaster("Enemy Blaster")
            blaster.projectile_pool = self.projectiles
            self.attach_item(blaster, _WEAPON_OFFSET)
            self.fire(TriggerType.NONE)
            self.fire_weapons(TriggerType.NONE)
            logger.info("Enemy Ship is Firing!")
            self.time_since_last_shot = 0.0

        super().update(game_time)

    def draw(self, sprite_batch: Any) -> None:
        """Draw the ship upside down, faded by the level's alpha."""
        if not self.is_active():
            return
        sprite_batch.draw(
            self.texture,
            self.position,
            _faded(_level_alpha()),
            self.texture.center,
            Vector2.ONE,
            math.pi,
            1,
        )


class Boss(Ship):
    """A large enemy that sweeps back and forth across the screen."""

    def __init__(self) -> None:
        super().__init__()
        self.speed = 150.0
        self.max_hit_points = 10.0
        self.collision_radius = 150
        self.texture: Any = None
        self.horizontal_speed: float = 100.0
        self.direction: int = 1

    def update(self, game_time: GameTime) -> None:
        """Bob while active, then sweep sideways and turn at the screen edges."""
        elapsed = game_time.elapsed_time
        if self.is_active():
            x = math.sin(game_time.total_time * math.pi + self.index)
            x *= self.speed * elapsed * 1.4
            y = math.cos(game_time.total_time * math.pi * 0.5 + self.index)
            y *= 30.0 * elapsed
            self.translate_position(x, y)

        super().update(game_time)

        x = self.position.x + self.horizontal_speed * elapsed * self.direction
        half_width = self.half_dimensions().x / 2
        screen_width = float(GameObject.viewport.width)
        if x - half_width <= 0:
            x = half_width
            self.direction = 1
        elif x + half_width >= screen_width:
            x = screen_width - half_width
            self.direction = -1
        self.set_position(x, self.position.y)

    def draw(self, sprite_batch: Any) -> None:
        """Draw the boss upside down, faded by the level's alpha."""
        if not self.is_active():
            return
        sprite_batch.draw(
            self.texture,
            self.position,
            _faded(_level_alpha()),
            self.texture.center,
            Vector2.ONE,
            math.pi,
            1,
        )

    def hit(self, damage: float) -> None:
        """Take damage like any ship."""
        super().hit(damage)
        logger.info("OUCH")

    def collision_type(self) -> CollisionType:
        return CollisionType.ENEMY | CollisionType.SHIP

    def __str__(self) -> str:
        return "BOSS Ship"
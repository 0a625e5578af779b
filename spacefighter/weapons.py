"""Weapons that fire projectiles from a pool."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Optional, Sequence

from spacefighter.flags import TriggerType
from spacefighter.gameobject import Attachable, Attachment, GameObject, GameTime
from spacefighter.projectile import Projectile
from spacefighter.vector2 import Vector2


class Weapon(Attachment):
    """Base for weapons that are attached to a game object and fired by triggers."""

    def __init__(
        self,
        key: str,
        is_attached_to_player: bool = True,
        active: bool = True,
        trigger_type: TriggerType = TriggerType.PRIMARY,
    ) -> None:
        self._key = key
        self.is_attached_to_player = is_attached_to_player
        self._active = active
        self.trigger_type = trigger_type
        self.game_object: Optional[GameObject] = None
        self.offset: Vector2 = Vector2.ZERO
        self.projectile_pool: Optional[Sequence[Projectile]] = None
        self.fire_sound: Any = None

    @property
    def key(self) -> str:
        return self._key

    @property
    def attachment_type(self) -> str:
        return "Weapon"

    def attach_to(self, attachable: Attachable, position: Vector2) -> None:
        """Mount the weapon on a game object at an offset from its centre."""
        self.game_object = attachable if isinstance(attachable, GameObject) else None
        self.offset = position

    def update(self, game_time: GameTime) -> None:
        """Advance the weapon by one frame; plain weapons do nothing."""

    @abstractmethod
    def fire(self, trigger_type: TriggerType) -> None:
        """Try to fire the weapon with the given trigger."""

    def activate(self) -> None:
        """Enable the weapon."""
        self._active = True

    def deactivate(self) -> None:
        """Disable the weapon."""
        self._active = False

    def is_active(self) -> bool:
        """Return True if the weapon and the object carrying it are both active."""
        return self._active and self.game_object is not None and self.game_object.is_active()

    def position(self) -> Vector2:
        """Return the weapon's position on the screen."""
        if self.game_object is None:
            return self.offset
        return self.game_object.position + self.offset

    def next_projectile(self) -> Optional[Projectile]:
        """Return the first inactive projectile in the pool, or None."""
        return next(
            (p for p in self.projectile_pool or () if not p.is_active()),
            None,
        )


class Blaster(Weapon):
    """A weapon that fires one projectile per shot, then cools down."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(key, **kwargs)
        self.cooldown: float = 0.0
        self.cooldown_seconds: float = 0.35

    def update(self, game_time: GameTime) -> None:
        """Let the cooldown run down."""
        if self.cooldown > 0:
            self.cooldown -= game_time.elapsed_time

    def can_fire(self) -> bool:
        """Return True once the cooldown has run out."""
        return self.cooldown <= 0

    def reset_cooldown(self) -> None:
        """Make the blaster ready to fire at once."""
        self.cooldown = 0.0

    def fire(self, trigger_type: TriggerType) -> None:
        """Fire a projectile if active, cooled down and the trigger matches."""
        if not self.is_active():
            return
        if not self.can_fire():
            return
        if not trigger_type.contains(self.trigger_type):
            return
        projectile = self.next_projectile()
        if projectile is None:
            return
        if self.fire_sound is not None:
            self.fire_sound.play()
        projectile.activate(self.position(), self.is_attached_to_player)
        self.cooldown = self.cooldown_seconds
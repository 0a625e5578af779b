"""Base game object, timing values, screen size and attachment interfaces."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union

from spacefighter.flags import CollisionType
from spacefighter.vector2 import Vector2


@dataclass
class GameTime:
    """Time elapsed since the previous frame and since the game started, in seconds."""

    elapsed_time: float = 0.0
    total_time: float = 0.0

    def advance(self, seconds: float) -> None:
        """Start a new frame that lasted the given number of seconds."""
        self.elapsed_time = seconds
        self.total_time += seconds


@dataclass(frozen=True)
class Viewport:
    """The size of the game screen in pixels."""

    width: int = 1600
    height: int = 900

    @property
    def center(self) -> Vector2:
        return Vector2(self.width / 2, self.height / 2)


class Attachable(ABC):
    """An object that can have items attached to it."""

    @abstractmethod
    def get_attachment(self, key: Union[str, int]) -> Optional["Attachment"]:
        """Return the attachment stored under a key or at an index, or None."""


class Attachment(ABC):
    """An item that can be attached to an attachable object."""

    @abstractmethod
    def attach_to(self, attachable: Attachable, position: Vector2) -> None:
        """Attach the item at an offset from the attachable's position."""

    @abstractmethod
    def update(self, game_time: GameTime) -> None:
        """Advance the item by one frame."""

    @property
    @abstractmethod
    def key(self) -> str:
        """The key under which the item is looked up."""

    @property
    @abstractmethod
    def attachment_type(self) -> str:
        """The kind of attachment."""


class GameObject(ABC):
    """Base for everything that is updated, drawn and checked for collisions."""

    current_level: ClassVar[Any] = None
    viewport: ClassVar[Viewport] = Viewport()
    _counter: ClassVar["itertools.count[int]"] = itertools.count()

    def __init__(self) -> None:
        self.index: int = next(GameObject._counter)
        self.collision_radius: float = 0.0
        self._active = False
        self._position = Vector2.ZERO
        self._previous_position = Vector2.ZERO

    @staticmethod
    def set_current_level(level: Any) -> None:
        """Set the level that game objects report their sector positions to."""
        GameObject.current_level = level

    @property
    def position(self) -> Vector2:
        return self._position

    @property
    def previous_position(self) -> Vector2:
        return self._previous_position

    def update(self, game_time: GameTime) -> None:
        """Report the object's position to the current level while active."""
        if not self.is_active():
            return
        level = GameObject.current_level
        if level is None:
            return
        level.update_sector_position(self)

    @abstractmethod
    def draw(self, sprite_batch: Any) -> None:
        """Render the object."""

    @abstractmethod
    def collision_type(self) -> CollisionType:
        """Return the object's collision type."""

    @abstractmethod
    def __str__(self) -> str: ...

    def is_active(self) -> bool:
        """Return True if the object is active."""
        return self._active

    def activate(self) -> None:
        """Make the object active."""
        self._active = True

    def deactivate(self) -> None:
        """Make the object inactive."""
        self._active = False

    def half_dimensions(self) -> Vector2:
        """Return half the object's extent; by default the collision radius both ways."""
        return Vector2(self.collision_radius, self.collision_radius)

    def hit(self, damage: float) -> None:
        """Apply damage to the object; plain objects ignore it."""

    def has_mask(self, mask: CollisionType) -> bool:
        """Return True if the mask shares any bit with the object's collision type."""
        return mask.contains(self.collision_type())

    def is_mask(self, mask: CollisionType) -> bool:
        """Return True if the object's collision type is exactly the mask."""
        return self.collision_type() == mask

    def set_position(self, x: Union[float, Vector2], y: Optional[float] = None) -> None:
        """Move the object to (x, y), or to a vector given alone; remembers the old place."""
        if y is None:
            x, y = x.x, x.y
        self._previous_position = self._position
        self._position = Vector2(x, y)

    def translate_position(self, dx: Union[float, Vector2], dy: Optional[float] = None) -> None:
        """Move the object by (dx, dy), or by a vector given alone."""
        if dy is None:
            dx, dy = dx.x, dx.y
        self.set_position(self._position.x + dx, self._position.y + dy)

    def is_on_screen(self) -> bool:
        """Return True if any part of the object lies within the viewport."""
        half = self.half_dimensions()
        screen = GameObject.viewport
        pos = self._position
        if pos.y - half.y >= screen.height:
            return False
        if pos.y + half.y <= 0:
            return False
        if pos.x - half.x >= screen.width:
            return False
        if pos.x + half.x <= 0:
            return False
        return True
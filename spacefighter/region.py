"""Axis-aligned integer rectangle."""

from __future__ import annotations

from dataclasses import dataclass

from spacefighter.vector2 import Vector2


@dataclass
class Region:
    """A rectangle given by its upper-left corner, width and height."""

    x: int = 0
    y: int = 0
    width: int = 1
    height: int = 1

    @classmethod
    def from_point(cls, position: tuple[int, int], width: int, height: int) -> Region:
        """Create a region whose upper-left corner is the given point."""
        px, py = position
        return cls(px, py, width, height)

    def set(self, x: int, y: int, width: int, height: int) -> None:
        """Set all components of the region."""
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top_left(self) -> tuple[int, int]:
        return self.left, self.top

    @property
    def top_right(self) -> tuple[int, int]:
        return self.right, self.top

    @property
    def bottom_left(self) -> tuple[int, int]:
        return self.left, self.bottom

    @property
    def bottom_right(self) -> tuple[int, int]:
        return self.right, self.bottom

    @property
    def center(self) -> Vector2:
        return Vector2(*self.top_left) + Vector2(self.width, self.height) / 2

    def translate(self, dx: int | tuple[int, int], dy: int | None = None) -> None:
        """Move the region by (dx, dy), or by a point given as the only argument."""
        if dy is None:
            dx, dy = dx
        self.x += dx
        self.y += dy
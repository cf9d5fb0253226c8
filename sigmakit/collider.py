"""Axis-aligned box colliders used for collision and damage checks."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Protocol, Sequence

DEFAULT_DEBUG_TEXTURE = "assets/core/debug_green.png"
DEBUG_DRAW_DEPTH = 1000.0


class ColliderFlag(enum.IntFlag):
    """Bit flags deciding which colliders may interact."""

    PLAYER = 1 << 0
    ENEMY = 1 << 1
    UI = 1 << 2
    BULLET = 1 << 3


class ColliderType(enum.Enum):
    """Whether a collider blocks movement or deals damage."""

    COLLISION = 0
    DAMAGE = 1


@dataclass
class Box:
    """Extents of a non-rotating box measured from its centre."""

    left: float = 0.5
    right: float = 0.5
    top: float = 0.5
    bottom: float = 0.5
    depth: float = 25.0
    offset: tuple[float, float] = (0.0, 0.0)

    def set(
        self,
        left: float,
        right: float,
        top: float,
        bottom: float,
        depth: float,
        offset: Sequence[float] = (0.0, 0.0),
    ) -> None:
        """Set the four side distances (taken as absolute values), depth and offset."""
        self.left = abs(left)
        self.right = abs(right)
        self.top = abs(top)
        self.bottom = abs(bottom)
        self.depth = depth
        self.offset = (float(offset[0]), float(offset[1]))

    def set_from_scale(self, scale: Sequence[float], offset: Sequence[float] = (0.0, 0.0)) -> None:
        """Size the box from an (x, y, z) scale, centred on the offset."""
        sx, sy, sz = scale[0], scale[1], scale[2]
        self.left = self.right = sx / 2
        self.top = self.bottom = sy / 2
        self.depth = sz
        self.offset = (float(offset[0]), float(offset[1]))

    def sides(self, position: Sequence[float]) -> tuple[float, float, float, float]:
        """Return the absolute (left, right, top, bottom) edges at a position."""
        x, y = position[0] + self.offset[0], position[1] + self.offset[1]
        return (x - self.left, x + self.right, y + self.top, y - self.bottom)

    def scale(self) -> tuple[float, float]:
        """Return the box's full (width, height)."""
        return (self.left + self.right, self.top + self.bottom)


class _Transform(Protocol):
    position: Any
    scale: Any


class _Drawable(Protocol):
    transform: _Transform

    def set_texture(self, path: str) -> None: ...


class BoxCollider:
    """A rectangular collider attached to an owning object."""

    def __init__(
        self,
        flag: int,
        type: ColliderType,
        size: Sequence[float] | None = None,
        depth: float = 25.0,
        offset: Sequence[float] = (0.0, 0.0),
    ) -> None:
        self.enabled = True
        self.flag = ColliderFlag(flag)
        self.type = ColliderType(type)
        self.damage_type: Any = None
        self.damage = 0.0
        self.owner: Any = None
        self.box = Box()
        if size is not None:
            if len(size) != 4:
                raise ValueError("size must hold four values: left, right, top, bottom")
            left, right, top, bottom = size
            self.box.set(left, right, top, bottom, depth, offset)

    def debug_draw(self, debug: _Drawable, parent: _Drawable, path: str = DEFAULT_DEBUG_TEXTURE) -> None:
        """Place and texture an actor so it outlines this collider on its parent."""
        debug.transform.scale = self.box.scale()
        px, py = parent.transform.position[0], parent.transform.position[1]
        ox, oy = self.box.offset
        debug.transform.position = (px + ox, py + oy, DEBUG_DRAW_DEPTH)
        debug.set_texture(path)
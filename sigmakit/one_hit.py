"""A damage collider that is live for exactly one collision pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from sigmakit.collider import BoxCollider, ColliderFlag, ColliderType


@dataclass
class _Transform:
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: tuple[float, float] = (1.0, 1.0)


class OneHitCollider:
    """An object whose damage box hits players and enemies once per trigger."""

    def __init__(self, id: Any) -> None:
        self.id = id
        self.transform = _Transform()
        self.start_handled = False
        self.collider = BoxCollider(ColliderFlag.PLAYER | ColliderFlag.ENEMY, ColliderType.DAMAGE)

    def trigger(
        self,
        position: Sequence[float],
        size: Sequence[float],
        damage: float,
        owner: Any,
        debug_draw: bool = False,
    ) -> None:
        """Place a damage box of ``size`` at ``position`` and arm it.

        ``debug_draw`` is accepted for callers that request a visual outline;
        no outline object is spawned.
        """
        self.transform.position = (float(position[0]), float(position[1]), float(position[2]))
        self.collider.box.set_from_scale(size)
        self.collider.damage = damage
        self.collider.owner = owner
        self.collider.enabled = True
        self.start_handled = False

    def update(self, delta_time: float) -> None:
        """Disarm the collider once the frame that armed it has passed."""
        if self.collider.enabled:
            self.collider.enabled = False
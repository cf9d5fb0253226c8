"""Pairwise box-collision detection and the events it dispatches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

from sigmakit.collider import BoxCollider, ColliderType


def _object_id(obj: Any) -> Any:
    return getattr(obj, "id", None)


@dataclass(frozen=True)
class CollisionEvent:
    """Tells ``receiver`` that it touched the collider owned by ``other``."""

    receiver: Any
    other: Any
    type: ColliderType

    def __str__(self) -> str:
        return f'Collision Event between "{self.receiver}" and "{_object_id(self.other)}"\n'


@dataclass(frozen=True)
class DamageEvent:
    """Tells ``receiver`` that a damage collider owned by ``other`` hit it."""

    receiver: Any
    other: Any
    type: ColliderType
    damage: float
    damage_type: Any = None

    def __str__(self) -> str:
        return (
            f'Damage Event on "{self.receiver}" from "{_object_id(self.other)}": '
            f"{self.damage} damage\n"
        )


Event = Union[CollisionEvent, DamageEvent]


def _active_collider(obj: Any) -> Optional[BoxCollider]:
    collider = getattr(obj, "collider", None)
    if collider is None or not collider.enabled:
        return None
    return collider


class CollisionSystem:
    """Tests every pair of objects for overlap and reports hits to a callback."""

    def __init__(self, callback: Callable[[Event], Any]) -> None:
        self._callback = callback

    def _dispatch(self, collider: BoxCollider, target_id: Any) -> None:
        if collider.type is ColliderType.DAMAGE:
            event: Event = DamageEvent(
                target_id, collider.owner, collider.type, collider.damage, collider.damage_type
            )
        else:
            event = CollisionEvent(target_id, collider.owner, collider.type)
        self._callback(event)

    def update_collisions(self, objects: Mapping[Any, Any]) -> None:
        """Check each unordered pair of objects once, in mapping order.

        Objects expose ``id``, ``transform.position`` (x, y, z) and an optional
        ``collider``. For every overlapping pair whose flags share a bit, each
        collider sends one event aimed at the other object.
        """
        items = list(objects.values())
        for index, first in enumerate(items):
            col1 = _active_collider(first)
            if col1 is None:
                continue
            pos1 = first.transform.position
            depth1 = col1.box.depth
            sides1 = col1.box.sides(pos1)

            for second in items[index + 1:]:
                col2 = _active_collider(second)
                if col2 is None:
                    continue
                if not (col1.flag & col2.flag):
                    continue

                pos2 = second.transform.position
                if abs(pos1[2] - pos2[2]) > depth1 + col2.box.depth:
                    continue

                sides2 = col2.box.sides(pos2)
                if sides1[1] < sides2[0] or sides1[0] > sides2[1]:
                    continue
                if sides1[2] < sides2[3] or sides1[3] > sides2[2]:
                    continue

                self._dispatch(col1, second.id)
                self._dispatch(col2, first.id)
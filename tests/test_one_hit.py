from types import SimpleNamespace

from sigmakit.collider import BoxCollider, ColliderFlag, ColliderType
from sigmakit.collision import CollisionSystem, DamageEvent
from sigmakit.one_hit import OneHitCollider


def test_collider_targets_players_and_enemies():
    hit = OneHitCollider(5)
    assert hit.collider.flag == ColliderFlag.PLAYER | ColliderFlag.ENEMY
    assert hit.collider.type is ColliderType.DAMAGE


def test_trigger_arms_and_sizes_collider():
    owner = SimpleNamespace(id=1)
    hit = OneHitCollider(5)
    hit.collider.enabled = False
    hit.start_handled = True

    hit.trigger((3.0, 4.0, 0.0), (2.0, 6.0, 10.0), 12.0, owner)

    assert hit.transform.position == (3.0, 4.0, 0.0)
    assert hit.collider.box.scale() == (2.0, 6.0)
    assert hit.collider.box.depth == 10.0
    assert hit.collider.damage == 12.0
    assert hit.collider.owner is owner
    assert hit.collider.enabled is True
    assert hit.start_handled is False


def test_update_disarms_collider():
    hit = OneHitCollider(5)
    hit.trigger((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), 1.0, None)
    hit.update(0.016)
    assert hit.collider.enabled is False
    hit.update(0.016)
    assert hit.collider.enabled is False


def test_hits_once_in_collision_pass():
    events = []
    system = CollisionSystem(events.append)
    owner = SimpleNamespace(id=1)
    enemy = SimpleNamespace(
        id=2,
        transform=SimpleNamespace(position=(0.0, 0.0, 0.0)),
        collider=BoxCollider(ColliderFlag.ENEMY, ColliderType.COLLISION),
    )
    hit = OneHitCollider(3)
    hit.trigger((0.0, 0.0, 0.0), (4.0, 4.0, 4.0), 9.0, owner, debug_draw=True)

    system.update_collisions({3: hit, 2: enemy})
    damage = [e for e in events if isinstance(e, DamageEvent)]
    assert len(damage) == 1
    assert damage[0].receiver == 2
    assert damage[0].damage == 9.0
    assert damage[0].other is owner

    events.clear()
    hit.update(0.016)
    system.update_collisions({3: hit, 2: enemy})
    assert events == []
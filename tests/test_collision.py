from dataclasses import dataclass
from types import SimpleNamespace

from sigmakit.collider import BoxCollider, ColliderFlag, ColliderType
from sigmakit.collision import CollisionEvent, CollisionSystem, DamageEvent


@dataclass
class Thing:
    id: int
    transform: SimpleNamespace
    collider: object = None


def make_thing(obj_id, position, flag=ColliderFlag.PLAYER, kind=ColliderType.COLLISION):
    thing = Thing(obj_id, SimpleNamespace(position=position))
    collider = BoxCollider(flag, kind)
    collider.owner = thing
    thing.collider = collider
    return thing


def sides_of(thing):
    return thing.collider.box.sides(thing.transform.position)


def test_overlap_sends_event_to_each_side():
    events = []
    system = CollisionSystem(events.append)
    a = make_thing(1, (0.0, 0.0, 0.0))
    b = make_thing(2, (0.5, 0.0, 0.0))
    system.update_collisions({1: a, 2: b})

    assert len(events) == 2
    first, second = events
    assert isinstance(first, CollisionEvent)
    assert isinstance(second, CollisionEvent)
    assert first.receiver == 2
    assert first.other is a
    assert second.receiver == 1
    assert second.other is b
    assert first.type is ColliderType.COLLISION
    assert second.type is ColliderType.COLLISION


def test_touching_edges_count_as_collision():
    events = []
    system = CollisionSystem(events.append)
    a = make_thing(1, (0.0, 0.0, 0.0))
    b = make_thing(2, (1.0, 0.0, 0.0))
    assert sides_of(a)[1] == sides_of(b)[0]

    system.update_collisions({1: a, 2: b})
    assert len(events) == 2
    assert {event.receiver for event in events} == {1, 2}


def test_separated_boxes_do_not_collide():
    events = []
    system = CollisionSystem(events.append)
    a = make_thing(1, (0.0, 0.0, 0.0))
    b = make_thing(2, (1.5, 0.0, 0.0))
    c = make_thing(3, (0.0, 2.0, 0.0))
    assert sides_of(a)[1] < sides_of(b)[0]
    assert sides_of(a)[2] < sides_of(c)[3]

    system.update_collisions({1: a, 2: b, 3: c})
    assert len(events) == 0


def test_no_shared_flag_means_no_event():
    events = []
    system = CollisionSystem(events.append)
    a = make_thing(1, (0.0, 0.0, 0.0), flag=ColliderFlag.PLAYER)
    b = make_thing(2, (0.0, 0.0, 0.0), flag=ColliderFlag.ENEMY)
    assert not (a.collider.flag & b.collider.flag)

    system.update_collisions({1: a, 2: b})
    assert len(events) == 0


def test_depth_limit_is_inclusive():
    events = []
    system = CollisionSystem(events.append)
    a = make_thing(1, (0.0, 0.0, 0.0))
    depth = a.collider.box.depth
    assert depth == 25.0

    b = make_thing(2, (0.0, 0.0, depth * 2))
    system.update_collisions({1: a, 2: b})
    assert len(events) == 2
    assert {event.receiver for event in events} == {1, 2}

    events.clear()
    b.transform.position = (0.0, 0.0, depth * 2 + 1.0)
    system.update_collisions({1: a, 2: b})
    assert len(events) == 0


def test_disabled_or_missing_collider_is_ignored():
    events = []
    system = CollisionSystem(events.append)
    a = make_thing(1, (0.0, 0.0, 0.0))
    b = make_thing(2, (0.0, 0.0, 0.0))
    b.collider.enabled = False
    c = Thing(3, SimpleNamespace(position=(0.0, 0.0, 0.0)))
    assert sides_of(a) == sides_of(b)

    system.update_collisions({1: a, 2: b, 3: c})
    assert len(events) == 0


def test_damage_collider_sends_damage_event():
    events = []
    system = CollisionSystem(events.append)
    attacker = make_thing(1, (0.0, 0.0, 0.0), kind=ColliderType.DAMAGE)
    attacker.collider.damage = 7.5
    attacker.collider.damage_type = "fire"
    target = make_thing(2, (0.0, 0.0, 0.0))
    system.update_collisions({1: attacker, 2: target})

    damage = [e for e in events if isinstance(e, DamageEvent)]
    plain = [e for e in events if isinstance(e, CollisionEvent)]
    assert len(damage) == 1 and len(plain) == 1
    assert damage[0].receiver == 2
    assert damage[0].other is attacker
    assert damage[0].damage == 7.5
    assert damage[0].damage_type == "fire"
    assert plain[0].receiver == 1


def test_every_overlapping_pair_is_reported_once():
    events = []
    system = CollisionSystem(events.append)
    things = {i: make_thing(i, (0.0, 0.0, 0.0)) for i in range(4)}
    system.update_collisions(things)

    assert len(events) == 12
    pairs = {frozenset((e.receiver, e.other.id)) for e in events}
    assert len(pairs) == 6
    assert all(e.receiver != e.other.id for e in events)


def test_collision_event_string():
    other = SimpleNamespace(id=2)
    event = CollisionEvent(1, other, ColliderType.COLLISION)
    assert str(event) == 'Collision Event between "1" and "2"\n'


def test_damage_event_string_mentions_both_sides():
    other = SimpleNamespace(id=9)
    event = DamageEvent(4, other, ColliderType.DAMAGE, 3.0)
    text = str(event)
    assert text.startswith("Damage Event")
    assert '"4"' in text and '"9"' in text
import pytest

from promethean.ecs.components import BehaviorComponent, NavComponent, Position, Velocity
from promethean.ecs.registry import Entity, Registry, System


def test_ids_start_at_one_and_count_active():
    reg = Registry()
    entities = [reg.create() for _ in range(3)]
    assert [e.id for e in entities] == [1, 2, 3]
    assert all(e.valid for e in entities)
    assert reg.active() == 3


def test_destroy_recycles_last_freed_id():
    reg = Registry()
    reg.create()
    second = reg.create()
    third = reg.create()
    reg.destroy(second.id)
    reg.destroy(third.id)
    assert reg.active() == 1
    assert reg.create().id == third.id
    assert reg.create().id == second.id
    assert reg.active() == 3


def test_default_entity_is_invalid():
    assert not Entity().valid
    assert not Entity(Registry(), 0).valid


def test_entity_destroy_invalidates_handle_and_removes_components():
    reg = Registry()
    entity = reg.create()
    entity_id = entity.id
    reg.add(entity_id, Position(1.0, 2.0))
    entity.destroy()
    assert not entity.valid
    assert entity.id == 0
    assert not reg.has(Position, entity_id)
    assert reg.active() == 0


def test_add_has_get_remove():
    reg = Registry()
    e = reg.create()
    stored = reg.add(e.id, Velocity(3.0, 4.0))
    assert reg.has(Velocity, e.id)
    assert reg.get(Velocity, e.id) is stored
    assert not reg.has(Position, e.id)
    assert reg.get(Position, e.id) is None
    reg.remove(Velocity, e.id)
    assert not reg.has(Velocity, e.id)


def test_add_keeps_existing_component():
    reg = Registry()
    e = reg.create()
    first = reg.add(e.id, Position(1.0, 1.0))
    assert reg.add(e.id, Position(5.0, 5.0)) is first
    assert reg.get(Position, e.id) == Position(1.0, 1.0)


def test_view_yields_only_complete_matches_in_pool_order():
    reg = Registry()
    a, b, c = reg.create(), reg.create(), reg.create()
    reg.add(a.id, Position(1.0, 1.0))
    reg.add(b.id, Position(2.0, 2.0))
    reg.add(c.id, Position(3.0, 3.0))
    reg.add(c.id, Velocity(6.0, 6.0))
    reg.add(b.id, Velocity(5.0, 5.0))
    result = list(reg.view(Position, Velocity))
    assert result == [
        (Position(2.0, 2.0), Velocity(5.0, 5.0)),
        (Position(3.0, 3.0), Velocity(6.0, 6.0)),
    ]


def test_view_allows_mutation_of_components():
    reg = Registry()
    e = reg.create()
    reg.add(e.id, NavComponent(position=(0, 0)))
    for (nav,) in reg.view(NavComponent):
        nav.position = (7, 8)
    assert reg.get(NavComponent, e.id).position == (7, 8)


def test_unsupported_component_type_raises():
    reg = Registry()
    with pytest.raises(TypeError):
        reg.pool(str)
    with pytest.raises(TypeError):
        reg.add(1, "not a component")
    with pytest.raises(TypeError):
        reg.view()


def test_destroy_clears_all_pools():
    reg = Registry()
    e = reg.create()
    reg.add(e.id, Position())
    reg.add(e.id, BehaviorComponent())
    reg.destroy(e.id)
    assert reg.pool(Position).entities() == []
    assert reg.pool(BehaviorComponent).entities() == []


def test_system_is_abstract_and_holds_registry():
    reg = Registry()
    with pytest.raises(TypeError):
        System(reg)

    class Counter(System):
        def __init__(self, registry):
            super().__init__(registry)
            self.total = 0.0

        def update(self, dt):
            self.total += dt * self.registry.active()

    reg.create()
    counter = Counter(reg)
    counter.update(2.0)
    assert counter.registry is reg
    assert counter.total == 2.0
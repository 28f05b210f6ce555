import pytest

from entitykit.component import Component, ComponentID, LogicComponent


class _Owner:
    pass


def test_component_is_active_by_default():
    assert Component().active is True


def test_owner_is_none_before_attach():
    assert Component().owner is None


def test_attach_sets_owner():
    owner = _Owner()
    comp = Component()
    comp.attach(owner)
    assert comp.owner is owner


def test_owner_is_held_weakly():
    owner = _Owner()
    comp = Component()
    comp.attach(owner)
    del owner
    assert comp.owner is None


def test_default_hooks_leave_state_unchanged():
    comp = Component()
    comp.start()
    comp.update(0.1)
    comp.draw()
    assert comp.active is True
    assert comp.owner is None


def test_component_ids_round_trip_by_value():
    members = list(ComponentID)
    looked_up = [ComponentID(member.value) for member in members]
    assert looked_up == members
    assert len({member.value for member in members}) == len(members)


def test_logic_component_requires_update():
    with pytest.raises(TypeError):
        LogicComponent()


def test_logic_component_subclass_without_update_is_abstract():
    class Incomplete(LogicComponent):
        pass

    plain = Component()
    assert plain.active is True
    with pytest.raises(TypeError):
        Incomplete()


def test_logic_component_subclass_updates():
    class Counter(LogicComponent):
        component_id = ComponentID.MOVE

        def __init__(self):
            super().__init__()
            self.elapsed = 0.0

        def update(self, delta_time):
            self.elapsed += delta_time

    owner = _Owner()
    comp = Counter()
    comp.attach(owner)
    comp.update(0.25)
    assert comp.elapsed == 0.25
    assert comp.owner is owner
    assert comp.active is True
    assert comp.component_id is ComponentID(ComponentID.MOVE.value)
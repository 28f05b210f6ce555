from entitykit.component import ComponentID
from entitykit.entity import Entity
from entitykit.lifetime import LifetimeComponent


def test_default_is_permanent():
    life = LifetimeComponent()
    assert life.lifetime == -1.0
    life.update(1000.0)
    assert not life.is_expired
    assert life.component_id is ComponentID.LIFE


def test_expires_after_lifetime():
    life = LifetimeComponent()
    life.set_lifetime(1.0)
    life.update(0.5)
    assert not life.is_expired
    life.update(0.5)
    assert life.is_expired


def test_zero_lifetime_is_expired_immediately():
    life = LifetimeComponent()
    life.set_lifetime(0.0)
    assert life.is_expired


def test_resetting_lifetime_clears_expiry():
    life = LifetimeComponent()
    life.set_lifetime(0.0)
    life.set_lifetime(2.0)
    assert not life.is_expired


def test_default_action_deactivates_owner():
    e = Entity()
    life = e.add_component(LifetimeComponent())
    life.set_lifetime(0.5)
    life.update(1.0)
    assert e.active is False


def test_callback_replaces_default_action():
    e = Entity()
    life = e.add_component(LifetimeComponent())
    calls = []
    life.on_expired = lambda: calls.append(1)
    life.set_lifetime(0.5)
    life.update(1.0)
    assert calls == [1]
    assert e.active is True


def test_callback_fires_only_once():
    life = LifetimeComponent()
    calls = []
    life.on_expired = lambda: calls.append(1)
    life.set_lifetime(0.5)
    life.update(1.0)
    life.update(1.0)
    assert calls == [1]


def test_entity_update_drives_lifetime():
    e = Entity()
    life = e.add_component(LifetimeComponent())
    life.set_lifetime(0.25)
    e.update(0.5)
    assert life.is_expired
    assert not e.active
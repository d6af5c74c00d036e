import random

import pytest

from hanoilog.events import Event, EventType, Scheduler
from hanoilog.package import Package
from hanoilog.warehouse import Warehouse


def test_store_event_key():
    pack = Package(5, 7, 0, 1)
    event = Event(EventType.STORE, 5, pack, Warehouse(0), Warehouse(1))
    assert event.key() == "0000050000071"
    assert event.type() is EventType.STORE


def test_transport_event_key():
    event = Event(EventType.TRANSPORT, 12, None, Warehouse(3), Warehouse(45))
    assert event.key() == "0000120030452"
    assert event.type() is EventType.TRANSPORT


def test_store_event_without_package_uses_zeros():
    event = Event(1, 9, None, Warehouse(2), None)
    assert event.key()[6:12] == "0" * 6
    assert event.key()[12] == "1"


def test_transport_event_missing_endpoint_uses_zeros():
    event = Event(2, 9, None, Warehouse(4), None)
    assert event.key()[6:12] == "0" * 6
    assert event.type() is EventType.TRANSPORT


def test_unknown_type_key():
    event = Event(7, 3, Package(0, 11, 0, 1))
    assert event.type() is EventType.UNKNOWN
    assert event.key()[6:] == "0" * 7


def test_key_length_is_fixed():
    events = [
        Event(1, 0, Package(0, 1, 0, 1), Warehouse(0), Warehouse(1)),
        Event(2, 1234567, None, Warehouse(1234), Warehouse(5)),
        Event(1, 999999, Package(0, 9999999, 0, 1), Warehouse(0), None),
    ]
    assert all(len(e.key()) == 13 for e in events)


def test_time_is_truncated_to_six_characters():
    event = Event(2, 1234567, None, Warehouse(1), Warehouse(2))
    assert event.key().startswith("123456")


def test_ordering_by_time():
    early = Event(2, 4, None, Warehouse(9), Warehouse(8))
    late = Event(1, 5, Package(0, 0, 0, 1), Warehouse(0), Warehouse(1))
    assert early < late
    assert not late < early


def test_same_time_ordering_follows_key_text():
    store = Event(1, 5, Package(0, 7, 0, 1), Warehouse(0), Warehouse(1))
    transport = Event(2, 5, None, Warehouse(0), Warehouse(1))
    assert (transport < store) == (transport.key() < store.key())
    assert transport < store


def test_scheduler_pops_in_key_order():
    rng = random.Random(3)
    scheduler = Scheduler()
    houses = [Warehouse(i) for i in range(5)]
    for i in range(40):
        if i % 2:
            scheduler.schedule(1, rng.randrange(100), Package(0, i, 0, 1), houses[0], houses[1])
        else:
            scheduler.schedule(2, rng.randrange(100), None, rng.choice(houses), rng.choice(houses))
    keys = []
    while not scheduler.is_empty():
        keys.append(scheduler.pop().key())
    assert len(keys) == 40
    assert keys == sorted(keys)


def test_scheduler_returns_the_event_it_queued():
    scheduler = Scheduler()
    pack = Package(3, 2, 0, 1)
    queued = scheduler.schedule(1, 3, pack, Warehouse(0), Warehouse(1))
    assert scheduler.pop() is queued
    assert queued.pack is pack


def test_scheduler_drops_events_when_full():
    scheduler = Scheduler(2)
    first = scheduler.schedule(2, 1, None, Warehouse(0), Warehouse(1))
    second = scheduler.schedule(2, 2, None, Warehouse(1), Warehouse(0))
    dropped = scheduler.schedule(2, 0, None, Warehouse(2), Warehouse(0))
    assert dropped is None
    assert len(scheduler) == 2
    assert scheduler.pop() is first
    assert scheduler.pop() is second
    assert scheduler.is_empty()


def test_scheduler_accepts_again_after_pop():
    scheduler = Scheduler(1)
    scheduler.schedule(2, 1, None, Warehouse(0), Warehouse(1))
    scheduler.pop()
    again = scheduler.schedule(2, 2, None, Warehouse(0), Warehouse(1))
    assert scheduler.pop() is again


def test_pop_empty_scheduler_raises():
    with pytest.raises(IndexError):
        Scheduler().pop()
"""Simulation events and the scheduler that orders them."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from hanoilog.package import Package
from hanoilog.warehouse import Warehouse


class EventType(IntEnum):
    """Kinds of events handled by the simulation."""

    UNKNOWN = 0
    STORE = 1
    TRANSPORT = 2


def _field(value: int, width: int) -> str:
    """Zero-pad ``value`` to ``width`` digits, keeping at most ``width`` characters."""
    return ("%0*d" % (width, value))[:width]


@dataclass(eq=False)
class Event:
    """A timed event; events are ordered by their textual key.

    The key is the time (6 digits) followed by the package id (6 digits)
    for store events, or the origin and destination ids (3 digits each)
    for transport events, and finally the event type digit.
    """

    event_type: int
    time: int
    pack: Optional[Package] = None
    origin: Optional[Warehouse] = None
    destination: Optional[Warehouse] = None
    _key: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        try:
            kind = EventType(self.event_type)
        except ValueError:
            kind = EventType.UNKNOWN
        prefix = _field(self.time, 6)
        if kind is EventType.STORE:
            middle = _field(self.pack.pack_id if self.pack is not None else 0, 6)
        elif kind is EventType.TRANSPORT:
            if self.origin is not None and self.destination is not None:
                middle = _field(self.origin.w_id, 3) + _field(self.destination.w_id, 3)
            else:
                middle = _field(0, 6)
        else:
            middle = _field(0, 6)
        self._key = prefix + middle + str(int(kind))

    def key(self) -> str:
        """Return the 13-character ordering key."""
        return self._key

    def type(self) -> EventType:
        """Return the event type encoded in the key."""
        return EventType(int(self._key[12]))

    def __lt__(self, other: Event) -> bool:
        return self._key < other._key

    def __le__(self, other: Event) -> bool:
        return self._key <= other._key


class Scheduler:
    """Min-priority queue of events keyed by :meth:`Event.key`.

    With a ``capacity``, events scheduled while the queue is full are dropped.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        self.capacity = capacity
        self._heap: list[tuple[str, int, Event]] = []
        self._counter = itertools.count()

    def schedule(
        self,
        event_type: int,
        time: int,
        pack: Optional[Package],
        origin: Optional[Warehouse],
        destination: Optional[Warehouse],
    ) -> Optional[Event]:
        """Create and queue an event; return it, or None if it was dropped."""
        if self.capacity is not None and len(self._heap) >= self.capacity:
            return None
        event = Event(event_type, time, pack, origin, destination)
        heapq.heappush(self._heap, (event.key(), next(self._counter), event))
        return event

    def pop(self) -> Event:
        """Remove and return the event with the smallest key."""
        if not self._heap:
            raise IndexError("no event is scheduled")
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        """Tell whether no event is queued."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
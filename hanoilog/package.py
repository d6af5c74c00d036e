"""Packages moving through the warehouse network."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import MutableSequence


class PackageStatus(IntEnum):
    """Lifecycle states a package may be in."""

    NONE = 0
    NOT_POSTED = 1
    ARRIVAL_SCHEDULED = 2
    ARRIVED_NOT_STORED = 3
    STORED = 4
    ALLOCATED_FOR_TRANSPORT = 5
    DELIVERED = 6


@dataclass(eq=False)
class Package:
    """A package with its origin, destination and remaining route.

    ``route`` holds the warehouse ids still to be visited, origin excluded.
    ``time`` is the package's own clock, starting at the post date.
    """

    post_date: int
    pack_id: int
    origin_id: int
    destination_id: int
    route: MutableSequence[int] = field(default_factory=deque)
    status: PackageStatus = PackageStatus.NONE
    time: int = field(init=False)

    def __post_init__(self) -> None:
        self.time = self.post_date

    def next_hop(self) -> int:
        """Return the next warehouse on the route."""
        if not self.route:
            raise IndexError("route of package %d is empty" % self.pack_id)
        return self.route[0]

    def advance(self) -> None:
        """Drop the first warehouse from the route."""
        if not self.route:
            raise IndexError("route of package %d is empty" % self.pack_id)
        del self.route[0]

    def route_done(self) -> bool:
        """Tell whether no warehouse is left on the route."""
        return not self.route
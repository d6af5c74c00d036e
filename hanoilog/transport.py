"""Moving packages between warehouses and running scheduled events."""

from __future__ import annotations

import sys
from collections import deque
from typing import Optional, TextIO

from hanoilog.events import EventType, Scheduler
from hanoilog.graph import Graph
from hanoilog.package import Package, PackageStatus
from hanoilog.warehouse import Warehouse


class Transport:
    """Carrier that runs the discrete-event simulation and reports each step."""

    def __init__(
        self,
        transport_capacity: int,
        transport_latency: int,
        transport_gap: int,
        removal_cost: int,
        warehouse_count: int,
        out: Optional[TextIO] = None,
    ) -> None:
        self.time = transport_gap
        self.transport_capacity = transport_capacity
        self.transport_latency = transport_latency
        self.transport_gap = transport_gap
        self.removal_cost = removal_cost
        self.warehouse_count = warehouse_count
        self.packs_delivered = 0
        self.out = out if out is not None else sys.stdout

    def _emit(self, line: str) -> None:
        print(line, file=self.out)

    def calculate_route(self, graph: Graph, pack: Package) -> None:
        """Set the package's route to a shortest path found by breadth-first search.

        The route is left untouched when the destination cannot be reached
        or equals the origin.
        """
        origin = pack.origin_id
        destination = pack.destination_id
        parents: dict[int, int] = {}
        visited = {origin}
        queue = deque([origin])

        while queue:
            current = queue.popleft()
            if current == destination:
                break
            if current not in graph:
                print("ERRO: Armazém com ID %d não existe." % current, file=sys.stderr)
                continue
            for neighbour in graph.edges(current):
                if neighbour not in visited:
                    visited.add(neighbour)
                    parents[neighbour] = current
                    queue.append(neighbour)

        if destination not in parents:
            return

        route: deque[int] = deque()
        step: Optional[int] = destination
        while step is not None and step != origin:
            route.appendleft(step)
            step = parents.get(step)
        pack.route = route

    def add_time(self, time: int) -> None:
        """Advance the carrier's clock."""
        self.time += time

    def execute_event(self, scheduler: Scheduler, graph: Graph) -> None:
        """Pop the next event and carry it out."""
        event = scheduler.pop()
        kind = event.type()

        if kind is EventType.STORE:
            pack = event.pack
            warehouse = event.origin
            if pack is None or warehouse is None:
                raise ValueError("store event without package or warehouse")
            if warehouse.w_id == pack.destination_id:
                pack.status = PackageStatus.DELIVERED
                self._emit(
                    "%07d pacote %03d entregue em %03d"
                    % (event.time, pack.pack_id, warehouse.w_id)
                )
                self.packs_delivered += 1
            else:
                if event.destination is None:
                    raise ValueError("store event without a target section")
                section = event.destination.w_id
                warehouse.store(section, pack)
                pack.status = PackageStatus.STORED
                self._emit(
                    "%07d pacote %03d armazenado em %03d na secao %03d"
                    % (event.time, pack.pack_id, warehouse.w_id, section)
                )

        elif kind is EventType.TRANSPORT:
            self.transport_packages(
                scheduler, graph, event.time, event.origin, event.destination
            )
            scheduler.schedule(
                EventType.TRANSPORT,
                event.time + self.transport_gap,
                None,
                event.origin,
                event.destination,
            )

    def create_transports(self, scheduler: Scheduler, graph: Graph) -> None:
        """Schedule the first transport along every connection."""
        for warehouse in graph:
            for neighbour in graph.edges(warehouse.w_id):
                scheduler.schedule(
                    EventType.TRANSPORT, self.time, None, warehouse, graph.find(neighbour)
                )

    def transport_packages(
        self,
        scheduler: Scheduler,
        graph: Graph,
        time: int,
        origin: Warehouse,
        destination: Warehouse,
    ) -> None:
        """Unstack the section towards ``destination``, ship the oldest packages
        up to capacity and put the rest back."""
        section = origin.section(destination.w_id)
        if section is None:
            return

        session_time = time
        waiting: list[Package] = []
        while not section.is_empty():
            removed = section.pop()
            session_time += self.removal_cost
            removed.time = session_time
            self._emit(
                "%07d pacote %03d removido de %03d na secao %03d"
                % (removed.time, removed.pack_id, origin.w_id, destination.w_id)
            )
            waiting.append(removed)

        arrival = session_time + self.transport_latency
        for _ in range(self.transport_capacity):
            if not waiting:
                break
            target = waiting.pop()
            self._emit(
                "%07d pacote %03d em transito de %03d para %03d"
                % (session_time, target.pack_id, origin.w_id, destination.w_id)
            )
            target.status = PackageStatus.ALLOCATED_FOR_TRANSPORT
            target.advance()
            next_section = None if target.route_done() else graph.find(target.next_hop())
            scheduler.schedule(EventType.STORE, arrival, target, destination, next_section)

        while waiting:
            back = waiting.pop()
            section.push(back)
            self._emit(
                "%07d pacote %03d rearmazenado em %03d na secao %03d"
                % (session_time, back.pack_id, origin.w_id, destination.w_id)
            )
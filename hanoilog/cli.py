"""Command-line entry point: read a scenario file and run the simulation."""

from __future__ import annotations

import io
import sys
from typing import Iterator, Optional, Sequence, TextIO

from hanoilog.events import EventType, Scheduler
from hanoilog.graph import Graph
from hanoilog.package import Package
from hanoilog.transport import Transport


class _Tokens:
    """Whitespace-separated tokens of a scenario, read one at a time."""

    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._it)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError("expected an integer, got %r" % token) from None

    def integers(self) -> Iterator[int]:
        while True:
            yield self.integer()


def _run(text: str, out: TextIO) -> None:
    tokens = _Tokens(text)
    transport_capacity = tokens.integer()
    transport_latency = tokens.integer()
    transport_gap = tokens.integer()
    removal_cost = tokens.integer()
    warehouse_count = tokens.integer()

    graph = Graph()
    graph.add_nodes(warehouse_count)
    graph.load_adjacency(tokens.integers())

    pack_count = tokens.integer()

    transport = Transport(
        transport_capacity,
        transport_latency,
        transport_gap,
        removal_cost,
        warehouse_count,
        out=out,
    )
    scheduler = Scheduler(pack_count * warehouse_count)

    first_arrival = transport_gap
    for index in range(pack_count):
        post_time = tokens.integer()
        tokens.word()
        tokens.integer()  # the file's own package id is not used
        tokens.word()
        origin_id = tokens.integer()
        tokens.word()
        destination_id = tokens.integer()

        pack = Package(post_time, index, origin_id, destination_id)
        transport.calculate_route(graph, pack)

        first_arrival = min(first_arrival, pack.post_date)

        scheduler.schedule(
            EventType.STORE,
            pack.post_date,
            pack,
            graph.find(pack.origin_id),
            graph.find(pack.next_hop()),
        )

    transport.add_time(first_arrival)
    transport.create_transports(scheduler, graph)

    while transport.packs_delivered < pack_count:
        transport.execute_event(scheduler, graph)


def simulate(text: str) -> str:
    """Run the scenario described by ``text`` and return the report."""
    buffer = io.StringIO()
    _run(text, buffer)
    return buffer.getvalue()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the scenario file named by the first argument; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("ERRO: Nome do arquivo deve ser passado na execução", file=sys.stderr)
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("ERRO: Não foi possível abrir o arquivo.", file=sys.stderr)
        return 1
    try:
        _run(text, sys.stdout)
    except (ValueError, IndexError, KeyError) as exc:
        print("ERRO: %s" % exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
# hanoilog

A discrete-event simulator for a postal network. Warehouses are connected by
one-way links. Each warehouse keeps one stacked section per outgoing link, and
packages in a section pile up last-in, first-out. Every link has a transport
that leaves at a fixed interval. At each departure, every package in the
section is unstacked, one removal cost per package. The packages stored
earliest are shipped, up to the transport capacity. The rest are put back.

Each package follows a shortest route (by hop count, found with a
breadth-first search) from its origin to its destination. The simulation runs
until every package has been delivered, and prints one line per step.

## Installation

```
pip install .
```

## Usage

```
hanoilog scenario.txt
```

The input file holds whitespace-separated values in this order:

1. transport capacity, transport latency, transport interval, removal cost
2. the number of warehouses `N`
3. an `N x N` adjacency matrix in row order, where `1` marks a link from the
   row's warehouse to the column's
4. the number of packages
5. one entry per package:
   `<post time> pac <id> org <origin> dst <destination>`

The package ids in the file are ignored. Packages are numbered from 0 in the
order they appear. Warehouses are numbered from 0 in matrix order.

For example, this scenario has two warehouses, a link from 0 to 1, and one
package posted at time 3:

```
2 20 10 0
2
0 1
0 0
1
3 pac 7 org 0 dst 1
```

It prints:

```
0000003 pacote 000 armazenado em 000 na secao 001
0000013 pacote 000 removido de 000 na secao 001
0000013 pacote 000 em transito de 000 para 001
0000033 pacote 000 entregue em 001
```

The first transports leave at the transport interval plus the earliest post
time (capacity one interval no later than the first interval). Events that
fall at the same time are ordered by a key built from the time, then the
package id (storage events) or the origin and destination ids (transport
events), then the event type.

The command exits with status 1 and a message starting with `ERRO:` on
standard error when no file is given, the file cannot be opened, or the input
is malformed. A package whose destination cannot be reached from its origin
is also reported as an error.

## Library use

`hanoilog.cli.simulate` takes the scenario text and returns the whole report
as one string:

```python
from hanoilog.cli import simulate

with open("scenario.txt", encoding="utf-8") as handle:
    print(simulate(handle.read()), end="")
```

The building blocks can also be used directly:

- `hanoilog.graph.Graph` builds the warehouse network: `add_node`,
  `add_nodes`, `add_edge`, `load_adjacency`, `find` and `edges`.
- `hanoilog.package.Package` holds a package, its route and its clock, with
  `next_hop`, `advance` and `route_done`; `PackageStatus` lists its states.
- `hanoilog.warehouse.Warehouse` holds one `Section` (a stack of packages)
  per outgoing link, with `add_section`, `section` and `store`.
- `hanoilog.events.Event` and `hanoilog.events.Scheduler` order events by
  their keys; a scheduler given a capacity drops events once it is full.
- `hanoilog.transport.Transport` computes routes and runs storage and
  transport events, writing its report to standard output or to the `out`
  stream it is given.

## Running the tests

```
pip install .[test]
pytest
```
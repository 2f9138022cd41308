# frogroute

Building blocks for multi-depot capacitated vehicle routing problems. The package is a library and has no commands.

## What is in it

- **`frogroute.distances`**
  - `DistanceTable` is a square table of edge weights indexed by internal vertex id. `add_edge` stores a weight in both directions, and `edge` returns `DistanceTable.NO_ADJ` (`-1.0`) for pairs that were never set.
  - `DistVect` holds the per-vertex bookkeeping of a shortest-path search from one origin: tentative distances, marks, predecessors and customer flags. It can also sort its solution view by distance and render it as text.
- **`frogroute.cluster`**
  - `Node` is a depot or a customer: id, label, demand, capacity, remaining capacity and coordinates.
  - `Cluster` groups customers around one depot.
    - `distance_to_customer` measures how far a customer is from the cluster in the way set by `DistanceType`: `MEAN`, `NEAREST`, `FURTHEST` or `DEPOT`.
    - `to_vrp` renders the cluster as a TSPLIB-style CVRP instance, and `export_vrp` writes that instance to `ClusterId_<label>.vrp`.
- **`frogroute.routes`**
  - `Route` is a depot, an ordered list of customers, and the depot again.
  - `LocationType` says where a node sits in a route.
  - `compute_savings` returns the `Saving` of every customer pair, largest first.
- **`frogroute.savings`**
  - `ClarkWrightHandler` runs the Clarke-Wright savings heuristic for one cluster.
  - Every route it builds stays within the vehicle capacity.
  - `route_cost` and `format_routes` report on the result.
- **`frogroute.vehicle`**
  - `Vehicle` holds a capacity and the customers it visits in order.
  - `decode_frog_leap_value` maps a value in `[0, n_depots]` to a depot index.
- **`frogroute.decoding`**
  - `DecodedSolution` assigns customers to depots with `assign_customer_to_depot`. This marks the solution infeasible when a demand does not fit.
  - It then builds vehicles for a depot in one of four ways: `assign_first_fit`, `assign_nearest_neighbour`, `assign_mixed` (the cheaper of those two), or `assign_from_savings_routes`.
  - `evaluate_depot` and `evaluate` sum the tour distances.
- **`frogroute.report`**
  - `format_solution` renders a decoded solution as text.
  - `write_solution` writes that text to a stream.

## Installation

```
pip install frogroute
```

To run the test suite:

```
pip install "frogroute[test]"
pytest
```

## Example

```python
from frogroute.cluster import Cluster, Node
from frogroute.decoding import DecodedSolution
from frogroute.distances import DistanceTable
from frogroute.report import format_solution
from frogroute.savings import ClarkWrightHandler
from frogroute.vehicle import decode_frog_leap_value

table = DistanceTable(3)
table.add_edge(0, 1, 4.0)
table.add_edge(0, 2, 5.0)
table.add_edge(1, 2, 3.0)

depot = Node(id=0, label_id=1, capacity=100, remaining_capacity=100)
a = Node(id=1, label_id=2, demand=10)
b = Node(id=2, label_id=3, demand=20)

cluster = Cluster(depot, customers=[a, b])
routes = ClarkWrightHandler(cluster, table, vehicle_capacity=50).execute()

solution = DecodedSolution([depot], table, vehicle_capacity=50)
solution.assign_from_savings_routes(0, routes)
print(solution.evaluate())   # 12.0
print(format_solution(solution))

print(decode_frog_leap_value(2.0, 2))   # 1
print(decode_frog_leap_value(0.7, 2))   # 0
```

## What it does not do

The package does not do any of the following:

- It does not read TSPLIB instance files.
- It does not compute shortest paths. `DistVect` only keeps the bookkeeping for such a search, so you fill `DistanceTable` yourself.
- It does not run a frog-leaping search loop, a local search or random solution generation. It supplies the pieces that decode and score a given encoding.
- It has no command-line program.
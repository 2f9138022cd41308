"""Routes that start and end at a depot, and the savings between customers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from itertools import combinations, pairwise
from typing import Iterable, Iterator

from frogroute.cluster import Node
from frogroute.distances import DistanceTable


class LocationType(enum.Enum):
    """Where a node sits among the customers of a route."""

    NO_EXISTS = "no_exists"
    AT_BEGIN = "at_begin"
    AT_LAST = "at_last"
    AT_MIDDLE = "at_middle"


@dataclass(frozen=True)
class Saving:
    """Distance saved by serving customers i and j on one tour instead of two."""

    id: int
    i: int
    j: int
    value: float


@dataclass(eq=False)
class Route:
    """A depot, the customers it visits in order, and the depot again."""

    depot: Node
    customers: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.customers = list(self.customers)

    @property
    def nodes(self) -> list[Node]:
        """Every stop of the route, the depot at both ends."""
        return [self.depot, *self.customers, self.depot]

    def __len__(self) -> int:
        return len(self.customers) + 2

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return any(customer.id == node_id for customer in self.customers)

    def __add__(self, other: Route) -> Route:
        """Join two routes of the same depot, this one's customers first."""
        if not isinstance(other, Route):
            return NotImplemented
        return Route(self.depot, [*self.customers, *other.customers])

    def locate(self, node_id: int) -> LocationType:
        """Classify the first stop with this id by its place in the route."""
        nodes = self.nodes
        position = next(
            (index for index, node in enumerate(nodes) if node.id == node_id), -1
        )
        size = len(nodes)
        if position in (-1, 0, size - 1):
            return LocationType.NO_EXISTS
        if position == 1:
            return LocationType.AT_BEGIN
        if position == size - 2:
            return LocationType.AT_LAST
        return LocationType.AT_MIDDLE

    def demand(self) -> int:
        """Total demand of the customers, the depot ends left out."""
        return sum(customer.demand for customer in self.customers)

    def cost(self, distances: DistanceTable) -> float:
        """Sum of the distances between consecutive stops."""
        return sum(distances.edge(a.id, b.id) for a, b in pairwise(self.nodes))

    def add_at_begin(self, node: Node) -> None:
        """Visit the node first, right after leaving the depot."""
        self.customers.insert(0, node)

    def add_at_end(self, node: Node) -> None:
        """Visit the node last, right before returning to the depot."""
        self.customers.append(node)

    def reversed(self) -> Route:
        """A new route visiting the same customers in the opposite order."""
        return Route(self.depot, self.customers[::-1])


def compute_savings(
    depot: Node, customers: Iterable[Node], distances: DistanceTable
) -> list[Saving]:
    """Savings of every customer pair, largest first; ties keep pair order."""
    savings = []
    for index, (first, second) in enumerate(combinations(list(customers), 2)):
        value = (
            distances.edge(depot.id, first.id)
            + distances.edge(depot.id, second.id)
            - distances.edge(first.id, second.id)
        )
        savings.append(Saving(index, first.id, second.id, value))
    savings.sort(key=lambda saving: saving.value, reverse=True)
    return savings
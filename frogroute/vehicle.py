"""Vehicles that serve customers from one depot, and decoding of frog-leap values."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from frogroute.cluster import Node
from frogroute.distances import DistanceTable
from frogroute.routes import Route


def decode_frog_leap_value(fvalue: float, number_of_depots: int) -> int:
    """Map a value in [0, number_of_depots] to a depot index.

    The value is floored; the upper bound itself belongs to the last depot.
    """
    if number_of_depots < 1:
        raise ValueError("number of depots must be at least 1")
    index = math.floor(fvalue)
    if index == number_of_depots:
        index -= 1
    if not 0 <= index < number_of_depots:
        raise ValueError(
            f"value {fvalue} does not decode to a depot in 0..{number_of_depots - 1}"
        )
    return index


@dataclass(eq=False)
class Vehicle:
    """A vehicle of fixed capacity and the customers it visits, in order."""

    id: int
    capacity: int
    depot_index: int = 0
    customers: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.customers = list(self.customers)

    @property
    def demand(self) -> int:
        """Total demand of the customers on board."""
        return sum(customer.demand for customer in self.customers)

    @property
    def remaining_capacity(self) -> int:
        return self.capacity - self.demand

    def __len__(self) -> int:
        return len(self.customers)

    def add_customer(self, customer: Node) -> None:
        """Visit the customer after every customer already on the route."""
        self.customers.append(customer)

    def path_cost(self, distances: DistanceTable, depot: Node) -> float:
        """Distance of the tour from the depot through every customer and back."""
        if not self.customers:
            return 0.0
        return Route(depot, self.customers).cost(distances)

    def copy(self) -> Vehicle:
        """A vehicle with the same settings and its own list of the same customers."""
        return Vehicle(self.id, self.capacity, self.depot_index, list(self.customers))
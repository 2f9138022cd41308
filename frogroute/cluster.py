"""Clusters of customers around a depot."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from frogroute.distances import DistanceTable


@dataclass(eq=False)
class Node:
    """A depot or customer: internal id, label, demand or capacity, coordinates."""

    id: int
    label_id: int
    demand: int = 0
    capacity: int = 0
    remaining_capacity: int = 0
    x: float = 0
    y: float = 0

    def describe(self) -> str:
        return (
            f"Node {self.label_id} (internal id {self.id}): demand = {self.demand}, "
            f"capacity = {self.capacity}, remaining capacity = {self.remaining_capacity}"
        )


class DistanceType(enum.Enum):
    MEAN = "mean"
    NEAREST = "nearest"
    FURTHEST = "furthest"
    DEPOT = "depot"


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


@dataclass(eq=False)
class Cluster:
    """A depot together with the customers assigned to it."""

    depot: Node
    cluster_id: int = 0
    distance_type: DistanceType = DistanceType.MEAN
    customers: list[Node] = field(default_factory=list)
    value: float = 0.0

    def add_customer(self, customer: Node) -> None:
        """Put a customer at the front of the cluster's customer list."""
        self.customers.insert(0, customer)

    def remove_customer(self, customer: Node) -> None:
        self.customers.remove(customer)

    def distance_to_customer(self, customer: Node, distances: DistanceTable) -> float:
        measure = {
            DistanceType.MEAN: self.mean_distance_to_customer,
            DistanceType.NEAREST: self.nearest_distance_to_customer,
            DistanceType.DEPOT: self.depot_distance_to_customer,
            DistanceType.FURTHEST: self.furthest_distance_to_customer,
        }[self.distance_type]
        return measure(customer, distances)

    def _distances_from(self, customer: Node, distances: DistanceTable) -> list[float]:
        return [distances.edge(customer.id, self.depot.id)] + [
            distances.edge(customer.id, member.id) for member in self.customers
        ]

    def mean_distance_to_customer(self, customer: Node, distances: DistanceTable) -> float:
        """Mean distance from the customer to the depot and every member."""
        values = self._distances_from(customer, distances)
        return sum(values) / len(values)

    def nearest_distance_to_customer(self, customer: Node, distances: DistanceTable) -> float:
        return min(self._distances_from(customer, distances))

    def depot_distance_to_customer(self, customer: Node, distances: DistanceTable) -> float:
        return distances.edge(customer.id, self.depot.id)

    def furthest_distance_to_customer(self, customer: Node, distances: DistanceTable) -> float:
        return max(self._distances_from(customer, distances))

    def depot_capacity(self) -> int:
        return self.depot.capacity

    def depot_remaining_capacity(self) -> int:
        return self.depot.remaining_capacity

    @property
    def file_name(self) -> str:
        return f"ClusterId_{self.depot.label_id}.vrp"

    def to_vrp(self, vehicle_capacity: int) -> str:
        """Render the cluster as a CVRP instance in the TSPLIB format."""
        nodes = [self.depot, *self.customers]
        lines = [
            f"NAME : ClusterId_{self.depot.label_id} ",
            "COMMENT : (Gillet and Johnson) ",
            "TYPE : CVRP ",
            f"DIMENSION : {len(nodes)} ",
            "EDGE_WEIGHT_TYPE : EUC_2D ",
            f"CAPACITY : {vehicle_capacity} ",
            "NODE_COORD_SECTION ",
        ]
        lines.extend(f"{n.label_id} {_number(n.x)} {_number(n.y)}" for n in nodes)
        lines.append("DEMAND_SECTION ")
        lines.extend(f"{n.label_id} {n.demand}" for n in nodes)
        lines.append("DEPOT_SECTION ")
        lines.append(f" {self.depot.label_id}")
        lines.append(" -1")
        return "\n".join(lines) + "\nEOF"

    def export_vrp(self, directory, vehicle_capacity: int) -> Path:
        """Write the instance to ClusterId_<label>.vrp in directory."""
        path = Path(directory) / self.file_name
        path.write_text(self.to_vrp(vehicle_capacity), encoding="ascii")
        return path

    def format(self) -> str:
        lines = [
            "SHOWING  CLUSTER CONTENT",
            f"Showing Cluster Value = {self.value:.2f}",
            "Cluster Depot Information",
            self.depot.describe(),
            "Showing Cluster Customers Information",
        ]
        if not self.customers:
            lines.append("Cluster is empty")
        else:
            lines.extend(
                f"{self.depot.label_id}; {customer.label_id}" for customer in self.customers
            )
        return "\n".join(lines) + "\n"
"""Decoding of frog-leap values into depot assignments and vehicle routes."""

from __future__ import annotations

import itertools
from typing import Iterable, Iterator

from frogroute.cluster import Node
from frogroute.distances import DistanceTable
from frogroute.routes import Route
from frogroute.vehicle import Vehicle, decode_frog_leap_value


class DecodedSolution:
    """Customers assigned to depots and the vehicles that serve them.

    Each depot starts with its full capacity available; every customer
    assigned to it uses up its demand.
    """

    def __init__(
        self,
        depots: Iterable[Node],
        distances: DistanceTable,
        vehicle_capacity: int,
        vehicle_ids: Iterator[int] | None = None,
    ) -> None:
        self.depots = list(depots)
        if not self.depots:
            raise ValueError("at least one depot is needed")
        self.distances = distances
        self.vehicle_capacity = vehicle_capacity
        self._vehicle_ids = vehicle_ids if vehicle_ids is not None else itertools.count()
        self._remaining = [depot.capacity for depot in self.depots]
        self._assigned: list[list[Node]] = [[] for _ in self.depots]
        self._vehicles: list[list[Vehicle]] = [[] for _ in self.depots]
        self.is_feasible = True
        self.not_added_customer: int | None = None

    def __len__(self) -> int:
        return len(self.depots)

    def _check_depot(self, depot_index: int) -> None:
        if not 0 <= depot_index < len(self.depots):
            raise IndexError(
                f"depot {depot_index} out of range 0..{len(self.depots) - 1}"
            )

    def remaining_capacity(self, depot_index: int) -> int:
        self._check_depot(depot_index)
        return self._remaining[depot_index]

    def assigned_customers(self, depot_index: int) -> tuple[Node, ...]:
        self._check_depot(depot_index)
        return tuple(self._assigned[depot_index])

    def vehicles(self, depot_index: int) -> tuple[Vehicle, ...]:
        self._check_depot(depot_index)
        return tuple(self._vehicles[depot_index])

    def _new_vehicle(self, depot_index: int) -> Vehicle:
        return Vehicle(next(self._vehicle_ids), self.vehicle_capacity, depot_index)

    def assign_customer_to_depot(self, customer: Node, fvalue: float) -> bool:
        """Assign the customer to the depot its value decodes to.

        Returns False, and marks the solution infeasible, when the customer's
        demand exceeds the vehicle capacity or the depot's remaining capacity.
        """
        depot_index = decode_frog_leap_value(fvalue, len(self.depots))
        demand = customer.demand
        if demand > self.vehicle_capacity or demand > self._remaining[depot_index]:
            self.is_feasible = False
            self.not_added_customer = customer.id
            return False
        self._remaining[depot_index] -= demand
        self._assigned[depot_index].append(customer)
        return True

    def assign_first_fit(self, depot_index: int) -> None:
        """Put each customer, in assignment order, on the first vehicle it fits.

        Vehicles are kept in the order of their remaining capacity when they
        were opened; the depot's previous vehicles are replaced.
        """
        self._check_depot(depot_index)
        fleet: list[Vehicle] = []
        for customer in self._assigned[depot_index]:
            demand = customer.demand
            vehicle = next((v for v in fleet if v.remaining_capacity >= demand), None)
            if vehicle is None:
                vehicle = self._new_vehicle(depot_index)
                vehicle.add_customer(customer)
                position = next(
                    (
                        index
                        for index, other in enumerate(fleet)
                        if other.remaining_capacity > vehicle.remaining_capacity
                    ),
                    len(fleet),
                )
                fleet.insert(position, vehicle)
            else:
                vehicle.add_customer(customer)
        self._vehicles[depot_index] = fleet

    def _closest(
        self, origin: Node, candidates: list[Node], capacity: int
    ) -> Node | None:
        fitting = [c for c in candidates if c.demand <= capacity]
        if not fitting:
            return None
        return min(fitting, key=lambda c: self.distances.edge(origin.id, c.id))

    def assign_nearest_neighbour(self, depot_index: int) -> None:
        """Fill vehicles one at a time, always visiting the closest fitting customer.

        Each vehicle starts from the customer closest to the depot; the
        depot's previous vehicles are replaced.
        """
        self._check_depot(depot_index)
        depot = self.depots[depot_index]
        unassigned = list(self._assigned[depot_index])
        fleet: list[Vehicle] = []
        while unassigned:
            vehicle = self._new_vehicle(depot_index)
            current = self._closest(depot, unassigned, self.vehicle_capacity)
            if current is None:
                raise ValueError(
                    f"customer {unassigned[0].id} does not fit in any vehicle"
                )
            while current is not None:
                vehicle.add_customer(current)
                unassigned.remove(current)
                current = self._closest(current, unassigned, vehicle.remaining_capacity)
            fleet.append(vehicle)
        self._vehicles[depot_index] = fleet

    def assign_mixed(self, depot_index: int) -> None:
        """Keep whichever of first fit and nearest neighbour costs less."""
        self.assign_first_fit(depot_index)
        first_fit = list(self._vehicles[depot_index])
        first_fit_cost = self.evaluate_depot(depot_index)
        self.assign_nearest_neighbour(depot_index)
        nearest_cost = self.evaluate_depot(depot_index)
        if first_fit_cost < nearest_cost:
            self._vehicles[depot_index] = first_fit

    def assign_from_savings_routes(
        self, depot_index: int, routes: Iterable[Route]
    ) -> None:
        """Give each route a vehicle, opening another whenever one is full.

        The depot's previous vehicles are replaced.
        """
        self._check_depot(depot_index)
        fleet: list[Vehicle] = []
        for route in routes:
            vehicle = self._new_vehicle(depot_index)
            fleet.append(vehicle)
            for customer in route.customers:
                if vehicle.remaining_capacity < customer.demand:
                    vehicle = self._new_vehicle(depot_index)
                    fleet.append(vehicle)
                vehicle.add_customer(customer)
        self._vehicles[depot_index] = fleet

    def evaluate_depot(self, depot_index: int) -> float:
        """Total tour distance of the depot's vehicles."""
        self._check_depot(depot_index)
        depot = self.depots[depot_index]
        return sum(
            vehicle.path_cost(self.distances, depot)
            for vehicle in self._vehicles[depot_index]
        )

    def evaluate(self) -> float:
        """Total tour distance over every depot."""
        return sum(self.evaluate_depot(index) for index in range(len(self.depots)))
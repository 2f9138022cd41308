"""Savings heuristic that builds capacity-bounded depot routes for one cluster."""

from __future__ import annotations

from frogroute.cluster import Cluster, Node
from frogroute.distances import DistanceTable
from frogroute.routes import LocationType, Route, Saving, compute_savings

_ENDS = (LocationType.AT_BEGIN, LocationType.AT_LAST)


class ClarkWrightHandler:
    """Builds routes for a cluster by merging tours in order of decreasing saving."""

    def __init__(
        self, cluster: Cluster, distances: DistanceTable, vehicle_capacity: int
    ) -> None:
        self.cluster = cluster
        self.distances = distances
        self.vehicle_capacity = vehicle_capacity
        self.savings: list[Saving] = []
        self._routes: list[Route | None] = []
        self._final: list[Route] = []
        self._customers_by_id: dict[int, Node] = {}

    @property
    def routes(self) -> tuple[Route, ...]:
        """The final routes found by the last call to execute."""
        return tuple(self._final)

    def __len__(self) -> int:
        return len(self._final)

    def execute(self) -> tuple[Route, ...]:
        """Compute savings, start with one tour per customer and merge them."""
        depot = self.cluster.depot
        customers = list(self.cluster.customers)
        self._customers_by_id = {}
        for customer in customers:
            self._customers_by_id.setdefault(customer.id, customer)

        self.savings = compute_savings(depot, customers, self.distances)
        self._routes = [Route(depot, [customer]) for customer in customers]
        for saving in self.savings:
            self._apply(saving)

        self._final = [route for route in self._routes if route is not None]
        self._routes = []
        return self.routes

    def route(self, index: int) -> Route:
        if not 0 <= index < len(self._final):
            raise IndexError(f"route {index} out of range 0..{len(self._final) - 1}")
        return self._final[index]

    def route_cost(self, index: int) -> float:
        """Total distance travelled along one final route."""
        return self.route(index).cost(self.distances)

    def format_routes(self) -> str:
        parts = ["Showing final routes \n"]
        for index, route in enumerate(self._final):
            parts.append(f"Cost of route {index} is {self.route_cost(index):.2f} \n")
            parts.append("NodeLabelId; Cost\n")
            nodes = route.nodes
            parts.append(f"{nodes[0].label_id}; 0\n")
            for previous, current in zip(nodes, nodes[1:]):
                edge = self.distances.edge(previous.id, current.id)
                parts.append(f"{current.label_id}; {edge:.2f}  \n")
        parts.append("FINISH OF Showing final routes \n")
        return "".join(parts)

    def _find(self, node_id: int) -> tuple[int, LocationType]:
        """Index and location of the first working route holding the node."""
        for index, route in enumerate(self._routes):
            if route is None:
                continue
            location = route.locate(node_id)
            if location is not LocationType.NO_EXISTS:
                return index, location
        return -1, LocationType.NO_EXISTS

    def _apply(self, saving: Saving) -> None:
        index_i, loc_i = self._find(saving.i)
        index_j, loc_j = self._find(saving.j)
        absent = LocationType.NO_EXISTS

        if index_i != index_j and loc_i in _ENDS and loc_j in _ENDS:
            route_i = self._routes[index_i]
            route_j = self._routes[index_j]
            if route_i.demand() + route_j.demand() <= self.vehicle_capacity:
                self._merge(index_i, index_j, loc_i, loc_j)
            return

        if index_i != -1 and index_i == index_j:
            return

        if loc_i is absent and loc_j is absent:
            self._add_new_route(saving)
            return

        if loc_j is absent and loc_i in _ENDS:
            self._extend(index_i, loc_i, saving.j)
            return

        if loc_i is absent and loc_j in _ENDS:
            self._extend(index_j, loc_j, saving.i)

    def _merge(
        self, index_i: int, index_j: int, loc_i: LocationType, loc_j: LocationType
    ) -> None:
        route_i = self._routes[index_i]
        route_j = self._routes[index_j]
        begin, last = LocationType.AT_BEGIN, LocationType.AT_LAST

        if loc_i is begin and loc_j is begin:
            self._routes[index_i] = route_i.reversed() + route_j
            self._routes[index_j] = None
        elif loc_i is begin and loc_j is last:
            self._routes[index_j] = route_j + route_i
            self._routes[index_i] = None
        elif loc_i is last and loc_j is begin:
            self._routes[index_i] = route_i + route_j
            self._routes[index_j] = None
        elif loc_i is last and loc_j is last:
            self._routes[index_i] = route_i + route_j.reversed()
            self._routes[index_j] = None

    def _extend(self, index: int, location: LocationType, node_id: int) -> None:
        node = self._customers_by_id[node_id]
        route = self._routes[index]
        if node.demand + route.demand() > self.vehicle_capacity:
            return
        if location is LocationType.AT_BEGIN:
            route.add_at_begin(node)
        elif location is LocationType.AT_LAST:
            route.add_at_end(node)

    def _add_new_route(self, saving: Saving) -> None:
        first = self._customers_by_id[saving.i]
        second = self._customers_by_id[saving.j]
        if first.demand + second.demand > self.vehicle_capacity:
            return
        for index, route in enumerate(self._routes):
            if route is None:
                self._routes[index] = Route(self.cluster.depot, [first, second])
                return
"""Plain-text reports of a decoded solution: depots, vehicles and their tours."""

from __future__ import annotations

from typing import TextIO

from frogroute.decoding import DecodedSolution
from frogroute.vehicle import Vehicle
from frogroute.cluster import Node

_HEADER = "\n Showing DecodedFrogLeapSolution data results: "
_FOOTER = "DecodedFrogLeapSolution FINISHED \n"


def _vehicle_line(solution: DecodedSolution, vehicle: Vehicle, depot: Node) -> str:
    path = " -> ".join(
        str(node.label_id) for node in (depot, *vehicle.customers, depot)
    )
    cost = vehicle.path_cost(solution.distances, depot)
    return (
        f"Vehicle {vehicle.id}: demand = {vehicle.demand}, "
        f"remaining capacity = {vehicle.remaining_capacity}, "
        f"cost = {cost:.2f}, path = {path} \n"
    )


def format_solution(solution: DecodedSolution) -> str:
    """Render feasibility, then each depot with its vehicles and their tours."""
    parts = [_HEADER, "Feasible \n" if solution.is_feasible else "NOT FEASIBLE \n"]
    parts.append("Vehiculos por deposito\n")
    for index, depot in enumerate(solution.depots):
        parts.append(
            f"Deposito index: {index}; internalId: {depot.id} ; "
            f"LabelId = {depot.label_id}; Capacity = {depot.capacity}, "
            f"RemainingCapacity = {solution.remaining_capacity(index)} \n"
        )
        vehicles = solution.vehicles(index)
        parts.append(f"Cantidad de vehiculos: {len(vehicles)} \n")
        parts.extend(_vehicle_line(solution, vehicle, depot) for vehicle in vehicles)
    parts.append(_FOOTER)
    return "".join(parts)


def write_solution(solution: DecodedSolution, stream: TextIO) -> int:
    """Write the report to a text stream; return the number of characters written."""
    text = format_solution(solution)
    stream.write(text)
    return len(text)
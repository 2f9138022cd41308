import pytest

from frogroute.cluster import Node
from frogroute.distances import DistanceTable
from frogroute.routes import Route
from frogroute.decoding import DecodedSolution


def _table(positions):
    table = DistanceTable(len(positions))
    for u, pu in enumerate(positions):
        for v, pv in enumerate(positions):
            if u <= v:
                table.add_edge(u, v, abs(pu - pv))
    return table


def _line_instance(positions, demands, depot_capacity=100):
    depot = Node(0, 1, capacity=depot_capacity)
    customers = [
        Node(i + 1, i + 2, demand=d) for i, d in enumerate(demands)
    ]
    return depot, customers, _table([0, *positions])


def _customer_sets(solution, depot_index):
    return [
        [c.id for c in vehicle.customers] for vehicle in solution.vehicles(depot_index)
    ]


def test_value_decodes_to_depot_and_upper_bound_to_last():
    depots = [Node(0, 1, capacity=50), Node(1, 2, capacity=50)]
    table = _table([0, 0, 3, 4])
    a = Node(2, 3, demand=1)
    b = Node(3, 4, demand=1)
    solution = DecodedSolution(depots, table, 10)
    assert solution.assign_customer_to_depot(a, 1.0)
    assert solution.assign_customer_to_depot(b, 2.0)
    assert solution.assigned_customers(0) == ()
    assert solution.assigned_customers(1) == (a, b)


def test_assignment_uses_depot_capacity():
    depot, customers, table = _line_instance([1, 2], [4, 5], depot_capacity=10)
    solution = DecodedSolution([depot], table, 20)
    for customer in customers:
        solution.assign_customer_to_depot(customer, 0.5)
    assert solution.remaining_capacity(0) == depot.capacity - 4 - 5
    assert solution.is_feasible


def test_customer_over_vehicle_capacity_is_rejected():
    depot, customers, table = _line_instance([1], [30])
    solution = DecodedSolution([depot], table, 20)
    assert solution.assign_customer_to_depot(customers[0], 0.2) is False
    assert solution.is_feasible is False
    assert solution.not_added_customer == customers[0].id
    assert solution.assigned_customers(0) == ()


def test_customer_over_depot_capacity_is_rejected():
    depot, customers, table = _line_instance([1, 2], [6, 6], depot_capacity=10)
    solution = DecodedSolution([depot], table, 20)
    assert solution.assign_customer_to_depot(customers[0], 0.0)
    assert solution.assign_customer_to_depot(customers[1], 0.0) is False
    assert solution.not_added_customer == customers[1].id
    assert solution.remaining_capacity(0) == depot.capacity - 6


def test_first_fit_reuses_vehicle_with_room():
    depot, customers, table = _line_instance([1, 2, 3], [6, 5, 4])
    solution = DecodedSolution([depot], table, 10)
    for customer in customers:
        solution.assign_customer_to_depot(customer, 0.0)
    solution.assign_first_fit(0)
    first, second, third = (c.id for c in customers)
    assert _customer_sets(solution, 0) == [[first, third], [second]]


def test_first_fit_serves_every_customer_once_within_capacity():
    depot, customers, table = _line_instance([1, 2, 3, 4, 5], [3, 7, 2, 8, 5])
    solution = DecodedSolution([depot], table, 10)
    for customer in customers:
        solution.assign_customer_to_depot(customer, 0.0)
    solution.assign_first_fit(0)
    served = sorted(c.id for v in solution.vehicles(0) for c in v.customers)
    assert served == sorted(c.id for c in customers)
    assert all(v.demand <= 10 for v in solution.vehicles(0))
    assert all(v.depot_index == 0 for v in solution.vehicles(0))


def test_nearest_neighbour_follows_closest_customers():
    depot, customers, table = _line_instance([5, 1, 2, 10], [3, 3, 3, 3])
    a, b, c, d = customers
    solution = DecodedSolution([depot], table, 9)
    for customer in customers:
        solution.assign_customer_to_depot(customer, 0.0)
    solution.assign_nearest_neighbour(0)
    assert _customer_sets(solution, 0) == [[b.id, c.id, a.id], [d.id]]


def test_nearest_neighbour_replaces_previous_vehicles():
    depot, customers, table = _line_instance([1, 2], [1, 1])
    solution = DecodedSolution([depot], table, 10)
    for customer in customers:
        solution.assign_customer_to_depot(customer, 0.0)
    solution.assign_nearest_neighbour(0)
    solution.assign_nearest_neighbour(0)
    assert len(solution.vehicles(0)) == 1
    assert len(solution.vehicles(0)[0]) == len(customers)


def _fresh(positions, demands, capacity):
    depot, customers, table = _line_instance(positions, demands)
    solution = DecodedSolution([depot], table, capacity)
    for customer in customers:
        solution.assign_customer_to_depot(customer, 0.0)
    return solution


@pytest.mark.parametrize(
    "positions, demands",
    [([5, -4, 6, -3, 1], [6, 5, 4, 3, 2]), ([1, 2, 3, 4], [5, 5, 5, 5])],
)
def test_mixed_keeps_cheaper_assignment(positions, demands):
    first_fit = _fresh(positions, demands, 10)
    first_fit.assign_first_fit(0)
    nearest = _fresh(positions, demands, 10)
    nearest.assign_nearest_neighbour(0)
    mixed = _fresh(positions, demands, 10)
    mixed.assign_mixed(0)
    assert mixed.evaluate_depot(0) == min(
        first_fit.evaluate_depot(0), nearest.evaluate_depot(0)
    )


def test_savings_routes_split_when_vehicle_is_full():
    depot, customers, table = _line_instance([1, 2, 3], [4, 4, 4])
    a, b, c = customers
    solution = DecodedSolution([depot], table, 10)
    solution.assign_from_savings_routes(0, [Route(depot, [a, b, c])])
    assert _customer_sets(solution, 0) == [[a.id, b.id], [c.id]]


def test_savings_routes_keep_one_vehicle_per_route():
    depot, customers, table = _line_instance([1, 2, 3], [2, 2, 2])
    a, b, c = customers
    solution = DecodedSolution([depot], table, 10)
    solution.assign_from_savings_routes(0, [Route(depot, [a]), Route(depot, [b, c])])
    assert _customer_sets(solution, 0) == [[a.id], [b.id, c.id]]
    ids = [v.id for v in solution.vehicles(0)]
    assert len(set(ids)) == len(ids)


def test_evaluate_is_round_trip_on_a_line():
    depot, customers, table = _line_instance([1, 2, 3], [1, 1, 1])
    a, b, c = customers
    solution = DecodedSolution([depot], table, 10)
    solution.assign_from_savings_routes(0, [Route(depot, [a, b, c])])
    assert solution.evaluate_depot(0) == 6


def test_evaluate_sums_depots():
    depots = [Node(0, 1, capacity=50), Node(1, 2, capacity=50)]
    table = _table([0, 10, 2, 13])
    a = Node(2, 3, demand=1)
    b = Node(3, 4, demand=1)
    solution = DecodedSolution(depots, table, 10)
    solution.assign_customer_to_depot(a, 0.3)
    solution.assign_customer_to_depot(b, 1.7)
    solution.assign_first_fit(0)
    solution.assign_first_fit(1)
    assert solution.evaluate() == solution.evaluate_depot(0) + solution.evaluate_depot(1)
    assert solution.evaluate_depot(0) == 2 * table.edge(0, 2)


def test_empty_depot_costs_nothing():
    depot, _, table = _line_instance([1], [1])
    solution = DecodedSolution([depot], table, 10)
    solution.assign_nearest_neighbour(0)
    assert solution.vehicles(0) == ()
    assert solution.evaluate() == 0


def test_invalid_depot_index_raises():
    depot, _, table = _line_instance([1], [1])
    solution = DecodedSolution([depot], table, 10)
    with pytest.raises(IndexError):
        solution.assign_first_fit(1)
    with pytest.raises(IndexError):
        solution.evaluate_depot(-1)


def test_no_depots_is_an_error():
    with pytest.raises(ValueError):
        DecodedSolution([], DistanceTable(0), 10)


def test_value_outside_depots_raises():
    depot, customers, table = _line_instance([1], [1])
    solution = DecodedSolution([depot], table, 10)
    with pytest.raises(ValueError):
        solution.assign_customer_to_depot(customers[0], 3.5)
import pytest

from frogroute.cluster import Cluster, DistanceType, Node
from frogroute.distances import DistanceTable


@pytest.fixture
def setup():
    table = DistanceTable(4)
    depot = Node(id=0, label_id=7, capacity=100, remaining_capacity=60, x=10, y=20)
    a = Node(id=1, label_id=11, demand=5, x=1, y=2)
    b = Node(id=2, label_id=12, demand=8, x=3, y=4)
    c = Node(id=3, label_id=13, demand=2, x=5, y=6)
    table.add_edge(0, 3, 4.0)
    table.add_edge(1, 3, 2.0)
    table.add_edge(2, 3, 6.0)
    cluster = Cluster(depot, cluster_id=1)
    cluster.add_customer(a)
    cluster.add_customer(b)
    return cluster, table, c


def test_add_customer_puts_it_first(setup):
    cluster, _, c = setup
    cluster.add_customer(c)
    assert [n.label_id for n in cluster.customers] == [13, 12, 11]


def test_remove_customer(setup):
    cluster, _, c = setup
    first = cluster.customers[0]
    cluster.remove_customer(first)
    assert first not in cluster.customers
    with pytest.raises(ValueError):
        cluster.remove_customer(c)


def test_distance_measures(setup):
    cluster, table, c = setup
    assert cluster.nearest_distance_to_customer(c, table) == 2.0
    assert cluster.furthest_distance_to_customer(c, table) == 6.0
    assert cluster.depot_distance_to_customer(c, table) == 4.0
    assert cluster.mean_distance_to_customer(c, table) == pytest.approx((4.0 + 2.0 + 6.0) / 3)


@pytest.mark.parametrize(
    "kind,method",
    [
        (DistanceType.MEAN, "mean_distance_to_customer"),
        (DistanceType.NEAREST, "nearest_distance_to_customer"),
        (DistanceType.FURTHEST, "furthest_distance_to_customer"),
        (DistanceType.DEPOT, "depot_distance_to_customer"),
    ],
)
def test_distance_to_customer_dispatch(setup, kind, method):
    cluster, table, c = setup
    cluster.distance_type = kind
    assert cluster.distance_to_customer(c, table) == getattr(cluster, method)(c, table)


def test_nearest_never_exceeds_furthest(setup):
    cluster, table, c = setup
    nearest = cluster.nearest_distance_to_customer(c, table)
    furthest = cluster.furthest_distance_to_customer(c, table)
    mean = cluster.mean_distance_to_customer(c, table)
    assert nearest <= mean <= furthest


def test_capacities(setup):
    cluster, _, _ = setup
    assert cluster.depot_capacity() == 100
    assert cluster.depot_remaining_capacity() == 60


def test_to_vrp_layout(setup):
    cluster, _, _ = setup
    lines = cluster.to_vrp(500).split("\n")
    assert lines[0] == "NAME : ClusterId_7 "
    assert lines[1] == "COMMENT : (Gillet and Johnson) "
    assert lines[2] == "TYPE : CVRP "
    assert lines[3] == "DIMENSION : 3 "
    assert lines[5] == "CAPACITY : 500 "
    assert lines[7] == "7 10 20"
    assert lines[-1] == "EOF"
    assert lines[-2] == " -1"
    assert lines[-3] == " 7"
    demand_start = lines.index("DEMAND_SECTION ")
    assert lines[demand_start + 1 : demand_start + 4] == ["7 0", "12 8", "11 5"]


def test_export_vrp_writes_file(setup, tmp_path):
    cluster, _, _ = setup
    path = cluster.export_vrp(tmp_path, 500)
    assert path.name == "ClusterId_7.vrp"
    assert path.read_text(encoding="ascii") == cluster.to_vrp(500)


def test_format_lists_customers(setup):
    cluster, _, _ = setup
    text = cluster.format()
    assert text.startswith("SHOWING  CLUSTER CONTENT\n")
    assert "Showing Cluster Value = 0.00" in text
    assert "7; 12\n7; 11\n" in text


def test_format_empty_cluster():
    cluster = Cluster(Node(id=0, label_id=3))
    assert cluster.format().endswith("Cluster is empty\n")
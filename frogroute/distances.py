"""Distance tables and the distance vector used by shortest-path searches."""

from __future__ import annotations

from dataclasses import dataclass

INFINITE_DISTANCE = 2**31 - 1
NO_ADJ = -1.0


class DistanceTable:
    """Square table of distances between vertices, indexed by internal id."""

    NO_ADJ = NO_ADJ

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._size = vertices
        self._table = [[NO_ADJ] * vertices for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self._size:
            raise IndexError(f"vertex {vertex} out of range 0..{self._size - 1}")

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """Store the distance between u and v in both directions."""
        self._check(u)
        self._check(v)
        self._table[u][v] = float(weight)
        self._table[v][u] = float(weight)

    def add_diagonal_edge(self, u: int, weight: float) -> None:
        """Store the distance from a vertex to itself."""
        self._check(u)
        self._table[u][u] = float(weight)

    def edge(self, u: int, v: int) -> float:
        """Return the stored distance, or NO_ADJ when none was set."""
        self._check(u)
        self._check(v)
        return self._table[u][v]

    def number_of_vertices(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size


@dataclass
class _Vertex:
    id: int
    distance: int = INFINITE_DISTANCE
    prev_index: int = -1
    prev_path_index: int = -1
    marked: bool = False
    is_customer: bool = False


class DistVect:
    """Per-vertex tentative distances, marks and predecessors from one origin."""

    def __init__(self, count: int, origin: int) -> None:
        if not 0 <= origin < count:
            raise IndexError(f"origin {origin} out of range 0..{count - 1}")
        self._vertices = [_Vertex(i) for i in range(count)]
        self._order = list(self._vertices)
        self.origin = origin
        self.last_marked = -1
        self._vertices[origin].distance = 0

    def __len__(self) -> int:
        return len(self._vertices)

    def _vertex(self, v: int) -> _Vertex:
        if not 0 <= v < len(self._vertices):
            raise IndexError(f"vertex {v} out of range 0..{len(self._vertices) - 1}")
        return self._vertices[v]

    def set_min_dist(self, v: int, dist: int) -> None:
        self._vertex(v).distance = dist

    def min_dist(self, v: int) -> int:
        return self._vertex(v).distance

    def mark(self, v: int) -> None:
        self._vertex(v).marked = True
        self.last_marked = v

    def unmark(self, v: int) -> None:
        self._vertex(v).marked = False

    def is_unmarked(self, v: int) -> bool:
        return not self._vertex(v).marked

    def all_marked(self) -> bool:
        return all(vertex.marked for vertex in self._vertices)

    def set_prev_index(self, v: int, prev: int) -> None:
        self._vertex(v).prev_index = prev

    def prev_index(self, v: int) -> int:
        return self._vertex(v).prev_index

    def set_prev_path_index(self, v: int, prev: int) -> None:
        self._vertex(v).prev_path_index = prev

    def prev_path_index(self, v: int) -> int:
        return self._vertex(v).prev_path_index

    def sort_solution(self) -> None:
        """Order the solution view by ascending distance, keeping ties stable."""
        self._order.sort(key=lambda vertex: vertex.distance)

    @property
    def order(self) -> list[int]:
        """Vertex ids in the current solution order."""
        return [vertex.id for vertex in self._order]

    def format_solution(self) -> str:
        lines = [f"Vertex |  Previous Vertex | Distance from source: {self.origin} "]
        lines.extend(
            f"{vertex.id}      |    {vertex.prev_path_index}      |        {vertex.distance}  "
            for vertex in self._order
        )
        return "\n".join(lines) + "\n"

    def distance_between(self, i: int, j: int) -> int:
        """Distance between two positions of the sorted solution view."""
        low, high = sorted((i, j))
        for position in (low, high):
            if not 0 <= position < len(self._order):
                raise IndexError(f"position {position} out of range")
        return self._order[high].distance - self._order[low].distance

    def import_customers(self, customer_ids) -> None:
        """Flag the given vertex ids as customers."""
        for customer_id in customer_ids:
            self._vertex(customer_id).is_customer = True

    def customer_count(self) -> int:
        return sum(1 for vertex in self._vertices if vertex.is_customer)

    @property
    def customers(self) -> list[int]:
        return [vertex.id for vertex in self._vertices if vertex.is_customer]
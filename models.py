import numpy as np


# Half of the int64 range so that INFINITY + INFINITY cannot overflow.
INFINITY = int(np.iinfo(np.int64).max // 2)

NO_VERTEX = -1

FOUND = "found"
UNREACHABLE = "unreachable"


class Path:
    def __init__(self, vertices=None, total_cost=0, status=FOUND):
        self.vertices = list(vertices) if vertices is not None else []
        self.total_cost = total_cost
        self.status = status

    @classmethod
    def unreachable(cls):
        return cls(vertices=[], total_cost=None, status=UNREACHABLE)

    @property
    def found(self):
        return self.status == FOUND

    @property
    def source(self):
        return self.vertices[0] if self.vertices else None

    @property
    def target(self):
        return self.vertices[-1] if self.vertices else None

    def __len__(self):
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def __eq__(self, other):
        if not isinstance(other, Path):
            return False
        return (self.status, self.vertices, self.total_cost) == (
            other.status, other.vertices, other.total_cost
        )

    def __str__(self):
        if not self.found:
            return "no path"
        return " -> ".join(str(v) for v in self.vertices)

    def __repr__(self):
        if not self.found:
            return "Path(unreachable)"
        return f"Path(cost={self.total_cost}, vertices={len(self.vertices)})"


class DistanceTable:
    """Single-source result: best distance and predecessor per vertex.

    Unreached vertices keep INFINITY as their distance and NO_VERTEX as
    their predecessor, as does the source itself.
    """

    def __init__(self, source, vertex_count):
        self.source = source
        self.dist = np.full(vertex_count, INFINITY, dtype=np.int64)
        self.prev = np.full(vertex_count, NO_VERTEX, dtype=np.int64)
        self.dist[source] = 0

    def __len__(self):
        return len(self.dist)

    def distance(self, vertex):
        """Distance from the source, or None when unreachable."""
        d = int(self.dist[vertex])
        return None if d >= INFINITY else d

    def predecessor(self, vertex):
        p = int(self.prev[vertex])
        return None if p == NO_VERTEX else p

    def reachable(self, vertex):
        return self.dist[vertex] < INFINITY


class AllPairsTable:
    """All-pairs result: V x V distance and next-hop matrices."""

    def __init__(self, vertex_count):
        self.dist = np.full((vertex_count, vertex_count), INFINITY, dtype=np.int64)
        self.next = np.full((vertex_count, vertex_count), NO_VERTEX, dtype=np.int64)

    def __len__(self):
        return self.dist.shape[0]

    def distance(self, source, target):
        d = int(self.dist[source, target])
        return None if d >= INFINITY else d

    def next_hop(self, source, target):
        n = int(self.next[source, target])
        return None if n == NO_VERTEX else n

    def reachable(self, source, target):
        return self.dist[source, target] < INFINITY

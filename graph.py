import logging

import numpy as np


logger = logging.getLogger(__name__)


class ConstructionError(ValueError):
    """Raised when a graph is created with a non-positive vertex count."""


class InvalidEdgeEndpoint(ValueError):
    """Raised when a vertex index falls outside [0, V)."""

    def __init__(self, vertex, vertex_count):
        super().__init__(f"vertex {vertex} is out of range [0, {vertex_count})")
        self.vertex = vertex
        self.vertex_count = vertex_count


class Graph:
    def __init__(self, vertex_count):
        if vertex_count <= 0:
            raise ConstructionError(f"vertex count must be positive, got {vertex_count}")
        self.V = int(vertex_count)
        self.edges = [[] for _ in range(self.V)]  # edges[from] = [(to, weight), ...]

    def check_vertex(self, vertex):
        if not 0 <= vertex < self.V:
            raise InvalidEdgeEndpoint(vertex, self.V)

    def add_edge(self, from_vertex, to_vertex, weight):
        """Append a directed edge. Out-of-range endpoints are rejected."""
        for vertex in (from_vertex, to_vertex):
            if not 0 <= vertex < self.V:
                logger.warning("rejected edge %s -> %s: vertex %s is out of range",
                               from_vertex, to_vertex, vertex)
                raise InvalidEdgeEndpoint(vertex, self.V)
        self.edges[from_vertex].append((to_vertex, int(weight)))

    def edges_from(self, vertex):
        """Yields (to, weight) for every edge added to vertex."""
        self.check_vertex(vertex)
        for to_vertex, weight in self.edges[vertex]:
            yield to_vertex, weight

    def vertex_count(self):
        return self.V

    def edge_count(self):
        return sum(len(out) for out in self.edges)

    def min_weight(self, from_vertex, to_vertex):
        """Cheapest direct edge between two vertices, or None if not adjacent."""
        weights = [w for to, w in self.edges_from(from_vertex) if to == to_vertex]
        return min(weights) if weights else None

    def has_negative_weights(self):
        return any(w < 0 for out in self.edges for _, w in out)

    def __len__(self):
        return self.V

    def __str__(self):
        lines = [f"Graph(V={self.V}, E={self.edge_count()}):"]
        for vertex, out in enumerate(self.edges):
            if not out:
                continue
            edge_strs = [f"{to}: {w}" for to, w in out]
            lines.append(f"  {vertex} -> {{{', '.join(edge_strs)}}}")
        return "\n".join(lines)


def build_graph(heights, cost_fn):
    """Build a grid graph from a square height field using cost_fn(delta) -> int.

    Vertex x*size + y is cell (x, y). Each cell gets an edge to each of its
    neighbours that exist, in the order south, west, east, north.
    """
    heights = np.asarray(heights)
    if heights.ndim != 2 or heights.shape[0] != heights.shape[1] or heights.size == 0:
        raise ValueError(f"Height field must be a non-empty square array, got shape {heights.shape}")

    size = heights.shape[0]
    graph = Graph(size * size)
    for start in range(size * size):
        x, y = divmod(start, size)

        destinations = []
        if x != size - 1:
            destinations.append(start + size)
        if y != 0:
            destinations.append(start - 1)
        if y != size - 1:
            destinations.append(start + 1)
        if x != 0:
            destinations.append(start - size)

        for dest in destinations:
            dest_x, dest_y = divmod(dest, size)
            delta = int(heights[dest_x, dest_y]) - int(heights[x, y])
            graph.add_edge(start, dest, cost_fn(delta))
    return graph

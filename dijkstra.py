import logging

import numpy as np

from models import DistanceTable, INFINITY
from paths import from_predecessors


logger = logging.getLogger(__name__)

# Larger than INFINITY so visited vertices never win the minimum scan.
_VISITED = np.iinfo(np.int64).max


def dijkstra(graph, source):
    """Label-setting single-source shortest distances.

    Each of the V rounds scans every unvisited vertex for the smallest
    distance (first index wins ties), marks it visited, and relaxes its
    edges to vertices that are still unvisited. O(V^2 + E).

    Negative weights are accepted but break the label-setting invariant:
    a vertex is never revisited once settled, so results may be suboptimal.
    """
    graph.check_vertex(source)
    vertex_count = graph.vertex_count()
    table = DistanceTable(source, vertex_count)
    dist, prev = table.dist, table.prev
    visited = np.zeros(vertex_count, dtype=bool)
    warned_negative = False

    for _ in range(vertex_count):
        u = int(np.argmin(np.where(visited, _VISITED, dist)))
        visited[u] = True
        d_u = int(dist[u])
        if d_u >= INFINITY:
            # Everything left is unreachable from the source.
            break

        for w, weight in graph.edges_from(u):
            if weight < 0 and not warned_negative:
                logger.warning("negative edge %d -> %d (weight %d); "
                               "Dijkstra results may be suboptimal", u, w, weight)
                warned_negative = True
            if visited[w]:
                continue
            alt = d_u + weight
            if alt < dist[w]:
                dist[w] = alt
                prev[w] = u

    logger.debug("dijkstra from %d settled %d of %d vertices",
                 source, int(visited.sum()), vertex_count)
    return table


def find_shortest_path(graph, source, target):
    """Shortest path from source to target using Dijkstra."""
    graph.check_vertex(target)
    table = dijkstra(graph, source)
    return from_predecessors(table, target)

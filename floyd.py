import logging

import numpy as np

from models import AllPairsTable, INFINITY
from paths import from_next_hops


logger = logging.getLogger(__name__)


class NegativeCycleError(ValueError):
    """The graph contains a cycle whose total weight is negative."""


def floyd_warshall(graph):
    """All-pairs shortest distances plus a next-hop matrix.

    dist[i][j] starts as the cheapest direct edge (0 on the diagonal) and
    next[i][j] as j. Each intermediate vertex k then relaxes every pair at
    once; next[i][j] takes next[i][k], the first hop toward k. Legs at
    INFINITY are never combined, so unreachable pairs stay at INFINITY even
    when negative weights are present.
    """
    vertex_count = graph.vertex_count()
    table = AllPairsTable(vertex_count)
    dist, nxt = table.dist, table.next

    for i in range(vertex_count):
        for j, weight in graph.edges_from(i):
            if weight < dist[i, j]:
                dist[i, j] = weight
                nxt[i, j] = j
    diagonal = np.arange(vertex_count)
    dist[diagonal, diagonal] = np.minimum(dist[diagonal, diagonal], 0)
    nxt[diagonal, diagonal] = diagonal

    for k in range(vertex_count):
        via_k = dist[:, k, None] + dist[None, k, :]
        finite = (dist[:, k, None] < INFINITY) & (dist[None, k, :] < INFINITY)
        better = finite & (via_k < dist)
        if not better.any():
            continue
        dist[better] = via_k[better]
        nxt[:] = np.where(better, nxt[:, k, None], nxt)

    if (dist[diagonal, diagonal] < 0).any():
        bad = int(np.flatnonzero(dist[diagonal, diagonal] < 0)[0])
        raise NegativeCycleError(f"Negative cycle through vertex {bad}")

    logger.debug("floyd-warshall over %d vertices done", vertex_count)
    return table


def find_shortest_path(graph, source, target):
    """Shortest path from source to target using Floyd-Warshall."""
    graph.check_vertex(source)
    graph.check_vertex(target)
    table = floyd_warshall(graph)
    return from_next_hops(table, source, target)

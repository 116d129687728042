"""Turn engine tables into ordered vertex sequences."""

from models import Path, NO_VERTEX


class CycleDetected(RuntimeError):
    """Reconstruction ran for more steps than the graph has vertices."""


def from_predecessors(table, target):
    """Walk a DistanceTable's predecessor chain back from target to its source.

    Returns an unreachable Path when the target was never reached or the
    chain stops before getting back to the source.
    """
    source = table.source
    if not table.reachable(target):
        return Path.unreachable()

    vertex_count = len(table)
    vertices = [target]
    vertex = target
    while vertex != source:
        vertex = int(table.prev[vertex])
        if vertex == NO_VERTEX:
            return Path.unreachable()
        if len(vertices) >= vertex_count:
            raise CycleDetected(
                f"predecessor chain from {target} exceeded {vertex_count} vertices"
            )
        vertices.append(vertex)

    vertices.reverse()
    return Path(vertices, table.distance(target))


def from_next_hops(table, source, target):
    """Follow an AllPairsTable's next-hop matrix from source to target."""
    if source == target:
        return Path([source], 0)
    if not table.reachable(source, target) or table.next[source, target] == NO_VERTEX:
        return Path.unreachable()

    vertex_count = len(table)
    vertices = [source]
    current = source
    while current != target:
        current = int(table.next[current, target])
        if current == NO_VERTEX:
            return Path.unreachable()
        if len(vertices) >= vertex_count:
            raise CycleDetected(
                f"next-hop walk from {source} to {target} exceeded {vertex_count} vertices"
            )
        vertices.append(current)

    return Path(vertices, table.distance(source, target))


def path_cost(graph, vertices):
    """Sum of the cheapest direct edge between each pair of consecutive vertices."""
    total = 0
    for a, b in zip(vertices, vertices[1:]):
        weight = graph.min_weight(a, b)
        if weight is None:
            raise ValueError(f"No edge from {a} to {b}")
        total += weight
    return total

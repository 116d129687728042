import logging

import dijkstra
import floyd


logger = logging.getLogger(__name__)

ALGORITHMS = {
    "dijkstra": dijkstra.find_shortest_path,
    "floyd": floyd.find_shortest_path,
}


def get_algorithm(name):
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"Unknown algorithm {name!r}, expected one of {sorted(ALGORITHMS)}")


class MissionResult:
    def __init__(self, path, traversed):
        self.path = path
        self.traversed = traversed  # height field with the path cells marked

    @property
    def energy(self):
        return self.path.total_cost

    def __repr__(self):
        return f"MissionResult({self.path!r})"


def run_mission(dem, find_shortest_path, cost_fn, source=0, target=None):
    """Find the cheapest route across dem and overlay it on a copy of the map.

    Defaults to the top-left to bottom-right corner.
    """
    graph = dem.build_graph(cost_fn)
    if target is None:
        target = graph.vertex_count() - 1

    path = find_shortest_path(graph, source, target)
    if path.found:
        logger.info("mission %d -> %d: %d steps, energy %d",
                    source, target, len(path) - 1, path.total_cost)
        traversed = dem.traverse(path)
    else:
        logger.info("mission %d -> %d: no path", source, target)
        traversed = dem.heights.copy()
    return MissionResult(path, traversed)

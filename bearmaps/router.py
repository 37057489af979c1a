"""Shortest path search over the road network."""

import heapq
import logging
from typing import Dict, List, Optional, Set, Tuple

from .graph import GraphDB

logger = logging.getLogger(__name__)


class Router:
    """A* shortest paths between map coordinates."""

    @staticmethod
    def shortest_path(graph: GraphDB, stlon: float, stlat: float,
                      destlon: float, destlat: float) -> Optional[List[int]]:
        """Find the shortest path between the vertices nearest two locations.

        Args:
            graph: Cleaned road network
            stlon: Longitude of the start location
            stlat: Latitude of the start location
            destlon: Longitude of the destination location
            destlat: Latitude of the destination location

        Returns:
            Vertex ids in travel order, or None if no path exists
        """
        logger.debug(f"Finding path between ({stlon}, {stlat}) and ({destlon}, {destlat})")
        source = graph.closest(stlon, stlat)
        target = graph.closest(destlon, destlat)
        if source is None or target is None:
            logger.warning("Graph has no vertices to route through")
            return None
        return Router.shortest_path_between(graph, source, target)

    @staticmethod
    def shortest_path_between(graph: GraphDB, source: int, target: int) -> Optional[List[int]]:
        """A* search from source to target using straight-line distance as heuristic.

        The heuristic is the graph's own distance metric, so it never
        overestimates and the first time target is popped its distance is final.
        """
        dist_to: Dict[int, float] = {source: 0.0}
        edge_to: Dict[int, Optional[int]] = {source: None}
        settled: Set[int] = set()
        frontier: List[Tuple[float, int]] = [(graph.distance(source, target), source)]
        expansions = 0

        while frontier:
            _, v = heapq.heappop(frontier)
            if v in settled:
                continue
            if v == target:
                break
            settled.add(v)
            expansions += 1

            for w in graph.adjacent(v):
                candidate = dist_to[v] + graph.distance(v, w)
                if candidate < dist_to.get(w, float("inf")):
                    dist_to[w] = candidate
                    edge_to[w] = v
                    heapq.heappush(frontier, (candidate + graph.distance(w, target), w))

        logger.debug(f"Search settled {expansions} vertices")

        path = Router._reconstruct(edge_to, source, target)
        if path is None:
            logger.warning(f"No path from vertex {source} to vertex {target}")
            return None

        logger.info(f"Found path of {len(path)} vertices, {dist_to[target]:.3f} miles")
        return path

    @staticmethod
    def _reconstruct(edge_to: Dict[int, Optional[int]], source: int, target: int) -> Optional[List[int]]:
        """Follow predecessors back from target; None if the chain misses source."""
        if target not in edge_to:
            return None

        path = []
        v: Optional[int] = target
        while v is not None:
            path.append(v)
            v = edge_to[v]
        path.reverse()

        if path[0] != source:
            return None
        return path

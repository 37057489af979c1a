"""Road network graph used by the router and direction builder."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set

from rtree import index

from .config import SNAP_CANDIDATES
from .geo_utils import calculate_bearing, distance_miles, search_window

logger = logging.getLogger(__name__)


class GraphError(ValueError):
    """Raised when the graph is used against its preconditions."""


@dataclass
class Node:
    """A graph vertex."""
    id: int
    lon: float
    lat: float
    ways: Set[int] = field(default_factory=set)


@dataclass
class Way:
    """A named road, as the ordered vertices it passes through."""
    id: int
    node_ids: List[int]
    name: Optional[str] = None
    highway: Optional[str] = None
    source_id: Optional[object] = None


class GraphDB:
    """Road network graph.

    Vertices are connected by the ways that pass through them. The graph is
    built with add_node/add_way, then clean() is called once; after that it is
    only read, so concurrent queries need no locking.
    """

    def __init__(self):
        """Initialize an empty graph."""
        self.nodes: Dict[int, Node] = {}
        self.ways: Dict[int, Way] = {}
        self.adjacency: Dict[int, Set[int]] = {}
        self.node_idx: Optional[index.Index] = None

    # Building

    def add_node(self, node_id: int, lon: float, lat: float) -> Node:
        node = Node(node_id, lon, lat)
        self.nodes[node_id] = node
        self.adjacency.setdefault(node_id, set())
        return node

    def add_way(self, way_id: int, node_ids: Sequence[int], name: Optional[str] = None,
                highway: Optional[str] = None, source_id: Optional[object] = None) -> Way:
        """Add a way and connect its consecutive vertices in both directions.

        Args:
            way_id: Identifier of the way; reusing an id adds another part to it
            node_ids: Ordered vertex ids the way passes through (at least two)
            name: Display name of the way
            highway: Road classification
            source_id: Identifier the way had in the source data

        Returns:
            The stored Way

        Raises:
            GraphError: If the way is too short or references an unknown vertex
        """
        if len(node_ids) < 2:
            raise GraphError(f"Way {way_id} needs at least two nodes, got {len(node_ids)}")
        missing = [n for n in node_ids if n not in self.nodes]
        if missing:
            raise GraphError(f"Way {way_id} references unknown nodes {missing}")

        way = self.ways.get(way_id)
        if way is None:
            way = Way(way_id, list(node_ids), name, highway, source_id)
            self.ways[way_id] = way
        else:
            # another part of a multi-part way
            way.node_ids.extend(node_ids)
        for prev, cur in zip(node_ids, node_ids[1:]):
            if prev == cur:
                continue
            self.adjacency[prev].add(cur)
            self.adjacency[cur].add(prev)
        for node_id in node_ids:
            self.nodes[node_id].ways.add(way_id)
        return way

    def clean(self) -> None:
        """Remove vertices without neighbours and build the spatial index."""
        isolated = [v for v, neighbors in self.adjacency.items() if not neighbors]
        for v in isolated:
            del self.adjacency[v]
            del self.nodes[v]
        logger.debug(f"Removed {len(isolated)} isolated vertices, {len(self.nodes)} remain")
        self._build_index()

    def _build_index(self) -> None:
        logger.debug("Building spatial index for vertices")
        idx = index.Index()
        for node in self.nodes.values():
            idx.insert(node.id, (node.lon, node.lat, node.lon, node.lat))
        self.node_idx = idx

    # Reading

    def _node(self, v: int) -> Node:
        try:
            return self.nodes[v]
        except KeyError:
            raise GraphError(f"Unknown vertex {v}") from None

    def vertices(self) -> Iterable[int]:
        return self.nodes.keys()

    def adjacent(self, v: int) -> Iterable[int]:
        self._node(v)
        return self.adjacency[v]

    def lon(self, v: int) -> float:
        return self._node(v).lon

    def lat(self, v: int) -> float:
        return self._node(v).lat

    def node_ways(self, v: int) -> Set[int]:
        return self._node(v).ways

    def way_name(self, way_id: int) -> Optional[str]:
        way = self.ways.get(way_id)
        return way.name if way is not None else None

    def distance(self, v: int, w: int) -> float:
        """Geodesic distance in miles between two vertices."""
        a, b = self._node(v), self._node(w)
        return distance_miles((a.lon, a.lat), (b.lon, b.lat))

    def bearing(self, v: int, w: int) -> float:
        """Compass bearing in degrees from vertex v to vertex w."""
        a, b = self._node(v), self._node(w)
        return calculate_bearing((a.lon, a.lat), (b.lon, b.lat))

    def route_distance(self, route: Sequence[int]) -> float:
        """Total length in miles of a vertex sequence."""
        return sum(self.distance(v, w) for v, w in zip(route, route[1:]))

    def closest(self, lon: float, lat: float) -> Optional[int]:
        """Find the vertex nearest to a coordinate.

        Args:
            lon: Longitude coordinate
            lat: Latitude coordinate

        Returns:
            Id of the nearest vertex, or None if the graph has no vertices
        """
        if self.node_idx is None:
            raise GraphError("Spatial index not built; call clean() after loading")
        if not self.nodes:
            return None

        def snap_key(v: int):
            node = self.nodes[v]
            return distance_miles((lon, lat), (node.lon, node.lat)), v

        # nearest in lon/lat space gives an upper bound on the geodesic distance;
        # every vertex that could beat it lies inside the matching window
        seeds = self.node_idx.nearest((lon, lat, lon, lat), SNAP_CANDIDATES)
        bound, _ = min(snap_key(v) for v in seeds)
        candidates = list(self.node_idx.intersection(search_window(lon, lat, bound)))
        best = min(candidates, key=snap_key)
        logger.debug(f"Closest vertex to ({lon}, {lat}) is {best} out of {len(candidates)} candidates")
        return best

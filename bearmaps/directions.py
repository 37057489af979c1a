"""Turn-by-turn direction building for routes."""

import logging
from typing import List, Optional, Sequence

from .direction_types import Direction, UNKNOWN_ROAD
from .geo_utils import relative_bearing
from .graph import GraphDB
from .interfaces import NavigationDirection

logger = logging.getLogger(__name__)


class DirectionBuilder:
    """Class to turn a vertex route into navigation directions."""

    @staticmethod
    def route_directions(graph: GraphDB, route: Sequence[int]) -> List[NavigationDirection]:
        """Create the list of directions corresponding to a route.

        Consecutive edges on the same way are merged into one direction. A new
        direction starts whenever the way changes; its turn is classified from
        the change of bearing against the last edge of the previous direction.

        Args:
            graph: Road network the route was computed on
            route: Vertex ids in travel order

        Returns:
            Directions in travel order; empty if the route has fewer than two vertices
        """
        if len(route) < 2:
            return []

        directions: List[NavigationDirection] = []
        current_way = DirectionBuilder._shared_way(graph, route[0], route[1], None)
        current = NavigationDirection(Direction.START, DirectionBuilder._way_label(graph, current_way), 0.0)
        prev_bearing: Optional[float] = None

        for prev, cur in zip(route, route[1:]):
            bearing = graph.bearing(prev, cur)
            edge_way = DirectionBuilder._shared_way(graph, prev, cur, current_way)

            if prev_bearing is not None and edge_way != current_way:
                directions.append(current)
                turn = DirectionBuilder.classify(relative_bearing(bearing, prev_bearing))
                current_way = edge_way
                current = NavigationDirection(turn, DirectionBuilder._way_label(graph, edge_way), 0.0)

            current.distance += graph.distance(prev, cur)
            prev_bearing = bearing

        directions.append(current)
        logger.debug(f"Built {len(directions)} directions for a route of {len(route)} vertices")
        return directions

    @staticmethod
    def classify(relative: float) -> int:
        """Map a relative bearing in degrees to a Direction."""
        if -15 <= relative <= 15:
            return Direction.STRAIGHT
        elif -30 <= relative < -15:
            return Direction.SLIGHT_LEFT
        elif 15 < relative <= 30:
            return Direction.SLIGHT_RIGHT
        elif -100 <= relative < -30:
            return Direction.RIGHT
        elif 30 < relative <= 100:
            return Direction.LEFT
        elif relative < -100:
            return Direction.SHARP_LEFT
        return Direction.SHARP_RIGHT

    @staticmethod
    def _shared_way(graph: GraphDB, v: int, w: int, preferred: Optional[int]) -> Optional[int]:
        """A way id both vertices lie on, keeping the preferred one if possible."""
        common = graph.node_ways(v) & graph.node_ways(w)
        if not common:
            return None
        if preferred in common:
            return preferred
        return min(common)

    @staticmethod
    def _way_label(graph: GraphDB, way_id: Optional[int]) -> str:
        if way_id is None:
            return UNKNOWN_ROAD
        return graph.way_name(way_id) or UNKNOWN_ROAD

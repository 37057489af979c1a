"""Road network loading from GeoJSON."""

import json
import logging
from typing import Dict, List, Tuple

import requests
from shapely.geometry import shape, MultiLineString, LineString

from .config import ALLOWED_HIGHWAY_TYPES, COORDINATE_PRECISION
from .graph import GraphDB

logger = logging.getLogger(__name__)


class GraphDataLoader:
    """Class to build a road graph from GeoJSON line features."""

    def __init__(self):
        """Initialize the loader with an empty graph."""
        self.graph = GraphDB()
        self._node_ids: Dict[Tuple[float, float], int] = {}

    def load_data(self, source: str) -> GraphDB:
        """Load road data from a GeoJSON URL or file path.

        Args:
            source: http(s) URL or local path of a GeoJSON FeatureCollection

        Returns:
            The cleaned graph
        """
        logger.info(f"Loading road data from {source}")

        try:
            if source.startswith(("http://", "https://")):
                response = requests.get(source)
                response.raise_for_status()
                data = json.loads(response.content)
            else:
                with open(source, encoding="utf-8") as f:
                    data = json.load(f)
        except (requests.RequestException, json.JSONDecodeError, OSError) as e:
            logger.error(f"Failed to load road data: {str(e)}")
            raise

        return self.load_geojson(data)

    def load_geojson(self, data: Dict) -> GraphDB:
        """Build the graph from a parsed FeatureCollection."""
        features = data["features"]
        logger.debug(f"Processing {len(features)} features")

        for ordinal, feature in enumerate(features):
            self._process_feature(ordinal, feature)
        self.graph.clean()

        logger.info(f"Successfully loaded {len(self.graph.nodes)} vertices "
                    f"and {len(self.graph.ways)} ways")
        return self.graph

    def _process_feature(self, ordinal: int, feature: Dict) -> None:
        properties = feature.get("properties") or {}
        highway = properties.get("highway")
        if highway is not None and highway not in ALLOWED_HIGHWAY_TYPES:
            logger.debug(f"Skipping feature {ordinal} with highway type {highway}")
            return

        geom = shape(feature["geometry"])
        lines: List[LineString] = []
        if isinstance(geom, MultiLineString):
            lines.extend(geom.geoms)
        elif isinstance(geom, LineString):
            lines.append(geom)
        else:
            logger.warning(f"Skipping feature {ordinal} with geometry type {geom.geom_type}")
            return

        # dense ids; the feature's own id is kept as source_id
        way_id = len(self.graph.ways)
        source_id = properties.get("id")
        name = properties.get("name")
        for line in lines:
            node_ids: List[int] = []
            for lon, lat in (coord[:2] for coord in line.coords):
                node_id = self._node_for(lon, lat)
                if not node_ids or node_ids[-1] != node_id:
                    node_ids.append(node_id)

            if len(node_ids) < 2:
                logger.warning(f"Skipping degenerate part of way {way_id}")
                continue
            self.graph.add_way(way_id, node_ids, name=name, highway=highway,
                               source_id=source_id)

    def _node_for(self, lon: float, lat: float) -> int:
        """Vertex id for a coordinate, creating the vertex on first sight."""
        key = (round(lon, COORDINATE_PRECISION), round(lat, COORDINATE_PRECISION))
        node_id = self._node_ids.get(key)
        if node_id is None:
            node_id = len(self._node_ids)
            self._node_ids[key] = node_id
            self.graph.add_node(node_id, lon, lat)
        return node_id

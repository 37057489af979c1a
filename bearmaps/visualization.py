"""Visualization utilities for routes and raster queries."""

import logging
from typing import List, Optional, Sequence

import folium

from .graph import GraphDB
from .interfaces import NavigationDirection, RasterResult

logger = logging.getLogger(__name__)


def create_route_map(
    graph: GraphDB,
    route: Sequence[int],
    directions: Optional[List[NavigationDirection]] = None,
    raster: Optional[RasterResult] = None,
    filename: str = "route_map.html",
) -> str:
    """Create an interactive map of a route.

    Args:
        graph: Graph the route was computed on
        route: Vertex ids in travel order (at least one)
        directions: Directions to list in the destination popup
        raster: Raster result whose tile extent should be outlined
        filename: Name of the output HTML file

    Returns:
        Path to the generated HTML file
    """
    coordinates = [(graph.lat(v), graph.lon(v)) for v in route]
    m = folium.Map(location=coordinates[0], zoom_start=15)

    folium.Marker(
        coordinates[0],
        popup="Start",
        icon=folium.Icon(color="green", icon="info-sign")
    ).add_to(m)

    if len(coordinates) > 1:
        folium.PolyLine(coordinates, weight=4, color="blue", opacity=0.8).add_to(m)

        popup = "Destination"
        if directions:
            popup += "<br>" + "<br>".join(str(d) for d in directions)
        folium.Marker(
            coordinates[-1],
            popup=popup,
            icon=folium.Icon(color="red", icon="flag")
        ).add_to(m)

    if raster is not None and raster.query_success:
        folium.Rectangle(
            bounds=[(raster.raster_lr_lat, raster.raster_ul_lon),
                    (raster.raster_ul_lat, raster.raster_lr_lon)],
            color="#3186cc",
            fill=False,
            popup=f"Depth {raster.depth} tiles",
        ).add_to(m)

    m.save(filename)
    logger.info(f"Route map saved to {filename}")
    return filename

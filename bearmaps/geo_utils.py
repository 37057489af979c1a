"""Geographic utility functions for routing."""

import math
from typing import Tuple

from geopy.distance import geodesic

# Widening applied to search windows to absorb ellipsoid flattening and
# the chord/arc difference up to 60 degrees of longitude
WINDOW_MARGIN = 1.1


def calculate_bearing(start_coord: Tuple[float, float], end_coord: Tuple[float, float]) -> float:
    """Calculate the initial compass bearing between two coordinates.

    Args:
        start_coord: Starting coordinate (lon, lat)
        end_coord: Ending coordinate (lon, lat)

    Returns:
        Bearing in degrees (0-360), clockwise from north
    """
    start_lon, start_lat = start_coord
    end_lon, end_lat = end_coord

    lat1 = math.radians(start_lat)
    lat2 = math.radians(end_lat)
    diff_lon = math.radians(end_lon - start_lon)

    x = math.sin(diff_lon) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - (math.sin(lat1) * math.cos(lat2) * math.cos(diff_lon))
    bearing = math.degrees(math.atan2(x, y))

    return (bearing + 360) % 360


def distance_miles(start_coord: Tuple[float, float], end_coord: Tuple[float, float]) -> float:
    """Geodesic distance in miles between two (lon, lat) coordinates."""
    # geopy expects (lat, lon)
    return geodesic((start_coord[1], start_coord[0]), (end_coord[1], end_coord[0])).miles


def relative_bearing(current: float, previous: float) -> float:
    """Change of heading from previous to current, in (-180, 180].

    Differences already inside that range are returned unchanged.
    """
    diff = current - previous
    if diff > 180:
        diff -= 360
    elif diff <= -180:
        diff += 360
    return diff


def search_window(lon: float, lat: float, miles: float) -> Tuple[float, float, float, float]:
    """Bounding box holding every point within a geodesic distance of (lon, lat).

    Returns:
        (min_lon, min_lat, max_lon, max_lat)
    """
    # a degree of latitude is never shorter than 68.70 miles on WGS-84
    lat_delta = miles / 68.7 * WINDOW_MARGIN
    max_abs_lat = min(90.0, abs(lat) + lat_delta)
    min_lat, max_lat = max(-90.0, lat - lat_delta), min(90.0, lat + lat_delta)

    cos_lat = math.cos(math.radians(max_abs_lat))
    if cos_lat <= 0 or lat_delta / cos_lat > 60.0:
        return -180.0, min_lat, 180.0, max_lat

    lon_delta = lat_delta / cos_lat
    return lon - lon_delta, min_lat, lon + lon_delta, max_lat

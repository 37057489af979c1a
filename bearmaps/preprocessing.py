"""Input preprocessing for routing and raster queries."""

import re
import logging
from typing import Mapping, Optional
from dataclasses import dataclass

from .interfaces import RasterRequest

logger = logging.getLogger(__name__)

_DMS_PATTERN = re.compile(
    r"(\d+)°(\d+)'(\d+(?:\.\d+)?)\"([NS])\s*(\d+)°(\d+)'(\d+(?:\.\d+)?)\"([EW])"
)


@dataclass
class ParsedCoordinate:
    """Represents a parsed coordinate with validation status."""
    longitude: float
    latitude: float
    is_valid: bool
    error_message: Optional[str] = None


def parse_coordinates(coord_input: str) -> ParsedCoordinate:
    """Parse a user supplied coordinate into decimal degrees.

    Supports formats:
    - Decimal degrees: lon,lat optionally wrapped in [] or ()
    - DMS: 37°52'12"N 122°16'23"W
    """
    cleaned = coord_input.strip().strip("[]()")

    if "," in cleaned:
        try:
            lon, lat = (float(part) for part in cleaned.split(","))
        except ValueError:
            return ParsedCoordinate(0, 0, False, f"Invalid decimal coordinate: {coord_input}")
        return validate_coordinates(lon, lat)

    match = _DMS_PATTERN.fullmatch(cleaned)
    if match:
        lat_d, lat_m, lat_s, lat_dir, lon_d, lon_m, lon_s, lon_dir = match.groups()
        lat = (int(lat_d) + int(lat_m) / 60 + float(lat_s) / 3600) * (1 if lat_dir == "N" else -1)
        lon = (int(lon_d) + int(lon_m) / 60 + float(lon_s) / 3600) * (1 if lon_dir == "E" else -1)
        return validate_coordinates(lon, lat)

    return ParsedCoordinate(0, 0, False, "Invalid coordinate format")


def validate_coordinates(lon: float, lat: float) -> ParsedCoordinate:
    """Validate that coordinates are within valid ranges."""
    if not (-180 <= lon <= 180):
        return ParsedCoordinate(lon, lat, False, "Longitude must be between -180 and 180")
    if not (-90 <= lat <= 90):
        return ParsedCoordinate(lon, lat, False, "Latitude must be between -90 and 90")
    return ParsedCoordinate(lon, lat, True)


def parse_raster_params(params: Mapping[str, str]) -> Optional[RasterRequest]:
    """Build a raster request from string query parameters.

    Returns:
        The request, or None if a required parameter is missing or not a number
    """
    try:
        return RasterRequest.from_params(params)
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Invalid raster parameters {dict(params)}: {str(e)}")
        return None

"""Type definitions and interfaces for map rastering and navigation."""

import re
import logging
from typing import Dict, List, Mapping, Optional
from dataclasses import dataclass, field

from shapely.geometry import Polygon, box

from .direction_types import Direction, DIRECTION_PHRASES, PHRASE_TO_DIRECTION, UNKNOWN_ROAD

logger = logging.getLogger(__name__)

_DIRECTION_PATTERN = re.compile(
    r"(?P<phrase>" + "|".join(re.escape(p) for p in DIRECTION_PHRASES) + r")"
    r" on (?P<way>.*) and continue for (?P<distance>\d+(?:\.\d*)?) miles\.",
    re.DOTALL,
)


@dataclass(frozen=True)
class RootCoverage:
    """Geographic extent and pixel size of the depth 0 tile."""
    ullon: float
    ullat: float
    lrlon: float
    lrlat: float
    tile_size: int = 256
    max_depth: int = 7

    @property
    def lon_extent(self) -> float:
        return self.lrlon - self.ullon

    @property
    def lat_extent(self) -> float:
        return self.ullat - self.lrlat


@dataclass
class RasterRequest:
    """A query box plus the viewport it will be drawn into."""
    ullon: float
    ullat: float
    lrlon: float
    lrlat: float
    width: float
    height: Optional[float] = None

    @classmethod
    def from_params(cls, params: Mapping[str, float]) -> "RasterRequest":
        """Build a request from HTTP-style query parameters.

        Args:
            params: Mapping with ullon, ullat, lrlon, lrlat, w and optionally h

        Returns:
            The corresponding RasterRequest
        """
        height = params.get("h")
        return cls(
            ullon=float(params["ullon"]),
            ullat=float(params["ullat"]),
            lrlon=float(params["lrlon"]),
            lrlat=float(params["lrlat"]),
            width=float(params["w"]),
            height=float(height) if height is not None else None,
        )

    @property
    def lon_dpp(self) -> float:
        """Longitude covered by one viewport pixel."""
        return (self.lrlon - self.ullon) / self.width


@dataclass
class RasterResult:
    """Tiles selected for a query, ready for the rendering layer."""
    render_grid: List[List[str]] = field(default_factory=list)
    raster_ul_lon: float = 0.0
    raster_ul_lat: float = 0.0
    raster_lr_lon: float = 0.0
    raster_lr_lat: float = 0.0
    depth: int = 0
    query_success: bool = False

    def to_dict(self) -> Dict[str, object]:
        return {
            "render_grid": self.render_grid,
            "raster_ul_lon": self.raster_ul_lon,
            "raster_ul_lat": self.raster_ul_lat,
            "raster_lr_lon": self.raster_lr_lon,
            "raster_lr_lat": self.raster_lr_lat,
            "depth": self.depth,
            "query_success": self.query_success,
        }

    def raster_box(self) -> Polygon:
        """Aggregate extent of the selected tiles as a polygon in (lon, lat)."""
        return box(self.raster_ul_lon, self.raster_lr_lat, self.raster_lr_lon, self.raster_ul_lat)


@dataclass
class NavigationDirection:
    """One turn instruction: a direction, a way, and the distance along it."""
    direction: int = Direction.STRAIGHT
    way: str = UNKNOWN_ROAD
    distance: float = 0.0

    def __str__(self) -> str:
        return (f"{DIRECTION_PHRASES[self.direction]} on {self.way} "
                f"and continue for {self.distance:.3f} miles.")

    @classmethod
    def from_string(cls, text: str) -> Optional["NavigationDirection"]:
        """Parse the string form of a direction.

        Args:
            text: A string such as "Turn left on Oak St and continue for 0.250 miles."

        Returns:
            The parsed NavigationDirection, or None if the text is not a direction
        """
        if not isinstance(text, str):
            return None

        match = _DIRECTION_PATTERN.fullmatch(text)
        if match is None:
            logger.debug(f"Not a navigation direction: {text!r}")
            return None

        return cls(
            direction=PHRASE_TO_DIRECTION[match.group("phrase")],
            way=match.group("way"),
            distance=float(match.group("distance")),
        )

"""Configuration constants for map rastering and routing."""

import os

from .interfaces import RootCoverage

# Root coverage of the tile set (depth 0 tile)
ROOT_ULLAT = 37.892195547244356
ROOT_ULLON = -122.2998046875
ROOT_LRLAT = 37.82280243352756
ROOT_LRLON = -122.2119140625
TILE_SIZE = 256  # pixels per side of one tile
MAX_DEPTH = 7

# Routing parameters
SNAP_CANDIDATES = 10  # vertices pre-selected by the spatial index when snapping

# Map data loading
COORDINATE_PRECISION = 7  # decimals used to merge shared vertices
ALLOWED_HIGHWAY_TYPES = frozenset({
    "motorway", "trunk", "primary", "secondary", "tertiary", "unclassified",
    "residential", "living_street", "motorway_link", "trunk_link",
    "primary_link", "secondary_link", "tertiary_link",
})


def load_root_coverage() -> RootCoverage:
    """Build the root coverage, honouring BEARMAPS_* environment overrides."""
    return RootCoverage(
        ullon=float(os.getenv("BEARMAPS_ROOT_ULLON", ROOT_ULLON)),
        ullat=float(os.getenv("BEARMAPS_ROOT_ULLAT", ROOT_ULLAT)),
        lrlon=float(os.getenv("BEARMAPS_ROOT_LRLON", ROOT_LRLON)),
        lrlat=float(os.getenv("BEARMAPS_ROOT_LRLAT", ROOT_LRLAT)),
        tile_size=int(os.getenv("BEARMAPS_TILE_SIZE", TILE_SIZE)),
        max_depth=int(os.getenv("BEARMAPS_MAX_DEPTH", MAX_DEPTH)),
    )

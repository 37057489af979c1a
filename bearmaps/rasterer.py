"""Quadtree tile selection for map rastering."""

import logging
from typing import List, Optional

from .config import load_root_coverage
from .interfaces import RasterRequest, RasterResult, RootCoverage

logger = logging.getLogger(__name__)


def tile_id(depth: int, x: int, y: int) -> str:
    """Identifier of the tile at (depth, x, y)."""
    return f"d{depth}_x{x}_y{y}"


class Rasterer:
    """Select the pre-rendered tiles that cover a query box.

    Depth d splits the root coverage into 2^d x 2^d equal tiles. For a query the
    rasterer picks the coarsest depth whose tiles resolve at least as finely as
    the viewport needs, then every tile at that depth intersecting the box.
    """

    def __init__(self, root: Optional[RootCoverage] = None):
        """Initialize the rasterer with a root coverage (configured one by default)."""
        self.root = root if root is not None else load_root_coverage()

    def get_map_raster(self, request: RasterRequest) -> RasterResult:
        """Find the grid of tiles that best matches a query.

        Args:
            request: Query box and viewport width

        Returns:
            RasterResult with query_success False and default fields if the box
            is inverted, lies outside the root coverage, or has no viewport width
        """
        logger.debug(f"Rastering query {request}")
        root = self.root

        if (request.ullon > root.lrlon or request.lrlon < root.ullon
                or request.lrlat > root.ullat or request.ullat < root.lrlat):
            logger.info(f"Query box lies outside the root coverage: {request}")
            return RasterResult()
        if request.ullon > request.lrlon or request.lrlat > request.ullat:
            logger.info(f"Query box is inverted: {request}")
            return RasterResult()
        if not request.width or request.width <= 0:
            logger.info(f"Query has no viewport width: {request}")
            return RasterResult()

        depth = self.find_depth(request.lon_dpp)
        tiles_per_side = 2 ** depth
        lon_step = root.lon_extent * 0.5 ** depth
        lat_step = root.lat_extent * 0.5 ** depth

        left = self._steps_before_crossing(tiles_per_side, request.ullon, root.ullon, lon_step)
        upper = self._steps_before_crossing(tiles_per_side, -request.ullat, -root.ullat, lat_step)
        right = tiles_per_side - 1 - self._steps_before_crossing(
            tiles_per_side, -request.lrlon, -root.lrlon, lon_step)
        lower = tiles_per_side - 1 - self._steps_before_crossing(
            tiles_per_side, request.lrlat, root.lrlat, lat_step)

        render_grid: List[List[str]] = [
            [tile_id(depth, x, y) for x in range(left, right + 1)]
            for y in range(upper, lower + 1)
        ]
        logger.debug(f"Selected {lower - upper + 1}x{right - left + 1} tiles at depth {depth}")

        return RasterResult(
            render_grid=render_grid,
            raster_ul_lon=root.ullon + left * lon_step,
            raster_ul_lat=root.ullat - upper * lat_step,
            raster_lr_lon=root.ullon + (right + 1) * lon_step,
            raster_lr_lat=root.ullat - (lower + 1) * lat_step,
            depth=depth,
            query_success=True,
        )

    def find_depth(self, lon_dpp: float) -> int:
        """Coarsest depth whose tiles beat the required longitude per pixel."""
        bound = lon_dpp * self.root.tile_size
        for depth in range(self.root.max_depth + 1):
            if self.root.lon_extent * 0.5 ** depth < bound:
                return depth
        return self.root.max_depth

    @staticmethod
    def _steps_before_crossing(tiles_per_side: int, edge: float, start: float, step: float) -> int:
        """Walk tile boundaries from start until one passes edge.

        Boundaries are start + k * step. Returns the index of the last tile
        whose boundary did not pass the edge, or 0 if the first one already does.
        Edges on the upper and right sides are passed negated so that the walk
        is always in the increasing direction.
        """
        for k in range(tiles_per_side):
            if start + k * step > edge:
                return 0 if k == 0 else k - 1
        return tiles_per_side - 1

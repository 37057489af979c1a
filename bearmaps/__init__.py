"""Map rastering and road navigation package."""

from .interfaces import RootCoverage, RasterRequest, RasterResult, NavigationDirection
from .direction_types import Direction
from .graph import GraphDB, GraphError
from .data_loader import GraphDataLoader
from .rasterer import Rasterer
from .router import Router
from .directions import DirectionBuilder
from .geo_utils import calculate_bearing, distance_miles

__all__ = [
    'RootCoverage', 'RasterRequest', 'RasterResult', 'NavigationDirection', 'Direction',
    'GraphDB', 'GraphError', 'GraphDataLoader', 'Rasterer', 'Router', 'DirectionBuilder',
    'calculate_bearing', 'distance_miles'
]

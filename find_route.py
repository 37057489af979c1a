"""Print turn-by-turn directions between two locations on a road network."""

import argparse
import logging
import sys

from dotenv import load_dotenv

from bearmaps import DirectionBuilder, GraphDataLoader, Router
from bearmaps.preprocessing import parse_coordinates
from bearmaps.visualization import create_route_map

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def main() -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("data", help="GeoJSON road network (URL or path)")
    parser.add_argument("start", help='Start coordinate, "lon,lat" or DMS')
    parser.add_argument("destination", help='Destination coordinate, "lon,lat" or DMS')
    parser.add_argument("--map", dest="map_file", help="Write an HTML map of the route here")
    args = parser.parse_args()

    start = parse_coordinates(args.start)
    destination = parse_coordinates(args.destination)
    for coord in (start, destination):
        if not coord.is_valid:
            logger.error(coord.error_message)
            return 2

    graph = GraphDataLoader().load_data(args.data)
    route = Router.shortest_path(graph, start.longitude, start.latitude,
                                 destination.longitude, destination.latitude)
    if route is None:
        print("❌ No route found between the two locations.")
        return 1

    directions = DirectionBuilder.route_directions(graph, route)
    for i, direction in enumerate(directions, 1):
        print(f"{i}. {direction}")
    print(f"Total: {graph.route_distance(route):.3f} miles")

    if args.map_file:
        create_route_map(graph, route, directions, filename=args.map_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())

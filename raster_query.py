"""Print the tile grid selected for a query box."""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from bearmaps import Rasterer
from bearmaps.preprocessing import parse_raster_params

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def main() -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description=__doc__)
    for name in ("ullon", "ullat", "lrlon", "lrlat", "w"):
        parser.add_argument(f"--{name}", required=True)
    parser.add_argument("--h")
    args = parser.parse_args()

    params = {k: v for k, v in vars(args).items() if v is not None}
    request = parse_raster_params(params)
    if request is None:
        return 2

    result = Rasterer().get_map_raster(request)
    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.query_success else 1


if __name__ == "__main__":
    sys.exit(main())

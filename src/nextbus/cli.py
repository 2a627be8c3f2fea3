"""Command line lookup of bus predictions by stop name.

Usage:
    nextbus-predictions <agency> <routeTag> <stopTitleSubstring>

Example:
    nextbus-predictions actransit 18 59th
"""

import logging
import sys
from typing import List, Optional

from .feed import get_stops, Predictions

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Print predictions for every stop on the route whose title contains the substring."""
    if argv is None:
        argv = sys.argv[1:]

    agency = argv[0]
    route = argv[1]
    stop_contains = argv[2]

    stops = {
        tag: s for tag, s in get_stops(agency, route).items() if stop_contains in s.title
    }
    logger.debug(f"{len(stops)} stops on route {route} match {stop_contains!r}")

    if not stops:
        print(f'Cannot find stop containing "{stop_contains}"')
        return 0

    for tag, s in stops.items():
        print(f'tag is {tag} for stop "{s.title}" - now running predictions query ...')
        predictions, messages = Predictions(agency, route, tag).get()
        for p in predictions:
            print(p)
        print("messages for this query: " + "\n".join(messages))

    return 0


def run() -> None:
    """Console script entry point."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    sys.exit(main())


if __name__ == "__main__":
    run()

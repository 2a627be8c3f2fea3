"""High-level interface to the NextBus XML feed.

Supports the ``routeList``, ``routeConfig`` and ``predictions`` commands.
Routes and stops come back keyed on their tag, which is the identifier the
feed expects in follow-up queries.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .models import Route, Stop, Prediction
from .parsers import parse_routes, parse_stops, parse_predictions
from .query import BASE_URL, routes_query, stops_query, predictions_query

logger = logging.getLogger(__name__)


class NextBusClient:
    """Runs feed queries against a NextBus endpoint."""

    def __init__(self, base_url: str = BASE_URL, timeout: Optional[float] = None):
        """
        Initialize the client.

        Args:
            base_url: Feed endpoint. Defaults to the public NextBus feed.
            timeout: Per-request timeout in seconds. None waits indefinitely.
        """
        self.base_url = base_url
        self.timeout = timeout

    def get_routes(self, agency: str) -> Dict[str, Route]:
        """
        Fetch the routes for an agency.

        Args:
            agency: Agency tag (e.g., "actransit").

        Returns:
            Dictionary of route tag -> Route. A repeated tag keeps the last
            route the feed listed under it.
        """
        q = routes_query(agency, base_url=self.base_url, timeout=self.timeout)
        return {r.tag: r for r in parse_routes(q())}

    def get_stops(self, agency: str, route: str) -> Dict[str, Stop]:
        """
        Fetch the stops along a route.

        Args:
            agency: Agency tag.
            route: Route tag (a key of get_routes()).

        Returns:
            Dictionary of stop tag -> Stop, in feed order.
        """
        q = stops_query(agency, route, base_url=self.base_url, timeout=self.timeout)
        return {s.tag: s for s in parse_stops(q())}

    def get_predictions(
        self, agency: str, route: str, stop: str
    ) -> Tuple[List[Prediction], List[str]]:
        """
        Fetch arrival predictions for a stop.

        Returns:
            Tuple of (predictions, messages).
        """
        q = predictions_query(agency, route, stop, base_url=self.base_url, timeout=self.timeout)
        predictions, messages = parse_predictions(q())
        logger.debug(f"{len(predictions)} predictions for {agency}/{route}/{stop}")
        return predictions, messages


def get_routes(agency: str) -> Dict[str, Route]:
    """Fetch routes for an agency from the public feed, keyed on route tag."""
    return NextBusClient().get_routes(agency)


def get_stops(agency: str, route: str) -> Dict[str, Stop]:
    """Fetch stops for a route from the public feed, keyed on stop tag."""
    return NextBusClient().get_stops(agency, route)


class Predictions:
    """Predictions for one agency/route/stop, fetched (possibly repeatedly) via get()."""

    def __init__(
        self, agency: str, route: str, stop: str, client: Optional[NextBusClient] = None
    ):
        self.agency = agency
        self.route = route
        self.stop = stop
        self.client = client or NextBusClient()

    def get(self) -> Tuple[List[Prediction], List[str]]:
        """Query the feed and return (predictions, messages). Never cached."""
        return self.client.get_predictions(self.agency, self.route, self.stop)

    def __repr__(self) -> str:
        return f"Predictions({self.agency!r}, {self.route!r}, {self.stop!r})"

"""URL building and fetching for the NextBus XML feed."""

import logging
from typing import Dict, Optional
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

import requests

from .exceptions import NetworkError, ParseError

logger = logging.getLogger(__name__)

# Base URL for the NextBus public XML feed
BASE_URL = "http://webservices.nextbus.com/service/publicXMLFeed"

# Supported feed commands
ROUTE_LIST = "routeList"
ROUTE_CONFIG = "routeConfig"
PREDICTIONS = "predictions"


def build_url(command: str, params: Dict[str, str], base_url: str = BASE_URL) -> str:
    """
    Build a feed request URL.

    Args:
        command: Feed command (e.g., "routeList").
        params: Query parameters such as {"a": "actransit", "r": "18"}.
        base_url: Feed endpoint.

    Returns:
        URL of the form ``base?command=<cmd>&k1=v1&...`` with parameters in
        insertion order and values percent-encoded.
    """
    query = {"command": command}
    query.update(params)
    return requests.Request("GET", base_url, params=query).prepare().url


def fetch_xml(url: str, timeout: Optional[float] = None) -> Element:
    """
    GET a URL and parse the response body as XML.

    Args:
        url: Full request URL.
        timeout: Seconds to wait for the server, or None to wait indefinitely.

    Returns:
        Root element of the response document.

    Raises:
        NetworkError: If the request fails or returns an error status.
        ParseError: If the body is not well-formed XML.
    """
    logger.debug(f"Fetching {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        content = response.content
    except requests.RequestException as e:
        logger.error(f"Failed to fetch {url}: {e}")
        raise NetworkError(f"Request to {url} failed: {e}", url=url) from e

    try:
        return ElementTree.fromstring(content)
    except ElementTree.ParseError as e:
        logger.error(f"Failed to parse response from {url}: {e}")
        raise ParseError(f"Malformed XML from {url}: {e}", url=url) from e


class Query:
    """A feed command plus its parameters; call it to fetch the XML."""

    def __init__(
        self,
        command: str,
        params: Dict[str, str],
        base_url: str = BASE_URL,
        timeout: Optional[float] = None,
    ):
        self.command = command
        self.params = dict(params)
        self.base_url = base_url
        self.timeout = timeout

    @property
    def url(self) -> str:
        return build_url(self.command, self.params, self.base_url)

    def __call__(self) -> Element:
        return fetch_xml(self.url, timeout=self.timeout)

    def __repr__(self) -> str:
        return f"Query({self.command!r}, {self.params!r})"


def routes_query(agency: str, **kwargs) -> Query:
    """Query for the routes of an agency (``routeList``)."""
    return Query(ROUTE_LIST, {"a": agency}, **kwargs)


def stops_query(agency: str, route: str, **kwargs) -> Query:
    """Query for the stops of a route (``routeConfig``)."""
    return Query(ROUTE_CONFIG, {"a": agency, "r": route}, **kwargs)


def predictions_query(agency: str, route: str, stop: str, **kwargs) -> Query:
    """Query for arrival predictions at a stop (``predictions``)."""
    return Query(PREDICTIONS, {"a": agency, "r": route, "s": stop}, **kwargs)

"""NextBus - Client for the NextBus real-time transit XML feed."""

__version__ = "0.1.0"

from .models import Route, Stop, Prediction, records_to_json
from .exceptions import FeedError, NetworkError, ParseError
from .parsers import parse_routes, parse_stops, parse_predictions
from .query import BASE_URL, Query, build_url, fetch_xml
from .feed import NextBusClient, Predictions, get_routes, get_stops

__all__ = [
    "NextBusClient",
    "Predictions",
    "get_routes",
    "get_stops",
    "Query",
    "build_url",
    "fetch_xml",
    "parse_routes",
    "parse_stops",
    "parse_predictions",
    "Route",
    "Stop",
    "Prediction",
    "records_to_json",
    "FeedError",
    "NetworkError",
    "ParseError",
    "BASE_URL",
]

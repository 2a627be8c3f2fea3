"""Parsers mapping NextBus XML responses to records."""

import logging
from typing import Iterator, List, Tuple
from xml.etree.ElementTree import Element

from .models import Route, Stop, Prediction

logger = logging.getLogger(__name__)


def _bodies(root: Element) -> Iterator[Element]:
    # iter() includes the root itself, which is <body> in real responses
    return root.iter("body")


def parse_routes(root: Element) -> List[Route]:
    """Parse a ``routeList`` response into Route objects, in document order."""
    routes = [
        Route(
            tag=r.get("tag", ""),
            title=r.get("title", ""),
            short_title=r.get("shortTitle", ""),
        )
        for body in _bodies(root)
        for r in body.findall("route")
    ]
    logger.debug(f"Parsed {len(routes)} routes")
    return routes


def parse_stops(root: Element) -> List[Stop]:
    """
    Parse a ``routeConfig`` response into Stop objects.

    Only ``stop`` elements directly under ``route`` are read; the stop
    references nested in ``direction`` elements are skipped.
    """
    stops = [
        Stop(
            tag=s.get("tag", ""),
            title=s.get("title", ""),
            short_title=s.get("shortTitle", ""),
            stop_id=s.get("stopId", ""),
        )
        for body in _bodies(root)
        for s in body.findall("route/stop")
    ]
    logger.debug(f"Parsed {len(stops)} stops")
    return stops


def parse_predictions(root: Element) -> Tuple[List[Prediction], List[str]]:
    """
    Parse a ``predictions`` response.

    Args:
        root: Root element of the response.

    Returns:
        Tuple of (predictions, messages). Each prediction takes its
        direction title from the enclosing ``direction`` element; messages
        are the ``text`` attributes of the ``message`` elements.
    """
    predictions: List[Prediction] = []
    messages: List[str] = []

    for body in _bodies(root):
        for block in body.findall("predictions"):
            messages.extend(m.get("text", "") for m in block.findall("message"))

            for direction in block.findall("direction"):
                dir_title = direction.get("title", "")
                for p in direction.findall("prediction"):
                    predictions.append(
                        Prediction(
                            minutes=p.get("minutes", ""),
                            dir_title=dir_title,
                            dir_tag=p.get("dirTag", ""),
                        )
                    )

    logger.debug(f"Parsed {len(predictions)} predictions and {len(messages)} messages")
    return predictions, messages

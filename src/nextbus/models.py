"""Data models for NextBus feed results."""

import json
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Union


@dataclass(frozen=True)
class Route:
    """A single route from a ``routeList`` response."""
    tag: str  # Route tag, used in queries
    title: str
    short_title: str

    def __str__(self) -> str:
        return f"Route {self.tag}: {self.title} ({self.short_title})"

    def to_dict(self) -> Dict[str, str]:
        return {"tag": self.tag, "title": self.title, "shortTitle": self.short_title}

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "Route":
        return cls(
            tag=data.get("tag", ""),
            title=data.get("title", ""),
            short_title=data.get("shortTitle", ""),
        )


@dataclass(frozen=True)
class Stop:
    """A single stop from a ``routeConfig`` response."""
    tag: str  # Stop tag, used in predictions queries
    title: str
    short_title: str
    stop_id: str

    def __str__(self) -> str:
        return f"Stop {self.tag}: {self.title} ({self.short_title}) [{self.stop_id}]"

    def to_dict(self) -> Dict[str, str]:
        return {
            "tag": self.tag,
            "title": self.title,
            "shortTitle": self.short_title,
            "stopId": self.stop_id,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "Stop":
        return cls(
            tag=data.get("tag", ""),
            title=data.get("title", ""),
            short_title=data.get("shortTitle", ""),
            stop_id=data.get("stopId", ""),
        )


@dataclass(frozen=True)
class Prediction:
    """One estimated arrival for a stop, in a given direction."""
    minutes: str  # Kept as text, the feed is not guaranteed to send a number
    dir_title: str
    dir_tag: str

    def __str__(self) -> str:
        return f"Bus in {self.minutes} minutes (direction: {self.dir_title})"

    def to_dict(self) -> Dict[str, str]:
        return {"minutes": self.minutes, "dirTitle": self.dir_title, "dirTag": self.dir_tag}

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "Prediction":
        return cls(
            minutes=data.get("minutes", ""),
            dir_title=data.get("dirTitle", ""),
            dir_tag=data.get("dirTag", ""),
        )


Record = Union[Route, Stop, Prediction]


def records_to_json(records: Iterable[Record], indent: Optional[int] = None) -> str:
    """
    Serialize records as a JSON array.

    Args:
        records: Any mix of Route, Stop and Prediction objects.
        indent: Passed through to ``json.dumps``.

    Returns:
        JSON text, one object per record in input order.
    """
    return json.dumps([record.to_dict() for record in records], indent=indent)

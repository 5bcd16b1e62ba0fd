"""Data model definitions for the entry points: raw query, resolved observer."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class QueryInput:
    """Raw user input. Not yet validated."""

    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees)
    when: str  # "YYYY-MM-DD HH:MM", local time at the site


@dataclass(frozen=True)
class ObserverContext:
    """Resolved observer: site plus UTC instant. Input to sky computation."""

    lat: float
    lng: float
    utc_dt: datetime  # tzinfo=utc
    tz_name: str  # IANA zone the local time was read in ("Europe/Zurich")

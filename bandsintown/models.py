"""
Domain records decoded from Bandsintown API responses.

Every record is built by from_dict() from a decoded JSON payload and can be
written back to the same JSON shape with to_dict().

Datetimes: the API sends naive ISO 8601 strings ("2016-04-05T19:00:00") which
are read as UTC. A null or missing datetime decodes to None, which is the
"not announced" value; it is written back as null.
"""

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Optional

from dateutil import parser as dateparser

from bandsintown.errors import DecodeError


@dataclass(frozen=True)
class Artist:
    name: str          # Also the path segment for name lookups
    url: str = ""
    mbid: str = ""     # MusicBrainz id, empty when unknown

    @classmethod
    def from_dict(cls, data: Any) -> "Artist":
        data = _require_object(data, "artist")
        return cls(
            name=_str(data, "name"),
            url=_str(data, "url"),
            mbid=_str(data, "mbid"),
        )

    def to_dict(self) -> dict:
        return {"name": self.name, "url": self.url, "mbid": self.mbid}


@dataclass(frozen=True)
class ArtistInfo:
    artist: Artist
    upcoming_events_count: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "ArtistInfo":
        """The payload is flat: artist fields sit next to the event count."""
        data = _require_object(data, "artist info")
        count = _int(data, "upcoming_events_count")
        if count < 0:
            raise DecodeError(f"upcoming_events_count must not be negative, got {count}")
        return cls(artist=Artist.from_dict(data), upcoming_events_count=count)

    def to_dict(self) -> dict:
        return {**self.artist.to_dict(), "upcoming_events_count": self.upcoming_events_count}


@dataclass(frozen=True)
class Venue:
    id: int
    name: str = ""
    url: str = ""
    city: str = ""
    region: str = ""
    country: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> "Venue":
        data = _require_object(data, "venue")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            url=_str(data, "url"),
            city=_str(data, "city"),
            region=_str(data, "region"),
            country=_str(data, "country"),
            latitude=_float(data, "latitude"),
            longitude=_float(data, "longitude"),
        )

    def to_dict(self) -> dict:
        return {
            "id":        self.id,
            "url":       self.url,
            "name":      self.name,
            "city":      self.city,
            "region":    self.region,
            "country":   self.country,
            "latitude":  self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class Event:
    id: int
    url: str = ""
    datetime: Optional[dt.datetime] = None
    ticket_url: str = ""
    artists: tuple[Artist, ...] = ()
    venue: Venue = field(default_factory=lambda: Venue(id=0))
    ticket_status: str = ""            # Free-form, e.g. "available"
    on_sale_datetime: Optional[dt.datetime] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Event":
        data = _require_object(data, "event")

        artists_raw = data.get("artists")
        if artists_raw is None:
            artists_raw = []
        if not isinstance(artists_raw, list):
            raise DecodeError(f"'artists' must be a list, got {type(artists_raw).__name__}")

        venue_raw = data.get("venue")
        venue = Venue.from_dict(venue_raw) if venue_raw is not None else Venue(id=0)

        return cls(
            id=_int(data, "id"),
            url=_str(data, "url"),
            datetime=_datetime(data, "datetime"),
            ticket_url=_str(data, "ticket_url"),
            artists=tuple(Artist.from_dict(a) for a in artists_raw),
            venue=venue,
            ticket_status=_str(data, "ticket_status"),
            on_sale_datetime=_datetime(data, "on_sale_datetime"),
        )

    def to_dict(self) -> dict:
        return {
            "id":               self.id,
            "url":              self.url,
            "datetime":         format_datetime(self.datetime),
            "ticket_url":       self.ticket_url,
            "artists":          [a.to_dict() for a in self.artists],
            "venue":            self.venue.to_dict(),
            "ticket_status":    self.ticket_status,
            "on_sale_datetime": format_datetime(self.on_sale_datetime),
        }


def parse_datetime(raw: Optional[str]) -> Optional[dt.datetime]:
    """Parse an API datetime string into an aware UTC datetime; None stays None."""
    if raw is None:
        return None
    try:
        parsed = dateparser.isoparse(raw)
    except (ValueError, OverflowError) as exc:
        raise DecodeError(f"Invalid datetime {raw!r}: {exc}") from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.timezone.utc)
    return parsed.astimezone(dt.timezone.utc)


def format_datetime(value: Optional[dt.datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(dt.timezone.utc)
    return value.replace(tzinfo=None).isoformat()


# --- Field readers ---
# A missing key or JSON null reads as the type's zero value; a present value of
# the wrong type is a DecodeError.

def _require_object(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object for {what}, got {type(data).__name__}")
    return data


def _str(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _int(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is a subclass of int but never a valid id or count
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"'{key}' must be an integer, got {type(value).__name__}")
    return value


def _float(data: dict, key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"'{key}' must be a number, got {type(value).__name__}")
    return float(value)


def _datetime(data: dict, key: str) -> Optional[dt.datetime]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise DecodeError(f"'{key}' must be a datetime string, got {type(value).__name__}")
    return parse_datetime(value)

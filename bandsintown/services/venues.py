"""
Venue lookups.

Endpoint:
  /venues/<id>/events.json   upcoming events at a venue

Returns a JSON array of events, each with a nested "artists" list and "venue"
object. Order is kept as the server sends it.
"""

import requests

from bandsintown.errors import DecodeError
from bandsintown.models import Event
from bandsintown.services.base import BaseService, path_segment


class VenueService(BaseService):
    def events(self, venue_id: int) -> tuple[list[Event], requests.Response]:
        payload, response = self._get(f"/venues/{path_segment(venue_id)}/events.json")
        try:
            if not isinstance(payload, list):
                raise DecodeError(f"Expected a JSON array of events, got {type(payload).__name__}")
            events = [Event.from_dict(item) for item in payload]
        except DecodeError as exc:
            exc.response = response
            raise
        return events, response

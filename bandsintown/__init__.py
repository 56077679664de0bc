__version__ = "0.1.0"

from bandsintown.client import Client, new_client  # noqa: E402
from bandsintown.errors import BandsintownError, ConfigError, DecodeError, TransportError  # noqa: E402
from bandsintown.models import Artist, ArtistInfo, Event, Venue  # noqa: E402

__all__ = [
    "Artist",
    "ArtistInfo",
    "BandsintownError",
    "Client",
    "ConfigError",
    "DecodeError",
    "Event",
    "TransportError",
    "Venue",
    "new_client",
]

"""
API services.

Each service wraps one API resource and is attached to Client in
Client.__init__ (client.artists, client.venues). To add a resource:
1. Subclass BaseService in services/<resource>.py
2. Export it here
3. Attach an instance in Client.__init__
"""

from bandsintown.services.artists import ArtistService
from bandsintown.services.base import BaseService
from bandsintown.services.venues import VenueService

__all__ = ["ArtistService", "BaseService", "VenueService"]

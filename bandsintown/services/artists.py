"""
Artist lookups.

Endpoints:
  /artists/<name>.json        artist info by name
  /artists/mbid_<mbid>.json   artist info by MusicBrainz id

Both return a flat JSON object:
  {"name": ..., "url": ..., "mbid": ..., "upcoming_events_count": 5}
"""

import requests

from bandsintown.errors import DecodeError
from bandsintown.models import ArtistInfo
from bandsintown.services.base import BaseService, path_segment


class ArtistService(BaseService):
    def get_info_by_name(self, name: str) -> tuple[ArtistInfo, requests.Response]:
        return self._get_info(f"/artists/{path_segment(name)}.json")

    def get_info_by_mbid(self, mbid: str) -> tuple[ArtistInfo, requests.Response]:
        return self._get_info(f"/artists/mbid_{path_segment(mbid)}.json")

    def _get_info(self, path: str) -> tuple[ArtistInfo, requests.Response]:
        payload, response = self._get(path)
        try:
            info = ArtistInfo.from_dict(payload)
        except DecodeError as exc:
            exc.response = response
            raise
        return info, response

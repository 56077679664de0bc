from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import requests

if TYPE_CHECKING:
    from bandsintown.client import Client


class BaseService:
    def __init__(self, client: "Client"):
        """
        Args:
            client: The owning Client. Services read its base URL, app id and
                    transport on every call and keep no state of their own.
        """
        self.client = client

    def _get(self, path: str) -> tuple[Any, requests.Response]:
        return self.client.get(path)


def path_segment(value: object) -> str:
    """Escape a value for use as a single URL path segment ('/' included)."""
    return quote(str(value), safe="")

"""
HTTP transports.

The client only needs one capability from the network: GET a URL with some
query parameters and hand back the response. Anything implementing
HTTPTransport can be passed to Client, which is how tests swap in a canned
transport. RequestsTransport is the real one.
"""

import logging
from typing import Optional, Protocol

import requests

from bandsintown import __version__
from bandsintown.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15
DEFAULT_USER_AGENT = f"bandsintown-client/{__version__}"


class HTTPTransport(Protocol):
    def get(self, url: str, params: dict[str, str]) -> requests.Response:
        """
        Perform a single GET and return the response, whatever its status.

        Raises TransportError when no response was received at all.
        """
        ...


class RequestsTransport:
    """Single-attempt GETs over a pooled requests.Session. No retries."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})
        self.timeout = timeout

    def get(self, url: str, params: dict[str, str]) -> requests.Response:
        try:
            return self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("GET %s failed: %s", url, exc)
            raise TransportError(f"GET {url} failed: {exc}") from exc

    def close(self) -> None:
        self.session.close()

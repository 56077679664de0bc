import logging
from typing import Any, Optional

import requests

import bandsintown.config as cfg_module
from bandsintown.config import DEFAULT_BASE_URL
from bandsintown.errors import DecodeError, TransportError
from bandsintown.services.artists import ArtistService
from bandsintown.services.venues import VenueService
from bandsintown.transport import DEFAULT_TIMEOUT, HTTPTransport, RequestsTransport

logger = logging.getLogger(__name__)


class Client:
    """
    Entry point for the Bandsintown API.

    Holds the base URL, the application id sent as ``app_id`` on every request,
    and the transport used to perform GETs. Services are available as
    ``client.artists`` and ``client.venues``.

    Construction does no network I/O.
    """

    def __init__(self, transport: HTTPTransport, base_url: str, app_id: str):
        self.transport = transport
        self.base_url = base_url.rstrip("/")
        self.app_id = app_id
        self.artists = ArtistService(self)
        self.venues = VenueService(self)

    @classmethod
    def from_config(cls, cfg: dict, transport: Optional[HTTPTransport] = None) -> "Client":
        api = cfg_module.get_api(cfg)
        return cls(
            transport or RequestsTransport(timeout=api["timeout"]),
            api["base_url"],
            api["app_id"],
        )

    def close(self) -> None:
        """Release the transport's connections, if it holds any."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str) -> tuple[Any, requests.Response]:
        """
        GET ``path`` relative to the base URL and decode the JSON body.

        Returns the decoded payload and the raw response. Raises TransportError
        for a failed request or a non-2xx status, DecodeError if the body is
        not JSON.
        """
        url = self.url_for(path)
        logger.debug("GET %s", url)
        response = self.transport.get(url, {"app_id": self.app_id})

        if not 200 <= response.status_code < 300:
            logger.warning("GET %s returned HTTP %s", url, response.status_code)
            raise TransportError(
                f"GET {url} returned HTTP {response.status_code}",
                response=response,
            )

        try:
            payload = response.json()
        except (ValueError, RecursionError) as exc:
            logger.warning("GET %s returned a body that is not JSON", url)
            raise DecodeError(f"Response from {url} is not valid JSON: {exc}", response=response) from exc

        return payload, response


def new_client(
    app_id: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> Client:
    """Build a Client over a fresh RequestsTransport."""
    return Client(RequestsTransport(timeout=timeout), base_url, app_id)

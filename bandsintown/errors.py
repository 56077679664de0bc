from typing import Optional

import requests


class BandsintownError(Exception):
    """Base class for everything this package raises."""


class TransportError(BandsintownError):
    """
    The request did not produce a usable HTTP response.

    Covers connection failures, timeouts and non-2xx statuses. ``response`` is
    None when nothing came back from the server.
    """

    def __init__(self, message: str, response: Optional[requests.Response] = None):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None


class DecodeError(BandsintownError):
    """The response body is not JSON, or not the JSON shape we expected."""

    def __init__(self, message: str, response: Optional[requests.Response] = None):
        super().__init__(message)
        self.response = response


class ConfigError(BandsintownError):
    pass

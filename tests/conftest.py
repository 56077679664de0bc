import pytest
import requests

from bandsintown.client import Client
from bandsintown.transport import RequestsTransport

BASE_URL = "http://example.com"
APP_ID = "appid"

ARTIST_INFO_JSON = (
    '{"name":"65daysofstatic","url":"http://www.bandsintown.com/65daysofstatic",'
    '"mbid":"0cd12ab3-9628-45ef-a97b-ff18624f14a0","upcoming_events_count":5}'
)

VENUE_EVENTS_JSON = (
    '[{"id":11224258,"url":"http://www.bandsintown.com/event/11224258?app_id=myappId",'
    '"datetime":"2016-04-05T19:00:00","ticket_url":"http://www.bandsintown.com/event/11224258/buy_tickets?'
    'app_id=myappId\\u0026came_from=233","artists":[{"name":"Weezer","url":"http://www.bandsintown.com/Weezer",'
    '"mbid":"6fe07aa5-fec0-4eca-a456-f29bff451b04"}],"venue":{"id":1015552,"url":"http://www.bandsintown.com/'
    'venue/1015552","name":"O2 BRIXTON ACADEMY","city":"Brixton","region":"London","country":"United Kingdom",'
    '"latitude":51.4620184,"longitude":-0.1152248},"ticket_status":"available","on_sale_datetime":null}]'
)


@pytest.fixture
def client():
    return Client(RequestsTransport(), BASE_URL, APP_ID)


class CannedTransport:
    """HTTPTransport that records calls and answers every GET with the same response."""

    def __init__(self, body: bytes = b"{}", status: int = 200):
        self.body = body
        self.status = status
        self.calls: list[tuple[str, dict]] = []

    def get(self, url, params):
        self.calls.append((url, dict(params)))
        response = requests.Response()
        response.status_code = self.status
        response._content = self.body
        response.encoding = "utf-8"
        response.url = url
        response.headers["Content-Type"] = "application/json"
        return response

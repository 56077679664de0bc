import pytest
import requests
import responses as rsps

from bandsintown import Client, new_client
from bandsintown.config import DEFAULT_BASE_URL
from bandsintown.errors import DecodeError, TransportError
from bandsintown.services import ArtistService, VenueService
from bandsintown.transport import DEFAULT_USER_AGENT, RequestsTransport

from conftest import ARTIST_INFO_JSON, CannedTransport


def test_client_exposes_services():
    client = Client(CannedTransport(), "http://example.com", "appid")
    assert isinstance(client.artists, ArtistService)
    assert isinstance(client.venues, VenueService)
    assert client.artists.client is client


def test_construction_does_no_io():
    transport = CannedTransport()
    Client(transport, "http://example.com", "appid")
    assert transport.calls == []


def test_custom_transport_receives_url_and_app_id():
    transport = CannedTransport(body=ARTIST_INFO_JSON.encode())
    client = Client(transport, "http://example.com/", "myappId")

    info, response = client.artists.get_info_by_name("65daysofstatic")

    assert transport.calls == [("http://example.com/artists/65daysofstatic.json", {"app_id": "myappId"})]
    assert info.upcoming_events_count == 5
    assert response.status_code == 200


def test_base_url_path_prefix_is_kept():
    transport = CannedTransport(body=b"[]")
    client = Client(transport, "http://example.com/api/v2/", "appid")

    client.venues.events(1)

    assert transport.calls[0][0] == "http://example.com/api/v2/venues/1/events.json"


def test_custom_transport_error_status():
    client = Client(CannedTransport(body=b"{}", status=403), "http://example.com", "appid")

    with pytest.raises(TransportError) as excinfo:
        client.artists.get_info_by_mbid("x")

    assert excinfo.value.status_code == 403


def test_custom_transport_decode_error():
    client = Client(CannedTransport(body=b"not json"), "http://example.com", "appid")

    with pytest.raises(DecodeError):
        client.venues.events(1)


@rsps.activate
def test_requests_transport_sends_user_agent():
    rsps.add(rsps.GET, "http://example.com/venues/1/events.json", json=[])
    client = Client(RequestsTransport(), "http://example.com", "appid")

    client.venues.events(1)

    assert rsps.calls[0].request.headers["User-Agent"] == DEFAULT_USER_AGENT


@rsps.activate
def test_requests_transport_wraps_timeouts():
    rsps.add(
        rsps.GET, "http://example.com/venues/1/events.json",
        body=requests.exceptions.ReadTimeout("timed out"),
    )
    client = Client(RequestsTransport(timeout=0.1), "http://example.com", "appid")

    with pytest.raises(TransportError) as excinfo:
        client.venues.events(1)

    assert isinstance(excinfo.value.__cause__, requests.exceptions.Timeout)


@rsps.activate
def test_single_attempt_no_retry():
    rsps.add(rsps.GET, "http://example.com/venues/1/events.json", status=500)
    client = Client(RequestsTransport(), "http://example.com", "appid")

    with pytest.raises(TransportError):
        client.venues.events(1)

    assert len(rsps.calls) == 1


def test_new_client_defaults():
    client = new_client("appid")
    assert client.base_url == DEFAULT_BASE_URL
    assert client.app_id == "appid"
    assert isinstance(client.transport, RequestsTransport)


def test_from_config_uses_api_section():
    transport = CannedTransport()
    client = Client.from_config(
        {"api": {"app_id": "abc", "base_url": "http://example.com"}},
        transport=transport,
    )
    assert client.app_id == "abc"
    assert client.base_url == "http://example.com"
    assert client.transport is transport



class ClosableTransport(CannedTransport):
    def __init__(self):
        super().__init__()
        self.closed = False

    def close(self):
        self.closed = True


def test_close_closes_transport():
    transport = ClosableTransport()
    Client(transport, "http://example.com", "appid").close()
    assert transport.closed


def test_context_manager_closes_transport_on_error():
    transport = ClosableTransport()
    transport.status = 500

    with pytest.raises(TransportError):
        with Client(transport, "http://example.com", "appid") as client:
            client.venues.events(1)

    assert transport.closed


def test_close_without_transport_close_is_a_no_op():
    client = Client(CannedTransport(), "http://example.com", "appid")
    client.close()


def test_requests_transport_close_closes_session():
    session = requests.Session()
    closed = []
    session.close = lambda: closed.append(True)

    with Client(RequestsTransport(session=session), "http://example.com", "appid"):
        pass

    assert closed == [True]

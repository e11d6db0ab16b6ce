import httpx
import pytest

from app.common.exceptions import ConfigurationError
from app.services.place_service import calculate_walking_time_minutes
from tests.fixtures import json_transport, make_client, response_json


@pytest.mark.parametrize(
    "distance, minutes",
    [
        (0, 0),
        (840, 10),
        (84, 1),
        (1000, 12),
        (5000, 60),
    ],
)
def test_walking_time_minutes(distance, minutes):
    assert calculate_walking_time_minutes(distance) == minutes


def test_walking_time_rounds_half_minutes_up():
    # 42m = 0.5분, 210m = 2.5분
    assert calculate_walking_time_minutes(42) == 1
    assert calculate_walking_time_minutes(210) == 3
    assert calculate_walking_time_minutes(41) == 0


def test_walking_time_negative_distance_is_not_validated():
    assert calculate_walking_time_minutes(-840) == -10


def test_walking_time_returns_int():
    assert isinstance(calculate_walking_time_minutes(123.4), int)


def test_photo_url_exact_format():
    client = make_client(json_transport(response_json([])), api_key="K")

    url = client.get_photo_url("abc123", 200)

    assert url == "https://maps.googleapis.com/maps/api/place/photo?maxwidth=200&photoreference=abc123&key=K"


def test_photo_url_default_width():
    client = make_client(json_transport(response_json([])), api_key="K")

    url = httpx.URL(client.get_photo_url("abc123"))

    assert url.params["maxwidth"] == "400"


def test_photo_url_makes_no_request():
    transport = json_transport(response_json([]))
    client = make_client(transport, api_key="K")

    client.get_photo_url("abc123")

    assert transport.requests == []


def test_photo_url_requires_api_key():
    client = make_client(json_transport(response_json([])), api_key=None)

    with pytest.raises(ConfigurationError):
        client.get_photo_url("abc123")

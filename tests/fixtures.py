from typing import Callable, List, Optional

import httpx

from app.core.config import PlacesSettings
from app.services.place_service import PlaceSearchClient

BASE_URL = "https://maps.googleapis.com/maps/api/place"


def place_json(place_id: str, price_level=None, rating=None, **extra) -> dict:
    place = {
        "place_id": place_id,
        "name": f"Place {place_id}",
        "formatted_address": f"{place_id} Main St",
        "types": ["restaurant", "food"],
        "geometry": {"location": {"lat": 37.5665, "lng": 126.978}},
    }
    if price_level is not None:
        place["price_level"] = price_level
    if rating is not None:
        place["rating"] = rating
    place.update(extra)
    return place


def response_json(results: List[dict], status: str = "OK", next_page_token: Optional[str] = None) -> dict:
    body = {"html_attributions": [], "results": results, "status": status}
    if next_page_token is not None:
        body["next_page_token"] = next_page_token
    return body


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_transport(body, status_code: int = 200) -> RecordingTransport:
    return RecordingTransport(lambda request: httpx.Response(status_code, json=body))


def text_transport(text: str, status_code: int = 200) -> RecordingTransport:
    return RecordingTransport(lambda request: httpx.Response(status_code, text=text))


def make_client(transport: httpx.MockTransport, api_key: Optional[str] = "test-key") -> PlaceSearchClient:
    return PlaceSearchClient(PlacesSettings(api_key=api_key, base_url=BASE_URL), transport=transport)

import json
import logging
import math
from typing import Dict, List, Optional

import httpx
from pydantic import ValidationError

from app.common.exceptions import ConfigurationError, ResponseFormatError, TransportError
from app.core.config import PlacesSettings
from app.models.google_places_schema import Place, PlacesResponse

log = logging.getLogger(__name__)

DEFAULT_RADIUS = 5000                # 기본 검색 반경 (m)
DEFAULT_PLACE_TYPE = "restaurant"
DEFAULT_PHOTO_MAX_WIDTH = 400
WALKING_SPEED_MPS = 1.4              # 평균 보행 속도 (약 5km/h)


def _format_coordinate(value: float) -> str:
    # 지수 표기 방지 (1e-05 -> 0.00001), 소수점 7자리 (약 1cm)
    formatted = f"{value:.7f}".rstrip("0").rstrip(".")
    return "0" if formatted in ("", "-0") else formatted


def build_nearby_search_params(
    api_key: str,
    latitude: float,
    longitude: float,
    radius: int = DEFAULT_RADIUS,
    place_type: str = DEFAULT_PLACE_TYPE,
    page_token: Optional[str] = None,
) -> Dict[str, str]:
    """
    Nearby Search 쿼리 파라미터 생성.

    page_token 이 있으면 pagetoken/key 만 보낸다. upstream 이 다음 페이지 요청에
    다른 검색 조건을 허용하지 않으므로 위치/반경/타입은 그대로 무시된다.
    """
    if page_token:
        return {"pagetoken": page_token, "key": api_key}

    return {
        "location": f"{_format_coordinate(latitude)},{_format_coordinate(longitude)}",
        "radius": str(radius),
        "type": place_type,
        "key": api_key,
    }


def filter_places(
    results: List[Place],
    min_price: Optional[int] = None,
    max_price: Optional[int] = None,
    min_rating: Optional[float] = None,
) -> List[Place]:
    # 필드가 없는 장소는 해당 조건에서 제외
    if min_price is not None:
        results = [p for p in results if p.price_level is not None and p.price_level >= min_price]

    if max_price is not None:
        results = [p for p in results if p.price_level is not None and p.price_level <= max_price]

    if min_rating is not None:
        results = [p for p in results if p.rating is not None and p.rating >= min_rating]

    return results


def calculate_walking_time_minutes(distance_meters: float) -> int:
    """
    거리(m)를 도보 소요 시간(분)으로 환산. 1.4 m/s 고정 속도 기준 근사값.

    0.5 분은 올림 처리 (42m -> 1분). 음수 입력은 검증하지 않는다.
    """
    time_seconds = distance_meters / WALKING_SPEED_MPS
    return math.floor(time_seconds / 60 + 0.5)


class PlaceSearchClient:
    def __init__(
        self,
        settings: PlacesSettings,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self._client = client
        self._transport = transport

    def _require_api_key(self) -> str:
        api_key = self.settings.api_key
        if not api_key:
            raise ConfigurationError("Google Places API key is not set")
        return api_key

    @property
    def nearby_search_url(self) -> str:
        return f"{self.settings.base_url}/nearbysearch/json"

    @property
    def photo_url(self) -> str:
        return f"{self.settings.base_url}/photo"

    async def _get(self, url: str, params: Dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url, params=params)

        async with httpx.AsyncClient(timeout=self.settings.timeout, transport=self._transport) as client:
            return await client.get(url, params=params)

    async def search_nearby(
        self,
        latitude: float,
        longitude: float,
        radius: int = DEFAULT_RADIUS,
        type: str = DEFAULT_PLACE_TYPE,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
        min_rating: Optional[float] = None,
        page_token: Optional[str] = None,
    ) -> PlacesResponse:
        """
        특정 좌표 기준 인근 장소 조회 + 가격/평점 후처리 필터
        """
        api_key = self._require_api_key()

        params = build_nearby_search_params(
            api_key=api_key,
            latitude=latitude,
            longitude=longitude,
            radius=radius,
            place_type=type,
            page_token=page_token,
        )
        log.debug(
            "Nearby Search 요청: %s",
            {k: v for k, v in params.items() if k != "key"},
        )

        try:
            response = await self._get(self.nearby_search_url, params)
        except httpx.HTTPError as e:
            raise TransportError(f"Google Places API request failed: {e}") from e

        parsed = self._parse_response(response)

        results = filter_places(
            parsed.results,
            min_price=min_price,
            max_price=max_price,
            min_rating=min_rating,
        )
        log.info(
            "Nearby Search 결과: status=%s, 응답 %d개, 필터 후 %d개",
            parsed.status,
            len(parsed.results),
            len(results),
        )
        return parsed.model_copy(update={"results": results})

    def _parse_response(self, response: httpx.Response) -> PlacesResponse:
        try:
            data = response.json()
            return PlacesResponse.model_validate(data)
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            log.error(
                "Error parsing Google Places API response (HTTP %s): %s | body=%s",
                response.status_code,
                e,
                response.text[:2000],
            )
        raise ResponseFormatError("Invalid response from Google Places API")

    def get_photo_url(self, photo_reference: str, max_width: int = DEFAULT_PHOTO_MAX_WIDTH) -> str:
        api_key = self._require_api_key()

        params = {
            "maxwidth": str(max_width),
            "photoreference": photo_reference,
            "key": api_key,
        }
        return str(httpx.URL(self.photo_url, params=params))


_default_place_client: Optional[PlaceSearchClient] = None


def get_default_place_client() -> PlaceSearchClient:
    global _default_place_client
    if _default_place_client is None:
        _default_place_client = PlaceSearchClient(PlacesSettings.from_env())
    return _default_place_client

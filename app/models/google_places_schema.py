from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, model_validator


# ==== Google Place 주변 장소 검색 (legacy Nearby Search) ====
# 타입 강제 변환 없이 검증 ("4" -> int 불가), 응답의 기타 필드는 무시
class PlacesModel(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    # 선택 필드는 생략만 허용, 명시적 null 은 거부
    @model_validator(mode="before")
    @classmethod
    def reject_null_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = [name for name in cls.model_fields if name in data and data[name] is None]
            if nulls:
                raise ValueError(f"null is not allowed for fields: {', '.join(nulls)}")
        return data


class Location(PlacesModel):
    lat: float
    lng: float


class Geometry(PlacesModel):
    location: Location


class Photo(PlacesModel):
    photo_reference: str
    height: int
    width: int


class Place(PlacesModel):
    place_id: str
    name: str
    formatted_address: str
    types: List[str]
    price_level: Optional[int] = None
    rating: Optional[float] = None
    user_ratings_total: Optional[int] = None
    geometry: Geometry
    photos: Optional[List[Photo]] = None
    website: Optional[str] = None
    url: Optional[str] = None  # Google Maps URL


class PlacesResponse(PlacesModel):
    results: List[Place]
    status: str
    next_page_token: Optional[str] = None

from typing import Optional
from fastapi import APIRouter, Depends, Query
from app.models.google_places_schema import PlacesResponse
from app.models.place_api_model import PhotoUrlResponse, WalkingTimeResponse
from app.services.place_service import (
    DEFAULT_PHOTO_MAX_WIDTH,
    DEFAULT_PLACE_TYPE,
    DEFAULT_RADIUS,
    PlaceSearchClient,
    calculate_walking_time_minutes,
    get_default_place_client,
)

router = APIRouter()


@router.get("/api/places/nearby", response_model=PlacesResponse, response_model_exclude_none=True)
async def search_nearby_places(
    latitude: float = Query(..., ge=-90, le=90, description="위도"),
    longitude: float = Query(..., ge=-180, le=180, description="경도"),
    radius: int = Query(DEFAULT_RADIUS, gt=0, le=50000, description="검색 반경 (m)"),
    type: str = Query(DEFAULT_PLACE_TYPE, description="장소 유형"),
    minPrice: Optional[int] = Query(None, ge=0, le=4, description="최소 가격대"),
    maxPrice: Optional[int] = Query(None, ge=0, le=4, description="최대 가격대"),
    minRating: Optional[float] = Query(None, ge=0, le=5, description="최소 평점"),
    pageToken: Optional[str] = Query(None, description="다음 페이지 토큰"),
    client: PlaceSearchClient = Depends(get_default_place_client),
):
    """
    좌표 기준 주변 장소 검색. pageToken 이 있으면 나머지 검색 조건은 무시된다.
    """
    result = await client.search_nearby(
        latitude=latitude,
        longitude=longitude,
        radius=radius,
        type=type,
        min_price=minPrice,
        max_price=maxPrice,
        min_rating=minRating,
        page_token=pageToken,
    )
    # 응답 JSON 에는 값이 없는 선택 필드를 포함하지 않음
    return result.model_dump(exclude_none=True)


@router.get("/api/places/photo-url", response_model=PhotoUrlResponse)
def get_place_photo_url(
    photoReference: str = Query(..., min_length=1, description="사진 참조 토큰"),
    maxWidth: int = Query(DEFAULT_PHOTO_MAX_WIDTH, ge=1, le=1600, description="최대 너비 (px)"),
    client: PlaceSearchClient = Depends(get_default_place_client),
):
    photo_url = client.get_photo_url(photoReference, max_width=maxWidth)
    return PhotoUrlResponse(photoReference=photoReference, maxWidth=maxWidth, photoUrl=photo_url)


@router.get("/api/places/walking-time", response_model=WalkingTimeResponse)
def get_walking_time(
    distanceMeters: float = Query(..., allow_inf_nan=False, description="거리 (m)"),
):
    return WalkingTimeResponse(
        distanceMeters=distanceMeters,
        walkingTimeMinutes=calculate_walking_time_minutes(distanceMeters),
    )

from pydantic import BaseModel


class PhotoUrlResponse(BaseModel):
    photoReference: str
    maxWidth: int
    photoUrl: str


class WalkingTimeResponse(BaseModel):
    distanceMeters: float
    walkingTimeMinutes: int

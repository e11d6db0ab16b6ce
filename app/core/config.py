from dotenv import load_dotenv
from typing import Optional
import os

load_dotenv()

# Google Places API Configuration
GOOGLE_PLACES_API_KEY = os.getenv("GOOGLE_PLACES_API_KEY")
GOOGLE_PLACES_BASE_URL = os.getenv("GOOGLE_PLACES_BASE_URL", "https://maps.googleapis.com/maps/api/place")
GOOGLE_PLACES_TIMEOUT_SECONDS = os.getenv("GOOGLE_PLACES_TIMEOUT_SECONDS")


def _as_float(val: Optional[str]) -> Optional[float]:
    if val is None or not val.strip():
        return None
    return float(val)


class PlacesSettings:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = "https://maps.googleapis.com/maps/api/place",
        timeout: Optional[float] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> "PlacesSettings":
        return cls(
            api_key=GOOGLE_PLACES_API_KEY,
            base_url=GOOGLE_PLACES_BASE_URL,
            timeout=_as_float(GOOGLE_PLACES_TIMEOUT_SECONDS),
        )

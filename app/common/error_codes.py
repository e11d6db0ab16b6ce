from enum import Enum

class ErrorCode(Enum):
    PLACES_CONFIGURATION_ERROR = ("50010", "Google Places API 키가 설정되지 않았습니다.")
    PLACES_TRANSPORT_ERROR = ("50210", "Google Places API 호출에 실패했습니다.")
    PLACES_INVALID_RESPONSE = ("50211", "Google Places API 응답 형식이 잘못되었습니다.")

    UNKNOWN_ERROR = ("50000", "알 수 없는 오류가 발생했어요.")

    def __init__(self, code: str, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

from typing import Optional

from app.common.error_codes import ErrorCode


class PlacesError(Exception):
    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR
    status_code: int = 500

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.error_code.message)


# API 키 미설정 (네트워크 호출 전 실패)
class ConfigurationError(PlacesError):
    error_code = ErrorCode.PLACES_CONFIGURATION_ERROR
    status_code = 500


# 네트워크/전송 계층 오류 (재시도 없음)
class TransportError(PlacesError):
    error_code = ErrorCode.PLACES_TRANSPORT_ERROR
    status_code = 502


# JSON 파싱 실패 또는 스키마 불일치
class ResponseFormatError(PlacesError):
    error_code = ErrorCode.PLACES_INVALID_RESPONSE
    status_code = 502

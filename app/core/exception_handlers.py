from fastapi import Request
from fastapi.responses import JSONResponse
from app.common.responses import ErrorResponse
from app.common.error_codes import ErrorCode
from app.common.exceptions import PlacesError

import logging
log = logging.getLogger(__name__)

# Google Places 연동 예외 처리
async def places_exception_handler(request: Request, exc: PlacesError):
    log.warning("Google Places 연동 오류 [%s %s]: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse.of(exc.error_code).model_dump()
    )

# 일반 예외 처리
async def global_exception_handler(request: Request, exc: Exception):
    log.exception("서버 내부 에러 발생")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse.of(ErrorCode.UNKNOWN_ERROR).model_dump()
    )

from pydantic import BaseModel
from typing import Optional

from app.common.error_codes import ErrorCode


class ErrorResponse(BaseModel):
    success: bool = False
    code: str
    message: Optional[str] = None

    @classmethod
    def of(cls, error: ErrorCode) -> "ErrorResponse":
        return cls(code=error.code, message=error.message)

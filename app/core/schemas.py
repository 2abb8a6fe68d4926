"""공통 API 응답 스키마

성공 응답은 ``success``/``message`` 를 기본으로 가지며, 에러 응답은
``app.core.exceptions`` 의 핸들러가 ``ErrorResponse`` 형태로 만듭니다.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class MessageResponse(BaseModel):
    """메시지만 담는 API 응답"""

    success: bool = True
    message: str


class APIResponse(BaseModel, Generic[DataT]):
    """단일 데이터 API 응답"""

    success: bool = True
    message: str = "OK"
    data: Optional[DataT] = None


class ErrorDetail(BaseModel):
    """에러 상세 정보"""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    detail: Optional[dict[str, Any]] = Field(default=None, description="추가 정보")


class ErrorResponse(BaseModel):
    """에러 API 응답

    Example::

        {
            "success": false,
            "message": "El correo electrónico ya está registrado.",
            "error": {
                "code": "EMAIL_ALREADY_EXISTS",
                "message": "El correo electrónico ya está registrado.",
                "detail": {"error": "...", "code": "ALREADY_EXISTS"}
            }
        }
    """

    success: bool = False
    message: str
    error: ErrorDetail

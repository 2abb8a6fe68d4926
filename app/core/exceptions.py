from enum import Enum
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from app.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """전역 에러 코드"""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    BAD_REQUEST = "BAD_REQUEST"


class BaseAPIException(HTTPException):
    """기본 API 예외 클래스"""

    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        detail: Optional[Dict[str, Any]] = None,
    ):
        self.error_code = error_code
        self.message = message
        self.detail_info = detail or {}
        super().__init__(status_code=status_code, detail=message)


class BadRequestException(BaseAPIException):
    """400 Bad Request"""

    def __init__(
        self,
        message: str = "Solicitud inválida.",
        error_code: str = ErrorCode.BAD_REQUEST,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class InternalServerException(BaseAPIException):
    """500 Internal Server Error"""

    def __init__(
        self,
        message: str = "Error interno del servidor.",
        error_code: str = ErrorCode.INTERNAL_ERROR,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code=error_code,
            message=message,
            detail=detail,
        )


def describe_backend_error(exc: BaseException) -> Dict[str, Any]:
    """외부 백엔드 예외를 응답용 detail 로 변환

    Firebase 예외는 ``code`` 속성(예: ``ALREADY_EXISTS``)을 가지며,
    그 외 예외는 클래스 이름을 코드로 사용합니다.
    """
    return {
        "error": str(exc),
        "code": str(getattr(exc, "code", None) or type(exc).__name__),
    }


async def base_exception_handler(
    request: Request, exc: BaseAPIException
) -> JSONResponse:
    """BaseAPIException 핸들러"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": exc.message,
            "error": {
                "code": exc.error_code,
                "message": exc.message,
                "detail": exc.detail_info,
            },
        },
    )


async def http_exception_handler(
    request: Request, exc: HTTPException
) -> JSONResponse:
    """HTTPException 핸들러"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": str(exc.detail),
            "error": {
                "code": ErrorCode.INTERNAL_ERROR,
                "message": str(exc.detail),
                "detail": None,
            },
        },
    )


async def generic_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """일반 예외 핸들러"""
    logger.exception("Unhandled exception", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "Error interno del servidor.",
            "error": {
                "code": ErrorCode.INTERNAL_ERROR,
                "message": "Error interno del servidor.",
                "detail": None,
            },
        },
    )

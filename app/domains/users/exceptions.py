"""Users 도메인 예외 정의"""

from enum import Enum
from typing import Any, Dict, Optional

from app.core.exceptions import BadRequestException, InternalServerException
from app.core.i18n import MessageKey, translate


class UserErrorCode(str, Enum):
    """사용자 도메인 에러 코드"""

    MISSING_REQUIRED_FIELDS = "MISSING_REQUIRED_FIELDS"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    PHONE_ALREADY_EXISTS = "PHONE_ALREADY_EXISTS"
    USER_CREATE_FAILED = "USER_CREATE_FAILED"
    USER_UPDATE_FAILED = "USER_UPDATE_FAILED"
    USER_DELETE_FAILED = "USER_DELETE_FAILED"


class MissingRequiredFieldsException(BadRequestException):
    """생성 시 필수 필드(email, password, name, lastName)가 없는 경우"""

    def __init__(
        self, missing: list[str] | None = None, locale: str | None = None
    ):
        detail = {"missing": missing} if missing else {}
        super().__init__(
            message=translate(MessageKey.MISSING_REQUIRED_FIELDS, locale),
            error_code=UserErrorCode.MISSING_REQUIRED_FIELDS,
            detail=detail,
        )


class EmailAlreadyExistsException(BadRequestException):
    """이미 등록된 이메일인 경우"""

    def __init__(
        self,
        detail: Optional[Dict[str, Any]] = None,
        locale: str | None = None,
    ):
        super().__init__(
            message=translate(MessageKey.EMAIL_ALREADY_EXISTS, locale),
            error_code=UserErrorCode.EMAIL_ALREADY_EXISTS,
            detail=detail,
        )


class PhoneAlreadyExistsException(BadRequestException):
    """이미 등록된 전화번호인 경우"""

    def __init__(
        self,
        detail: Optional[Dict[str, Any]] = None,
        locale: str | None = None,
    ):
        super().__init__(
            message=translate(MessageKey.PHONE_ALREADY_EXISTS, locale),
            error_code=UserErrorCode.PHONE_ALREADY_EXISTS,
            detail=detail,
        )


class UserCreateFailedException(InternalServerException):
    """사용자 생성 중 분류되지 않은 오류"""

    def __init__(
        self,
        detail: Optional[Dict[str, Any]] = None,
        locale: str | None = None,
    ):
        super().__init__(
            message=translate(MessageKey.USER_CREATE_FAILED, locale),
            error_code=UserErrorCode.USER_CREATE_FAILED,
            detail=detail,
        )


class UserUpdateFailedException(BadRequestException):
    """사용자 수정 중 분류되지 않은 오류 (400 으로 응답)"""

    def __init__(
        self,
        detail: Optional[Dict[str, Any]] = None,
        locale: str | None = None,
    ):
        super().__init__(
            message=translate(MessageKey.USER_UPDATE_FAILED, locale),
            error_code=UserErrorCode.USER_UPDATE_FAILED,
            detail=detail,
        )


class UserDeleteFailedException(BadRequestException):
    """사용자 삭제 실패"""

    def __init__(
        self,
        detail: Optional[Dict[str, Any]] = None,
        locale: str | None = None,
    ):
        super().__init__(
            message=translate(MessageKey.USER_DELETE_FAILED, locale),
            error_code=UserErrorCode.USER_DELETE_FAILED,
            detail=detail,
        )

"""Users 도메인 스키마 정의

요청/응답 JSON 은 camelCase(lastName, isBlocked)를 사용하고,
파이썬 코드에서는 snake_case 속성으로 접근합니다.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase JSON 별칭 스키마"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class UserCreate(CamelModel):
    """사용자 생성 요청 스키마

    필수 필드(email, password, name, lastName)는 서비스에서 검증합니다.
    누락 시 422 가 아닌 400 으로 응답해야 하기 때문입니다.
    """

    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = Field(default=None, description="E.164 형식 전화번호")
    address: Optional[Any] = None
    card: Optional[Any] = None
    photo: Optional[Any] = None
    is_blocked: Optional[Any] = None
    rol: Optional[Any] = None

    def missing_required_fields(self) -> list[str]:
        """비어 있는 필수 필드의 JSON 이름 목록"""
        required = {
            "email": self.email,
            "password": self.password,
            "name": self.name,
            "lastName": self.last_name,
        }
        return [field for field, value in required.items() if not value]

    def to_document(self) -> dict[str, Any]:
        """요청에 포함된 프로필 필드를 문서 형태로 변환 (비밀번호 제외)"""
        return self.model_dump(
            by_alias=True, exclude={"password"}, exclude_unset=True
        )


class UserUpdate(CamelModel):
    """사용자 수정 요청 스키마 (모든 필드 선택)"""

    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Any] = None
    card: Optional[Any] = None
    photo: Optional[Any] = None


class UserCreatedResponse(BaseModel):
    """사용자 생성 응답 스키마"""

    success: bool = True
    message: str
    uid: str = Field(..., description="Firebase Authentication 사용자 UID")

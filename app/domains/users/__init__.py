"""Users 도메인 모듈

Firebase Authentication 계정과 Cloud Firestore 사용자 문서를 함께 관리하는
도메인입니다.

구조:
    - schemas.py: Pydantic 스키마 (UserCreate, UserUpdate, etc.)
    - repository.py: 인증 계정/사용자 문서 접근 계층
    - service.py: 비즈니스 로직 (두 저장소 순차 쓰기, 오류 분류)
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from app.domains.users.exceptions import (
    EmailAlreadyExistsException,
    MissingRequiredFieldsException,
    PhoneAlreadyExistsException,
    UserCreateFailedException,
    UserDeleteFailedException,
    UserErrorCode,
    UserUpdateFailedException,
)
from app.domains.users.repository import IdentityRepository, ProfileRepository
from app.domains.users.router import router
from app.domains.users.schemas import (
    UserCreate,
    UserCreatedResponse,
    UserUpdate,
)
from app.domains.users.service import UserService

__all__ = [
    "IdentityRepository",
    "ProfileRepository",
    "UserService",
    "UserCreate",
    "UserUpdate",
    "UserCreatedResponse",
    "router",
    "UserErrorCode",
    "MissingRequiredFieldsException",
    "EmailAlreadyExistsException",
    "PhoneAlreadyExistsException",
    "UserCreateFailedException",
    "UserUpdateFailedException",
    "UserDeleteFailedException",
]

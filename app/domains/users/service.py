"""Users 도메인 서비스

인증 계정(Firebase Authentication)과 사용자 문서(Cloud Firestore)에 대한
생성/수정/삭제를 순차적으로 조율합니다.

두 저장소 쓰기는 트랜잭션으로 묶이지 않습니다. 인증 계정 생성 후 문서 저장이
실패하면 문서 없는 인증 계정이 남으며, 기본 설정에서는 되돌리지 않습니다.
"""

from typing import Any, Optional

from firebase_admin import auth

from app.core.exceptions import describe_backend_error
from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.domains.users.exceptions import (
    EmailAlreadyExistsException,
    MissingRequiredFieldsException,
    PhoneAlreadyExistsException,
    UserCreateFailedException,
    UserDeleteFailedException,
    UserUpdateFailedException,
)
from app.domains.users.repository import IdentityRepository, ProfileRepository
from app.domains.users.schemas import UserCreate, UserUpdate

logger = get_logger(__name__)


def build_display_name(name: Optional[str], last_name: Optional[str]) -> str:
    """표시 이름 생성 ("{name} {lastName}", 없는 값은 빈 문자열)"""
    return f"{name or ''} {last_name or ''}"


class UserService:
    """사용자 서비스"""

    def __init__(
        self,
        identity_repository: IdentityRepository,
        profile_repository: ProfileRepository,
        locale: Optional[str] = None,
        rollback_orphaned_identity: bool = False,
    ):
        self.identity_repository = identity_repository
        self.profile_repository = profile_repository
        self.locale = locale
        self.rollback_orphaned_identity = rollback_orphaned_identity

    async def create_user(
        self, id_coop: str, user_type: str, user_data: UserCreate
    ) -> str:
        """사용자 생성

        1. 인증 계정 생성
        2. 생성된 UID 로 사용자 문서 저장

        Args:
            id_coop: 협동조합(테넌트) ID
            user_type: 사용자 유형 (컬렉션 이름)
            user_data: 생성 요청 데이터

        Returns:
            생성된 사용자 UID

        Raises:
            MissingRequiredFieldsException: 필수 필드 누락 (백엔드 호출 없음)
            EmailAlreadyExistsException: 이미 등록된 이메일
            PhoneAlreadyExistsException: 이미 등록된 전화번호
            UserCreateFailedException: 그 외 모든 실패
        """
        missing = user_data.missing_required_fields()
        if missing:
            raise MissingRequiredFieldsException(
                missing=missing, locale=self.locale
            )

        uid: Optional[str] = None
        try:
            uid = await self.identity_repository.create(
                email=user_data.email,
                password=user_data.password,
                display_name=build_display_name(
                    user_data.name, user_data.last_name
                ),
                phone_number=user_data.phone or None,
            )

            document = user_data.to_document()
            document["uid"] = uid
            document["uidCooperative"] = id_coop
            await self.profile_repository.set(uid, id_coop, user_type, document)

        except auth.EmailAlreadyExistsError as e:
            raise EmailAlreadyExistsException(
                detail=describe_backend_error(e), locale=self.locale
            )
        except auth.PhoneNumberAlreadyExistsError as e:
            raise PhoneAlreadyExistsException(
                detail=describe_backend_error(e), locale=self.locale
            )
        except Exception as e:
            logger.exception(
                "Failed to create user",
                extra={
                    "request_id": get_request_id(),
                    "id_coop": id_coop,
                    "user_type": user_type,
                    "uid": uid,
                },
            )
            if uid is not None and self.rollback_orphaned_identity:
                await self._rollback_identity(uid)
            raise UserCreateFailedException(
                detail=describe_backend_error(e), locale=self.locale
            )

        logger.info(
            "User created",
            extra={
                "request_id": get_request_id(),
                "uid": uid,
                "id_coop": id_coop,
                "user_type": user_type,
                "action": "created",
            },
        )
        return uid

    async def _rollback_identity(self, uid: str) -> None:
        """문서 저장 실패로 남은 인증 계정 삭제 (실패 시 로그만 남김)"""
        try:
            await self.identity_repository.delete(uid)
        except Exception:
            logger.exception(
                "Failed to roll back orphaned identity",
                extra={"request_id": get_request_id(), "uid": uid},
            )
            return

        logger.warning(
            "Orphaned identity rolled back",
            extra={"request_id": get_request_id(), "uid": uid},
        )

    async def update_user(
        self,
        uid: str,
        id_coop: str,
        user_type: str,
        user_data: UserUpdate,
    ) -> None:
        """사용자 수정

        인증 계정을 먼저 수정하고, 성공한 경우에만 문서를 수정합니다.
        문서의 address, card, name, lastName, photo 는 요청에 없어도
        항상 포함되어 null 로 기록됩니다. 표시 이름도 항상 다시 계산되므로
        name, lastName 이 모두 없으면 인증 계정의 표시 이름이 " " 로 바뀝니다.

        Raises:
            EmailAlreadyExistsException: 이미 등록된 이메일
            PhoneAlreadyExistsException: 이미 등록된 전화번호
            UserUpdateFailedException: 그 외 모든 실패 (400)
        """
        identity_fields: dict[str, Any] = {
            "display_name": build_display_name(
                user_data.name, user_data.last_name
            ),
        }
        if user_data.email:
            identity_fields["email"] = user_data.email
        if user_data.phone:
            identity_fields["phone_number"] = user_data.phone
        if user_data.password:
            identity_fields["password"] = user_data.password

        document: dict[str, Any] = {
            "address": user_data.address,
            "card": user_data.card,
            "name": user_data.name,
            "lastName": user_data.last_name,
            "photo": user_data.photo,
        }
        if user_data.email:
            document["email"] = user_data.email
        if user_data.phone:
            document["phone"] = user_data.phone

        try:
            await self.identity_repository.update(uid, identity_fields)
            await self.profile_repository.update(
                uid, id_coop, user_type, document
            )
        except auth.EmailAlreadyExistsError as e:
            raise EmailAlreadyExistsException(
                detail=describe_backend_error(e), locale=self.locale
            )
        except auth.PhoneNumberAlreadyExistsError as e:
            raise PhoneAlreadyExistsException(
                detail=describe_backend_error(e), locale=self.locale
            )
        except Exception as e:
            raise UserUpdateFailedException(
                detail=describe_backend_error(e), locale=self.locale
            )

        logger.info(
            "User updated",
            extra={
                "request_id": get_request_id(),
                "uid": uid,
                "action": "updated",
            },
        )

    async def delete_user(self, uid: str, id_coop: str, user_type: str) -> None:
        """사용자 삭제 (인증 계정 → 문서 순서)

        존재 여부는 미리 확인하지 않으며, 백엔드 오류는 그대로 전달합니다.

        Raises:
            UserDeleteFailedException: 어느 단계든 실패한 경우 (400)
        """
        try:
            await self.identity_repository.delete(uid)
            await self.profile_repository.delete(uid, id_coop, user_type)
        except Exception as e:
            raise UserDeleteFailedException(
                detail=describe_backend_error(e), locale=self.locale
            )

        logger.info(
            "User deleted",
            extra={
                "request_id": get_request_id(),
                "uid": uid,
                "action": "deleted",
            },
        )

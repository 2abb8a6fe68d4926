"""Users 도메인 라우터

협동조합(idCoop)과 사용자 유형(type) 경로 아래의 사용자 생성/수정/삭제 API.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.core.config import settings
from app.core.firebase import FirebaseClient, get_firebase_client
from app.core.i18n import MessageKey, get_locale, translate
from app.core.schemas import ErrorResponse, MessageResponse
from app.domains.users.repository import IdentityRepository, ProfileRepository
from app.domains.users.schemas import (
    UserCreate,
    UserCreatedResponse,
    UserUpdate,
)
from app.domains.users.service import UserService

router = APIRouter()

ERROR_RESPONSES: dict = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
}


def get_user_service(
    firebase: FirebaseClient = Depends(get_firebase_client),
    locale: str = Depends(get_locale),
) -> UserService:
    """UserService 의존성"""
    return UserService(
        identity_repository=IdentityRepository(firebase.auth),
        profile_repository=ProfileRepository(
            firebase.firestore,
            layout=settings.user_storage_layout,
            cooperatives_collection=settings.cooperatives_collection,
            users_collection=settings.users_collection,
        ),
        locale=locale,
        rollback_orphaned_identity=settings.rollback_orphaned_identity,
    )


@router.post(
    "/{id_coop}/{user_type}",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        **ERROR_RESPONSES,
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def create_user(
    id_coop: str,
    user_type: str,
    user_data: Optional[UserCreate] = None,
    locale: str = Depends(get_locale),
    service: UserService = Depends(get_user_service),
):
    """사용자 생성 (인증 계정 + 사용자 문서)"""
    uid = await service.create_user(
        id_coop, user_type, user_data or UserCreate()
    )
    return UserCreatedResponse(
        message=translate(MessageKey.USER_CREATED, locale),
        uid=uid,
    )


@router.put(
    "/{user_id}/{id_coop}/{user_type}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
)
async def update_user(
    user_id: str,
    id_coop: str,
    user_type: str,
    user_data: Optional[UserUpdate] = None,
    locale: str = Depends(get_locale),
    service: UserService = Depends(get_user_service),
):
    """사용자 수정 (전달된 필드만 인증 계정에 반영)"""
    await service.update_user(
        user_id, id_coop, user_type, user_data or UserUpdate()
    )
    return MessageResponse(message=translate(MessageKey.USER_UPDATED, locale))


@router.delete(
    "/{user_id}/{id_coop}/{user_type}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
)
async def delete_user(
    user_id: str,
    id_coop: str,
    user_type: str,
    locale: str = Depends(get_locale),
    service: UserService = Depends(get_user_service),
):
    """사용자 삭제 (인증 계정 → 사용자 문서)"""
    await service.delete_user(user_id, id_coop, user_type)
    return MessageResponse(message=translate(MessageKey.USER_DELETED, locale))

"""Users 도메인 리포지토리

사용자 한 명은 두 저장소에 나뉘어 저장됩니다.

- ``IdentityRepository``: Firebase Authentication 계정
- ``ProfileRepository``: Cloud Firestore 사용자 문서

두 리포지토리는 백엔드 예외를 그대로 전파하며, 분류는 서비스가 담당합니다.
"""

from typing import Any, Literal, Optional

from firebase_admin import auth
from google.cloud.firestore import AsyncClient, AsyncDocumentReference
from starlette.concurrency import run_in_threadpool


class IdentityRepository:
    """Firebase Authentication 계정 리포지토리

    firebase_admin 의 auth API 는 블로킹 호출이므로 스레드풀에서 실행합니다.
    """

    def __init__(self, client: auth.Client):
        self.client = client

    async def create(
        self,
        email: str,
        password: str,
        display_name: str,
        phone_number: Optional[str] = None,
    ) -> str:
        """인증 계정 생성

        Returns:
            Firebase 가 생성한 사용자 UID

        Raises:
            auth.EmailAlreadyExistsError: 이미 등록된 이메일
            auth.PhoneNumberAlreadyExistsError: 이미 등록된 전화번호
        """
        record = await run_in_threadpool(
            self.client.create_user,
            email=email,
            password=password,
            display_name=display_name,
            phone_number=phone_number,
        )
        return str(record.uid)

    async def update(self, uid: str, fields: dict[str, Any]) -> None:
        """인증 계정 부분 수정 (전달된 필드만 변경)"""
        await run_in_threadpool(self.client.update_user, uid, **fields)

    async def delete(self, uid: str) -> None:
        """인증 계정 삭제

        Raises:
            auth.UserNotFoundError: 존재하지 않는 UID
        """
        await run_in_threadpool(self.client.delete_user, uid)


class ProfileRepository:
    """Cloud Firestore 사용자 문서 리포지토리

    문서 위치는 저장 레이아웃 설정에 따라 결정됩니다.

    - ``cooperative``: ``{cooperatives}/{id_coop}/{user_type}/{uid}``
    - ``flat``: ``{users}/{uid}``
    """

    def __init__(
        self,
        db: AsyncClient,
        layout: Literal["cooperative", "flat"] = "cooperative",
        cooperatives_collection: str = "cooperatives",
        users_collection: str = "users",
    ):
        self.db = db
        self.layout = layout
        self.cooperatives_collection = cooperatives_collection
        self.users_collection = users_collection

    def document(
        self, uid: str, id_coop: str, user_type: str
    ) -> AsyncDocumentReference:
        """사용자 문서 참조 반환"""
        if self.layout == "flat":
            collection = self.db.collection(self.users_collection)
        else:
            collection = self.db.collection(
                self.cooperatives_collection, id_coop, user_type
            )
        return collection.document(uid)

    async def set(
        self, uid: str, id_coop: str, user_type: str, data: dict[str, Any]
    ) -> None:
        """문서 생성 (기존 문서는 덮어씀)"""
        await self.document(uid, id_coop, user_type).set(data)

    async def update(
        self, uid: str, id_coop: str, user_type: str, data: dict[str, Any]
    ) -> None:
        """문서 필드 수정

        Raises:
            google.api_core.exceptions.NotFound: 문서가 없는 경우
        """
        await self.document(uid, id_coop, user_type).update(data)

    async def delete(self, uid: str, id_coop: str, user_type: str) -> None:
        """문서 삭제 (없는 문서도 오류 없이 처리됨)"""
        await self.document(uid, id_coop, user_type).delete()

"""Firebase 백엔드 클라이언트

사용자 인증 정보(Firebase Authentication)와 사용자 문서(Cloud Firestore)에
접근하는 클라이언트를 프로세스 단위 싱글톤으로 관리합니다.
"""

import json
from functools import lru_cache
from typing import Any

import firebase_admin
from firebase_admin import auth, credentials, firestore_async

from app.core.config import Settings, settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def load_credential(settings: Settings) -> credentials.Base:
    """설정에서 Firebase 인증 정보 생성

    FIREBASE_CREDENTIALS 가 없으면 Application Default Credentials 를 사용합니다.

    Raises:
        ValueError: FIREBASE_CREDENTIALS 가 올바른 JSON 이 아닌 경우
    """
    if not settings.firebase_credentials:
        return credentials.ApplicationDefault()

    try:
        service_account = json.loads(settings.firebase_credentials)
    except json.JSONDecodeError as e:
        raise ValueError(
            "FIREBASE_CREDENTIALS must be a valid service account JSON."
        ) from e

    return credentials.Certificate(service_account)


class FirebaseClient:
    """Firebase Admin 클라이언트

    - ``auth``: 인증 계정 생성/수정/삭제 (동기 API)
    - ``firestore``: 사용자 문서 저장소 (비동기 API)
    """

    def __init__(self, settings: Settings):
        """Firebase 앱 초기화

        Args:
            settings: 애플리케이션 설정
        """
        self.settings = settings

        options: dict[str, Any] = {
            "databaseURL": settings.firebase_database_url,
        }
        if settings.firebase_project_id:
            options["projectId"] = settings.firebase_project_id

        self.app = firebase_admin.initialize_app(
            load_credential(settings),
            options,
            name=settings.firebase_app_name,
        )
        self.auth = auth.Client(self.app)
        self.firestore = firestore_async.client(self.app)

        logger.info(
            "Firebase client initialized",
            extra={
                "app_name": self.app.name,
                "project_id": self.app.project_id,
            },
        )

    def close(self) -> None:
        """Firebase 앱 해제"""
        firebase_admin.delete_app(self.app)
        logger.info("Firebase client closed", extra={"app_name": self.app.name})


@lru_cache
def _create_firebase_client() -> FirebaseClient:
    """Firebase 클라이언트 싱글톤 생성 (캐시됨)"""
    return FirebaseClient(settings)


def get_firebase_client() -> FirebaseClient:
    """FastAPI DI용 Firebase 클라이언트 의존성"""
    return _create_firebase_client()


def close_firebase_client() -> None:
    """싱글톤이 생성된 경우에만 해제"""
    if _create_firebase_client.cache_info().currsize:
        _create_firebase_client().close()
    _create_firebase_client.cache_clear()

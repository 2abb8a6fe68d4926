"""테스트 설정

Firebase 클라이언트는 MagicMock/AsyncMock 으로 대체합니다.

- 인증 클라이언트(auth.Client): 동기 메서드 → MagicMock
- Firestore 문서 참조: 비동기 메서드(set/update/delete) → AsyncMock
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.firebase import get_firebase_client
from app.domains.users.repository import IdentityRepository, ProfileRepository
from app.domains.users.service import UserService
from app.main import app

FIREBASE_UID = "firebase-uid-123"


@pytest.fixture
def mock_auth_client():
    """Firebase Authentication 클라이언트 Mock"""
    client = MagicMock()
    client.create_user.return_value = MagicMock(uid=FIREBASE_UID)
    return client


@pytest.fixture
def mock_document():
    """Firestore 사용자 문서 참조 Mock"""
    document = MagicMock()
    document.set = AsyncMock()
    document.update = AsyncMock()
    document.delete = AsyncMock()
    return document


@pytest.fixture
def mock_firestore(mock_document):
    """Firestore 비동기 클라이언트 Mock"""
    db = MagicMock()
    db.collection.return_value.document.return_value = mock_document
    return db


@pytest.fixture
def mock_firebase(mock_auth_client, mock_firestore):
    """FirebaseClient Mock"""
    firebase = MagicMock()
    firebase.auth = mock_auth_client
    firebase.firestore = mock_firestore
    return firebase


@pytest.fixture
def user_service(mock_auth_client, mock_firestore):
    """Mock 백엔드를 사용하는 UserService"""
    return UserService(
        identity_repository=IdentityRepository(mock_auth_client),
        profile_repository=ProfileRepository(mock_firestore),
    )


@pytest_asyncio.fixture
async def client(mock_firebase):
    """비동기 테스트 클라이언트 (Firebase Mock 사용)

    ASGITransport 는 lifespan 을 실행하지 않으므로 실제 Firebase 앱은
    초기화되지 않습니다.
    """
    app.dependency_overrides[get_firebase_client] = lambda: mock_firebase

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def create_payload():
    """필수 필드를 모두 포함한 생성 요청 본문"""
    return {
        "email": "conductor@ecuabus.ec",
        "password": "s3cret-pass",
        "name": "Ana",
        "lastName": "Pérez",
        "phone": "+593991234567",
        "address": "Av. Amazonas N24",
        "isBlocked": False,
        "rol": "driver",
    }

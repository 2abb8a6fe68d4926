"""Firebase 클라이언트 단위 테스트"""

import json
from unittest.mock import MagicMock, patch

import pytest

from app.core.config import Settings
from app.core.firebase import FirebaseClient, load_credential

SERVICE_ACCOUNT = {
    "type": "service_account",
    "project_id": "ecuabus-test",
    "client_email": "sa@ecuabus-test.iam.gserviceaccount.com",
}


class TestLoadCredential:
    """인증 정보 로딩 테스트"""

    def test_service_account_json(self):
        settings = Settings(firebase_credentials=json.dumps(SERVICE_ACCOUNT))

        with patch("app.core.firebase.credentials") as mock_credentials:
            load_credential(settings)

        mock_credentials.Certificate.assert_called_once_with(SERVICE_ACCOUNT)

    def test_application_default_without_credentials(self):
        settings = Settings(firebase_credentials=None)

        with patch("app.core.firebase.credentials") as mock_credentials:
            load_credential(settings)

        mock_credentials.ApplicationDefault.assert_called_once_with()
        mock_credentials.Certificate.assert_not_called()

    def test_invalid_json_raises(self):
        settings = Settings(firebase_credentials="{not json")

        with pytest.raises(ValueError):
            load_credential(settings)


class TestFirebaseClient:
    """FirebaseClient 초기화 테스트"""

    def test_initializes_app_and_clients(self):
        settings = Settings(
            firebase_credentials=json.dumps(SERVICE_ACCOUNT),
            firebase_project_id="ecuabus-test",
            firebase_app_name="test-app",
        )
        app = MagicMock()

        with patch("app.core.firebase.credentials"), patch(
            "app.core.firebase.firebase_admin"
        ) as mock_admin, patch("app.core.firebase.auth") as mock_auth, patch(
            "app.core.firebase.firestore_async"
        ) as mock_firestore:
            mock_admin.initialize_app.return_value = app

            client = FirebaseClient(settings)

            options = mock_admin.initialize_app.call_args.args[1]
            assert options == {
                "databaseURL": settings.firebase_database_url,
                "projectId": "ecuabus-test",
            }
            assert mock_admin.initialize_app.call_args.kwargs == {
                "name": "test-app"
            }
            mock_auth.Client.assert_called_once_with(app)
            mock_firestore.client.assert_called_once_with(app)
            assert client.auth is mock_auth.Client.return_value
            assert client.firestore is mock_firestore.client.return_value

            client.close()
            mock_admin.delete_app.assert_called_once_with(app)

import json
from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "EcuaBus API"
    app_description: str = "API para la gestión de usuarios en EcuaBus"
    app_version: str = "1.0.0"
    app_env: str = "development"
    debug: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS (기본: 모든 Origin 허용)
    cors_origins: List[str] = ["*"]

    # Firebase
    firebase_credentials: Optional[str] = None  # 서비스 계정 JSON 문자열
    firebase_database_url: str = "https://ecuabus-33f65.firebaseio.com"
    firebase_project_id: Optional[str] = None
    firebase_app_name: str = "[DEFAULT]"

    # 사용자 문서 저장 위치
    user_storage_layout: Literal["cooperative", "flat"] = "cooperative"
    cooperatives_collection: str = "cooperatives"
    users_collection: str = "users"

    # 문서 저장 실패 시 방금 생성한 인증 계정 삭제 여부 (기본: 비활성)
    rollback_orphaned_identity: bool = False

    # 응답 메시지 기본 언어
    default_locale: Literal["es", "en"] = "es"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",")]
        return v

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """프로덕션 환경에서 Firebase 인증 정보 검증"""
        if not self.is_production:
            return self

        if not self.firebase_credentials:
            raise ValueError(
                "Production requires FIREBASE_CREDENTIALS. "
                "Set it via environment variable."
            )

        try:
            json.loads(self.firebase_credentials)
        except json.JSONDecodeError as e:
            raise ValueError(
                "FIREBASE_CREDENTIALS must be a valid service account JSON."
            ) from e

        return self

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """설정 인스턴스를 반환 (캐싱됨)"""
    return Settings()


settings = get_settings()

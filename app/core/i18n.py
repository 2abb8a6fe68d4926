"""응답 메시지 다국어 처리

Accept-Language 헤더로 호출자 언어를 결정하고 메시지 카탈로그에서
사용자용 문구를 찾습니다. 기본 언어는 스페인어(es)입니다.
"""

from enum import Enum
from typing import Optional

from fastapi import Header

from app.core.config import settings


class MessageKey(str, Enum):
    """사용자 메시지 키"""

    USER_CREATED = "user_created"
    USER_UPDATED = "user_updated"
    USER_DELETED = "user_deleted"
    MISSING_REQUIRED_FIELDS = "missing_required_fields"
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    PHONE_ALREADY_EXISTS = "phone_already_exists"
    USER_CREATE_FAILED = "user_create_failed"
    USER_UPDATE_FAILED = "user_update_failed"
    USER_DELETE_FAILED = "user_delete_failed"


MESSAGES: dict[str, dict[MessageKey, str]] = {
    "es": {
        MessageKey.USER_CREATED: "Usuario creado exitosamente",
        MessageKey.USER_UPDATED: "Usuario actualizado exitosamente",
        MessageKey.USER_DELETED: "Usuario eliminado exitosamente",
        MessageKey.MISSING_REQUIRED_FIELDS: (
            "Faltan campos obligatorios: email, password, name o lastName."
        ),
        MessageKey.EMAIL_ALREADY_EXISTS: (
            "El correo electrónico ya está registrado."
        ),
        MessageKey.PHONE_ALREADY_EXISTS: (
            "El número de telefono ya está registrado."
        ),
        MessageKey.USER_CREATE_FAILED: "Error al crear el usuario.",
        MessageKey.USER_UPDATE_FAILED: "Error al actualizar el usuario",
        MessageKey.USER_DELETE_FAILED: "Error al eliminar el usuario",
    },
    "en": {
        MessageKey.USER_CREATED: "User created successfully",
        MessageKey.USER_UPDATED: "User updated successfully",
        MessageKey.USER_DELETED: "User deleted successfully",
        MessageKey.MISSING_REQUIRED_FIELDS: (
            "Missing required fields: email, password, name or lastName."
        ),
        MessageKey.EMAIL_ALREADY_EXISTS: "The email is already registered.",
        MessageKey.PHONE_ALREADY_EXISTS: (
            "The phone number is already registered."
        ),
        MessageKey.USER_CREATE_FAILED: "Error creating the user.",
        MessageKey.USER_UPDATE_FAILED: "Error updating the user",
        MessageKey.USER_DELETE_FAILED: "Error deleting the user",
    },
}


def resolve_locale(accept_language: Optional[str]) -> str:
    """Accept-Language 값에서 지원하는 언어 선택

    가중치(q)는 무시하고 나열된 순서대로 기본 언어 태그를 비교합니다.

    Example::

        resolve_locale("en-US,en;q=0.9")  # "en"
        resolve_locale("fr-FR")  # settings.default_locale
    """
    if accept_language:
        for part in accept_language.split(","):
            tag = part.split(";")[0].strip().lower()
            language = tag.split("-")[0]
            if language in MESSAGES:
                return language
    return settings.default_locale


def translate(key: MessageKey, locale: Optional[str] = None) -> str:
    """메시지 키를 해당 언어 문구로 변환 (없으면 기본 언어)"""
    catalog = MESSAGES.get(locale or settings.default_locale)
    if catalog is None:
        catalog = MESSAGES[settings.default_locale]
    return catalog[key]


async def get_locale(
    accept_language: Optional[str] = Header(None, alias="Accept-Language")
) -> str:
    """요청 언어 의존성"""
    return resolve_locale(accept_language)

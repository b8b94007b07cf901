# 공용 의존성 — DB 핸들/생성기/토큰 검증
# DB 핸들과 생성기는 lifespan에서 만들어 app.state에 둔다 (모듈 전역 X)

import logging
from typing import Any, Dict

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import Settings, get_settings
from app.core.errors import RejectedError, InternalError
from app.core.security import TokenInvalid, decode_access_token

log = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    # create_app(settings)로 넘긴 설정 우선
    return getattr(request.app.state, "settings", None) or get_settings()


def get_db(request: Request) -> AsyncIOMotorDatabase:
    db = getattr(request.app.state, "db", None)
    if db is None:
        log.error("db handle requested before startup")
        raise InternalError()
    return db


def get_generator(request: Request):
    gen = getattr(request.app.state, "generator", None)
    if gen is None:
        log.error("generator requested before startup")
        raise InternalError()
    return gen


def extract_bearer(header_value: str | None) -> str | None:
    # "Bearer <token>" 또는 토큰만 — 마지막 공백 구분 조각을 토큰으로
    if not header_value or not header_value.strip():
        return None
    return header_value.split()[-1]


def verify_token(request: Request, settings: Settings = Depends(get_app_settings)) -> Dict[str, Any]:
    """보호 라우트 게이트: 검증된 클레임을 request.state.token_data 에 붙인다."""
    # starlette 헤더는 대소문자 구분 없음
    token = extract_bearer(request.headers.get("authorization"))
    if token is None:
        raise RejectedError("Missing token")
    try:
        token_data = decode_access_token(token, settings.TOKEN_SECRET or "")
    except TokenInvalid:
        raise RejectedError("Invalid token")
    request.state.token_data = token_data
    return token_data

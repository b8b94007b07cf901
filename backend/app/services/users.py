# app/services/users.py
# 회원가입/로그인 — 세션은 서버에 저장하지 않음 (토큰만 발급)

from __future__ import annotations
import logging

from pymongo.errors import DuplicateKeyError

from app.core.config import Settings
from app.core.errors import RejectedError, ValidationError
from app.core.security import create_access_token, hash_password, verify_password

log = logging.getLogger(__name__)

INVALID_LOGIN = "Invalid login"


def _normalize_email(email: str) -> str:
    return (email or "").strip()


async def register_user(db, email: str, password: str, settings: Settings) -> str:
    email = _normalize_email(email)
    if not email or not password:
        raise ValidationError("Missing required fields")

    if await db["users"].find_one({"email": email}):
        raise ValidationError("Email already registered")

    doc = {"email": email, "password": hash_password(password, rounds=settings.BCRYPT_ROUNDS)}
    try:
        result = await db["users"].insert_one(doc)
    except DuplicateKeyError:
        # 동시 가입 경합: unique 인덱스가 잡아줌
        raise ValidationError("Email already registered")
    log.info("user registered id=%s", result.inserted_id)
    return str(result.inserted_id)


async def login(db, email: str, password: str, settings: Settings) -> str:
    user = await db["users"].find_one({"email": _normalize_email(email)})

    # 없는 이메일/틀린 비밀번호 구분 없이 같은 응답
    if not user or not verify_password(password or "", user.get("password") or ""):
        raise RejectedError(INVALID_LOGIN)

    return create_access_token(
        str(user["_id"]),
        user["email"],
        settings.TOKEN_SECRET or "",
        expires_minutes=settings.TOKEN_TTL_MINUTES,
    )

# app/core/security.py
# 비밀번호 해시(bcrypt) + 세션 토큰 발급/검증(PyJWT, HS256)

from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
import jwt

ALGORITHM = "HS256"


class TokenInvalid(Exception):
    # 서명 불일치/만료/형식 오류 전부 여기로
    pass


def hash_password(password: str, rounds: int = 12) -> str:
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # 저장된 해시가 bcrypt 형식이 아님
        return False


def create_access_token(user_id: str, email: str, secret: str, expires_minutes: int = 60) -> str:
    """user_id/email 클레임 + exp(기본 1시간)로 서명된 토큰 생성"""
    now = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(claims, secret, algorithm=ALGORITHM)


def decode_access_token(token: str, secret: str) -> Dict[str, Any]:
    try:
        return jwt.decode(token, secret, algorithms=[ALGORITHM], options={"require": ["exp"]})
    except jwt.PyJWTError as e:
        raise TokenInvalid(str(e)) from e

# app/api/routes_users.py
# 회원가입/로그인 + 토큰 보호 예시 라우트
# 보호 라우트 헤더: Authorization: Bearer <JWT>

from __future__ import annotations
import logging
from typing import Any, Dict
from fastapi import APIRouter, Depends

from app.core.config import Settings
from app.core.deps import get_app_settings, get_db, verify_token
from app.core.errors import AppError, InternalError
from app.db.models.schemas import LoginIn, LoginOut, ProtectedOut, UserCreatedOut, UserIn
from app.services.users import login, register_user

log = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.post("/users", response_model=UserCreatedOut)
async def register(payload: UserIn, db=Depends(get_db), settings: Settings = Depends(get_app_settings)):
    try:
        user_id = await register_user(db, payload.email, payload.password, settings)
    except AppError:
        raise
    except Exception:
        log.exception("user registration failed")
        raise InternalError()
    return {"message": "User created successfully", "userId": user_id}


@router.post("/login", response_model=LoginOut)
async def authenticate(payload: LoginIn, db=Depends(get_db), settings: Settings = Depends(get_app_settings)):
    try:
        token = await login(db, payload.email, payload.password, settings)
    except AppError:
        raise
    except Exception:
        log.exception("login failed")
        raise InternalError()
    return {"accessToken": token}


@router.get("/protected", response_model=ProtectedOut)
async def protected(token_data: Dict[str, Any] = Depends(verify_token)):
    return {"message": "This is a secret message", "tokenData": token_data}

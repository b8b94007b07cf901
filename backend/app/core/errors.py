# app/core/errors.py
# 에러 분류 + {"error": ...} 응답 변환 핸들러

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

log = logging.getLogger(__name__)


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    # 호출자가 고칠 수 있는 입력 오류
    status_code = 400
    default_message = "Invalid request"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class RejectedError(AppError):
    # 인증 실패
    status_code = 401
    default_message = "Unauthorized"


class InternalError(AppError):
    status_code = 500
    default_message = "Internal server error"


async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 바디/쿼리 타입 불일치 → 400 (내부 구조는 노출하지 않고 위치/메시지만)
    details = [
        {"loc": [str(p) for p in e.get("loc", ())], "msg": e.get("msg", "")}
        for e in exc.errors()
    ]
    log.info("request validation failed %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(status_code=400, content={"error": "Invalid request", "details": details})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

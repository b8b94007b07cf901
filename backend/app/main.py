# app/main.py
# FastAPI 앱 초기화 및 라우터 설정
# DB 핸들/생성기는 lifespan에서 한 번 만들어 app.state에 두고 Depends로 주입한다.

from __future__ import annotations

import logging
import sys
from asyncio import sleep
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes_ai import router as ai_router
from app.api.routes_recipes import router as recipes_router
from app.api.routes_users import router as users_router
from app.api.routes_vocab import router as vocab_router
from app.core.config import Settings, get_settings
from app.core.deps import get_db
from app.core.errors import register_error_handlers
from app.db.indexes import ensure_indexes
from app.db.init import close, connect
from app.services.generator import RecipeGenerator

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
log = logging.getLogger("recipe_book")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # 서명키 없으면 기동 거부
    if not (settings.TOKEN_SECRET or "").strip():
        log.error("[startup] TOKEN_SECRET is not set. Set TOKEN_SECRET in .env or the environment.")
        raise RuntimeError("TOKEN_SECRET is not set")

    # 1) DB 먼저 붙는다 (최대 DB_INIT_RETRIES회, 1초 간격)
    client = db = None
    for i in range(max(settings.DB_INIT_RETRIES, 1)):
        try:
            client, db = await connect(settings.MONGO_URI, settings.MONGO_DB)
            log.info("[startup] db ready (%s)", settings.MONGO_DB)
            break
        except Exception as e:
            log.warning("[startup] db init retry %d: %s", i + 1, e)
            await sleep(1.0)
    if db is None:
        raise RuntimeError("[startup] db init failed after retries")

    # 2) 인덱스 보장 — 실패해도 서비스는 뜬다
    try:
        await ensure_indexes(db)
        log.info("[startup] indexes ensured")
    except Exception as e:
        log.warning("[startup] ensure_indexes failed: %s", e)

    app.state.db = db
    app.state.generator = RecipeGenerator.from_settings(settings)
    try:
        yield
    finally:
        # 몽고db 커넥션 정리
        close(client)
        app.state.db = None
        log.info("[shutdown] db closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Recipe Book - API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = None
    app.state.generator = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/")
    async def root():
        return {"status": "ok"}

    @app.get("/test")
    async def hello():
        return {"message": "Hello world"}

    @app.get("/health")
    async def health(db=Depends(get_db)):
        ok = {"status": "ok", "db": "ok"}
        try:
            await db.command("ping")
        except Exception as e:
            log.warning("health ping failed: %s", e)
            ok["db"] = "error"
        return ok

    # 라우터 prefix는 각 파일 내에서 정의함 , 중복 prefix 금지
    app.include_router(recipes_router)
    app.include_router(ai_router)
    app.include_router(users_router)
    app.include_router(vocab_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("app.main:app", host=_settings.HOST, port=_settings.PORT)

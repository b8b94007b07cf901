# 환경변수 로딩 (.env)
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "recipe_book"
    DB_INIT_RETRIES: int = 20

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # 세션 토큰 서명키 — 비어 있으면 서버 기동 거부
    TOKEN_SECRET: Optional[str] = None
    TOKEN_TTL_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 12

    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_TIMEOUT_S: float = 30.0

    CORS_ORIGINS: List[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()

# app/db/init.py
# Mongo 연결 유틸 — motor
# 전역 싱글턴 대신 (client, db)를 돌려주고, 소유는 앱 lifespan이 한다.

from __future__ import annotations
from typing import Tuple

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase


async def connect(uri: str, name: str) -> Tuple[AsyncIOMotorClient, AsyncIOMotorDatabase]:
    client = AsyncIOMotorClient(uri)
    db = client[name]
    try:
        # 연결 확인 (준비 안 됐으면 예외)
        await db.command("ping")
    except Exception:
        client.close()
        raise
    return client, db


def close(client: AsyncIOMotorClient | None) -> None:
    if client is not None:
        client.close()

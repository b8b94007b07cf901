# app/scripts/seed_vocab.py
# 요리 분류/태그 어휘 시드 (HTTP 쓰기 경로가 없으므로 관리용 스크립트로)
# 사용: python -m app.scripts.seed_vocab --cuisines Italian,Chinese --tags popular,spicy

import argparse
import asyncio
from typing import Dict, List

from app.core.config import get_settings
from app.db.indexes import ensure_indexes
from app.db.init import close, connect
from app.services.criteria import split_csv


async def upsert_names(col, names: List[str]) -> int:
    # 이름 기준 업서트 — 이미 있으면 그대로
    added = 0
    for n in names:
        result = await col.update_one({"name": n}, {"$setOnInsert": {"name": n}}, upsert=True)
        if result.upserted_id is not None:
            added += 1
    return added


async def seed(db, cuisines: List[str], tags: List[str]) -> Dict[str, int]:
    return {
        "cuisines": await upsert_names(db["cuisines"], cuisines),
        "tags": await upsert_names(db["tags"], tags),
    }


async def main(cuisines: List[str], tags: List[str]):
    settings = get_settings()
    client, db = await connect(settings.MONGO_URI, settings.MONGO_DB)
    try:
        await ensure_indexes(db)
        added = await seed(db, cuisines, tags)
        print(f"cuisines added: {added['cuisines']}, tags added: {added['tags']}")
    finally:
        close(client)

if __name__ == "__main__":
    p = argparse.ArgumentParser(description="seed cuisine/tag vocabularies")
    p.add_argument("--cuisines", default="", help="콤마 구분 (예: Italian,Chinese)")
    p.add_argument("--tags", default="", help="콤마 구분 (예: popular,spicy)")
    args = p.parse_args()
    asyncio.run(main(split_csv(args.cuisines), split_csv(args.tags)))

# app/services/utils.py
# Mongo 문서 → JSON 응답 변환 유틸
# - ObjectId는 전부 문자열로 (중첩 문서/배열 포함)

from __future__ import annotations
from typing import Any, Optional

from bson import ObjectId


def to_jsonable(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def parse_object_id(raw: str) -> Optional[ObjectId]:
    # 형식이 틀리면 None → 어떤 문서와도 매칭 안 됨
    return ObjectId(raw) if ObjectId.is_valid(raw) else None


def snapshot(doc: dict) -> dict:
    # 참조 문서의 식별 필드만 복사 (이후 원본 수정과 동기화하지 않음)
    return {"_id": doc["_id"], "name": doc["name"]}

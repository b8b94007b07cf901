# app/services/recipes.py
# 레시피 검색/생성/수정/삭제
# 쓰기 전에 cuisine/tags 이름을 실제 문서로 확인하고 스냅샷을 박아 넣는다.

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId

from app.core.errors import NotFoundError, ValidationError
from app.db.models.schemas import RecipeIn
from app.services.utils import parse_object_id, snapshot, to_jsonable

log = logging.getLogger(__name__)

# 목록 응답에 싣는 필드
SEARCH_PROJECTION = {
    "name": 1, "cuisine": 1, "prepTime": 1, "cookTime": 1, "servings": 1,
    "ingredients": 1, "instructions": 1, "tags": 1,
}


async def find_recipes(db, criteria: Dict[str, Any], projection: Optional[Dict[str, int]] = None) -> List[Dict[str, Any]]:
    log.debug("recipe criteria=%s", criteria)
    docs = await db["recipes"].find(criteria, projection).to_list(length=None)
    return [to_jsonable(d) for d in docs]


def _require_fields(payload: RecipeIn) -> None:
    # 빈 문자열/빈 배열도 누락으로 본다
    required = (payload.name, payload.cuisine, payload.ingredients, payload.instructions, payload.tags)
    if any(not v for v in required):
        raise ValidationError("Missing required fields")


async def resolve_cuisine(db, name: str) -> Optional[dict]:
    return await db["cuisines"].find_one({"name": name})


async def resolve_tags(db, names: List[str]) -> List[dict]:
    return await db["tags"].find({"name": {"$in": names}}).to_list(length=None)


async def _resolve_refs(db, payload: RecipeIn) -> Tuple[dict, List[dict]]:
    cuisine_doc = await resolve_cuisine(db, payload.cuisine)
    if not cuisine_doc:
        raise ValidationError("Invalid cuisine")

    # 같은 이름이 두 번 와도 태그 하나로 센다
    wanted = list(dict.fromkeys(payload.tags))
    tag_docs = await resolve_tags(db, wanted)
    if len(tag_docs) != len(wanted):
        raise ValidationError("One or more invalid tags")
    # 요청 순서 유지
    order = {n: i for i, n in enumerate(wanted)}
    tag_docs.sort(key=lambda t: order.get(t["name"], len(order)))
    return cuisine_doc, tag_docs


def _build_document(payload: RecipeIn, cuisine_doc: dict, tag_docs: List[dict]) -> Dict[str, Any]:
    return {
        "name": payload.name,
        "cuisine": snapshot(cuisine_doc),
        "prepTime": payload.prepTime,
        "cookTime": payload.cookTime,
        "servings": payload.servings,
        "ingredients": [i.model_dump() for i in payload.ingredients],
        "instructions": list(payload.instructions),
        "tags": [snapshot(t) for t in tag_docs],
    }


async def create_recipe(db, payload: RecipeIn) -> str:
    _require_fields(payload)
    cuisine_doc, tag_docs = await _resolve_refs(db, payload)

    doc = {"_id": ObjectId(), **_build_document(payload, cuisine_doc, tag_docs)}
    result = await db["recipes"].insert_one(doc)
    log.info("recipe created id=%s name=%s", result.inserted_id, payload.name)
    return str(result.inserted_id)


async def update_recipe(db, recipe_id: str, payload: RecipeIn) -> None:
    _require_fields(payload)
    cuisine_doc, tag_docs = await _resolve_refs(db, payload)

    oid = parse_object_id(recipe_id)
    if oid is None:
        raise NotFoundError("Recipe not found")
    result = await db["recipes"].update_one(
        {"_id": oid},
        {"$set": _build_document(payload, cuisine_doc, tag_docs)},
    )
    if result.matched_count == 0:
        raise NotFoundError("Recipe not found")
    log.info("recipe updated id=%s", recipe_id)


async def delete_recipe(db, recipe_id: str) -> int:
    # 없는 id도 성공 처리 (멱등)
    oid = parse_object_id(recipe_id)
    if oid is None:
        return 0
    result = await db["recipes"].delete_one({"_id": oid})
    return result.deleted_count


async def list_names(db, collection: str) -> List[str]:
    return sorted(await db[collection].distinct("name"))

# app/services/ai_assist.py
# 생성기 결과를 실제 cuisine/tag 문서와 맞춰본 뒤 검색/저장
# - cuisine 불일치: NotFoundError (저장 안 함)
# - tag 불일치: 조용히 버림 (경고 로그만)

from __future__ import annotations
import logging
from typing import Any, Dict, List

from bson import ObjectId

from app.core.errors import NotFoundError
from app.services.criteria import build_ai_criteria
from app.services.recipes import find_recipes, list_names, resolve_cuisine, resolve_tags
from app.services.utils import snapshot

log = logging.getLogger(__name__)


async def ai_search(db, generator, query: str) -> List[Dict[str, Any]]:
    cuisines = await list_names(db, "cuisines")
    tags = await list_names(db, "tags")
    ingredients = sorted(await db["recipes"].distinct("ingredients.name"))

    params = await generator.search_params(query, cuisines, tags, ingredients)
    log.info("ai search q=%r -> %s", query, params.model_dump())

    return await find_recipes(db, build_ai_criteria(params))


async def ai_create_recipe(db, generator, recipe_text: str) -> str:
    cuisines = await list_names(db, "cuisines")
    tags = await list_names(db, "tags")

    generated = await generator.recipe(recipe_text, cuisines, tags)

    cuisine_doc = await resolve_cuisine(db, generated.cuisine)
    if not cuisine_doc:
        log.warning("generator returned unknown cuisine %r", generated.cuisine)
        raise NotFoundError("AI tried to use a cuisine that doesn't exist")

    wanted = list(dict.fromkeys(generated.tags))
    tag_docs = await resolve_tags(db, wanted) if wanted else []
    dropped = set(wanted) - {t["name"] for t in tag_docs}
    if dropped:
        log.warning("dropping unknown generated tags: %s", sorted(dropped))

    doc = {
        "_id": ObjectId(),
        "name": generated.name,
        "cuisine": snapshot(cuisine_doc),
        "prepTime": generated.prepTime,
        "cookTime": generated.cookTime,
        "servings": generated.servings,
        "ingredients": [i.model_dump() for i in generated.ingredients],
        "instructions": list(generated.instructions),
        "tags": [snapshot(t) for t in tag_docs],
    }
    result = await db["recipes"].insert_one(doc)
    log.info("ai recipe created id=%s name=%s", result.inserted_id, generated.name)
    return str(result.inserted_id)

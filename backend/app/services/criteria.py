# app/services/criteria.py
# 검색 파라미터 → Mongo 필터
# - name: 부분 일치(대소문자 무시)
# - tags: 하나라도 포함 ($in, OR)
# - ingredients: 토큰마다 부분 일치하는 재료가 있어야 함 ($and, AND)

from __future__ import annotations
import re
from typing import Any, Dict, Iterable, List, Optional

from app.db.models.schemas import AiSearchParams


def split_csv(raw: Optional[str]) -> List[str]:
    # "popular, spicy,," → ["popular", "spicy"]
    if raw is None:
        return []
    return [t.strip() for t in raw.split(",") if t.strip()]


def _contains_ci(token: str) -> Dict[str, Any]:
    # 사용자 입력은 정규식이 아닌 부분 문자열로 취급
    return {"$regex": re.escape(token), "$options": "i"}


def build_recipe_criteria(
    name: Optional[str] = None,
    tags: Optional[str] = None,
    ingredients: Optional[str] = None,
) -> Dict[str, Any]:
    criteria: Dict[str, Any] = {}

    if name:
        criteria["name"] = _contains_ci(name)

    tag_list = split_csv(tags)
    if tag_list:
        criteria["tags.name"] = {"$in": tag_list}

    # 토큰이 하나도 안 남으면 조건 없음
    tokens = split_csv(ingredients)
    if tokens:
        criteria["$and"] = [{"ingredients.name": _contains_ci(t)} for t in tokens]

    return criteria


def _non_empty(values: Optional[Iterable[str]]) -> List[str]:
    return [v for v in (values or []) if isinstance(v, str) and v]


def build_ai_criteria(params: AiSearchParams) -> Dict[str, Any]:
    """생성기가 뽑은 조건 → 필터 (어휘에서 나온 값이므로 정확 일치)"""
    criteria: Dict[str, Any] = {}

    cuisines = _non_empty(params.cuisines)
    if cuisines:
        criteria["cuisine.name"] = {"$in": cuisines}

    tags = _non_empty(params.tags)
    if tags:
        criteria["tags.name"] = {"$in": tags}

    ingredients = _non_empty(params.ingredients)
    if ingredients:
        criteria["ingredients.name"] = {"$all": ingredients}

    return criteria

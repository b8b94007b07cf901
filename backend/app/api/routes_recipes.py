# app/api/routes_recipes.py
# 레시피 검색/생성/수정/삭제
# 쿼리: name=부분일치, tags=popular,spicy (OR), ingredients=pasta,chicken (AND)

from __future__ import annotations
from typing import Optional
import logging
from fastapi import APIRouter, Depends, Query

from app.core.deps import get_db
from app.core.errors import AppError, InternalError
from app.db.models.schemas import MessageOut, RecipeCreatedOut, RecipeIn, RecipesOut
from app.services.criteria import build_recipe_criteria
from app.services.recipes import (
    SEARCH_PROJECTION, create_recipe, delete_recipe, find_recipes, update_recipe,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("", response_model=RecipesOut)
async def search_recipes(
    name: Optional[str] = Query(None, description="레시피 이름 부분 일치"),
    tags: Optional[str] = Query(None, description="콤마 구분 태그 (하나라도 포함)"),
    ingredients: Optional[str] = Query(None, description="콤마 구분 재료 (전부 포함)"),
    db=Depends(get_db),
):
    criteria = build_recipe_criteria(name=name, tags=tags, ingredients=ingredients)
    try:
        recipes = await find_recipes(db, criteria, SEARCH_PROJECTION)
    except Exception:
        log.exception("recipe search failed criteria=%s", criteria)
        raise InternalError()
    return {"recipes": recipes}


@router.post("", status_code=201, response_model=RecipeCreatedOut)
async def create(payload: RecipeIn, db=Depends(get_db)):
    try:
        recipe_id = await create_recipe(db, payload)
    except AppError:
        raise
    except Exception:
        log.exception("Error creating recipe")
        raise InternalError()
    return {"message": "Recipe created successfully", "recipeId": recipe_id}


@router.put("/{recipe_id}", response_model=MessageOut)
async def update(recipe_id: str, payload: RecipeIn, db=Depends(get_db)):
    try:
        await update_recipe(db, recipe_id, payload)
    except AppError:
        raise
    except Exception:
        log.exception("Error updating recipe %s", recipe_id)
        raise InternalError()
    return {"message": "Recipe updated successfully"}


@router.delete("/{recipe_id}", response_model=MessageOut)
async def delete(recipe_id: str, db=Depends(get_db)):
    try:
        await delete_recipe(db, recipe_id)
    except Exception:
        log.exception("Error deleting recipe %s", recipe_id)
        raise InternalError()
    return {"message": "Recipe deleted successfully"}

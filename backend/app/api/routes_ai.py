# app/api/routes_ai.py
# 자연어 검색 / 자연어 → 레시피 저장

from __future__ import annotations
import logging
from fastapi import APIRouter, Depends, Query

from app.core.deps import get_db, get_generator
from app.core.errors import AppError, InternalError
from app.db.models.schemas import AiRecipeCreatedOut, AiRecipeIn, RecipesOut
from app.services.ai_assist import ai_create_recipe, ai_search
from app.services.generator import GeneratorError, GeneratorNotReady

log = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


@router.get("/recipes", response_model=RecipesOut)
async def search_by_text(
    q: str = Query(..., min_length=1, description="자연어 검색어"),
    db=Depends(get_db),
    generator=Depends(get_generator),
):
    try:
        recipes = await ai_search(db, generator, q)
    except GeneratorNotReady as e:
        log.warning("GeneratorNotReady: %s", e)
        raise InternalError("AI service unavailable")
    except GeneratorError:
        log.exception("Generator error")
        raise InternalError("AI service error")
    except AppError:
        raise
    except Exception:
        log.exception("ai search failed")
        raise InternalError()
    return {"recipes": recipes}


@router.post("/recipes", response_model=AiRecipeCreatedOut)
async def create_from_text(
    payload: AiRecipeIn,
    db=Depends(get_db),
    generator=Depends(get_generator),
):
    try:
        recipe_id = await ai_create_recipe(db, generator, payload.recipeText)
    except GeneratorNotReady as e:
        log.warning("GeneratorNotReady: %s", e)
        raise InternalError("AI service unavailable")
    except GeneratorError:
        log.exception("Generator error")
        raise InternalError("AI service error")
    except AppError:
        raise
    except Exception:
        log.exception("ai recipe creation failed")
        raise InternalError()
    return {"recipeId": recipe_id}

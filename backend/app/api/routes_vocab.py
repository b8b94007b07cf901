# 요리 분류/태그 어휘 조회 — 레시피 작성 폼/AI 프롬프트와 같은 목록

import logging
from fastapi import APIRouter, Depends

from app.core.deps import get_db
from app.core.errors import InternalError
from app.services.recipes import list_names

log = logging.getLogger(__name__)

router = APIRouter(tags=["vocabulary"])


@router.get("/cuisines")
async def list_cuisines(db=Depends(get_db)):
    try:
        names = await list_names(db, "cuisines")
    except Exception:
        log.exception("cuisine listing failed")
        raise InternalError()
    return {"cuisines": names}


@router.get("/tags")
async def list_tags(db=Depends(get_db)):
    try:
        names = await list_names(db, "tags")
    except Exception:
        log.exception("tag listing failed")
        raise InternalError()
    return {"tags": names}

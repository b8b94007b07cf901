# app/services/generator.py
# 자연어 → 검색 조건 / 레시피 (OpenAI Chat Completions)
# - JSON만 수신(response_format=json_object)
# - 출력은 pydantic으로 검증, 형식이 틀리면 GeneratorError

from __future__ import annotations
import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

try:
    from openai import AsyncOpenAI  # v1 SDK
except Exception:
    AsyncOpenAI = None  # type: ignore

from app.core.config import Settings
from app.db.models.schemas import AiSearchParams, GeneratedRecipe

log = logging.getLogger(__name__)


class GeneratorNotReady(Exception):
    # 패키지/키 없음
    pass


class GeneratorError(Exception):
    # 호출 실패 또는 JSON/스키마 불일치
    pass


SEARCH_PROMPT = (
    "You turn a free-text recipe search into structured filters.\n"
    "Return ONE JSON object only, shape: "
    '{{"cuisines": [string], "tags": [string], "ingredients": [string]}}.\n'
    "- Every value MUST be copied exactly from the lists below; never invent values.\n"
    "- Leave a list empty when the query does not mention it.\n"
    "Available cuisines: {cuisines}\n"
    "Available tags: {tags}\n"
    "Available ingredients: {ingredients}\n"
    "Query: {query}\n"
)

RECIPE_PROMPT = (
    "You turn free-text recipe notes into a structured recipe.\n"
    "Return ONE JSON object only, shape: "
    '{{"name": string, "cuisine": string, "prepTime": integer minutes, "cookTime": integer minutes, '
    '"servings": integer, "ingredients": [{{"name": string, "quantity": number, "unit": string}}], '
    '"instructions": [string], "tags": [string]}}.\n'
    "- cuisine MUST be exactly one of: {cuisines}\n"
    "- tags MUST be chosen from: {tags}\n"
    "Recipe text:\n{text}\n"
)


class RecipeGenerator:
    """OpenAI 기반 생성기. 라우터는 app.state.generator 로 주입받는다."""

    def __init__(self, api_key: Optional[str], model: str, timeout: float = 30.0, client: Any = None):
        self.model = model
        self._client = client
        if self._client is None and api_key and AsyncOpenAI is not None:
            self._client = AsyncOpenAI(api_key=api_key, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecipeGenerator":
        return cls(settings.OPENAI_API_KEY, settings.OPENAI_MODEL, settings.OPENAI_TIMEOUT_S)

    def _require_client(self) -> Any:
        if self._client is None:
            if AsyncOpenAI is None:
                raise GeneratorNotReady("openai SDK not installed")
            raise GeneratorNotReady("OPENAI_API_KEY not set")
        return self._client

    async def _complete_json(self, prompt: str) -> Dict[str, Any]:
        client = self._require_client()
        try:
            chat = await client.chat.completions.create(
                model=self.model,
                temperature=0.1,
                messages=[{"role": "user", "content": prompt}],
                response_format={"type": "json_object"},
            )
        except Exception as e:
            raise GeneratorError(f"completion failed: {e}") from e

        text = chat.choices[0].message.content if chat and chat.choices else ""
        if not text:
            raise GeneratorError("empty completion")
        try:
            obj = json.loads(text)
        except json.JSONDecodeError as e:
            raise GeneratorError("completion is not JSON") from e
        if not isinstance(obj, dict):
            raise GeneratorError("completion is not a JSON object")
        return obj

    async def search_params(
        self, query: str, cuisines: List[str], tags: List[str], ingredients: List[str]
    ) -> AiSearchParams:
        prompt = SEARCH_PROMPT.format(
            cuisines=json.dumps(cuisines, ensure_ascii=False),
            tags=json.dumps(tags, ensure_ascii=False),
            ingredients=json.dumps(ingredients, ensure_ascii=False),
            query=query,
        )
        obj = await self._complete_json(prompt)
        try:
            return AiSearchParams.model_validate(obj)
        except PydanticValidationError as e:
            raise GeneratorError(f"bad search params: {e}") from e

    async def recipe(self, text: str, cuisines: List[str], tags: List[str]) -> GeneratedRecipe:
        prompt = RECIPE_PROMPT.format(
            cuisines=json.dumps(cuisines, ensure_ascii=False),
            tags=json.dumps(tags, ensure_ascii=False),
            text=text,
        )
        obj = await self._complete_json(prompt)
        try:
            return GeneratedRecipe.model_validate(obj)
        except PydanticValidationError as e:
            raise GeneratorError(f"bad generated recipe: {e}") from e

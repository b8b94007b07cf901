# app/db/models/schemas.py
# Pydantic 모델 정의
# RecipeIn: 생성/수정 입력 (필수 여부는 서비스에서 검사 → "Missing required fields")
# AiSearchParams / GeneratedRecipe: 생성기 출력 검증용
from __future__ import annotations
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class Ingredient(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    quantity: Optional[Union[int, float, str]] = None
    unit: Optional[str] = None


# # 레시피 생성/수정 입력 — 원본 폼과 같은 camelCase 필드명
class RecipeIn(BaseModel):
    name: Optional[str] = None
    cuisine: Optional[str] = None                 # 요리 분류 이름 (정확 일치로 조회)
    prepTime: Optional[int] = None
    cookTime: Optional[int] = None
    servings: Optional[int] = None
    ingredients: Optional[List[Ingredient]] = None
    instructions: Optional[List[str]] = None
    tags: Optional[List[str]] = None              # 태그 이름 목록


class RecipeCreatedOut(BaseModel):
    message: str
    recipeId: str


class MessageOut(BaseModel):
    message: str


class RecipesOut(BaseModel):
    recipes: List[Dict[str, Any]] = Field(default_factory=list)


# # 자연어 → 레시피 생성 입력
class AiRecipeIn(BaseModel):
    recipeText: str = Field(..., min_length=1)


class AiRecipeCreatedOut(BaseModel):
    recipeId: str


# # 생성기 출력: 검색 조건 (어휘 목록에서 뽑은 값이어야 함)
class AiSearchParams(BaseModel):
    cuisines: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    ingredients: Optional[List[str]] = None


# # 생성기 출력: 레시피 (cuisine/tags는 이름 — 저장 전 실제 문서로 치환)
class GeneratedRecipe(BaseModel):
    name: str
    cuisine: str
    prepTime: Optional[int] = None
    cookTime: Optional[int] = None
    servings: Optional[int] = None
    ingredients: List[Ingredient] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)


# # 회원가입/로그인
class UserIn(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class LoginIn(BaseModel):
    email: str
    password: str


class UserCreatedOut(BaseModel):
    message: str
    userId: str


class LoginOut(BaseModel):
    accessToken: str


class ProtectedOut(BaseModel):
    message: str
    tokenData: Dict[str, Any]

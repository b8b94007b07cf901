"""
Pytest configuration and shared fixtures
"""

import asyncio
import os

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

# Set test environment
os.environ["TOKEN_SECRET"] = "test-secret-key-for-recipe-book-tests"
os.environ["BCRYPT_ROUNDS"] = "4"

from app.core.config import Settings
from app.db.models.schemas import AiSearchParams, GeneratedRecipe
from app.main import create_app

TEST_SECRET = os.environ["TOKEN_SECRET"]


class FakeGenerator:
    """Stands in for the OpenAI-backed generator; returns canned results."""

    def __init__(self):
        self.search_result = AiSearchParams()
        self.recipe_result = None
        self.calls = []

    async def search_params(self, query, cuisines, tags, ingredients):
        self.calls.append(("search_params", query, cuisines, tags, ingredients))
        return self.search_result

    async def recipe(self, text, cuisines, tags):
        self.calls.append(("recipe", text, cuisines, tags))
        return self.recipe_result


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def test_settings():
    return Settings(TOKEN_SECRET=TEST_SECRET, BCRYPT_ROUNDS=4, MONGO_DB="recipe_book_test")


@pytest.fixture
def db():
    return AsyncMongoMockClient()["recipe_book_test"]


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def app(test_settings, db, generator):
    # lifespan은 돌리지 않고 주입 대상만 채운다
    application = create_app(test_settings)
    application.state.db = db
    application.state.generator = generator
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def vocab(db):
    """Seed cuisines and tags; returns name -> _id maps."""
    cuisines = {name: ObjectId() for name in ("Italian", "Chinese", "Mexican")}
    tags = {name: ObjectId() for name in ("popular", "spicy", "quick", "vegetarian")}
    run(db["cuisines"].insert_many([{"_id": i, "name": n} for n, i in cuisines.items()]))
    run(db["tags"].insert_many([{"_id": i, "name": n} for n, i in tags.items()]))
    return {"cuisines": cuisines, "tags": tags}


def _recipe_doc(name, cuisine, tags, ingredients, vocab):
    return {
        "_id": ObjectId(),
        "name": name,
        "cuisine": {"_id": vocab["cuisines"][cuisine], "name": cuisine},
        "prepTime": 10,
        "cookTime": 20,
        "servings": 2,
        "ingredients": [{"name": i, "quantity": 1, "unit": "pc"} for i in ingredients],
        "instructions": ["Cook it."],
        "tags": [{"_id": vocab["tags"][t], "name": t} for t in tags],
    }


@pytest.fixture
def recipes(db, vocab):
    """A small catalog for search tests."""
    docs = [
        _recipe_doc("Spaghetti Carbonara", "Italian", ["popular"], ["Spaghetti", "Egg", "Pancetta"], vocab),
        _recipe_doc("Kung Pao Chicken", "Chinese", ["spicy", "popular"], ["Chicken Breast", "Peanuts", "Chili"], vocab),
        _recipe_doc("Chicken Tacos", "Mexican", ["quick"], ["Chicken Thigh", "Tortilla", "Salsa"], vocab),
        _recipe_doc("Margherita Pizza", "Italian", ["vegetarian"], ["Flour", "Tomato", "Mozzarella"], vocab),
    ]
    run(db["recipes"].insert_many(docs))
    return {d["name"]: d for d in docs}


@pytest.fixture
def sample_recipe_request():
    """Valid create/update body against the seeded vocabulary"""
    return {
        "name": "Penne Arrabbiata",
        "cuisine": "Italian",
        "prepTime": 10,
        "cookTime": 15,
        "servings": 4,
        "ingredients": [
            {"name": "Penne", "quantity": 400, "unit": "g"},
            {"name": "Chili", "quantity": 2, "unit": "pc"},
        ],
        "instructions": ["Boil pasta.", "Make sauce.", "Combine."],
        "tags": ["spicy", "quick"],
    }


@pytest.fixture
def sample_generated_recipe():
    return GeneratedRecipe(
        name="Mapo Tofu",
        cuisine="Chinese",
        prepTime=10,
        cookTime=15,
        servings=3,
        ingredients=[{"name": "Tofu", "quantity": 400, "unit": "g"}],
        instructions=["Fry the sauce.", "Add tofu."],
        tags=["spicy", "made-up-tag"],
    )

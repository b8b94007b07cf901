import re

from app.db.models.schemas import AiSearchParams
from app.services.criteria import build_ai_criteria, build_recipe_criteria, split_csv


def test_no_params_means_no_clauses():
    assert build_recipe_criteria() == {}
    assert build_recipe_criteria(name="", tags=None, ingredients=None) == {}


def test_name_is_case_insensitive_substring():
    c = build_recipe_criteria(name="carbo")
    assert c == {"name": {"$regex": "carbo", "$options": "i"}}


def test_name_special_chars_are_literal():
    c = build_recipe_criteria(name="mac & cheese (v2)")
    pattern = re.compile(c["name"]["$regex"], re.I)
    assert pattern.search("Best MAC & CHEESE (v2) ever")
    assert not pattern.search("mac & cheese v2")


def test_tags_are_or_across_set():
    c = build_recipe_criteria(tags="popular,spicy")
    assert c == {"tags.name": {"$in": ["popular", "spicy"]}}


def test_ingredients_are_and_of_patterns():
    c = build_recipe_criteria(ingredients="pasta, Chicken")
    assert c == {
        "$and": [
            {"ingredients.name": {"$regex": "pasta", "$options": "i"}},
            {"ingredients.name": {"$regex": "Chicken", "$options": "i"}},
        ]
    }


def test_ingredients_with_no_tokens_adds_no_clause():
    assert build_recipe_criteria(ingredients=",, ,") == {}
    assert build_recipe_criteria(tags=",") == {}


def test_all_params_combine():
    c = build_recipe_criteria(name="soup", tags="quick", ingredients="leek")
    assert set(c) == {"name", "tags.name", "$and"}


def test_split_csv():
    assert split_csv(None) == []
    assert split_csv(" a ,b,,c ") == ["a", "b", "c"]


def test_ai_criteria_uses_exact_membership():
    params = AiSearchParams(cuisines=["Italian"], tags=["quick", "spicy"], ingredients=["Egg", "Flour"])
    assert build_ai_criteria(params) == {
        "cuisine.name": {"$in": ["Italian"]},
        "tags.name": {"$in": ["quick", "spicy"]},
        "ingredients.name": {"$all": ["Egg", "Flour"]},
    }


def test_ai_criteria_skips_empty_lists():
    assert build_ai_criteria(AiSearchParams(cuisines=[], tags=None)) == {}
    assert build_ai_criteria(AiSearchParams(ingredients=[""])) == {}

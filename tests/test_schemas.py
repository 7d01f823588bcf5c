"""Tests for recipe request/response schemas."""

import pytest
from pydantic import ValidationError

from recipes_api.app.schemas.recipe import RecipeCreate, RecipeRead, RecipeUpdate


def test_create_ignores_unknown_fields():
    recipe = RecipeCreate.model_validate({"name": "Toast", "ingredients": ["Bread"], "id": "abc"})

    assert recipe.model_dump() == {"name": "Toast", "ingredients": ["Bread"]}


@pytest.mark.parametrize(
    "data",
    [
        {"name": "Toast"},
        {"ingredients": ["Bread"]},
        {"name": "", "ingredients": ["Bread"]},
        {"name": "Toast", "ingredients": []},
        {"name": "Toast", "ingredients": ["Bread", ""]},
    ],
)
def test_create_rejects_invalid(data):
    with pytest.raises(ValidationError):
        RecipeCreate.model_validate(data)


def test_update_requires_id():
    with pytest.raises(ValidationError):
        RecipeUpdate.model_validate({"name": "Toast", "ingredients": ["Bread"]})


def test_read_has_exactly_three_keys():
    recipe = RecipeRead(id="1", name="Toast", ingredients=["Bread"])

    assert set(recipe.model_dump()) == {"id", "name", "ingredients"}

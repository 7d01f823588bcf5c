"""
Pydantic models for recipe data.

``RecipeBase`` holds the fields every recipe carries.  ``RecipeCreate``
is the body of ``POST /recipes`` (the server assigns the id, so any id
sent by the client is ignored), ``RecipeUpdate`` is the body of
``PUT /recipes/{id}`` and must repeat the id, and ``RecipeRead`` is what
the API returns.
"""

from typing import Annotated, List

from pydantic import BaseModel, Field


NonEmptyStr = Annotated[str, Field(min_length=1)]


class RecipeBase(BaseModel):
    name: NonEmptyStr = Field(..., examples=["Fried Rice"])
    ingredients: List[NonEmptyStr] = Field(
        ...,
        min_length=1,
        examples=[["Rice", "Soy Sauce", "Egg", "Sausage"]],
    )


class RecipeCreate(RecipeBase):
    """Schema for creating a recipe."""
    pass


class RecipeUpdate(RecipeBase):
    """Schema for replacing a recipe.

    The ``id`` must equal the id in the request path.
    """

    id: NonEmptyStr


class RecipeRead(RecipeBase):
    """Schema for reading a recipe from the API."""

    id: str

    model_config = {
        "from_attributes": True,
    }

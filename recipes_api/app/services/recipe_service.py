"""
In-memory storage for recipes.

``RecipeStore`` keeps recipes in insertion order and provides the CRUD
operations used by the API.  Nothing is persisted; a store starts empty
(or with ``SEED_RECIPES``) every time the application is created.

Each operation either completes or raises before touching the
collection, so a failed request never leaves a partial change behind.
The store is owned by the application instance and handed to the
endpoints through a dependency; there is no module-level collection.
"""

from __future__ import annotations

import logging
import uuid
from typing import Dict, Iterable, List, Optional

from recipes_api.app.core.errors import RecipeIdMismatchError, RecipeNotFoundError
from recipes_api.app.schemas.recipe import RecipeCreate, RecipeRead, RecipeUpdate


logger = logging.getLogger(__name__)


SEED_RECIPES = (
    RecipeCreate(name="boiled white rice", ingredients=["1 cup white rice", "2 cups water", "pinch of salt"]),
    RecipeCreate(name="milkshake", ingredients=["2 tbsp cocoa", "2 cups vanilla ice cream", "1 cup milk"]),
)


class RecipeStore:
    """Ordered in-memory collection of recipes."""

    def __init__(self, recipes: Optional[Iterable[RecipeCreate]] = None) -> None:
        # dicts keep insertion order, which is the order List returns
        self._recipes: Dict[str, RecipeRead] = {}
        for data in recipes or ():
            self.create_recipe(data)

    def __len__(self) -> int:
        return len(self._recipes)

    def __contains__(self, recipe_id: object) -> bool:
        return recipe_id in self._recipes

    @staticmethod
    def _new_id() -> str:
        return uuid.uuid4().hex

    def list_recipes(self) -> List[RecipeRead]:
        """Return every stored recipe, oldest first.

        Copies are returned so callers cannot modify stored records.
        """
        return [recipe.model_copy(deep=True) for recipe in self._recipes.values()]

    def get_recipe(self, recipe_id: str) -> RecipeRead:
        """Return the recipe with ``recipe_id`` or raise ``RecipeNotFoundError``."""
        recipe = self._recipes.get(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe.model_copy(deep=True)

    def create_recipe(self, data: RecipeCreate) -> RecipeRead:
        """Store a new recipe under a freshly generated id and return it."""
        recipe_id = self._new_id()
        while recipe_id in self._recipes:
            recipe_id = self._new_id()
        recipe = RecipeRead(id=recipe_id, name=data.name, ingredients=list(data.ingredients))
        self._recipes[recipe_id] = recipe
        logger.info("Created recipe %s (%s)", recipe_id, recipe.name)
        return recipe.model_copy(deep=True)

    def update_recipe(self, recipe_id: str, data: RecipeUpdate) -> RecipeRead:
        """Replace the name and ingredients of an existing recipe.

        The recipe keeps its id and its position in the collection.
        Raises ``RecipeIdMismatchError`` when ``data.id`` differs from
        ``recipe_id`` and ``RecipeNotFoundError`` when no such recipe
        exists.
        """
        if data.id != recipe_id:
            raise RecipeIdMismatchError(recipe_id, data.id)
        if recipe_id not in self._recipes:
            raise RecipeNotFoundError(recipe_id)
        recipe = RecipeRead(id=recipe_id, name=data.name, ingredients=list(data.ingredients))
        self._recipes[recipe_id] = recipe
        logger.info("Updated recipe %s", recipe_id)
        return recipe.model_copy(deep=True)

    def delete_recipe(self, recipe_id: str) -> None:
        """Remove a recipe.  Raises ``RecipeNotFoundError`` if it does not exist."""
        if recipe_id not in self._recipes:
            raise RecipeNotFoundError(recipe_id)
        del self._recipes[recipe_id]
        logger.info("Deleted recipe %s", recipe_id)

    def clear(self) -> None:
        self._recipes.clear()

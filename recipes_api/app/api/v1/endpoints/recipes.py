"""
Recipe endpoints for API v1.

These routes expose a CRUD API over the application's ``RecipeStore``:
list, retrieve, create, replace and delete.  The store is looked up on
``app.state`` by the ``get_store`` dependency so each application
instance (and each test) works on its own collection.

Status codes: 200 for reads, 201 for create, 204 with an empty body for
update and delete.  Invalid bodies and updates of unknown ids are
answered with 400; retrieving or deleting an unknown id gives 404.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from recipes_api.app.core.errors import RecipeIdMismatchError, RecipeNotFoundError
from recipes_api.app.schemas.recipe import RecipeCreate, RecipeRead, RecipeUpdate
from recipes_api.app.services.recipe_service import RecipeStore

router = APIRouter()

logger = logging.getLogger(__name__)


def get_store(request: Request) -> RecipeStore:
    """Return the store owned by the running application."""
    return request.app.state.recipe_store


@router.get("", response_model=List[RecipeRead])
@router.get("/", response_model=List[RecipeRead], include_in_schema=False)
async def list_recipes(store: RecipeStore = Depends(get_store)) -> List[RecipeRead]:
    """Return all recipes in the order they were created."""
    return store.list_recipes()


@router.get("/{recipe_id}", response_model=RecipeRead)
async def get_recipe(recipe_id: str, store: RecipeStore = Depends(get_store)) -> RecipeRead:
    """Retrieve a single recipe by ID.

    Returns HTTP 404 if the recipe is not found.
    """
    try:
        return store.get_recipe(recipe_id)
    except RecipeNotFoundError as exc:
        raise HTTPException(status_code=exc.status_code, detail="Recipe not found")


@router.post("", response_model=RecipeRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=RecipeRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_recipe(
    recipe_in: RecipeCreate,
    store: RecipeStore = Depends(get_store),
) -> RecipeRead:
    """Create a new recipe; the server assigns its ``id``."""
    return store.create_recipe(recipe_in)


@router.put("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_recipe(
    recipe_id: str,
    recipe_in: RecipeUpdate,
    store: RecipeStore = Depends(get_store),
) -> None:
    """Replace the name and ingredients of an existing recipe.

    The body ``id`` must match the path.  An unknown id is a client
    error (400), not a 404, for compatibility with existing clients.
    """
    try:
        store.update_recipe(recipe_id, recipe_in)
    except (RecipeIdMismatchError, RecipeNotFoundError) as exc:
        logger.warning("Rejected update of recipe %s: %s", recipe_id, exc.detail)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.detail)
    return None


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(recipe_id: str, store: RecipeStore = Depends(get_store)) -> None:
    """Delete a recipe.  Returns HTTP 404 if it does not exist."""
    try:
        store.delete_recipe(recipe_id)
    except RecipeNotFoundError as exc:
        logger.warning("Rejected delete of unknown recipe %s", recipe_id)
        raise HTTPException(status_code=exc.status_code, detail="Recipe not found")
    return None

"""
Error types raised by the recipe store and their HTTP mapping.

The store raises the exceptions defined here; endpoints translate them
into ``HTTPException`` with the status code the route promises.  Body
validation is done by pydantic before a handler runs, and the handler
registered by ``register_exception_handlers`` reports those failures
as ``400 Bad Request`` instead of FastAPI's default 422.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class RecipeError(Exception):
    """Base class for recipe store errors."""

    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid recipe request"

    def __init__(self, detail: str | None = None) -> None:
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class RecipeNotFoundError(RecipeError):
    """No recipe with the requested id exists."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Recipe not found"

    def __init__(self, recipe_id: str) -> None:
        self.recipe_id = recipe_id
        super().__init__(f"Recipe {recipe_id!r} not found")


class RecipeIdMismatchError(RecipeError):
    """The id in the request body differs from the id in the path."""

    def __init__(self, path_id: str, body_id: str) -> None:
        self.path_id = path_id
        self.body_id = body_id
        super().__init__(
            f"Request path id ({path_id!r}) and request body id ({body_id!r}) must match"
        )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the application's exception handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

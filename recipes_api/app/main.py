"""
Main entrypoint for the Recipes API.

This module assembles the FastAPI application, sets up logging and
includes the versioned router.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``, so it can be served directly::

    uvicorn recipes_api.app.main:app --reload

Each application owns its own ``RecipeStore`` (kept on
``app.state.recipe_store``).  Pass a store to ``create_app`` to share
or pre-populate one, e.g. in tests.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.recipe_service import SEED_RECIPES, RecipeStore


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RecipeStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the module-level settings
        read from the environment.
    store : Optional[RecipeStore]
        Store backing the recipe endpoints.  A new one (seeded when
        ``settings.seed_recipes`` is set) is created if omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so the store can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if store is None:
        store = RecipeStore(SEED_RECIPES if settings.seed_recipes else None)
    app.state.recipe_store = store
    app.state.settings = settings

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info("%s %s ready with %d recipe(s)", settings.project_name, settings.api_version, len(store))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

"""
Top‑level router for version 1 of the API.

When new resources are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import recipes

router = APIRouter()

router.include_router(recipes.router, prefix="/recipes", tags=["recipes"])

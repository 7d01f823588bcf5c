"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from recipes_api.app.core.config import Settings
from recipes_api.app.main import create_app
from recipes_api.app.services.recipe_service import RecipeStore


@pytest.fixture
def store():
    """Empty store, fresh for each test."""
    return RecipeStore()


@pytest.fixture
def app(store):
    return create_app(Settings(api_prefix="", seed_recipes=False), store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def fried_rice():
    return {
        "name": "Fried Rice",
        "ingredients": ["Rice", "Soy Sauce", "Egg", "Sausage"],
    }

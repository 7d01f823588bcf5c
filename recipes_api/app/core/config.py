"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all.  Values are read when a
``Settings`` instance is created, which lets tests build their own
instance after patching the environment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Recipes API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When unset, logs only go to the
    # console.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Prefix under which the recipe routes are mounted.  Empty by
    # default so the collection lives at ``/recipes``; set e.g.
    # ``API_PREFIX=/api/v1`` to version the paths.
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "").rstrip("/"))

    # Start the store with a couple of sample recipes.
    seed_recipes: bool = field(default_factory=lambda: _env_flag("SEED_RECIPES"))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()

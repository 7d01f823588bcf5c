"""
Application package initializer.

The recipes service is organised the same way a larger API would be:
configuration and logging in ``core``, pydantic models in ``schemas``,
the in-memory store in ``services`` and the HTTP routes under
``api/v1``.
"""

from .main import app  # noqa: F401

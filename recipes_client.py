"""Recipes API client.

A thin wrapper around the recipes HTTP API built on the ``requests``
library.  Every public method returns a ``(data, error)`` tuple: on
success ``error`` is ``None``; on failure ``data`` is ``None`` (or
``False`` for operations without a payload) and ``error`` is a
dictionary with ``status_code`` and ``message`` keys.  Network errors
are reported the same way with ``status_code`` set to ``None``, so
callers never have to catch ``requests`` exceptions.

Example::

    api = RecipesAPI(base_url="http://localhost:8080")
    recipe, error = api.create_recipe("Fried Rice", ["Rice", "Egg"])
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RecipesAPI:
    """Client for the recipes API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            prefix: Path prefix the recipe routes are mounted under
                (``API_PREFIX`` on the server side).
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns a tuple ``(data, error)`` where ``data`` is the parsed
        JSON body (``None`` for empty responses such as 204).
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    message = exc.response.text
                else:
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Recipe operations
    # ------------------------------------------------------------------
    def list_recipes(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all recipes.  Returns an empty list on error."""
        data, error = self._request("GET", "/recipes")
        if error:
            return [], error
        return data or [], None

    def get_recipe(self, recipe_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/recipes/{recipe_id}")

    def create_recipe(
        self, name: str, ingredients: Sequence[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a recipe and return it as stored, including its ``id``."""
        return self._request(
            "POST", "/recipes", json_body={"name": name, "ingredients": list(ingredients)}
        )

    def update_recipe(
        self, recipe_id: str, name: str, ingredients: Sequence[str]
    ) -> Tuple[bool, Optional[Error]]:
        """Replace a recipe's name and ingredients.

        Returns ``(True, None)`` on success.
        """
        _, error = self._request(
            "PUT",
            f"/recipes/{recipe_id}",
            json_body={"id": recipe_id, "name": name, "ingredients": list(ingredients)},
        )
        return error is None, error

    def delete_recipe(self, recipe_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/recipes/{recipe_id}")
        return error is None, error

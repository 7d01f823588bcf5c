"""
Service layer.

``RecipeStore`` keeps recipes in memory.  Handlers receive it through a
dependency, so it can be replaced by a persistent implementation
without changing the API handlers.
"""

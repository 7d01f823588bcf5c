"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store so the HTTP representation can
change without touching storage.
"""

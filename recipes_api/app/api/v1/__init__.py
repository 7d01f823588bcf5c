"""
Version 1 of the API.

Breaking changes to the recipe contract should go into a new version
subpackage (e.g. ``v2``).
"""

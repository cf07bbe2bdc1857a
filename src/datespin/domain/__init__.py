"""Domain layer: step units, text patterns, and errors.

This layer depends only on stdlib, dateutil, and pydantic.
It must never import from core, services, commands, or config.
"""

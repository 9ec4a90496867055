"""Domain layer: scalar definitions, conversion rules, and node models.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""

"""Domain layer: validation results, validators, and step definitions.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""

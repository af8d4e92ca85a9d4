"""Domain layer — type descriptors, name resolution, format mini-language.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

"""Domain layer — references, target types, and declaration rendering.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

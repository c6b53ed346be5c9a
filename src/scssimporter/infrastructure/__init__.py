"""Infrastructure layer — filesystem probing, packages, manifests, temp area.

This layer depends on stdlib and third-party libs (structlog, ruamel.yaml).
It must never import from services, commands, or output.
"""

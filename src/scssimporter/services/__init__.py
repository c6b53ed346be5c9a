"""Service layer — the resolution engine and host adapters.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""

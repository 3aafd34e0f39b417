"""Service layer — command pipeline and the ServiceResult adapter.

Services may import from domain, config, and infrastructure layers.
They must never import from commands or output.
"""

"""Domain layer — stroke table, interleaving, and the reduction cascade.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

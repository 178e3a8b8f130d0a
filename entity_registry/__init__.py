"""
Entity Registry

A keyed, type-preserving container that maps string identifiers to entities
through unforgeable per-entry handles.
"""

from .entities import EntityRegistry, Handle

__version__ = "0.1.0"

__all__ = [
    "EntityRegistry",
    "Handle",
]

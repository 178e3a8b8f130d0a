"""
Entities Module - Name-addressed entity storage behind opaque handles

Enables lookups like:
- "jack" -> Handle('jack')#1 -> {"email": "jack@example.com"}
"""

from .entity_registry import EntityRegistry
from .handle import Handle

__all__ = [
    "EntityRegistry",
    "Handle",
]

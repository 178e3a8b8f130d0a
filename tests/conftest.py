"""
Pytest configuration and fixtures for Entity Registry tests
"""

import pytest

from entity_registry import EntityRegistry


@pytest.fixture
def empty_registry():
    """An empty registry"""
    return EntityRegistry()


@pytest.fixture
def registry():
    """Registry pre-populated with {a: 10, b: 20}"""
    return EntityRegistry({"a": 10, "b": 20})


@pytest.fixture
def people():
    """Registry of dict entities, as an embedding application would store them"""
    return EntityRegistry({
        "jack": {"name": "Jack Luo", "platform": "gmail"},
        "ana": {"name": "Ana Ruiz", "platform": "notion"},
        "li": {"name": "Li Wei", "platform": "gmail"},
    })

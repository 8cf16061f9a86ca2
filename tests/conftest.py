"""Shared pytest fixtures"""

import pytest

from jsonapi_client import create_manager


@pytest.fixture
def manager():
    """Factory manager with all built-in types"""
    return create_manager()


@pytest.fixture
def to_many(manager):
    """Relationship whose data is an identifier collection"""
    return manager.make(
        "Relationship",
        {"data": [{"type": "comments", "id": "5"}, {"type": "comments", "id": "12"}]},
    )


@pytest.fixture
def to_one(manager):
    """Relationship whose data is a single identifier"""
    return manager.make("Relationship", {"data": {"type": "people", "id": "9"}})

"""
Pytest configuration and shared fixtures.

Provides common fixtures for testing the Online Library application.
"""

import os
import sys

import mongomock
import pytest
from unittest.mock import MagicMock

# Add server directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from domain.models import Book, LibraryUser  # noqa: E402
from repositories.mongo_data_access import MongoDataAccess  # noqa: E402


@pytest.fixture
def mongo_db():
    """In-memory MongoDB database."""
    client = mongomock.MongoClient()
    yield client["test_library"]
    client.close()


@pytest.fixture
def data_access(mongo_db):
    """Data access backed by the in-memory database."""
    return MongoDataAccess(mongo_db)


@pytest.fixture
def failing_collection():
    """Collection whose every call fails like an unreachable server."""
    from pymongo.errors import ServerSelectionTimeoutError

    collection = MagicMock()
    error = ServerSelectionTimeoutError("localhost:27017: connection refused")
    for name in ("find", "find_one", "count_documents", "replace_one", "delete_one", "create_index"):
        getattr(collection, name).side_effect = error
    return collection


@pytest.fixture
def failing_data_access(failing_collection):
    """Data access whose store is down."""
    database = MagicMock()
    database.__getitem__.return_value = failing_collection
    return MongoDataAccess(database)


@pytest.fixture
def sample_book():
    """Sample book for testing."""
    return Book(
        title="The Pragmatic Programmer",
        author="Andrew Hunt",
        isbn="978-0201616224",
        publisher="Addison-Wesley",
        publication_year=1999,
        category="Software",
        total_copies=3,
        available_copies=3,
    )


@pytest.fixture
def sample_user():
    """Sample library user for testing."""
    return LibraryUser(username="alice", email="alice@example.org", display_name="Alice")


@pytest.fixture
def make_books(data_access):
    """Save `count` books titled 'Book 00', 'Book 01', ..."""

    def _make(count):
        return [data_access.save(Book(title=f"Book {i:02d}", author="Anon")) for i in range(count)]

    return _make

"""Shared fixtures: an in-memory Mongo collection and an app wired to it."""
import mongomock
import pytest

from book_catalog import create_app
from book_catalog.repository import BookRepository
from book_catalog.store import ensure_collection

TEST_CONFIG = {
    "TESTING": True,
    "SECRET_KEY": "test-secret",
    "FORCE_HTTPS": False,
    "SEED_ON_STARTUP": False,
}


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def collection(mongo_client):
    return ensure_collection(mongo_client, "bookcat-test", "books")


@pytest.fixture
def repo(collection):
    return BookRepository(collection)


@pytest.fixture
def app(repo):
    return create_app(TEST_CONFIG, repository=repo)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_book():
    return {
        "id": "b1",
        "title": "Dune",
        "author": "Frank Herbert",
        "edition": "978-0-441-17271-9",
        "pages": "412",
        "year": "1965",
    }

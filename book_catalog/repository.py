"""
Data access for the book collection.

``BookRepository`` wraps one pymongo ``Collection`` and owns the mapping
between wire and stored field names (see ``models``). Store failures are
logged here and re-raised as ``StoreError`` so handlers only ever see the
catalog's own error types.

Create and update are two round trips each (find-then-insert,
update-then-read) with no transaction around them. Two concurrent creates
with the same ``id`` can both pass the existence check, and a delete that
lands between an update and its read-back turns the update into an error.
"""
import logging
from typing import Dict, Iterable, List, Optional

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .errors import (
    BookNotFoundError, BookValidationError, DuplicateBookError, SeedIntegrityError,
    StartupError, StoreError
)
from .models import Book, BookPatch

logger = logging.getLogger(__name__)


class BookRepository:
    def __init__(self, collection: Collection):
        self.collection = collection

    # --- Seeding ---
    def seed(self, books: Iterable[Book]) -> int:
        """Insert each fixture book unless an identical document exists.

        Matching is on every stored field, so editing a fixture value makes
        the next start insert a second copy. More than one match for a
        fixture means the collection is corrupt. Returns the number of
        inserted books.
        """
        inserted = 0
        for book in books:
            doc = book.to_document()
            try:
                matches = list(self.collection.find(doc))
                if len(matches) > 1:
                    raise SeedIntegrityError(
                        f"Found {len(matches)} documents matching fixture {book.id!r}")
                if matches:
                    logger.info("Fixture %s already present (%s)", book.id, matches[0].get("_id"))
                    continue
                result = self.collection.insert_one(doc)
            except PyMongoError as e:
                raise StartupError(f"Seeding fixture {book.id!r} failed: {e}") from e
            logger.info("Inserted fixture %s as %s", book.id, result.inserted_id)
            inserted += 1
        return inserted

    # --- Reads ---
    def list_all(self) -> List[Book]:
        try:
            docs = list(self.collection.find({}))
        except PyMongoError as e:
            logger.error("Error listing books: %s", e)
            raise StoreError("Failed to fetch books") from e
        return [Book.from_document(doc) for doc in docs]

    def list_distinct_authors(self) -> List[Dict[str, str]]:
        authors = dict.fromkeys(book.author for book in self.list_all())
        return [{"author_name": author} for author in authors]

    def list_distinct_years(self) -> List[Dict[str, str]]:
        years = dict.fromkeys(book.year for book in self.list_all())
        return [{"year": year} for year in years]

    def find_by_id(self, book_id: str) -> Optional[Book]:
        try:
            doc = self.collection.find_one({"id": book_id})
        except PyMongoError as e:
            logger.error("Error fetching book with ID %s: %s", book_id, e)
            raise StoreError("Failed to fetch book") from e
        return Book.from_document(doc) if doc is not None else None

    # --- Writes ---
    def insert(self, book: Book) -> str:
        """Store a new book and return the store-assigned id.

        ``book.store_id`` is set on success.
        """
        if not book.id:
            raise BookValidationError("Book ID is required")
        try:
            existing = self.find_by_id(book.id)
        except StoreError as e:
            raise StoreError("Failed to create book due to a database error") from e
        if existing is not None:
            raise DuplicateBookError(book.id)

        try:
            result = self.collection.insert_one(book.to_document())
        except PyMongoError as e:
            logger.error("Error inserting book %s: %s", book.id, e)
            raise StoreError("Failed to create book") from e
        book.store_id = str(result.inserted_id)
        logger.info("Inserted book %s as %s", book.id, book.store_id)
        return book.store_id

    def update_by_id(self, book_id: str, patch: BookPatch) -> Book:
        """Apply ``patch`` to the book with ``book_id`` and return it re-read."""
        if patch.is_empty():
            raise BookValidationError("No valid fields provided for update")
        try:
            result = self.collection.update_one({"id": book_id}, {"$set": patch.to_update()})
        except PyMongoError as e:
            logger.error("Error updating book with ID %s: %s", book_id, e)
            raise StoreError("Failed to update book") from e
        if result.matched_count == 0:
            raise BookNotFoundError(book_id)

        try:
            book = self.find_by_id(book_id)
        except StoreError as e:
            raise StoreError("Failed to retrieve updated book details") from e
        if book is None:
            logger.error("Book with ID %s not found after update", book_id)
            raise StoreError("Failed to retrieve updated book details")
        return book

    def delete_by_id(self, book_id: str) -> bool:
        try:
            result = self.collection.delete_one({"id": book_id})
        except PyMongoError as e:
            logger.error("Error deleting book with ID %s: %s", book_id, e)
            raise StoreError("Failed to delete book") from e
        return result.deleted_count > 0

    def close(self):
        self.collection.database.client.close()

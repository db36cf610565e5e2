"""
Error taxonomy for the catalog.

Request-scoped errors carry the HTTP status they map to and a short public
message; the API blueprint turns them into ``{"error": message}`` bodies.
``StartupError`` is never mapped to HTTP: it stops the process.
"""


class CatalogError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class BookValidationError(CatalogError):
    status_code = 400
    message = "Invalid request payload"


class DuplicateBookError(CatalogError):
    status_code = 409

    def __init__(self, book_id):
        super().__init__(f"Book with ID {book_id} already exists")
        self.book_id = book_id


class BookNotFoundError(CatalogError):
    status_code = 404

    def __init__(self, book_id):
        super().__init__(f"Book not found with ID {book_id}")
        self.book_id = book_id


class StoreError(CatalogError):
    """Any failure talking to the document store during a request."""

    status_code = 500
    message = "Database error"


class StartupError(Exception):
    """Connect, ensure-collection or seed failed; the service cannot run."""


class SeedIntegrityError(StartupError):
    pass

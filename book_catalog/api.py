"""
JSON REST API under /api/books.

Status codes:
    GET    /api/books        200
    POST   /api/books        201 | 400 | 409 | 500
    GET    /api/books/<id>   200 | 404 | 500
    PUT    /api/books/<id>   200 | 400 | 404 | 500
    DELETE /api/books/<id>   200 | 404 | 500
"""
import logging

from flask import Blueprint, jsonify, request

from .errors import BookNotFoundError, CatalogError
from .models import Book, BookPatch
from .repository import BookRepository

logger = logging.getLogger(__name__)


def api_error(message, status=400):
    return jsonify({"error": message}), status


def json_body():
    # None for a missing or malformed body; models reject non-objects
    return request.get_json(silent=True)


def create_api_blueprint(repo: BookRepository) -> Blueprint:
    api = Blueprint('api', __name__, url_prefix='/api')

    @api.errorhandler(CatalogError)
    def handle_catalog_error(e):
        return api_error(e.message, e.status_code)

    @api.route('/books', methods=['GET'])
    def list_books():
        return jsonify([book.to_wire() for book in repo.list_all()])

    @api.route('/books', methods=['POST'])
    def create_book():
        book = Book.from_payload(json_body())
        repo.insert(book)
        return jsonify(book.to_wire(include_store_id=True)), 201

    @api.route('/books/<book_id>', methods=['GET'])
    def get_book(book_id):
        book = repo.find_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return jsonify(book.to_wire(include_store_id=True))

    @api.route('/books/<book_id>', methods=['PUT'])
    def update_book(book_id):
        patch = BookPatch.from_payload(json_body())
        book = repo.update_by_id(book_id, patch)
        return jsonify(book.to_wire(include_store_id=True))

    @api.route('/books/<book_id>', methods=['DELETE'])
    def delete_book(book_id):
        if not repo.delete_by_id(book_id):
            raise BookNotFoundError(book_id)
        logger.info("Deleted book %s", book_id)
        return "", 200

    return api

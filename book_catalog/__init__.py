"""
Book catalog web application.

HTML pages (index, book/author/year tables, search bar) and a JSON REST API
over one MongoDB collection of books.

Run:
    pip install -e .
    python -m book_catalog

Open http://127.0.0.1:3030/
"""
import logging
import time
from logging.handlers import RotatingFileHandler

from flask import Flask, g, jsonify, render_template, request
from flask_talisman import Talisman
from flask_wtf import CSRFProtect

from .api import create_api_blueprint
from .cli import register_cli
from .config import Config
from .errors import CatalogError, StartupError
from .fixtures import SEED_BOOKS
from .pages import create_pages_blueprint
from .repository import BookRepository
from .store import connect, ensure_collection

__version__ = "1.0.0"

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'

logger = logging.getLogger(__name__)
csrf = CSRFProtect()

# handlers installed on the root logger by configure_logging
_log_handlers = []


def configure_logging(app):
    """Console logging, plus a rotating file when LOG_FILE is set."""
    root = logging.getLogger()
    root.setLevel(app.config['LOG_LEVEL'])
    formatter = logging.Formatter(LOG_FORMAT)
    if not _log_handlers:
        handlers = [logging.StreamHandler()]
        if app.config.get('LOG_FILE'):
            handlers.append(RotatingFileHandler(
                app.config['LOG_FILE'],
                maxBytes=app.config['MAX_LOG_SIZE'],
                backupCount=app.config['BACKUP_COUNT'],
                encoding='utf-8',
            ))
        for handler in handlers:
            handler.setFormatter(formatter)
            root.addHandler(handler)
            _log_handlers.append(handler)


def register_request_logging(app):
    @app.before_request
    def start_timer():
        g.request_start = time.perf_counter()

    @app.after_request
    def log_response(response):
        started = g.pop('request_start', None)
        elapsed = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.path,
                    response.status_code, elapsed)
        return response


def register_error_handlers(app):
    @app.errorhandler(404)
    def not_found(e):
        if request.path.startswith('/api/'):
            return jsonify({"error": "Not found"}), 404
        return render_template('error.html', status=404, message="Page not found"), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        if request.path.startswith('/api/'):
            return jsonify({"error": "Method not allowed"}), 405
        return render_template('error.html', status=405, message="Method not allowed"), 405

    @app.errorhandler(CatalogError)
    def catalog_error(e):
        # API errors are handled by the blueprint; this covers the HTML pages
        return render_template('error.html', status=e.status_code, message=e.message), e.status_code


def open_repository(config) -> BookRepository:
    """Connect, ensure the collection and seed it, strictly in that order.

    Raises ``StartupError`` on any failure.
    """
    client = connect(config['MONGO_URI'], config['MONGO_TIMEOUT_MS'])
    try:
        collection = ensure_collection(client, config['MONGO_DB_NAME'], config['MONGO_COLLECTION'])
        repo = BookRepository(collection)
        if config['SEED_ON_STARTUP']:
            inserted = repo.seed(SEED_BOOKS)
            logger.info("Seeding done, %d fixture(s) inserted", inserted)
    except StartupError:
        client.close()
        raise
    return repo


def create_app(config=None, repository=None):
    """Application factory.

    ``config`` is a mapping of overrides applied on top of ``Config``.
    ``repository`` is shared by every handler; when omitted it is opened
    from the configured store (see ``open_repository``).
    """
    settings = {k: v for k, v in vars(Config).items() if k.isupper()}
    settings.update(config or {})

    app = Flask(
        __name__,
        template_folder=settings['TEMPLATE_FOLDER'],
        static_folder=settings['STATIC_FOLDER'],
        static_url_path='/css',
    )
    app.config.update(settings)
    app.json.sort_keys = False

    configure_logging(app)

    Talisman(
        app,
        force_https=app.config['FORCE_HTTPS'],
        content_security_policy={'default-src': ["'self'"]},
    )
    csrf.init_app(app)

    if repository is None:
        repository = open_repository(app.config)
    app.extensions['book_repository'] = repository

    api = create_api_blueprint(repository)
    csrf.exempt(api)
    app.register_blueprint(api)
    app.register_blueprint(create_pages_blueprint(repository))

    register_request_logging(app)
    register_error_handlers(app)
    register_cli(app)
    return app

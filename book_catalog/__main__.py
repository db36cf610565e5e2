import logging
import sys

from . import create_app
from .errors import StartupError

logger = logging.getLogger("book_catalog")


def main():
    try:
        app = create_app()
    except StartupError as e:
        logger.critical("Startup failed: %s", e)
        return 1

    repo = app.extensions['book_repository']
    try:
        app.run(host=app.config['HOST'], port=app.config['PORT'])
    finally:
        repo.close()
        logger.info("Store connection closed")
    return 0


if __name__ == '__main__':
    sys.exit(main())

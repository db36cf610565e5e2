import click
from flask import current_app

from .errors import StartupError
from .fixtures import SEED_BOOKS


def register_cli(app):
    @app.cli.command("seed")
    def seed():
        """Insert the sample books that are not in the collection yet.

        Loading the app already seeds when BOOKCAT_SEED is on (the default),
        so this reports 0 inserts then; run with BOOKCAT_SEED=0 to seed here
        only.
        """
        repo = current_app.extensions['book_repository']
        try:
            inserted = repo.seed(SEED_BOOKS)
        except StartupError as e:
            raise click.ClickException(str(e))
        finally:
            repo.close()
        click.echo(f"Seeded {inserted} book(s); {len(SEED_BOOKS) - inserted} already present.")

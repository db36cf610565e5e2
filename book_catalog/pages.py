from flask import Blueprint, render_template
from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import Length, Optional as OptionalValidator

from .repository import BookRepository


class SearchForm(FlaskForm):
    q = StringField('Search', validators=[OptionalValidator(), Length(max=200)])
    submit = SubmitField('Search')


def create_pages_blueprint(repo: BookRepository) -> Blueprint:
    pages = Blueprint('pages', __name__)

    @pages.route('/')
    def index():
        return render_template('index.html')

    @pages.route('/books')
    def books_table():
        books = [book.to_wire() for book in repo.list_all()]
        return render_template('book_table.html', books=books)

    @pages.route('/authors')
    def authors_table():
        return render_template('author_table.html', authors=repo.list_distinct_authors())

    @pages.route('/years')
    def years_table():
        return render_template('year_table.html', years=repo.list_distinct_years())

    @pages.route('/search')
    def search_bar():
        # The form is rendered only; nothing consumes its submission yet.
        return render_template('search_bar.html', form=SearchForm())

    @pages.route('/create')
    def create():
        return "", 204

    return pages

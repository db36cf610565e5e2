from unittest import mock

from pymongo.errors import PyMongoError

from book_catalog.fixtures import SEED_BOOKS


def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b"Book Catalog" in response.data


def test_books_table_lists_books(client, repo):
    repo.seed(SEED_BOOKS)
    response = client.get("/books")
    assert response.status_code == 200
    for book in SEED_BOOKS:
        assert book.title.encode() in response.data


def test_authors_table_is_deduplicated(client, repo):
    repo.seed(SEED_BOOKS)
    page = client.get("/authors").get_data(as_text=True)
    assert page.count("Mary Shelley") == 1
    assert "Edgar Allan Poe" in page


def test_years_table(client, repo):
    repo.seed(SEED_BOOKS)
    page = client.get("/years").get_data(as_text=True)
    for year in ("1924", "1818", "1843"):
        assert year in page


def test_search_renders_form(client):
    response = client.get("/search")
    assert response.status_code == 200
    assert b'name="q"' in response.data


def test_create_placeholder_is_empty(client):
    response = client.get("/create")
    assert response.status_code == 204
    assert response.data == b""


def test_css_is_served(client):
    response = client.get("/css/style.css")
    assert response.status_code == 200
    assert b"table" in response.data


def test_unknown_page_renders_html_404(client):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert b"Page not found" in response.data


def test_store_error_on_page_is_500(client, repo):
    with mock.patch.object(repo.collection, "find", side_effect=PyMongoError("down")):
        response = client.get("/books")
    assert response.status_code == 500
    assert b"Failed to fetch books" in response.data


def test_security_headers(client):
    response = client.get("/")
    assert "Content-Security-Policy" in response.headers

"""Test configuration and fixtures for the review club API."""

import pytest
from fastapi.testclient import TestClient

from config import settings
from database import Database
from main import app


@pytest.fixture(name="client")
def client_fixture(tmp_path, monkeypatch):
    """Test client backed by a fresh SQLite file and upload folder."""
    monkeypatch.setattr(Database, "_db_path", str(tmp_path / "reviewclub.db"))
    monkeypatch.setattr(settings, "UPLOADS_DIR", str(tmp_path / "uploads"))

    # Entering the context runs the lifespan, which creates the tables
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_category(client):
    def _make(name: str = "Fantasy", category_id: int = 0) -> dict:
        response = client.post("/api/Categories", json={"id": category_id, "bookCategory": name})
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_book(client, make_category):
    def _make(name: str = "The Hobbit", author: str = "J.R.R. Tolkien",
              category_id: int = None, book_of_the_month: bool = False) -> dict:
        if category_id is None:
            category_id = make_category()["id"]
        response = client.post(
            "/api/Books/Add",
            data={
                "bookName": name,
                "bookAuthor": author,
                "categoryId": str(category_id),
                "isBookOfTheMonth": str(book_of_the_month).lower(),
            },
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_reviewer(client):
    def _make(name: str = "Ada", email: str = "ada@example.com") -> dict:
        response = client.post(
            "/api/Reviewers/Add",
            json={"reviewersName": name, "reviewersEmail": email},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_review(client):
    def _make(reviewer_id: int, book_id: int, text: str = "Loved it.") -> dict:
        response = client.post(
            "/api/Reviews/Add",
            json={"reviewText": text, "reviewersId": reviewer_id, "bookId": book_id},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make

"""Reviewer endpoint tests."""


class TestReviewerCrud:
    """Create, read, update and delete reviewers."""

    def test_create(self, client):
        response = client.post(
            "/api/Reviewers/Add",
            json={"reviewersName": "Grace", "reviewersEmail": "grace@example.com", "reviewedBookCount": 12},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["reviewersId"] > 0
        assert body["reviewersName"] == "Grace"
        assert body["reviewedBookCount"] == 0

    def test_find_counts_reviews(self, client, make_reviewer, make_book, make_review):
        reviewer = make_reviewer()
        book = make_book()
        make_review(reviewer["reviewersId"], book["id"])
        make_review(reviewer["reviewersId"], book["id"], "Second read, still great.")

        body = client.get(f"/api/Reviewers/Find/{reviewer['reviewersId']}").json()

        assert body["reviewedBookCount"] == 2

    def test_list(self, client, make_reviewer, make_book, make_review):
        ada = make_reviewer("Ada", "ada@example.com")
        make_reviewer("Linus", "linus@example.com")
        make_review(ada["reviewersId"], make_book()["id"])

        reviewers = client.get("/api/Reviewers/List").json()

        assert [(r["reviewersName"], r["reviewedBookCount"]) for r in reviewers] == [
            ("Ada", 1),
            ("Linus", 0),
        ]

    def test_find_missing_returns_404(self, client):
        assert client.get("/api/Reviewers/Find/8").status_code == 404

    def test_update(self, client, make_reviewer):
        reviewer = make_reviewer()

        response = client.put(
            f"/api/Reviewers/Update/{reviewer['reviewersId']}",
            json={
                "reviewersId": reviewer["reviewersId"],
                "reviewersName": "Ada Lovelace",
                "reviewersEmail": "lovelace@example.com",
            },
        )

        assert response.status_code == 204
        body = client.get(f"/api/Reviewers/Find/{reviewer['reviewersId']}").json()
        assert body["reviewersName"] == "Ada Lovelace"
        assert body["reviewersEmail"] == "lovelace@example.com"

    def test_update_id_mismatch(self, client, make_reviewer):
        reviewer = make_reviewer()

        response = client.put(
            f"/api/Reviewers/Update/{reviewer['reviewersId']}",
            json={"reviewersId": 0, "reviewersName": "X", "reviewersEmail": "x@example.com"},
        )

        assert response.status_code == 400

    def test_update_missing_returns_404(self, client):
        response = client.put(
            "/api/Reviewers/Update/12",
            json={"reviewersId": 12, "reviewersName": "X", "reviewersEmail": "x@example.com"},
        )

        assert response.status_code == 404

    def test_delete_removes_reviews(self, client, make_reviewer, make_book, make_review):
        reviewer = make_reviewer()
        review = make_review(reviewer["reviewersId"], make_book()["id"])

        assert client.delete(f"/api/Reviewers/Delete/{reviewer['reviewersId']}").status_code == 204
        assert client.get(f"/api/Reviews/Find/{review['reviewId']}").status_code == 404
        assert client.delete(f"/api/Reviewers/Delete/{reviewer['reviewersId']}").status_code == 404


class TestReviewerValidation:
    """Name and email checks."""

    def test_blank_name_rejected(self, client):
        response = client.post(
            "/api/Reviewers/Add",
            json={"reviewersName": " ", "reviewersEmail": "a@example.com"},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["reviewersName"] == ["Name is required"]

    def test_invalid_email_rejected(self, client):
        response = client.post(
            "/api/Reviewers/Add",
            json={"reviewersName": "Ada", "reviewersEmail": "not-an-email"},
        )

        assert response.status_code == 400
        assert "reviewersEmail" in response.json()["detail"]
        assert client.get("/api/Reviewers/List").json() == []


class TestReviewerBooks:
    """The reviewer/book link maintained alongside reviews."""

    def test_books_listed_once_per_book(self, client, make_reviewer, make_book, make_review):
        reviewer = make_reviewer()
        dune = make_book("Dune")
        emma = make_book("Emma")
        make_review(reviewer["reviewersId"], dune["id"])
        make_review(reviewer["reviewersId"], dune["id"], "Again.")
        make_review(reviewer["reviewersId"], emma["id"])

        books = client.get(f"/api/Reviewers/{reviewer['reviewersId']}/Books").json()

        assert [(b["bookId"], b["bookTitle"]) for b in books] == [
            (dune["id"], "Dune"),
            (emma["id"], "Emma"),
        ]
        assert {b["reviewerName"] for b in books} == {"Ada"}

    def test_book_reviewers(self, client, make_reviewer, make_book, make_review):
        book = make_book()
        ada = make_reviewer("Ada", "ada@example.com")
        bob = make_reviewer("Bob", "bob@example.com")
        make_review(ada["reviewersId"], book["id"])
        make_review(bob["reviewersId"], book["id"])

        reviewers = client.get(f"/api/Books/{book['id']}/Reviewers").json()

        assert [r["reviewerName"] for r in reviewers] == ["Ada", "Bob"]

    def test_unknown_parent_returns_404(self, client):
        assert client.get("/api/Reviewers/5/Books").status_code == 404
        assert client.get("/api/Books/5/Reviewers").status_code == 404

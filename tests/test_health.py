"""Health and root endpoint tests."""


def test_health_reports_database_ok(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "ok"}


def test_root_lists_docs(client):
    body = client.get("/").json()

    assert body["docs"] == "/docs"
    assert body["version"]

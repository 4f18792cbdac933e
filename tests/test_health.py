def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/unknown")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_allowed_origins_strip_path(monkeypatch):
    from realestate.core.config import settings
    from realestate.main import allowed_origins

    monkeypatch.setattr(settings, "frontend_url", "https://app.example.com/owner/dashboard")
    assert allowed_origins() == ["https://app.example.com"]

    monkeypatch.setattr(settings, "frontend_url", None)
    assert allowed_origins() == []

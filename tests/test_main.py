from portfolio.config import settings


def test_health_endpoints(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/ready").json() == {"status": "ready"}
    root = client.get("/").json()
    assert root["status"] == "healthy"
    assert settings.app_name in root["message"]


def test_security_headers_present(client):
    response = client.get("/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"
    assert "max-age" in response.headers["Strict-Transport-Security"]
    assert "default-src 'self'" in response.headers["Content-Security-Policy"]


def test_scanner_user_agent_is_blocked(client):
    response = client.get("/api/home", headers={"User-Agent": "sqlmap/1.7"})
    assert response.status_code == 403
    assert response.json() == {"error": "Forbidden"}
    assert response.headers["X-Frame-Options"] == "DENY"


def test_path_traversal_in_query_is_blocked(client):
    response = client.get("/api/documents/browse", params={"path": "../secrets"})
    assert response.status_code == 403


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_validation_errors_use_error_envelope(client):
    response = client.post("/api/auth/login", json={"email": "not-an-email"})
    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "Invalid request"
    assert body["details"]


def test_sitemap_lists_public_pages(client):
    response = client.get("/sitemap.xml")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    base = settings.site_url.rstrip("/")
    assert f"<loc>{base}</loc>" in response.text
    assert f"<loc>{base}/projects</loc>" in response.text
    assert "<priority>1.0</priority>" in response.text

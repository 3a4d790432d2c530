from portfolio.config import settings
from portfolio.core.limiter import limiter
from tests.conftest import TEST_PASSWORD


def _login(client, email, password=TEST_PASSWORD):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def test_login_returns_token_and_role(client, fake):
    fake.add_user("admin@example.com", role="admin")

    response = _login(client, "admin@example.com")

    assert response.status_code == 200
    body = response.json()
    assert body["access_token"]
    assert body["token_type"] == "bearer"
    assert body["role"] == "admin"
    assert body["email"] == "admin@example.com"


def test_login_with_wrong_password_is_rejected(client, fake):
    fake.add_user("admin@example.com")

    response = _login(client, "admin@example.com", "wrong-password")

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}


def test_me_returns_user_with_permissions(client, fake):
    fake.add_user("manager@example.com", role="manager", name="Morgan")
    token = _login(client, "manager@example.com").json()["access_token"]

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "manager@example.com"
    assert body["name"] == "Morgan"
    assert body["role"] == "manager"
    assert "project:update" in body["permissions"]
    assert "project:delete" not in body["permissions"]


def test_me_without_token_is_unauthorized(client):
    response = client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_me_with_invalid_token(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer bogus"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid or expired token"}


def test_auth_user_without_site_row_is_unauthorized(client, fake):
    row = fake.add_user("ghost@example.com")
    fake.tables["users"] = [r for r in fake.rows("users") if r["id"] != row["id"]]
    token = _login(client, "ghost@example.com").json()["access_token"]

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_unknown_role_is_treated_as_user(client, fake):
    fake.add_user("odd@example.com", role="superuser")
    token = _login(client, "odd@example.com").json()["access_token"]

    response = client.get("/api/admin/projects", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    response = client.put("/api/admin/projects", json=[], headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
    assert response.json() == {"error": "Forbidden: Insufficient permissions. Required: project:update"}


def test_logout(client, fake):
    fake.add_user("admin@example.com")
    token = _login(client, "admin@example.com").json()["access_token"]

    response = client.post("/api/auth/logout", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}


def test_login_is_rate_limited(client, fake, monkeypatch):
    fake.add_user("admin@example.com")
    monkeypatch.setattr(settings, "auth_rate_limit", "2/minute")
    limiter.reset()

    statuses = [_login(client, "admin@example.com", "wrong-password").status_code for _ in range(3)]

    limiter.reset()
    assert statuses == [401, 401, 429]

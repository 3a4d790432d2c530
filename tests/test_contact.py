from portfolio.config import settings


def test_contact_returns_whatsapp_link(client):
    response = client.post("/api/contact", json={
        "name": "Ann",
        "email": "ann@example.com",
        "message": "Hello there",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Preparing to send WhatsApp message..."
    assert body["whatsappUrl"].startswith(f"https://wa.me/{settings.contact_whatsapp_number}?text=")
    assert "*From:* Ann%0A" in body["whatsappUrl"]
    assert "*Email:* ann%40example.com%0A" in body["whatsappUrl"]
    assert body["whatsappUrl"].endswith("*Message:* Hello%20there")


def test_contact_requires_all_fields(client):
    response = client.post("/api/contact", json={"name": "Ann", "email": "ann@example.com"})

    assert response.status_code == 400
    assert response.json() == {"error": "Name, email, and message are required fields"}


def test_contact_rejects_bad_email(client):
    response = client.post("/api/contact", json={"name": "Ann", "email": "ann@", "message": "Hi"})

    assert response.status_code == 400
    assert response.json() == {"error": "Please provide a valid email address"}


def test_contact_message_is_url_encoded(client):
    response = client.post("/api/contact", json={
        "name": "Tom & Jerry",
        "email": "tj@example.com",
        "message": "Rates? 50% off #deal & more",
    })

    url = response.json()["whatsappUrl"]
    assert "*From:* Tom%20%26%20Jerry%0A" in url
    assert url.endswith("*Message:* Rates%3F%2050%25%20off%20%23deal%20%26%20more")
    assert url.count("#") == 0

from tests.conftest import public_url

CERT_KEY = "documents/certificates/aws-cloud.pdf"


def test_certificates_default_to_file_name(client, fake):
    fake.put_object(CERT_KEY)

    body = client.get("/api/certificates").json()

    assert body == [{
        "id": 1,
        "title": "aws-cloud",
        "file": public_url(CERT_KEY),
        "description": "Certificate document: aws-cloud.pdf",
        "createdAt": "2024-01-01T00:00:00+00:00",
    }]


def test_certificates_use_stored_metadata(client, fake):
    fake.put_object(CERT_KEY, metadata={"title": "AWS Cloud Practitioner", "description": "Issued 2023"})

    cert = client.get("/api/certificates").json()[0]

    assert cert["title"] == "AWS Cloud Practitioner"
    assert cert["description"] == "Issued 2023"


def test_update_single_certificate_metadata(client, fake, login_as):
    login_as("admin")
    fake.put_object(CERT_KEY, b"pdf-bytes")

    response = client.post("/api/admin/certificates", json={
        "filePath": public_url(CERT_KEY),
        "title": "AWS",
        "description": "Cloud",
    })

    assert response.status_code == 200
    assert response.json()["filePath"] == CERT_KEY
    stored = fake.objects()[CERT_KEY]
    assert stored["metadata"] == {"title": "AWS", "description": "Cloud"}
    assert stored["content"] == b"pdf-bytes"
    assert client.get("/api/certificates").json()[0]["title"] == "AWS"


def test_update_single_certificate_requires_path(client, login_as):
    login_as("admin")

    response = client.post("/api/admin/certificates", json={"title": "AWS"})

    assert response.status_code == 400
    assert response.json() == {"error": "File path is required"}


def test_bulk_update_skips_foreign_and_missing_files(client, fake, login_as):
    login_as("admin")
    fake.put_object(CERT_KEY)

    response = client.put("/api/admin/certificates", json=[
        {"title": "AWS", "file": public_url(CERT_KEY)},
        {"title": "Elsewhere", "file": "https://example.com/cert.pdf"},
        {"title": "Gone", "file": public_url("documents/certificates/missing.pdf")},
    ])

    assert response.status_code == 200
    assert response.json()["updated"] == 1


def test_delete_certificate(client, fake, login_as):
    login_as("admin")
    fake.put_object(CERT_KEY)

    response = client.request("DELETE", "/api/admin/certificates", json={"file": public_url(CERT_KEY)})

    assert response.status_code == 200
    assert fake.objects() == {}


def test_manager_cannot_delete_certificates(client, fake, login_as):
    login_as("manager")
    fake.put_object(CERT_KEY)

    response = client.request("DELETE", "/api/admin/certificates", json={"file": CERT_KEY})

    assert response.status_code == 403
    assert CERT_KEY in fake.objects()

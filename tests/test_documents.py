from tests.conftest import public_url


def test_document_rows_default_category(client, fake):
    fake.add_row("documents", {"title": "CV", "file": "documents/cv.pdf", "order_index": 0})

    body = client.get("/api/documents").json()

    assert body[0]["category"] == "documents"
    assert body[0]["file"] == "documents/cv.pdf"


def test_replace_documents_drops_items_without_file(client, fake, login_as):
    login_as("admin")

    response = client.put("/api/admin/documents", json=[
        {"title": "CV", "file": public_url("documents/career/cv.pdf")},
        {"title": "Empty"},
        {"title": "Letter", "file": "documents/letter.pdf", "description": "Cover letter"},
    ])

    assert response.status_code == 200
    rows = fake.rows("documents")
    assert [r["title"] for r in rows] == ["CV", "Letter"]
    assert rows[0]["file"] == "documents/career/cv.pdf"
    assert [r["order_index"] for r in rows] == [0, 1]


def test_delete_document_by_id_or_file(client, fake, login_as):
    login_as("admin")
    first = fake.add_row("documents", {"title": "A", "file": "documents/a.pdf", "order_index": 0})
    fake.add_row("documents", {"title": "B", "file": "documents/b.pdf", "order_index": 1})

    client.request("DELETE", "/api/admin/documents", json={"id": first["id"]})
    client.request("DELETE", "/api/admin/documents", json={"file": "documents/b.pdf"})

    assert fake.rows("documents") == []


def test_delete_document_requires_target(client, login_as):
    login_as("admin")

    response = client.request("DELETE", "/api/admin/documents", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "Document ID or file is required"}


def test_document_folders_listing(client, fake):
    fake.put_object("documents/career/CV.pdf")
    fake.put_object("documents/career/.folder-placeholder", b"")
    fake.put_object("documents/Transcript.pdf")

    body = client.get("/api/documents/folders").json()

    assert [f["title"] for f in body["folders"]] == ["Career"]
    assert body["folders"][0]["type"] == "folder"
    assert body["folders"][0]["file"] == "documents/career"
    assert [f["title"] for f in body["files"]] == ["Transcript"]
    assert body["files"][0]["file"] == public_url("documents/Transcript.pdf")
    assert body["files"][0]["description"] == "Document in root folder"


def test_document_subfolder_listing(client, fake):
    fake.put_object("documents/career/CV.pdf")

    body = client.get("/api/documents/folders/career").json()

    assert body["folders"] == []
    assert body["files"][0]["title"] == "CV"
    assert body["files"][0]["category"] == "career"


def test_document_albums_and_album_lookup(client, fake):
    fake.put_object("documents/Transcript.pdf")
    fake.put_object("documents/career/CV.pdf")
    fake.put_object("documents/empty/.folder-placeholder", b"")

    albums = client.get("/api/documents/albums").json()
    assert [a["name"] for a in albums] == ["Documents", "Career"]

    album = client.get("/api/documents/career").json()
    assert album["name"] == "Career"
    assert album["items"][0]["title"] == "CV"

    missing = client.get("/api/documents/empty")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Category not found"}


def test_upload_document_into_category(client, fake, login_as):
    login_as("admin")

    response = client.post(
        "/api/admin/documents/upload",
        files={"file": ("my cv.pdf", b"%PDF-1.4", "application/pdf")},
        data={"category": "Career Docs"},
    )

    assert response.status_code == 201
    path = response.json()["path"]
    assert path.startswith("documents/career_docs/")
    assert path.endswith("_my_cv.pdf")
    assert path in fake.objects()


def test_upload_document_without_category(client, login_as):
    login_as("admin")

    response = client.post(
        "/api/admin/documents/upload",
        files={"file": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 201
    assert response.json()["path"].startswith("documents/uncategorized/")


def test_upload_document_rejects_wrong_type(client, login_as):
    login_as("admin")

    response = client.post(
        "/api/admin/documents/upload",
        files={"file": ("photo.png", b"png", "image/png")},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "File type image/png is not allowed"}


def test_browse_public_documents(client, fake):
    fake.put_object("rootdocs/guide.pdf")
    fake.put_object("rootdocs/private/secret.pdf")
    fake.put_object("rootdocs/public/notes.pdf")

    body = client.get("/api/documents/browse").json()

    assert body["path"] == "rootdocs"
    folders = {f["name"]: f["private"] for f in body["folders"]}
    assert folders == {"private": True, "public": False}
    assert [f["name"] for f in body["files"]] == ["guide.pdf"]


def test_browse_private_folder_requires_login(client, fake):
    fake.put_object("rootdocs/private/secret.pdf")

    response = client.get("/api/documents/browse", params={"path": "private"})

    assert response.status_code == 401
    assert response.json() == {"error": "Authentication required"}


def test_browse_private_folder_with_token(client, fake):
    fake.put_object("rootdocs/private/secret.pdf")
    fake.add_user("reader@example.com", role="user")
    token = client.post(
        "/api/auth/login", json={"email": "reader@example.com", "password": "Str0ng!Pass"}
    ).json()["access_token"]

    response = client.get(
        "/api/documents/browse", params={"path": "rootdocs/private"},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 200
    assert [f["name"] for f in response.json()["files"]] == ["secret.pdf"]


def test_external_document_links_keep_query_string(client, fake, login_as):
    login_as("admin")
    link = "https://drive.google.com/uc?id=abc123&export=download"

    response = client.put("/api/admin/documents", json=[{"title": "Slides", "file": link}])

    assert response.status_code == 200
    assert fake.rows("documents")[0]["file"] == link


def test_document_link_with_traversal_is_rejected(client, fake, login_as):
    login_as("admin")

    response = client.put("/api/admin/documents", json=[{"title": "Bad", "file": "documents/../secrets.pdf"}])

    assert response.status_code == 400
    assert fake.rows("documents") == []

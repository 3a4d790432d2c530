def _seed(fake):
    fake.put_object("gallery/nature/lake.jpg", content_type="image/jpeg")
    fake.put_object("gallery/nature/.folder-placeholder", b"")
    fake.put_object("gallery/events/party.png", content_type="image/png")
    fake.put_object("gallery/loose.jpg", content_type="image/jpeg")


def test_public_gallery_groups_by_folder(client, fake):
    _seed(fake)

    albums = client.get("/api/gallery").json()

    assert [a["name"] for a in albums] == ["events", "nature"]
    lake = albums[1]["items"][0]
    assert lake["alt"] == "lake"
    assert lake["category"] == "nature"
    assert lake["src"].endswith("/gallery/nature/lake.jpg")


def test_admin_gallery_items_have_sequential_ids(client, fake, login_as):
    login_as("admin")
    _seed(fake)

    items = client.get("/api/admin/gallery").json()

    assert [i["id"] for i in items] == [1, 2, 3]
    assert items[-1]["category"] == "General"


def test_categories_are_top_level_folders(client, fake, login_as):
    login_as("admin")
    _seed(fake)

    assert client.get("/api/admin/categories").json() == ["events", "nature"]


def test_upload_gallery_image_slugifies_category(client, fake, login_as):
    login_as("admin")

    response = client.post(
        "/api/admin/gallery/upload",
        files={"file": ("Photo.JPG", b"\xff\xd8", "image/jpeg")},
        data={"category": "Summer Trip"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["category"] == "summer-trip"
    assert body["path"].startswith("gallery/summer-trip/")
    assert body["path"].endswith(".jpg")
    assert body["path"] in fake.objects()


def test_upload_gallery_image_requires_usable_category(client, login_as):
    login_as("admin")

    response = client.post(
        "/api/admin/gallery/upload",
        files={"file": ("photo.jpg", b"\xff\xd8", "image/jpeg")},
        data={"category": "!!!"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Category is required"}


def test_upload_gallery_rejects_documents(client, login_as):
    login_as("admin")

    response = client.post(
        "/api/admin/gallery/upload",
        files={"file": ("cv.pdf", b"%PDF", "application/pdf")},
        data={"category": "nature"},
    )

    assert response.status_code == 400


def test_delete_gallery_item_by_relative_src(client, fake, login_as):
    login_as("admin")
    _seed(fake)

    response = client.request("DELETE", "/api/admin/gallery", json={"src": "/nature/lake.jpg"})

    assert response.status_code == 200
    assert response.json()["path"] == "gallery/nature/lake.jpg"
    assert "gallery/nature/lake.jpg" not in fake.objects()


def test_delete_gallery_item_by_public_url(client, fake, login_as):
    login_as("admin")
    _seed(fake)
    src = client.get("/api/admin/gallery").json()[0]["src"]

    client.request("DELETE", "/api/admin/gallery", json={"src": src})

    assert "gallery/events/party.png" not in fake.objects()


def test_delete_gallery_item_requires_src(client, login_as):
    login_as("admin")

    response = client.request("DELETE", "/api/admin/gallery", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "Source path (src) is required"}


def test_update_gallery_only_counts_items(client, fake, login_as):
    login_as("admin")

    response = client.put("/api/admin/gallery", json=[{"src": "gallery/a.jpg"}, {"alt": "no source"}])

    assert response.status_code == 200
    assert response.json()["count"] == 1
    assert fake.objects() == {}

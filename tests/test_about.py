def _about_payload():
    return {
        "name": "Ada",
        "education": [
            {"school": "First University", "degree": "BSc", "period": "2015 - 2019"},
            {"school": "Second University", "degree": "MSc"},
        ],
        "experiences": [{"title": "Developer", "company": "Acme", "period": "2020 - Present"}],
        "certifications": [{"title": "Cloud Practitioner", "description": "AWS"}],
    }


def test_public_about_is_empty_by_default(client):
    body = client.get("/api/about").json()

    assert body["education"] == []
    assert body["experiences"] == []
    assert body["certifications"] == []
    assert body["name"]


def test_save_about_replaces_lists_in_order(client, fake, login_as):
    login_as("admin")
    fake.add_row("education", {"school": "Stale", "degree": "Old", "order_index": 0})

    response = client.put("/api/admin/about", json=_about_payload())

    assert response.status_code == 200
    schools = [row["school"] for row in fake.rows("education")]
    assert schools == ["First University", "Second University"]
    assert [row["order_index"] for row in fake.rows("education")] == [0, 1]

    body = client.get("/api/about").json()
    assert body["name"] == "Ada"
    assert [e["school"] for e in body["education"]] == schools
    assert body["experiences"][0]["company"] == "Acme"
    assert body["certifications"][0]["title"] == "Cloud Practitioner"


def test_omitted_lists_are_left_alone(client, fake, login_as):
    login_as("admin")
    client.put("/api/admin/about", json=_about_payload())

    client.put("/api/admin/about", json={"title": "Engineer"})

    assert len(fake.rows("education")) == 2
    assert len(fake.rows("experience")) == 1
    assert fake.rows("user_profiles")[0]["name"] == "Ada"


def test_manager_can_edit_about(client, login_as):
    login_as("manager")

    response = client.put("/api/admin/about", json={"education": []})

    assert response.status_code == 200


def test_viewer_cannot_edit_about(client, login_as):
    login_as("viewer")

    response = client.put("/api/admin/about", json={"education": []})

    assert response.status_code == 403


def test_admin_about_requires_login(client):
    assert client.get("/api/admin/about").status_code == 401

def _payload():
    return {
        "skillCategories": [
            {"title": "Web", "skills": [{"name": "React", "level": 85}, {"name": "FastAPI", "level": 70}]},
            {"title": "Data", "skills": [{"name": "SQL", "level": 80}]},
        ],
        "additionalSkills": ["Git", " ", "Docker"],
    }


def test_public_skills_empty(client):
    body = client.get("/api/skills").json()

    assert body == {"skillCategories": [], "additionalSkills": []}


def test_replace_and_read_skills(client, fake, login_as):
    login_as("admin")

    response = client.put("/api/admin/skills", json=_payload())
    assert response.status_code == 200

    body = client.get("/api/skills").json()
    assert [c["title"] for c in body["skillCategories"]] == ["Web", "Data"]
    assert body["skillCategories"][0]["skills"] == [
        {"name": "React", "level": 85},
        {"name": "FastAPI", "level": 70},
    ]
    assert body["additionalSkills"] == ["Git", "Docker"]


def test_replace_skills_discards_previous_rows(client, fake, login_as):
    login_as("admin")
    client.put("/api/admin/skills", json=_payload())

    client.put("/api/admin/skills", json={"skillCategories": [{"title": "Only", "skills": []}], "additionalSkills": []})

    assert [c["title"] for c in fake.rows("skill_categories")] == ["Only"]
    assert fake.rows("skills") == []
    assert fake.rows("additional_skills") == []


def test_skill_level_is_bounded(client, login_as):
    login_as("admin")

    response = client.put("/api/admin/skills", json={
        "skillCategories": [{"title": "Web", "skills": [{"name": "React", "level": 150}]}],
    })

    assert response.status_code == 422


def test_viewer_can_read_but_not_edit_skills(client, login_as):
    login_as("viewer")

    assert client.get("/api/admin/skills").status_code == 200
    assert client.put("/api/admin/skills", json=_payload()).status_code == 403

"""
Projects API: create/read/update/delete, ownership, drafts and skill links.
"""

from folio.core.database import db
from folio.modules.projects.models import ProjectSkill

NEW_PROJECT = {"title": "X", "slug": "x", "description": "d"}


def _skill(client, name):
    r = client.post("/api/skills", json={"name": name, "category": "Backend", "proficiency": 4})
    assert r.status_code == 201, r.get_json()
    return r.get_json()["data"]["id"]


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------

def test_create_requires_session(client):
    r = client.post("/api/projects", json=NEW_PROJECT)
    assert r.status_code == 401
    assert r.get_json() == {"data": None, "error": "Unauthorized"}


def test_create_defaults_to_published(client, users, login):
    login(users["alice"])
    r = client.post("/api/projects", json=NEW_PROJECT)

    assert r.status_code == 201
    body = r.get_json()
    assert "error" not in body
    project = body["data"]
    assert project["published"] is True
    assert project["publishedAt"] is not None
    assert project["featured"] is False
    assert project["technologies"] == []
    assert project["author"] == {"id": users["alice"], "name": "Alice", "email": "alice@example.com"}


def test_duplicate_slug_conflicts(app, client, users, login):
    login(users["alice"])
    assert client.post("/api/projects", json=NEW_PROJECT).status_code == 201

    r = client.post("/api/projects", json={**NEW_PROJECT, "title": "Another"})
    assert r.status_code == 409
    assert r.get_json() == {"data": None, "error": "A project with this slug already exists"}

    listing = client.get("/api/projects").get_json()["data"]
    assert listing["pagination"]["total"] == 1
    assert listing["projects"][0]["title"] == "X"


def test_create_validation_errors(client, users, login):
    login(users["alice"])

    r = client.post("/api/projects", json={"title": "X", "description": "d"})
    assert r.status_code == 400
    assert r.get_json()["error"].startswith("slug")

    r = client.post("/api/projects", json={**NEW_PROJECT, "slug": "Not A Slug"})
    assert r.status_code == 400
    assert "lowercase letters" in r.get_json()["error"]

    r = client.post("/api/projects", json={**NEW_PROJECT, "githubUrl": "github.com/me"})
    assert r.status_code == 400
    assert "Invalid URL format" in r.get_json()["error"]


def test_blank_optional_url_is_cleared(client, users, login):
    login(users["alice"])
    r = client.post("/api/projects", json={**NEW_PROJECT, "projectUrl": ""})
    assert r.status_code == 201
    assert r.get_json()["data"]["projectUrl"] is None


def test_create_with_skills(client, users, login):
    login(users["alice"])
    flask_id = _skill(client, "Flask")
    sql_id = _skill(client, "SQLAlchemy")

    r = client.post("/api/projects", json={**NEW_PROJECT, "skillIds": [flask_id, sql_id, flask_id]})
    assert r.status_code == 201
    skills = r.get_json()["data"]["skills"]
    assert sorted(skill["name"] for skill in skills) == ["Flask", "SQLAlchemy"]
    assert set(skills[0]) == {"id", "name", "category"}


def test_unknown_skill_rolls_back_project(client, users, login):
    login(users["alice"])
    r = client.post("/api/projects", json={**NEW_PROJECT, "skillIds": ["nope"]})

    assert r.status_code == 400
    assert "nope" in r.get_json()["error"]
    assert client.get("/api/projects/slug/x").status_code == 404


# ---------------------------------------------------------------------------
# Read
# ---------------------------------------------------------------------------

def test_draft_hidden_from_others(client, users, login):
    login(users["alice"])
    draft = client.post("/api/projects", json={**NEW_PROJECT, "published": False}).get_json()["data"]
    assert draft["publishedAt"] is None

    assert client.get(f"/api/projects/{draft['id']}").status_code == 200
    assert client.get("/api/projects/slug/x").status_code == 200

    login(users["bob"])
    r = client.get(f"/api/projects/{draft['id']}")
    assert r.status_code == 404
    assert r.get_json() == {"data": None, "error": "Project not found"}

    login(None)
    assert client.get(f"/api/projects/{draft['id']}").status_code == 404
    assert client.get("/api/projects/slug/x").status_code == 404


def test_missing_project(client):
    assert client.get("/api/projects/does-not-exist").status_code == 404


def test_list_filters(client, users, login):
    login(users["alice"])
    client.post("/api/projects", json={"title": "A", "slug": "a", "description": "d",
                                       "featured": True, "technologies": ["Flask", "Vue"]})
    client.post("/api/projects", json={"title": "B", "slug": "b", "description": "d",
                                       "technologies": ["Django"]})

    featured = client.get("/api/projects?featured=true").get_json()["data"]["projects"]
    assert [project["slug"] for project in featured] == ["a"]

    flask = client.get("/api/projects?technology=flask").get_json()["data"]["projects"]
    assert [project["slug"] for project in flask] == ["a"]

    assert client.get("/api/projects?featured=perhaps").status_code == 400


def test_repeated_reads_are_identical(client, users, login):
    login(users["alice"])
    project = client.post("/api/projects", json=NEW_PROJECT).get_json()["data"]
    login(None)

    first = client.get(f"/api/projects/{project['id']}").get_json()
    second = client.get(f"/api/projects/{project['id']}").get_json()
    assert first == second


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------

def test_update_is_partial(client, users, login):
    login(users["alice"])
    project = client.post("/api/projects", json={**NEW_PROJECT, "technologies": ["Flask"]}).get_json()["data"]

    r = client.put(f"/api/projects/{project['id']}", json={"title": "Renamed"})
    assert r.status_code == 200
    updated = r.get_json()["data"]
    assert updated["title"] == "Renamed"
    assert updated["technologies"] == ["Flask"]
    assert updated["slug"] == "x"
    assert updated["updatedAt"] >= project["updatedAt"]


def test_update_by_other_user_forbidden(client, users, login):
    login(users["alice"])
    project = client.post("/api/projects", json=NEW_PROJECT).get_json()["data"]

    login(users["bob"])
    r = client.put(f"/api/projects/{project['id']}", json={"title": "Mine now"})
    assert r.status_code == 403
    assert r.get_json() == {"data": None, "error": "Forbidden"}

    assert client.delete(f"/api/projects/{project['id']}").status_code == 403

    login(None)
    assert client.get(f"/api/projects/{project['id']}").get_json()["data"]["title"] == "X"


def test_update_rejects_explicit_null_for_required_field(client, users, login):
    login(users["alice"])
    project = client.post("/api/projects", json=NEW_PROJECT).get_json()["data"]

    r = client.put(f"/api/projects/{project['id']}", json={"title": None})
    assert r.status_code == 400


def test_update_to_taken_slug_conflicts(client, users, login):
    login(users["alice"])
    client.post("/api/projects", json=NEW_PROJECT)
    other = client.post("/api/projects", json={**NEW_PROJECT, "slug": "y"}).get_json()["data"]

    r = client.put(f"/api/projects/{other['id']}", json={"slug": "x"})
    assert r.status_code == 409
    assert client.get(f"/api/projects/{other['id']}").get_json()["data"]["slug"] == "y"


def test_publish_stamp_survives_unpublish(client, users, login):
    login(users["alice"])
    project = client.post("/api/projects", json={**NEW_PROJECT, "published": False}).get_json()["data"]
    url = f"/api/projects/{project['id']}"

    published = client.put(url, json={"published": True}).get_json()["data"]
    stamp = published["publishedAt"]
    assert stamp is not None

    hidden = client.put(url, json={"published": False}).get_json()["data"]
    assert hidden["publishedAt"] == stamp

    again = client.put(url, json={"published": True}).get_json()["data"]
    assert again["publishedAt"] == stamp


def test_update_replaces_skill_links(client, users, login):
    login(users["alice"])
    flask_id = _skill(client, "Flask")
    vue_id = _skill(client, "Vue")
    project = client.post("/api/projects", json={**NEW_PROJECT, "skillIds": [flask_id, vue_id]}).get_json()["data"]
    url = f"/api/projects/{project['id']}"

    # Re-linking an already linked skill must not trip the unique pair constraint
    r = client.put(url, json={"skillIds": [vue_id]})
    assert r.status_code == 200
    assert [skill["name"] for skill in r.get_json()["data"]["skills"]] == ["Vue"]

    # Omitting skillIds leaves links alone
    r = client.put(url, json={"title": "Still linked"})
    assert [skill["name"] for skill in r.get_json()["data"]["skills"]] == ["Vue"]

    r = client.put(url, json={"skillIds": []})
    assert r.get_json()["data"]["skills"] == []


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------

def test_delete_removes_skill_links(app, client, users, login):
    login(users["alice"])
    skill_id = _skill(client, "Flask")
    project = client.post("/api/projects", json={**NEW_PROJECT, "skillIds": [skill_id]}).get_json()["data"]

    with app.app_context():
        assert db.session.query(ProjectSkill).count() == 1

    r = client.delete(f"/api/projects/{project['id']}")
    assert r.status_code == 200
    assert r.get_json() == {"data": {"success": True}}

    assert client.get(f"/api/projects/{project['id']}").status_code == 404
    with app.app_context():
        assert db.session.query(ProjectSkill).count() == 0

    # The skill itself is untouched
    assert client.get(f"/api/skills/{skill_id}").status_code == 200


def test_delete_missing_project(client, users, login):
    login(users["alice"])
    assert client.delete("/api/projects/nope").status_code == 404

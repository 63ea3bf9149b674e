"""
Skills, experience and education: ownership, uniqueness and the
current/end-date rule for dated entries.
"""

import pytest

from folio.core.database import db
from folio.modules.projects.models import ProjectSkill

SKILL = {"name": "Python", "category": "Backend", "proficiency": 5}
JOB = {"company": "Acme", "position": "Engineer", "description": "Built things"}
SCHOOL = {"institution": "State University", "degree": "BSc", "field": "Computer Science"}


def _post(client, url, body):
    r = client.post(url, json=body)
    assert r.status_code == 201, r.get_json()
    return r.get_json()["data"]


# =============================================================================
# Skills
# =============================================================================

def test_skill_crud(client, users, login):
    login(users["alice"])
    skill = _post(client, "/api/skills", SKILL)
    assert skill["featured"] is False
    assert skill["tags"] == []
    assert skill["author"]["name"] == "Alice"

    url = f"/api/skills/{skill['id']}"
    updated = client.put(url, json={"proficiency": 4}).get_json()["data"]
    assert updated["proficiency"] == 4
    assert updated["name"] == "Python"

    login(None)
    assert client.get(url).get_json()["data"]["proficiency"] == 4

    login(users["alice"])
    assert client.delete(url).get_json() == {"data": {"success": True}}
    r = client.get(url)
    assert r.status_code == 404
    assert r.get_json()["error"] == "Skill not found"


def test_skill_name_is_unique(client, users, login):
    login(users["alice"])
    _post(client, "/api/skills", SKILL)
    r = client.post("/api/skills", json={**SKILL, "category": "Other"})
    assert r.status_code == 409
    assert r.get_json() == {"data": None, "error": "A skill with this name already exists"}


@pytest.mark.parametrize("proficiency", [0, 6])
def test_skill_proficiency_range(client, users, login, proficiency):
    login(users["alice"])
    r = client.post("/api/skills", json={**SKILL, "proficiency": proficiency})
    assert r.status_code == 400
    assert r.get_json()["error"].startswith("proficiency:")


def test_skill_owned_by_author(client, users, login):
    login(users["alice"])
    skill = _post(client, "/api/skills", SKILL)

    login(users["bob"])
    r = client.put(f"/api/skills/{skill['id']}", json={"proficiency": 1})
    assert r.status_code == 403
    assert client.delete(f"/api/skills/{skill['id']}").status_code == 403


def test_deleting_skill_unlinks_projects(app, client, users, login):
    login(users["alice"])
    skill = _post(client, "/api/skills", SKILL)
    project = _post(client, "/api/projects", {
        "title": "Site", "slug": "site", "description": "A site",
        "published": True, "skillIds": [skill["id"]],
    })
    assert [s["name"] for s in project["skills"]] == ["Python"]

    client.delete(f"/api/skills/{skill['id']}")

    assert client.get(f"/api/projects/{project['id']}").get_json()["data"]["skills"] == []
    with app.app_context():
        assert db.session.scalars(db.select(ProjectSkill)).all() == []


def test_skill_list_filters(client, users, login):
    login(users["alice"])
    _post(client, "/api/skills", {**SKILL, "featured": True, "tags": ["language"]})
    _post(client, "/api/skills", {"name": "React", "category": "Frontend", "proficiency": 3})
    login(None)

    def names(query):
        return [s["name"] for s in client.get(f"/api/skills{query}").get_json()["data"]["skills"]]

    assert names("?category=Frontend") == ["React"]
    assert names("?featured=true") == ["Python"]
    assert names("?tag=Language") == ["Python"]
    assert names("?search=rea") == ["React"]
    assert names("?sort=asc") == ["Python", "React"]


# =============================================================================
# Experience
# =============================================================================

def test_experience_current_derived_from_end_date(client, users, login):
    login(users["alice"])
    ongoing = _post(client, "/api/experience", {**JOB, "startDate": "2022-01-01T00:00:00Z"})
    assert ongoing["currentJob"] is True
    assert ongoing["endDate"] is None

    past = _post(client, "/api/experience", {
        **JOB, "company": "Old Co",
        "startDate": "2018-01-01T00:00:00Z", "endDate": "2021-06-30T00:00:00Z",
    })
    assert past["currentJob"] is False
    assert past["endDate"] == "2021-06-30T00:00:00"


def test_experience_start_date_defaults_to_now(client, users, login):
    login(users["alice"])
    entry = _post(client, "/api/experience", JOB)
    assert entry["startDate"] is not None
    assert entry["currentJob"] is True


def test_past_entry_without_start_date(client, users, login):
    login(users["alice"])
    entry = _post(client, "/api/experience", {**JOB, "endDate": "2020-01-01T00:00:00Z"})
    assert entry["currentJob"] is False
    assert entry["startDate"] == entry["endDate"] == "2020-01-01T00:00:00"

    school = _post(client, "/api/education", {**SCHOOL, "endDate": "2015-06-30T00:00:00Z"})
    assert school["currentStudent"] is False
    assert school["startDate"] == "2015-06-30T00:00:00"


@pytest.mark.parametrize("body, message", [
    ({"currentJob": True, "endDate": "2021-01-01T00:00:00Z"},
     "endDate must be empty when currentJob is true"),
    ({"currentJob": False},
     "endDate is required when currentJob is false"),
    ({"startDate": "2021-01-01T00:00:00Z", "endDate": "2020-01-01T00:00:00Z"},
     "endDate must not be before startDate"),
])
def test_experience_period_rules(client, users, login, body, message):
    login(users["alice"])
    r = client.post("/api/experience", json={**JOB, **body})
    assert r.status_code == 400
    assert r.get_json()["error"] == message


def test_experience_update_period(client, users, login):
    login(users["alice"])
    entry = _post(client, "/api/experience", {**JOB, "startDate": "2020-01-01T00:00:00Z"})
    url = f"/api/experience/{entry['id']}"

    ended = client.put(url, json={"endDate": "2023-03-01T00:00:00Z"}).get_json()["data"]
    assert ended["currentJob"] is False
    assert ended["endDate"] == "2023-03-01T00:00:00"

    reopened = client.put(url, json={"currentJob": True}).get_json()["data"]
    assert reopened["currentJob"] is True
    assert reopened["endDate"] is None

    r = client.put(url, json={"endDate": "2019-01-01T00:00:00Z"})
    assert r.status_code == 400
    assert r.get_json()["error"] == "endDate must not be before startDate"

    # Unrelated edits leave the period alone
    renamed = client.put(url, json={"position": "Staff Engineer"}).get_json()["data"]
    assert renamed["position"] == "Staff Engineer"
    assert renamed["currentJob"] is True


def test_experience_current_filter_and_ownership(client, users, login):
    login(users["alice"])
    current = _post(client, "/api/experience", JOB)
    _post(client, "/api/experience", {
        **JOB, "company": "Old Co",
        "startDate": "2018-01-01T00:00:00Z", "endDate": "2019-01-01T00:00:00Z",
    })

    body = client.get("/api/experience?current=true").get_json()["data"]
    assert [e["company"] for e in body["experience"]] == ["Acme"]
    assert body["pagination"]["total"] == 1

    login(users["bob"])
    assert client.delete(f"/api/experience/{current['id']}").status_code == 403

    login(users["alice"])
    assert client.delete(f"/api/experience/{current['id']}").status_code == 200
    assert client.get(f"/api/experience/{current['id']}").status_code == 404


# =============================================================================
# Education
# =============================================================================

def test_education_search_and_period(client, users, login):
    login(users["alice"])
    studying = _post(client, "/api/education", SCHOOL)
    assert studying["currentStudent"] is True

    _post(client, "/api/education", {
        "institution": "Art College", "degree": "BA", "field": "Illustration",
        "startDate": "2010-09-01T00:00:00Z", "endDate": "2013-06-30T00:00:00Z",
    })

    login(None)
    body = client.get("/api/education?search=computer").get_json()["data"]
    assert [e["institution"] for e in body["education"]] == ["State University"]
    body = client.get("/api/education?current=false").get_json()["data"]
    assert [e["institution"] for e in body["education"]] == ["Art College"]

    login(users["alice"])
    r = client.put(f"/api/education/{studying['id']}", json={"currentStudent": False})
    assert r.status_code == 400
    assert r.get_json()["error"] == "endDate is required when currentStudent is false"

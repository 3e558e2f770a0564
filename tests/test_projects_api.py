# =============================================================================
# tests/test_projects_api.py - Project & Poll Endpoint Tests
# =============================================================================
# Run with: pytest tests/test_projects_api.py -v
# =============================================================================

from tests.conftest import auth_headers

NEW_PROJECT = {
    "title_en": "Padma Bridge Rail Link",
    "title_bn": "পদ্মা সেতু রেল সংযোগ",
    "description_en": "Rail line across the Padma bridge",
    "description_bn": "পদ্মা সেতুর উপর রেললাইন",
    "category": "Transport",
    "status": "Planning",
    "budget": "৳ ৩৯,২৪৬ কোটি",
}


def add_project(fake_db, title: str, upvotes: int) -> dict:
    return fake_db.add("projects", {**NEW_PROJECT, "title_en": title, "image_url": "u", "upvotes": upvotes})


class TestListProjects:

    def test_list_projects(self, client, project):
        response = client.get("/api/projects")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [project["id"]]

    def test_top_projects_limited_to_four_by_upvotes(self, client, fake_db):
        for title, votes in [("a", 1), ("b", 9), ("c", 4), ("d", 7), ("e", 2)]:
            add_project(fake_db, title, votes)

        response = client.get("/api/projects/top")

        assert response.status_code == 200
        assert [p["upvotes"] for p in response.json()] == [9, 7, 4, 2]


class TestUpvoteScenario:
    """Project at 5 upvotes: vote, repeat, unvote, anonymous."""

    def test_full_toggle_sequence(self, client, citizen, project):
        headers = auth_headers(citizen)
        url = f"/api/projects/{project['id']}"

        first = client.post(f"{url}/upvote", headers=headers)
        assert first.status_code == 200
        assert first.json()["upvotes"] == 6

        repeat = client.post(f"{url}/upvote", headers=headers)
        assert repeat.status_code == 409
        assert repeat.json()["detail"] == "Already voted"
        assert client.get("/api/projects").json()[0]["upvotes"] == 6

        status = client.get(f"{url}/vote-status", headers=headers)
        assert status.json() == {"voted": True}

        undo = client.post(f"{url}/unvote", headers=headers)
        assert undo.status_code == 200
        assert undo.json()["upvotes"] == 5

        anonymous = client.post(f"{url}/upvote")
        assert anonymous.status_code == 401
        assert client.get("/api/projects").json()[0]["upvotes"] == 5

    def test_unvote_without_vote_is_404(self, citizen_client, project):
        response = citizen_client.post(f"/api/projects/{project['id']}/unvote")

        assert response.status_code == 404
        assert response.json()["detail"] == "Vote not found"

    def test_upvote_unknown_project_is_404(self, citizen_client):
        response = citizen_client.post("/api/projects/00000000-0000-0000-0000-000000000000/upvote")

        assert response.status_code == 404

    def test_vote_status_anonymous_is_false(self, client, project):
        response = client.get(f"/api/projects/{project['id']}/vote-status")

        assert response.status_code == 200
        assert response.json() == {"voted": False}

    def test_invalid_session_token_is_anonymous(self, client, project):
        response = client.post(
            f"/api/projects/{project['id']}/upvote",
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401


class TestManageProjects:

    def test_create_project_uses_placeholder_image(self, official_client):
        response = official_client.post("/api/projects", json=NEW_PROJECT)

        assert response.status_code == 201
        body = response.json()
        assert body["upvotes"] == 0
        assert body["image_url"].startswith("https://placehold.co/")

    def test_citizen_cannot_create_project(self, citizen_client):
        response = citizen_client.post("/api/projects", json=NEW_PROJECT)

        assert response.status_code == 403

    def test_anonymous_cannot_create_project(self, client):
        response = client.post("/api/projects", json=NEW_PROJECT)

        assert response.status_code == 401

    def test_create_project_requires_fields(self, official_client):
        response = official_client.post("/api/projects", json={"title_en": "Only a title"})

        assert response.status_code == 422

    def test_update_status(self, official_client, project):
        response = official_client.patch(
            f"/api/projects/{project['id']}/status", json={"status": "Completed"}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "Completed"

    def test_update_status_rejects_unknown_value(self, official_client, project, fake_db):
        response = official_client.patch(
            f"/api/projects/{project['id']}/status", json={"status": "Abandoned"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid status"
        assert fake_db.get("projects", project["id"])["status"] == "Active"

    def test_delete_project(self, official_client, project, fake_db):
        response = official_client.delete(f"/api/projects/{project['id']}")

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert fake_db.rows("projects") == []


class TestPolls:

    def test_polls_are_top_projects(self, client, fake_db):
        for title, votes in [("a", 3), ("b", 8), ("c", 1), ("d", 5), ("e", 6)]:
            add_project(fake_db, title, votes)

        response = client.get("/api/polls")

        assert response.status_code == 200
        polls = response.json()
        assert [p["votes"] for p in polls] == [8, 6, 5, 3]
        assert set(polls[0]) == {
            "id", "title_bn", "title_en", "description_bn", "description_en", "votes", "created_at",
        }

    def test_poll_vote_is_a_project_upvote(self, client, citizen, project):
        headers = auth_headers(citizen)

        vote = client.post(f"/api/polls/{project['id']}/vote", headers=headers)
        assert vote.status_code == 200
        assert vote.json()["upvotes"] == 6

        # Same vote through the projects page
        again = client.post(f"/api/projects/{project['id']}/upvote", headers=headers)
        assert again.status_code == 409

        status = client.get(f"/api/projects/{project['id']}/vote-status", headers=headers)
        assert status.json() == {"voted": True}

    def test_poll_unvote(self, client, citizen, project):
        headers = auth_headers(citizen)
        client.post(f"/api/polls/{project['id']}/vote", headers=headers)

        response = client.post(f"/api/polls/{project['id']}/unvote", headers=headers)

        assert response.status_code == 200
        assert response.json()["upvotes"] == 5

    def test_anonymous_poll_vote_is_401(self, client, project):
        response = client.post(f"/api/polls/{project['id']}/vote")

        assert response.status_code == 401

"""Start, submit, progress and achievements over HTTP."""
import pytest

from kidcode.core.config import settings


@pytest.fixture
def headers(register):
    return register()


@pytest.mark.usefixtures("catalog")
class TestSubmitEndpoint:
    def test_submit_scores_and_unlocks(self, client, headers, make_lesson):
        lesson = make_lesson([0, 1])

        response = client.post(f"/api/lessons/{lesson.id}/submit", json={"answers": [0, 1]}, headers=headers)

        assert response.status_code == 200
        body = response.json()
        assert (body["score"], body["total"], body["completed"]) == (2, 2, True)
        assert sorted(body["newly_unlocked"]) == ["FIRST_LESSON_COMPLETE", "PERFECT_SCORE"]

    def test_resubmission_overwrites_progress(self, client, headers, make_lesson):
        lesson = make_lesson([0, 1])
        client.post(f"/api/lessons/{lesson.id}/submit", json={"answers": [0, 1]}, headers=headers)

        response = client.post(f"/api/lessons/{lesson.id}/submit", json={"answers": [1, 1]}, headers=headers)

        assert response.json()["completed"] is False
        progress = client.get("/api/me/progress", headers=headers).json()
        assert len(progress) == 1
        assert (progress[0]["lesson_id"], progress[0]["score"], progress[0]["completed"]) == (lesson.id, 1, False)
        codes = [a["code"] for a in client.get("/api/me/achievements", headers=headers).json()]
        assert sorted(codes) == ["FIRST_LESSON_COMPLETE", "PERFECT_SCORE"]

    def test_null_answers_are_unanswered(self, client, headers, make_lesson):
        lesson = make_lesson([0, 1])

        response = client.post(f"/api/lessons/{lesson.id}/submit", json={"answers": [None, 1]}, headers=headers)

        assert response.json()["score"] == 1

    def test_non_integer_answers_are_rejected(self, client, headers, make_lesson):
        lesson = make_lesson([0])

        response = client.post(f"/api/lessons/{lesson.id}/submit", json={"answers": ["0"]}, headers=headers)

        assert response.status_code == 400
        assert "error" in response.json()

    def test_missing_answers_are_rejected(self, client, headers, make_lesson):
        lesson = make_lesson([0])
        response = client.post(f"/api/lessons/{lesson.id}/submit", json={}, headers=headers)
        assert response.status_code == 400

    def test_unknown_lesson_writes_nothing(self, client, headers):
        response = client.post("/api/lessons/999/submit", json={"answers": [0]}, headers=headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Lesson not found"}
        assert client.get("/api/me/progress", headers=headers).json() == []
        assert client.get("/api/me/achievements", headers=headers).json() == []

    def test_non_numeric_lesson_id(self, client, headers):
        response = client.post("/api/lessons/abc/submit", json={"answers": [0]}, headers=headers)
        assert response.status_code == 400

    def test_lesson_id_too_large_for_storage(self, client, headers):
        for action, kwargs in (("submit", {"json": {"answers": [0]}}), ("start", {})):
            response = client.post(f"/api/lessons/99999999999999999999/{action}", headers=headers, **kwargs)

            assert response.status_code == 400
            assert "error" in response.json()
        assert client.get("/api/me/progress", headers=headers).json() == []

    def test_requires_token(self, client, make_lesson):
        lesson = make_lesson([0])

        response = client.post(f"/api/lessons/{lesson.id}/submit", json={"answers": [0]})

        assert response.status_code == 401
        assert response.json() == {"error": "Missing token"}


@pytest.mark.usefixtures("catalog")
class TestStartEndpoint:
    def test_start_then_progress(self, client, headers, make_lesson):
        lesson = make_lesson([0])

        response = client.post(f"/api/lessons/{lesson.id}/start", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        progress = client.get("/api/me/progress", headers=headers).json()
        assert (progress[0]["started"], progress[0]["completed"], progress[0]["score"]) == (True, False, 0)

    def test_start_keeps_existing_score(self, client, headers, make_lesson):
        lesson = make_lesson([0])
        client.post(f"/api/lessons/{lesson.id}/submit", json={"answers": [0]}, headers=headers)

        client.post(f"/api/lessons/{lesson.id}/start", headers=headers)

        progress = client.get("/api/me/progress", headers=headers).json()
        assert (progress[0]["started"], progress[0]["completed"], progress[0]["score"]) == (True, True, 1)

    def test_start_unknown_lesson(self, client, headers):
        response = client.post("/api/lessons/999/start", headers=headers)
        assert response.status_code == 404


@pytest.mark.usefixtures("catalog")
class TestAchievementsEndpoints:
    def test_progress_is_per_user(self, client, register, make_lesson):
        lesson = make_lesson([0])
        ada = register(email="ada@example.com")
        bob = register(email="bob@example.com")

        client.post(f"/api/lessons/{lesson.id}/submit", json={"answers": [0]}, headers=ada)

        assert len(client.get("/api/me/progress", headers=ada).json()) == 1
        assert client.get("/api/me/progress", headers=bob).json() == []
        assert client.get("/api/me/achievements", headers=bob).json() == []

    def test_unlock_known_code_is_idempotent(self, client, headers):
        first = client.post("/api/achievements/unlock", json={"code": "THREE_LESSONS"}, headers=headers)
        second = client.post("/api/achievements/unlock", json={"code": "THREE_LESSONS"}, headers=headers)

        assert first.status_code == 200
        assert first.json()["title"] == "Getting the Hang"
        assert second.json()["unlocked_at"] == first.json()["unlocked_at"]
        assert len(client.get("/api/me/achievements", headers=headers).json()) == 1

    def test_unlock_new_code_when_allowed(self, client, headers, monkeypatch):
        monkeypatch.setattr(settings, "ALLOW_CLIENT_ACHIEVEMENT_CODES", True)

        response = client.post("/api/achievements/unlock", json={
            "code": "NIGHT_OWL", "title": "Night Owl", "description": "Study after dark.",
        }, headers=headers)

        assert response.status_code == 200
        assert response.json()["code"] == "NIGHT_OWL"

    def test_unlock_new_code_without_text(self, client, headers, monkeypatch):
        monkeypatch.setattr(settings, "ALLOW_CLIENT_ACHIEVEMENT_CODES", True)

        response = client.post("/api/achievements/unlock", json={"code": "NIGHT_OWL"}, headers=headers)

        assert response.status_code == 400

    def test_unlock_new_code_when_closed(self, client, headers, monkeypatch):
        monkeypatch.setattr(settings, "ALLOW_CLIENT_ACHIEVEMENT_CODES", False)

        response = client.post("/api/achievements/unlock", json={
            "code": "NIGHT_OWL", "title": "Night Owl", "description": "Study after dark.",
        }, headers=headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Unknown achievement code: NIGHT_OWL"}

    def test_achievements_newest_first(self, client, headers, make_lesson):
        client.post("/api/achievements/unlock", json={"code": "THREE_LESSONS"}, headers=headers)
        lesson = make_lesson([0])
        client.post(f"/api/lessons/{lesson.id}/submit", json={"answers": [0]}, headers=headers)

        codes = [a["code"] for a in client.get("/api/me/achievements", headers=headers).json()]

        assert codes[-1] == "THREE_LESSONS"
        assert sorted(codes[:2]) == ["FIRST_LESSON_COMPLETE", "PERFECT_SCORE"]

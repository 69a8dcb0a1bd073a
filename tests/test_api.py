"""
API tests for profiles, the assessment flow, materials, tasks and recommendations
"""
import uuid

import pytest

from app.services.exceptions import PersistenceError
from app.services.submission_service import submission_service
from conftest import answers_for


@pytest.fixture
def learner(client):
    response = client.post("/api/profiles", json={"name": "Sam", "email": "Sam@Example.com", "age": 16})
    assert response.status_code == 201
    return response.json()


def take_quiz(client, user_id, targets):
    session = client.post("/api/assessment/sessions", json={"user_id": user_id}).json()
    for question_id, answer in answers_for(targets):
        response = client.post(
            f"/api/assessment/sessions/{session['session_id']}/answers",
            json={"question_id": question_id, "answer": answer},
        )
        assert response.status_code == 200, response.json()
    return session["session_id"]


class TestProfiles:

    def test_create_and_fetch(self, client, learner):
        assert learner["email"] == "sam@example.com"
        assert learner["quiz_completed"] is False
        assert learner["learning_style"] is None

        response = client.get(f"/api/profiles/{learner['id']}")
        assert response.status_code == 200
        assert response.json()["age"] == 16

    def test_duplicate_email(self, client, learner):
        response = client.post("/api/profiles", json={"name": "Sam", "email": "sam@example.com"})
        assert response.status_code == 409

    def test_update(self, client, learner):
        response = client.patch(f"/api/profiles/{learner['id']}", json={"age": 21, "learning_style": "auditory"})
        assert response.status_code == 200
        assert response.json()["age"] == 21
        assert response.json()["learning_style"] == "auditory"

    def test_invalid_learning_style(self, client, learner):
        response = client.patch(f"/api/profiles/{learner['id']}", json={"learning_style": "telepathic"})
        assert response.status_code == 422

    def test_missing_profile(self, client):
        response = client.get(f"/api/profiles/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json()["message"] == "Profile not found"


class TestAssessmentFlow:

    def test_questions_hide_answers(self, client):
        questions = client.get("/api/assessment/questions").json()
        assert len(questions) == 40
        assert all("correct" not in q for q in questions)
        assert questions[30]["type"] == "matching"
        assert {item["id"] for item in questions[30]["left_items"]} == {
            item["id"] for item in questions[30]["right_items"]
        }

    def test_full_quiz(self, client, learner):
        targets = {"visual": 8, "auditory": 6, "reading_writing": 4, "kinesthetic": 9}
        session_id = take_quiz(client, learner["id"], targets)

        state = client.get(f"/api/assessment/sessions/{session_id}").json()
        assert state["is_complete"] is True
        assert state["next_question"] is None
        assert state["scores"] == targets

        response = client.post(f"/api/assessment/sessions/{session_id}/submit")
        assert response.status_code == 200
        body = response.json()
        assert body["learning_style"] == "kinesthetic"
        assert body["quiz_level"] == "intermediate"
        assert body["total_score"] == 27
        assert body["quiz_result"]["kinesthetic_score"] == 9

        profile = client.get(f"/api/profiles/{learner['id']}").json()
        assert profile["learning_style"] == "kinesthetic"
        assert profile["quiz_completed"] is True

        # Session is closed once submitted
        assert client.get(f"/api/assessment/sessions/{session_id}").status_code == 404

        history = client.get(f"/api/profiles/{learner['id']}/quiz-results").json()
        assert len(history) == 1
        assert history[0]["dominant_style"] == "kinesthetic"

    def test_answer_reports_correctness(self, client, learner):
        session = client.post("/api/assessment/sessions", json={"user_id": learner["id"]}).json()
        assert session["next_question"]["id"] == 1
        assert session["resumed"] is False

        response = client.post(
            f"/api/assessment/sessions/{session['session_id']}/answers",
            json={"question_id": 1, "answer": 0},
        )
        body = response.json()
        assert body["is_correct"] is True
        assert body["session"]["scores"]["visual"] == 1
        assert body["session"]["next_question"]["id"] == 2

    def test_resume(self, client, learner):
        first = client.post("/api/assessment/sessions", json={"user_id": learner["id"]}).json()
        client.post(
            f"/api/assessment/sessions/{first['session_id']}/answers",
            json={"question_id": 1, "answer": 2},
        )

        second = client.post("/api/assessment/sessions", json={"user_id": learner["id"]}).json()
        assert second["session_id"] == first["session_id"]
        assert second["resumed"] is True
        assert second["current_question_index"] == 1

    def test_out_of_order_answer(self, client, learner):
        session = client.post("/api/assessment/sessions", json={"user_id": learner["id"]}).json()
        response = client.post(
            f"/api/assessment/sessions/{session['session_id']}/answers",
            json={"question_id": 7, "answer": 0},
        )
        assert response.status_code == 409

    def test_submit_incomplete(self, client, learner):
        session = client.post("/api/assessment/sessions", json={"user_id": learner["id"]}).json()
        response = client.post(f"/api/assessment/sessions/{session['session_id']}/submit")
        assert response.status_code == 409
        assert "incomplete" in response.json()["message"]

    def test_abandon(self, client, learner):
        session = client.post("/api/assessment/sessions", json={"user_id": learner["id"]}).json()

        response = client.delete(f"/api/assessment/sessions/{session['session_id']}")
        assert response.status_code == 204

        assert client.get(f"/api/profiles/{learner['id']}/quiz-results").json() == []
        assert client.get(f"/api/profiles/{learner['id']}").json()["quiz_completed"] is False

    def test_start_for_unknown_profile(self, client):
        response = client.post("/api/assessment/sessions", json={"user_id": str(uuid.uuid4())})
        assert response.status_code == 404


class TestProcessScores:

    def test_direct_submission(self, client, learner):
        response = client.post("/api/assessment/process", json={
            "user_id": learner["id"],
            "visual_score": 5,
            "auditory_score": 5,
            "reading_writing_score": 0,
            "kinesthetic_score": 0,
            "time_taken": 312,
            "age": 12,
        })
        assert response.status_code == 200
        body = response.json()
        assert body["learning_style"] == "visual"
        assert body["quiz_level"] == "beginner"
        assert body["dominance_percentage"] == 0.0
        assert body["quiz_result"]["time_taken"] == 312

    def test_negative_score_rejected(self, client, learner):
        response = client.post("/api/assessment/process", json={
            "user_id": learner["id"],
            "visual_score": -1,
            "auditory_score": 0,
            "reading_writing_score": 0,
            "kinesthetic_score": 0,
        })
        assert response.status_code == 422


class TestMaterialsAndRecommendations:

    def test_recommendations_follow_style_and_materials(self, client, learner):
        client.post("/api/assessment/process", json={
            "user_id": learner["id"],
            "visual_score": 1,
            "auditory_score": 2,
            "reading_writing_score": 9,
            "kinesthetic_score": 3,
        })
        created = client.post("/api/materials", json={
            "user_id": learner["id"],
            "title": "Roman aqueducts",
            "summary": "Aqueducts carried water using gravity; aqueducts fed Roman baths",
        })
        assert created.status_code == 201
        assert created.json()["learning_style"] == "reading_writing"

        materials = client.get(f"/api/profiles/{learner['id']}/materials").json()
        assert len(materials) == 1

        response = client.get(f"/api/profiles/{learner['id']}/recommendations")
        assert response.status_code == 200
        body = response.json()
        assert body["learning_style"] == "reading_writing"
        assert body["dominant_topics"][0] == "aqueducts"
        assert body["youtube_queries"][:2] == ["note taking methods", "study guide creation"]
        assert body["topic_recommendations"][0]["topic"] == "Advanced aqueducts"

    def test_material_for_unknown_profile(self, client):
        response = client.post("/api/materials", json={"user_id": str(uuid.uuid4()), "title": "Notes"})
        assert response.status_code == 404

    def test_material_crud(self, client, learner):
        created = client.post("/api/materials", json={
            "user_id": learner["id"],
            "title": "Nile floods",
            "subject": "History",
            "resource_url": "https://example.com/nile",
        }).json()
        material_url = f"/api/materials/{created['id']}"

        fetched = client.get(material_url).json()
        assert fetched["subject"] == "History"
        assert fetched["learning_style"] == "visual"

        updated = client.patch(material_url, json={"title": "Nile flood cycle"})
        assert updated.status_code == 200
        assert updated.json()["title"] == "Nile flood cycle"
        assert updated.json()["resource_url"] == "https://example.com/nile"

        assert client.delete(material_url).status_code == 204
        assert client.get(material_url).status_code == 404
        assert client.get(f"/api/profiles/{learner['id']}/materials").json() == []

    def test_flashcards_saved_and_removed_with_material(self, client, learner):
        material = client.post("/api/materials", json={"user_id": learner["id"], "title": "Pyramids"}).json()
        cards_url = f"/api/materials/{material['id']}/flashcards"

        response = client.post(cards_url, json={"flashcards": [
            {"front": "Largest pyramid?", "back": "Great Pyramid of Giza"},
            {"front": "Built for?", "back": "Pharaoh Khufu"},
        ]})
        assert response.status_code == 201
        assert len(response.json()) == 2

        cards = client.get(cards_url).json()
        assert {card["front"] for card in cards} == {"Largest pyramid?", "Built for?"}
        assert all(card["material_id"] == material["id"] for card in cards)

        client.delete(f"/api/materials/{material['id']}")
        assert client.get(cards_url).status_code == 404

    def test_empty_flashcard_batch_rejected(self, client, learner):
        material = client.post("/api/materials", json={"user_id": learner["id"], "title": "Pyramids"}).json()
        response = client.post(f"/api/materials/{material['id']}/flashcards", json={"flashcards": []})
        assert response.status_code == 422


class TestTasks:

    def schedule(self, client, user_id, title, start, end):
        return client.post("/api/tasks", json={
            "user_id": user_id,
            "title": title,
            "subject": "History",
            "start_time": start,
            "end_time": end,
        })

    def test_create_list_update_delete(self, client, learner):
        created = self.schedule(client, learner["id"], "Read chapter 3", "2026-10-20T09:00:00", "2026-10-20T10:00:00")
        assert created.status_code == 201
        task = created.json()
        assert task["source"] == "manual"

        tasks = client.get("/api/tasks", params={"user_id": learner["id"]}).json()
        assert [t["id"] for t in tasks] == [task["id"]]

        updated = client.patch(f"/api/tasks/{task['id']}", json={"end_time": "2026-10-20T11:30:00"})
        assert updated.status_code == 200
        assert updated.json()["end_time"].startswith("2026-10-20T11:30:00")

        assert client.delete(f"/api/tasks/{task['id']}").status_code == 204
        assert client.get(f"/api/tasks/{task['id']}").status_code == 404

    def test_time_window_filter(self, client, learner):
        self.schedule(client, learner["id"], "Monday", "2026-10-19T09:00:00", "2026-10-19T10:00:00")
        self.schedule(client, learner["id"], "Tuesday", "2026-10-20T09:00:00", "2026-10-20T10:00:00")

        response = client.get("/api/tasks", params={
            "user_id": learner["id"],
            "time_min": "2026-10-20T00:00:00",
            "time_max": "2026-10-20T23:59:59",
        })
        assert [t["title"] for t in response.json()] == ["Tuesday"]

    def test_end_before_start_rejected(self, client, learner):
        response = self.schedule(client, learner["id"], "Backwards", "2026-10-20T10:00:00", "2026-10-20T09:00:00")
        assert response.status_code == 422
        assert response.json()["error"] == "invalid_schedule"

    def test_task_for_unknown_profile(self, client):
        response = self.schedule(client, str(uuid.uuid4()), "Orphan", "2026-10-20T09:00:00", "2026-10-20T10:00:00")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestErrorResponses:

    def test_persistence_failure_is_503(self, client, learner, monkeypatch):
        def unavailable(*args, **kwargs):
            raise PersistenceError("Could not store quiz result")

        monkeypatch.setattr(submission_service, "_persist", unavailable)

        response = client.post("/api/assessment/process", json={
            "user_id": learner["id"],
            "visual_score": 1,
            "auditory_score": 0,
            "reading_writing_score": 0,
            "kinesthetic_score": 0,
        })
        assert response.status_code == 503
        assert response.json() == {
            "error": "persistence_unavailable",
            "message": "Could not store quiz result",
            "status_code": 503,
        }

    def test_session_state_error_is_409(self, client, learner):
        session = client.post("/api/assessment/sessions", json={"user_id": learner["id"]}).json()
        response = client.post(
            f"/api/assessment/sessions/{session['session_id']}/answers",
            json={"question_id": 1, "answer": 9},
        )
        assert response.status_code == 409
        assert response.json()["error"] == "invalid_session_state"

    def test_invalid_email_rejected(self, client):
        response = client.post("/api/profiles", json={"name": "Kim", "email": "not-an-email"})
        assert response.status_code == 422


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"

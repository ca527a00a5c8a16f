from fastapi import FastAPI
from fastapi.testclient import TestClient

from story_grader.api.dependencies.chains import (
    get_feedback_chain,
    get_grading_chain,
    get_questions_chain,
)
from story_grader.api.exceptions.handlers import register_exception_handlers
from story_grader.main import app
from story_grader.services.dialogue.grading import DEFAULT_FEEDBACK


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_auto_grade_success(client, grading_payload, make_chain):
    app.dependency_overrides[get_grading_chain] = lambda: make_chain("GRADE: 95\nFEEDBACK: أحسنت!")

    response = client.post("/auto-grade", json=grading_payload)

    assert response.status_code == 200
    assert response.json() == {"grade": 95, "feedback": "أحسنت!"}


def test_auto_grade_clamps_high_grade(client, grading_payload, make_chain):
    app.dependency_overrides[get_grading_chain] = lambda: make_chain("GRADE: 110\nFEEDBACK: جيد جدا")

    response = client.post("/auto-grade", json=grading_payload)

    assert response.status_code == 200
    assert response.json() == {"grade": 100, "feedback": "جيد جدا"}


def test_auto_grade_provider_failure(client, grading_payload, failing_chain):
    app.dependency_overrides[get_grading_chain] = lambda: failing_chain

    response = client.post("/auto-grade", json=grading_payload)

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to auto-grade submission",
        "grade": 75,
        "feedback": "حدث خطأ في التقييم التلقائي",
    }


def test_auto_grade_rejects_unknown_difficulty(client, grading_payload, make_chain):
    app.dependency_overrides[get_grading_chain] = lambda: make_chain("GRADE: 90")
    grading_payload["difficulty"] = "impossible"

    response = client.post("/auto-grade", json=grading_payload)

    assert response.status_code == 422


def test_generate_feedback_success(client, feedback_payload, make_chain):
    app.dependency_overrides[get_feedback_chain] = lambda: make_chain("أحسنت يا سارة!")

    response = client.post("/generate-feedback", json=feedback_payload)

    assert response.status_code == 200
    assert response.json() == {"feedback": "أحسنت يا سارة!"}


def test_generate_feedback_without_grade(client, feedback_payload, make_chain):
    app.dependency_overrides[get_feedback_chain] = lambda: make_chain("قراءة رائعة!")
    del feedback_payload["grade"]

    response = client.post("/generate-feedback", json=feedback_payload)

    assert response.status_code == 200
    assert response.json() == {"feedback": "قراءة رائعة!"}


def test_generate_feedback_provider_failure_is_masked(client, feedback_payload, failing_chain):
    app.dependency_overrides[get_feedback_chain] = lambda: failing_chain

    response = client.post("/generate-feedback", json=feedback_payload)

    assert response.status_code == 200
    assert response.json() == {"feedback": DEFAULT_FEEDBACK}


def test_generate_questions_success(client, make_chain):
    reply = (
        "ID: q1\nTEXT: من هو البطل؟\nTYPE: short_answer\nREQUIRED: true\n\n"
        "ID: q2\nTEXT: أين ذهب؟\nTYPE: multiple_choice\nREQUIRED: true\n"
        "OPTIONS: البحر، الجبل"
    )
    app.dependency_overrides[get_questions_chain] = lambda: make_chain(reply)

    response = client.post("/generate-questions", json={
        "storyContent": "نص القصة",
        "storyTitle": "رحلة الأمل",
        "difficulty": "easy",
        "gradeLevel": 1,
    })

    assert response.status_code == 200
    questions = response.json()["questions"]
    assert [q["id"] for q in questions] == ["q1", "q2"]
    assert questions[1]["type"] == "multiple_choice"
    assert questions[1]["options"] == ["البحر", "الجبل"]


def test_generate_questions_missing_fields(client, make_chain):
    app.dependency_overrides[get_questions_chain] = lambda: make_chain("")

    response = client.post("/generate-questions", json={"storyTitle": "رحلة الأمل"})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


def test_generate_questions_provider_failure(client, failing_chain):
    app.dependency_overrides[get_questions_chain] = lambda: failing_chain

    response = client.post("/generate-questions", json={
        "storyContent": "نص القصة",
        "storyTitle": "رحلة الأمل",
        "difficulty": "hard",
        "gradeLevel": 4,
    })

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate questions"}


def test_unhandled_errors_return_json_500():
    broken_app = FastAPI()
    register_exception_handlers(broken_app)

    @broken_app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    with TestClient(broken_app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}

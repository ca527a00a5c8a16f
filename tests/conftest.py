"""
Shared fixtures for the story grader tests.
Completion chains are replaced with LangChain fakes: no network calls.
"""
import os

# Settings are read at import time
os.environ.setdefault("GROQ_API_KEY", "test-key")

import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.runnables import RunnableLambda

from story_grader.main import app
from story_grader.services.dialogue.chains import create_completion_chain


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def grading_payload():
    """Request body of the single-question story used across tests."""
    return {
        "questions": [
            {
                "id": "q1",
                "text_arabic": "ما اسم البطل؟",
                "type": "short_answer",
                "required": True,
            }
        ],
        "answers": {"q1": "أحمد"},
        "storyContent": "كان يا ما كان، ولد اسمه أحمد يحب القراءة.",
        "storyTitle": "قصة أحمد",
        "difficulty": "easy",
        "gradeLevel": 2,
    }


@pytest.fixture
def feedback_payload(grading_payload):
    return {
        "questions": grading_payload["questions"],
        "answers": grading_payload["answers"],
        "storyTitle": grading_payload["storyTitle"],
        "studentName": "سارة",
        "grade": 90,
    }


@pytest.fixture
def make_chain():
    """Build a completion chain whose model replies with the given texts in turn."""
    def _make(*responses):
        return create_completion_chain(FakeListChatModel(responses=list(responses)))
    return _make


@pytest.fixture
def failing_chain():
    def _raise(_):
        raise ConnectionError("provider unavailable")
    return RunnableLambda(_raise)


@pytest.fixture
def recorded_prompts():
    return []


@pytest.fixture
def recording_chain(recorded_prompts):
    """Chain that records every prompt into recorded_prompts and replies with a fixed grade."""
    def _record(inputs):
        recorded_prompts.append(inputs["prompt"])
        return "GRADE: 90\nFEEDBACK: عمل رائع"

    return RunnableLambda(_record)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

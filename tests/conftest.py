"""Shared fixtures: a fresh SQLite file per test, services and an HTTP client."""

import pytest
from fastapi.testclient import TestClient

from forum_api.app.core.config import Settings
from forum_api.app.core.db import Database
from forum_api.app.main import create_app
from forum_api.app.schemas.answer import AnswerCreate
from forum_api.app.schemas.question import QuestionCreate
from forum_api.app.services.answer_service import AnswerService
from forum_api.app.services.question_service import QuestionService


@pytest.fixture
def db(tmp_path):
    database = Database(str(tmp_path / "forum.db"), busy_timeout=1.0, statement_timeout=5.0)
    database.init_db()
    yield database
    database.close()


@pytest.fixture
def questions(db) -> QuestionService:
    return QuestionService(db)


@pytest.fixture
def answers(db) -> AnswerService:
    return AnswerService(db)


@pytest.fixture
def make_question(questions):
    def _make(title="How do I learn Python?", description="Looking for resources", category="Software"):
        return questions.create_question(
            QuestionCreate(title=title, description=description, category=category)
        )

    return _make


@pytest.fixture
def make_answer(answers):
    def _make(question_id, content="Read the tutorial."):
        return answers.create_answer(question_id, AnswerCreate(content=content))

    return _make


@pytest.fixture
def client(tmp_path):
    settings = Settings(database_url=str(tmp_path / "api.db"), log_level="WARNING")
    with TestClient(create_app(settings)) as test_client:
        yield test_client

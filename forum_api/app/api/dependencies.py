"""
FastAPI dependencies that hand the services their store handle.

The ``Database`` instance lives on ``app.state`` for the lifetime of the
application; services are cheap wrappers built per request.
"""

from fastapi import Depends, Request

from forum_api.app.core.db import Database
from forum_api.app.services.answer_service import AnswerService
from forum_api.app.services.question_service import QuestionService


def get_db(request: Request) -> Database:
    """Return the application's store handle."""
    return request.app.state.db


def get_question_service(db: Database = Depends(get_db)) -> QuestionService:
    return QuestionService(db)


def get_answer_service(db: Database = Depends(get_db)) -> AnswerService:
    return AnswerService(db)

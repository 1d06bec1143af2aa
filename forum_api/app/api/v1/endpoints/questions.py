"""
Question endpoints for API v1.

These routes expose create, list, search, fetch, update and delete for
questions.  Path identifiers are taken as strings and parsed by the
service, so ``/questions/abc`` is a 400 rather than FastAPI's 422.
Errors raised by the service are rendered by the application's
``ForumError`` handler; the handlers here only shape success
responses.

``/search`` is declared before ``/{question_id}`` so that it is not
captured as an identifier.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from forum_api.app.api.dependencies import get_question_service
from forum_api.app.schemas.question import (
    MessageResponse,
    QuestionCreate,
    QuestionListResponse,
    QuestionResponse,
    QuestionUpdate,
)
from forum_api.app.services.question_service import QuestionService

router = APIRouter()


@router.post("", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED)
def create_question(
    question_in: QuestionCreate,
    service: QuestionService = Depends(get_question_service),
) -> QuestionResponse:
    """Create a new question."""
    question = service.create_question(question_in)
    return QuestionResponse(message="Question created successfully.", data=question)


@router.get("", response_model=QuestionListResponse)
def list_questions(
    service: QuestionService = Depends(get_question_service),
) -> QuestionListResponse:
    """Return all questions, most recent first.  An empty list is not an error."""
    return QuestionListResponse(data=service.list_questions())


@router.get("/search", response_model=QuestionListResponse)
def search_questions(
    title: Optional[str] = Query(None, description="Case-insensitive substring of the title"),
    category: Optional[str] = Query(None, description="Case-insensitive substring of the category"),
    service: QuestionService = Depends(get_question_service),
) -> QuestionListResponse:
    """Search questions by title and/or category.

    At least one of ``title`` or ``category`` is required; when both are
    given a question has to match both.
    """
    return QuestionListResponse(data=service.search_questions(title=title, category=category))


@router.get("/{question_id}", response_model=QuestionResponse, response_model_exclude_none=True)
def get_question(
    question_id: str,
    service: QuestionService = Depends(get_question_service),
) -> QuestionResponse:
    return QuestionResponse(data=service.get_question(question_id))


@router.put("/{question_id}", response_model=QuestionResponse)
def update_question(
    question_id: str,
    question_in: QuestionUpdate,
    service: QuestionService = Depends(get_question_service),
) -> QuestionResponse:
    """Update a question's title and description, and its category if given."""
    question = service.update_question(question_id, question_in)
    return QuestionResponse(message="Question updated successfully.", data=question)


@router.delete("/{question_id}", response_model=MessageResponse)
def delete_question(
    question_id: str,
    service: QuestionService = Depends(get_question_service),
) -> MessageResponse:
    """Delete a question and all of its answers."""
    service.delete_question(question_id)
    return MessageResponse(message="Question post has been deleted successfully.")

"""
Answer endpoints for API v1.

Answers are nested under their question: ``/questions/{id}/answers``.
The router is mounted with the same prefix as the question router.
"""

from fastapi import APIRouter, Depends, status

from forum_api.app.api.dependencies import get_answer_service
from forum_api.app.schemas.answer import AnswerCreate, AnswerListResponse, AnswerResponse
from forum_api.app.schemas.question import MessageResponse
from forum_api.app.services.answer_service import AnswerService

router = APIRouter()


@router.post(
    "/{question_id}/answers",
    response_model=AnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_answer(
    question_id: str,
    answer_in: AnswerCreate,
    service: AnswerService = Depends(get_answer_service),
) -> AnswerResponse:
    """Create an answer (at most 300 characters) for a question."""
    answer = service.create_answer(question_id, answer_in)
    return AnswerResponse(message="Answer created successfully.", data=answer)


@router.get("/{question_id}/answers", response_model=AnswerListResponse)
def list_answers(
    question_id: str,
    service: AnswerService = Depends(get_answer_service),
) -> AnswerListResponse:
    return AnswerListResponse(data=service.list_answers(question_id))


@router.delete("/{question_id}/answers", response_model=MessageResponse)
def delete_answers(
    question_id: str,
    service: AnswerService = Depends(get_answer_service),
) -> MessageResponse:
    """Delete all answers of a question; succeeds when there are none."""
    service.delete_answers(question_id)
    return MessageResponse(message="All answers for the question have been deleted successfully.")

"""
Pydantic schemas for answers.

An answer is a short text (at most 300 characters) attached to exactly
one question.  The length limit is enforced by the answer service so
that violations surface as HTTP 400 with the API's message envelope.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class AnswerCreate(BaseModel):
    """Schema for creating a new answer."""

    content: Optional[str] = Field(None, description="Answer text, 1 to 300 characters")


class AnswerRead(BaseModel):
    """Schema for reading an answer."""

    id: int
    question_id: int
    content: str
    created_at: str
    updated_at: str

    model_config = {
        "from_attributes": True,
    }


class AnswerResponse(BaseModel):
    message: Optional[str] = None
    data: AnswerRead


class AnswerListResponse(BaseModel):
    data: List[AnswerRead]

"""
Pydantic schemas for questions.

A question is a discussion topic with a title, a description and a
free-form category tag such as ``Software`` or ``Food``.  Request
fields are declared optional so that missing values reach the service
layer, which reports them as ``ValidationError`` (HTTP 400) instead of
FastAPI's default 422.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class QuestionCreate(BaseModel):
    """Schema for creating a new question."""

    title: Optional[str] = Field(None, description="Question title")
    description: Optional[str] = Field(None, description="Question body")
    category: Optional[str] = Field(None, description="Category tag, e.g. Software, Food, Travel")


class QuestionUpdate(BaseModel):
    """Schema for updating a question.

    ``title`` and ``description`` are required.  ``category`` may be
    omitted, in which case the stored category is kept.
    """

    title: Optional[str] = Field(None, description="New question title")
    description: Optional[str] = Field(None, description="New question body")
    category: Optional[str] = Field(None, description="New category tag; omit to keep the current one")


class QuestionRead(BaseModel):
    """Schema for reading a question."""

    id: int
    title: str
    description: str
    category: str
    created_at: str
    updated_at: str

    model_config = {
        "from_attributes": True,
    }


class QuestionResponse(BaseModel):
    message: Optional[str] = None
    data: QuestionRead


class QuestionListResponse(BaseModel):
    data: List[QuestionRead]


class MessageResponse(BaseModel):
    message: str

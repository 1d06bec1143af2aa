"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers.  Questions and their
answers share the ``/questions`` prefix; the answer routes only
declare paths below ``/{question_id}/answers``.
"""

from fastapi import APIRouter

from .endpoints import answers, info, questions

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(questions.router, prefix="/questions", tags=["questions"])
router.include_router(answers.router, prefix="/questions", tags=["answers"])

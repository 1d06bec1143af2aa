"""
Liveness endpoint for API v1.

``GET /test`` answers without touching the database so that a load
balancer or a developer can check that the process is serving.
"""

from fastapi import APIRouter

router = APIRouter()


@router.get("/test", response_model=str)
def get_status() -> str:
    return "Server API is working 🚀"

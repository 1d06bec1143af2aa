"""
Top‑level package for the Forum Questions API.

All functionality lives in submodules under ``app``; modules import
each other by fully qualified names such as
``forum_api.app.services.question_service``.
"""

__all__ = []

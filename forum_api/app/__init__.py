"""
Application package initializer.

The API is split into layers: ``core`` (configuration, logging, the
store handle and the error taxonomy), ``schemas`` (request and
response models), ``services`` (validation and persistence logic) and
``api`` (versioned FastAPI routers).  Each domain exposes a router in
``api/v1/endpoints``.
"""

from .main import app  # noqa: F401

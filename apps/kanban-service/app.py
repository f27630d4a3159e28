"""
App assembly entry point.

Re-exports the FastAPI `app` from `kanban.api.main` for ASGI servers.
"""

from kanban.api.main import app  # noqa: F401

"""
FastAPI app assembly: logging, router wiring and storage error handling.
"""
import logging
import os
from fastapi import FastAPI
from starlette.requests import Request
from starlette.responses import JSONResponse

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from kanban.db.errors import RepositoryError
from kanban.api.tags import router as tags_router
from kanban.api.users import router as users_router
from kanban.api.work_items import router as work_items_router

# Schema is created with scripts/init_db.py (or init_db() in tests).

app = FastAPI(
    title="Kanban Service",
    description="API for managing users, tags and work items on a Kanban board.",
    version="1.0.0",
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False


@app.exception_handler(RepositoryError)
async def repository_error_handler(request: Request, exc: RepositoryError):
    logger.error("storage_failure: path=%s error=%s", request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})


app.include_router(users_router)
app.include_router(tags_router)
app.include_router(work_items_router)


@app.get("/health")
def health():
    return {"status": "ok"}

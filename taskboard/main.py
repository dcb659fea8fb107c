import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskboard.core.config import settings
from taskboard.core.database import engine, Base
from taskboard.core.errors import TaskBoardError
from taskboard.models import user, task, comment  # noqa: F401  enregistre les tables
from taskboard.routers import health, auth, tasks, comments

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Init DB
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="TaskBoard API",
    version="1.0.0"
)


@app.exception_handler(TaskBoardError)
async def taskboard_error_handler(request: Request, exc: TaskBoardError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part not in ("body", "query", "path"))
        errors[field or "request"] = error["msg"]
    return JSONResponse(status_code=400, content={"detail": "Validation failed", "errors": errors})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # le détail reste dans les logs, pas dans la réponse
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# Routes
app.include_router(health.router, prefix="/health")
app.include_router(auth.router)
app.include_router(tasks.router)
app.include_router(comments.router)

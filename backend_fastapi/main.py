import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend_fastapi.api.routes.health import router as health_router
from backend_fastapi.api.routes.tasks import router as tasks_router
from core.domain.errors import STATUS_CHOICES
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import build_task_repository
from infrastructure.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError, method: str = "POST") -> str:
    """Turns the first pydantic error into a short client-facing message."""
    errors = exc.errors()
    if not errors:
        return "invalid request"
    error = errors[0]
    loc = tuple(error.get("loc", ()))
    if error.get("type") == "json_invalid":
        return "request body must be valid JSON"
    if loc == ("body",):
        return "request body must be a JSON object"
    field = loc[-1] if loc else ""
    if field == "title":
        if method == "PUT":
            return "title must be a string"
        return "title is required and must be a string"
    if field == "status":
        return f"status must be one of {STATUS_CHOICES}"
    return f"{field}: {error.get('msg', 'invalid value')}"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_error(exc, request.method)
    return JSONResponse(status_code=400, content={"error": message})


def create_app(
    repository: TaskRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Builds the Task Manager API.

    Args:
        repository: Task store to serve. Built from `settings` when omitted.
        settings: Process configuration. Read from the environment when omitted.
    """
    settings = settings or load_settings()
    if repository is None:
        repository = build_task_repository(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            app.state.task_repository.check_connection()
        except Exception as e:
            logger.error(f"Task store connection error: {e}")
            raise
        yield

    app = FastAPI(title="Task Manager API", lifespan=lifespan)
    app.state.task_repository = repository

    # Configure CORS for the console / browser clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health_router)
    app.include_router(tasks_router)
    return app


app = create_app()

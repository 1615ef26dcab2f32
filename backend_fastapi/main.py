import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend_fastapi.api.routes.tasks import router as tasks_router
from core.domain.errors import MalformedIdentifierError, NotFoundError, ValidationError
from infrastructure.config import Settings
from infrastructure.container import Container, build_container
from infrastructure.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.message, "field": exc.field},
    )


def _request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Cuerpo que no es JSON válido.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Request body must be valid JSON", "field": "body"},
    )


def _malformed_id(request: Request, exc: MalformedIdentifierError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid Task ID format"},
    )


def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": "Task not found"},
    )


def _internal_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


def create_app(
    settings: Settings | None = None, container: Container | None = None
) -> FastAPI:
    """
    Construye la aplicación FastAPI.

    Argumentos:
        settings (Settings | None): Configuración; por defecto se lee del entorno.
        container (Container | None): Casos de uso ya construidos (tests).
            Si no se pasa, se construye el repositorio indicado en `settings`.

    Retorna:
        FastAPI: La aplicación lista para servir.
    """
    if settings is None:
        settings = Settings.from_env()
        setup_logging(settings.log_level)

    app = FastAPI(title="Task Manager API")
    if container is None:
        container = build_container(settings)
    app.state.container = container

    # Configure CORS for frontend from environment variables
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(MalformedIdentifierError, _malformed_id)
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(Exception, _internal_error)

    @app.get("/", include_in_schema=False)
    def root() -> dict[str, str]:
        return {"message": "Task Manager API Running"}

    app.include_router(tasks_router)
    return app

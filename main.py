import uvicorn

from infrastructure.config import Settings
from infrastructure.logging_setup import setup_logging


def run() -> None:
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    print(
        f"Starting server at http://{settings.host}:{settings.port} "
        f"(Reload: {settings.reload}, Store: {settings.task_store})"
    )

    uvicorn.run(
        "backend_fastapi.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()

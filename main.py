import logging

import uvicorn

from infrastructure.logging_setup import setup_logging
from infrastructure.settings import load_settings

logger = logging.getLogger(__name__)


def run() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)

    logger.info(
        f"Starting Task Manager API at http://{settings.host}:{settings.port} "
        f"(storage: {settings.storage_mode}, reload: {settings.reload})"
    )

    uvicorn.run(
        "backend_fastapi.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()

"""Run the service with uvicorn: ``python -m ai_search``."""

import uvicorn

from ai_search.core.config.settings import get_settings


def main() -> None:
    settings = get_settings()

    uvicorn.run(
        "ai_search.application.app:app",
        host=settings.app.API_HOST,
        port=settings.app.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.logging.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()

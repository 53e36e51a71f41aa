import logging

import uvicorn

from src.config.settings import get_settings


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    # Run FastAPI app from src.main:app
    uvicorn.run(
        "src.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.reload,
        log_level=logging.getLevelName(settings.log_level).lower(),
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

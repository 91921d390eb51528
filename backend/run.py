"""Entry point — starts the FastAPI backend (``python -m backend.run``)."""

import uvicorn

from config import ensure_dirs
from backend.config import ServerSettings


def main(reload: bool = False):
    settings = ServerSettings.from_env()
    ensure_dirs()
    uvicorn.run(
        "backend.app.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main(reload=True)

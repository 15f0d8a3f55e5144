"""
Album Catalog Backend — Server Entrypoint
==========================================

Usage:
    python -m album_catalog

Binds to settings.host:settings.port (default localhost:3000). Equivalent to
`uvicorn album_catalog.main:app --host localhost --port 3000`.
"""

import uvicorn

from album_catalog.config import settings


def main() -> None:
    uvicorn.run(
        "album_catalog.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

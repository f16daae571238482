"""
Noteful API — Server Entry Point
================================

What:  `noteful-server` console script; runs uvicorn on HOST:PORT.
"""

import uvicorn

from noteful.config import settings


def main() -> None:
    uvicorn.run(
        "noteful.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

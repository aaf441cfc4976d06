"""
Blog API Backend — Command-Line Entry Point
============================================

Usage:
    python -m blogapi              # listens on 0.0.0.0:8080
    PORT=3000 python -m blogapi    # custom port
    blog-api                       # console script installed by pip

Configuration comes from the environment (see blogapi.config). If the
database cannot be reached at startup, uvicorn aborts and the process exits
with a non-zero status.
"""

import uvicorn

from blogapi.config import settings


def main() -> None:
    uvicorn.run(
        "blogapi.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""Serve the catalog with uvicorn: ``python -m bookcatalog``.

Host and port come from ``HOST`` and ``PORT`` (see ``config.Settings``).
"""

import uvicorn

from .config import settings


def main() -> None:
    uvicorn.run("bookcatalog.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

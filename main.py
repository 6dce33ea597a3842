"""Run the elevation profile HTTP API.

Host, port and auto-reload come from ``GPX_PROFILE_HOST``, ``GPX_PROFILE_PORT``
and ``GPX_PROFILE_RELOAD``.
"""

import logging

import uvicorn

from gpx_profile.config import get_settings


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "gpx_profile.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

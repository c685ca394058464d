"""Secrets entrypoint.

Run with:
  python -m secrets_app
"""

import logging

import uvicorn

from secrets_app.core import HOST, PORT, RELOAD, configure_logging

logger = logging.getLogger("secrets_app")


def main() -> None:
    uvicorn_log_level = configure_logging()
    logger.info("Server running on %s:%d", HOST, PORT)
    uvicorn.run("secrets_app.app:app", host=HOST, port=PORT, reload=RELOAD, log_level=uvicorn_log_level)


if __name__ == "__main__":
    main()

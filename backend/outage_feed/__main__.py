"""Run the API with uvicorn: ``python -m outage_feed``."""

import logging

import uvicorn

from outage_feed.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run("outage_feed.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

# ticketdesk/__main__.py
import logging

import uvicorn

from ticketdesk.core.config import get_settings

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Server listening on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run("ticketdesk.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()

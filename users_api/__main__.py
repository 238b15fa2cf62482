"""Run the API with uvicorn: ``python -m users_api``."""
import logging

import uvicorn

from users_api.core.config import get_settings
from users_api.main import configure_logging, create_application

logger = logging.getLogger("users_api")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_application(settings)
    logger.info("Server running at http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

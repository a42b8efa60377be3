"""Run the storefront with uvicorn: ``python -m storefront``."""
import logging

import uvicorn

from storefront.core.config import get_settings
from storefront.core.logs import configure_logging

logger = logging.getLogger("storefront")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Storefront running on http://%s:%s", settings.host, settings.port)
    uvicorn.run("storefront.app:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

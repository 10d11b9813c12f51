"""Run the API with uvicorn on $PORT (python -m availability)."""

import logging

import uvicorn

from availability.config import get_settings
from availability.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"listening on port {settings.port}")
    uvicorn.run(
        "availability.main:app",
        host="0.0.0.0",
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips="*",
        log_config=None,
    )


if __name__ == "__main__":
    main()

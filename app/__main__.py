"""
Run the Movies API with uvicorn.

Usage:
    python -m app
    PORT=8080 LOG_LEVEL=DEBUG movies-api
"""

import uvicorn

from app.api.config import get_api_host, get_api_port, get_log_file, get_log_level
from app.utils.logging_config import configure_api_logging, get_logger

logger = get_logger(__name__)


def main() -> None:
    configure_api_logging(log_file=get_log_file(), level=get_log_level())
    host = get_api_host()
    port = get_api_port()
    logger.info("server listening on port http://localhost:%d", port)
    uvicorn.run(
        "app.api.main:app",
        host=host,
        port=port,
        server_header=False,
        log_config=None,
    )


if __name__ == "__main__":
    main()

"""Run the API server: `python -m docportal` (or the `docportal` console script).

Exits with status 1 when configuration is missing or invalid.
"""

import logging
import sys

from pydantic import ValidationError

from docportal.core.config import get_settings
from docportal.shared.logging import get_logger

logger = get_logger("docportal")


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    import uvicorn

    from docportal.main import create_app

    uvicorn.run(create_app(), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

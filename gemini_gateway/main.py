"""Process entrypoint for running the API.

Usage:
- gemini-gateway
- python -m gemini_gateway.main

Configuration is validated before the app is built; a missing credential
aborts the process without binding a listener.
"""

from __future__ import annotations

import logging
import sys

from gemini_gateway import create_app
from gemini_gateway.config import Config, check_config

logger = logging.getLogger("gemini_gateway")


def main() -> None:
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    check = check_config(Config)
    if not check.ok:
        logger.error("Invalid configuration: %s", check.error)
        sys.exit(1)

    app = create_app(Config)
    port = int(Config.PORT)
    logger.info("Server ready on http://%s:%s (model %s)", Config.HOST, port, Config.GEMINI_MODEL)
    app.run(host=Config.HOST, port=port, threaded=True)


if __name__ == "__main__":
    main()

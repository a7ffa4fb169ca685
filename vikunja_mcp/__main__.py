"""Entry point for running the Vikunja MCP server on stdio.

Usage:
    python -m vikunja_mcp
"""

import asyncio
import logging
import sys

from .core.config import Settings
from .server.server import create_mcp_server
from .utils.logging_config import setup_logging

logger = logging.getLogger("vikunja_mcp")


async def run() -> None:
    """Load settings and serve until stdin closes."""
    settings = Settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    logger.info(f"Vikunja API base: {settings.vikunja_api_base or '(not set)'}")
    logger.info(f"Time zone: {settings.timezone}")

    server = create_mcp_server(settings)
    await server.run()


def main() -> None:
    """Console script entry point."""
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.exception(f"Fatal error in main(): {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Centralized logging configuration.

Logs go to stderr; stdout is reserved for the MCP stdio transport.
"""

import logging
import sys
from pathlib import Path


def setup_logging(
    name: str = "vikunja_mcp",
    level: str = "INFO",
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure logging with consistent format.

    Args:
        name: Logger name to return
        level: Log level name (e.g. "INFO", "DEBUG")
        log_file: Optional file path for logging output

    Returns:
        Configured logger instance
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,  # Override any existing configuration
    )
    # httpx logs full request URLs at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logging.getLogger(name)

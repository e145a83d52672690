"""Composition root for the duedate system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Logging setup
- Adapter instantiation
- Core service initialization
"""

import logging
import sys

from duedate.adapters.logging.stdlib import StdlibLoggerAdapter
from duedate.config import Settings, load_settings
from duedate.core.calculator import DueDateCalculator


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_calculator(settings: Settings | None = None) -> DueDateCalculator:
    """Load configuration, wire the logger adapter, and build the calculator.

    Steps:
    1. Load configuration from environment (unless given)
    2. Configure logging
    3. Wrap the configured logger in a LoggerPort adapter
    4. Initialize the calculator with it

    Raises:
        ValidationError: If settings loaded from the environment are invalid.
    """
    # Step 1: Load configuration
    if settings is None:
        settings = load_settings()

    # Step 2: Configure logging
    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    # Step 3: Instantiate adapters
    task_logger = StdlibLoggerAdapter(logging.getLogger(settings.logger_name))
    logger.debug(f"Calculator logger: {settings.logger_name}")

    # Step 4: Initialize core services
    return DueDateCalculator(logger=task_logger)

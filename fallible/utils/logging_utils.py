"""
Logging utilities for fallible.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. Applications (and tests) that want to see
what the async wrappers absorb call ``setup_logger``.
"""

import sys
import logging
from typing import Optional

from fallible.utils.config_manager import FallibleConfig, config as default_config

_HANDLER_NAME = "fallible-console"


def setup_logger(
    logger_name: str = "fallible",
    debug_mode: Optional[bool] = None,
    settings: Optional[FallibleConfig] = None,
) -> logging.Logger:
    """
    Set up a logger with a console handler and formatter.

    Args:
        logger_name: Name of the logger
        debug_mode: Force DEBUG level on or off (overrides config if provided)
        settings: Configuration to use instead of the global one

    Returns:
        logging.Logger: Configured logger instance
    """
    settings = settings or default_config

    # Get debug mode from config if not explicitly provided
    if debug_mode is None:
        debug_mode = settings.get_debug_mode(logger_name.split(".")[-1])

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG if debug_mode else settings.logging.level)

    # Reuse the console handler from an earlier call
    existing = [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]
    for handler in existing:
        logger.removeHandler(handler)

    if settings.logging.console_logging:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(settings.logging.log_format))
        logger.addHandler(console_handler)

    logger.debug(f"{logger_name} initialized with debug_mode={debug_mode}")
    return logger

"""
Utilities module for fallible.

Configuration, logging setup and the package's error types.
"""

# Re-export the configuration manager for easy imports
from fallible.utils.config_manager import config, FallibleConfig, ConfigurationError, get_debug_mode
from fallible.utils.error_manager import ErrorCode, FallibleError, UnwrapError
from fallible.utils.logging_utils import setup_logger

__all__ = [
    "config", "FallibleConfig", "ConfigurationError", "get_debug_mode",
    "ErrorCode", "FallibleError", "UnwrapError",
    "setup_logger",
]

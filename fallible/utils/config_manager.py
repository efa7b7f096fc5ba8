"""
Configuration Manager for fallible.

Settings come from default values, overridden by ``FALLIBLE_*`` environment
variables or an explicit dictionary. The containers themselves have no
tunables; configuration covers the ambient logging and debug behaviour.
"""

import os
import logging
from typing import Dict, Any, Mapping, Optional
from dataclasses import dataclass, field, asdict

from fallible.utils.error_manager import ErrorCode, FallibleError

ENV_PREFIX = "FALLIBLE_"
TRUE_VALUES = ["true", "1", "yes"]


class ConfigurationError(FallibleError):
    """Exception raised for configuration errors."""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.CONFIG_INVALID)


@dataclass
class LoggingConfig:
    """Configuration settings for logging."""

    log_level: str = "WARNING"
    console_logging: bool = True
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __post_init__(self):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if str(self.log_level).upper() not in valid_levels:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level}. Must be one of {valid_levels}"
            )

        self.log_level = self.log_level.upper()

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)


@dataclass
class DebugConfig:
    """Configuration settings for debugging."""

    global_debug: bool = False
    module_debug: Dict[str, bool] = field(default_factory=dict)

    def is_debug_enabled(self, module_name: str) -> bool:
        """
        Check if debug is enabled for a module.

        Args:
            module_name: Name of the module

        Returns:
            bool: Whether debug is enabled for the module
        """
        # First check environment variable
        env_var = f"{ENV_PREFIX}DEBUG_{module_name.upper()}"
        if env_var in os.environ:
            return os.environ[env_var].lower() in TRUE_VALUES

        # Then check module_debug dict
        if module_name in self.module_debug:
            return self.module_debug[module_name]

        # Fall back to global debug setting
        return self.global_debug


@dataclass
class FallibleConfig:
    """
    Central configuration class for fallible.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FallibleConfig":
        """
        Create a configuration instance from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            FallibleConfig: Configuration with values from the environment
        """
        environ = os.environ if environ is None else environ
        config = cls()

        for env_name, env_value in environ.items():
            if not env_name.startswith(ENV_PREFIX):
                continue

            # Handle global debug setting
            if env_name == f"{ENV_PREFIX}DEBUG":
                config.debug.global_debug = env_value.lower() in TRUE_VALUES
                continue

            # Module-specific debug settings
            if env_name.startswith(f"{ENV_PREFIX}DEBUG_"):
                module_name = env_name.replace(f"{ENV_PREFIX}DEBUG_", "", 1).lower()
                config.debug.module_debug[module_name] = env_value.lower() in TRUE_VALUES
                continue

            # Extract configuration section and key
            parts = env_name.replace(ENV_PREFIX, "", 1).lower().split("_", 1)
            if len(parts) != 2:
                continue

            section, key = parts
            if hasattr(config, section) and hasattr(getattr(config, section), key):
                section_obj = getattr(config, section)
                current_value = getattr(section_obj, key)
                setattr(section_obj, key, _coerce(env_value, current_value))

        # Re-run validation on the updated sections
        config.logging.__post_init__()
        return config

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FallibleConfig":
        """
        Build a configuration from a nested dictionary.

        Unknown sections and keys are ignored.
        """
        config = cls()

        for section_name, section_data in data.items():
            if not hasattr(config, section_name):
                continue

            section = getattr(config, section_name)
            for key, value in section_data.items():
                if hasattr(section, key):
                    setattr(section, key, value)

        config.logging.__post_init__()
        return config

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to a dictionary.

        Returns:
            Dict[str, Any]: Configuration as a nested dictionary
        """
        return {
            "logging": asdict(self.logging),
            "debug": {
                "global_debug": self.debug.global_debug,
                "module_debug": dict(self.debug.module_debug),
            },
        }

    def get_debug_mode(self, module_name: str) -> bool:
        """Get debug mode for a specific module."""
        return self.debug.is_debug_enabled(module_name)


def _coerce(raw: str, current: Any) -> Any:
    """Convert an environment string to the type of the field it overrides."""
    if isinstance(current, bool):
        return raw.lower() in TRUE_VALUES
    return raw


# Global configuration instance
# This will be initialized with defaults and environment variables
config = FallibleConfig.from_env()


def get_debug_mode(module_name: str) -> bool:
    """
    Get debug mode for a specific module.

    Args:
        module_name: Name of the module

    Returns:
        bool: Whether debug is enabled for the module
    """
    return config.get_debug_mode(module_name)

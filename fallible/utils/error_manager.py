"""
Error management for fallible.

The containers in this package model absence and failure as ordinary values,
so the only exception the package itself raises during normal use is
UnwrapError: the signal that calling code performed an unchecked extraction
against a state that cannot satisfy it.
"""

import logging
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

# Configure module logger
logger = logging.getLogger(__name__)

E = TypeVar("E")


class ErrorCode(Enum):
    """
    Standard error codes for fallible.

    Format: CATEGORY_DESCRIPTION
    """

    # Extraction errors
    UNWRAP_FAILED = "UNWRAP_FAILED"

    # Configuration errors
    CONFIG_INVALID = "CONFIG_INVALID"

    # General errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class FallibleError(Exception):
    """
    Base exception class for fallible.

    Carries a plain message and an ErrorCode; ``str()`` renders as
    ``"<CODE>: <message>"``.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN_ERROR):
        """
        Initialize a FallibleError.

        Args:
            message: Error message
            code: Error code
        """
        self.message = message
        self.code = code

        super().__init__(f"{code.value}: {message}")

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(self._format_for_logging())

    def _format_for_logging(self) -> str:
        """Format the error for logging."""
        return f"[{self.code.value}] {type(self).__name__}: {self.message}"


class UnwrapError(FallibleError, Generic[E]):
    """
    Raised when an ``unwrap`` or ``unwrap_err`` call hits the wrong variant.

    ``error`` holds the unexpected payload that was present instead:

    * ``Err.unwrap``: the Result's error value
    * ``Ok.unwrap_err``: the Result's success value
    * ``Nothing.unwrap``: ``None``
    """

    def __init__(self, message: str, error: Optional[E] = None):
        self.error = error
        super().__init__(message, code=ErrorCode.UNWRAP_FAILED)

    def __repr__(self) -> str:
        return f"UnwrapError({self.message!r}, error={self.error!r})"


def format_payload(payload: Any, limit: int = 80) -> str:
    """Render a payload for an error message, truncating long reprs."""
    text = repr(payload)
    if len(text) > limit:
        text = text[: limit - 3] + "..."
    return text

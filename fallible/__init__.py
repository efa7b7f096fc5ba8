"""
fallible: Option and Result values, with asyncio wrappers.

This package lets code represent "no value" and "failure" as ordinary values
and chain transformations over them without presence or error checks at
every step.
"""

__version__ = "0.1.0"

from fallible.monads import (
    Option, Some, Nothing, OptionT, some, nothing,
    Result, Ok, Err, ResultT, ok, err, try_result,
    AsyncOption, AsyncResult,
)
from fallible.utils.error_manager import FallibleError, UnwrapError

__all__ = [
    "Option", "Some", "Nothing", "OptionT", "some", "nothing",
    "Result", "Ok", "Err", "ResultT", "ok", "err", "try_result",
    "AsyncOption", "AsyncResult",
    "FallibleError", "UnwrapError",
]

"""Monadic types for values that may be absent or may have failed."""

from .option import Option, Some, Nothing, OptionT, some, nothing
from .result import Result, Ok, Err, ResultT, ok, err, try_result
from .async_option import AsyncOption
from .async_result import AsyncResult

__all__ = [
    # Option monad
    'Option', 'Some', 'Nothing', 'OptionT', 'some', 'nothing',
    # Result monad
    'Result', 'Ok', 'Err', 'ResultT', 'ok', 'err', 'try_result',
    # Async wrappers
    'AsyncOption', 'AsyncResult',
]

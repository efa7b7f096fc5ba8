"""Result monad for error handling without exceptions."""

from __future__ import annotations
from typing import TypeVar, Generic, Callable, Iterator, Optional, Union, Any, Type
from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging

from .option import Option, Some, Nothing
from ..utils.error_manager import UnwrapError, format_payload

logger = logging.getLogger(__name__)

T = TypeVar('T')
E = TypeVar('E')
U = TypeVar('U')
F = TypeVar('F')
R = TypeVar('R')


class Result(ABC, Generic[T, E]):
    """
    Result monad representing either success (Ok) or failure (Err).

    This provides a functional way to handle errors without exceptions,
    enabling railway-oriented programming. The error payload ``E`` is
    opaque: it does not have to be an exception.
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> bool:
        """Check if this is an Ok result."""
        pass

    @abstractmethod
    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """Check if this is Ok and the predicate holds for the value."""
        pass

    @abstractmethod
    def is_err(self) -> bool:
        """Check if this is an Err result."""
        pass

    @abstractmethod
    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """Check if this is Err and the predicate holds for the error."""
        pass

    @abstractmethod
    def ok(self) -> Option[T]:
        """Project the success value into an Option."""
        pass

    @abstractmethod
    def err(self) -> Option[E]:
        """Project the error value into an Option."""
        pass

    @abstractmethod
    def unwrap(self, message: Optional[str] = None) -> T:
        """Get the value, raising UnwrapError if this is an error."""
        pass

    @abstractmethod
    def unwrap_err(self, message: Optional[str] = None) -> E:
        """Get the error, raising UnwrapError if this is Ok."""
        pass

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Get the value or return a default."""
        pass

    @abstractmethod
    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Get the value or compute it from the error."""
        pass

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Transform the value if Ok."""
        pass

    @abstractmethod
    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the error if Err."""
        pass

    @abstractmethod
    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """Apply ``f`` to the value, or return ``default`` if Err."""
        pass

    @abstractmethod
    def map_or_else(self, default_f: Callable[[E], U], f: Callable[[T], U]) -> U:
        """Apply ``f`` to the value, or ``default_f`` to the error."""
        pass

    @abstractmethod
    def inspect(self, f: Callable[[T], Any]) -> Result[T, E]:
        """Call ``f`` with the value for its side effect; return self."""
        pass

    @abstractmethod
    def inspect_err(self, f: Callable[[E], Any]) -> Result[T, E]:
        """Call ``f`` with the error for its side effect; return self."""
        pass

    @abstractmethod
    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return ``other`` if Ok, otherwise this Err."""
        pass

    @abstractmethod
    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain operations that return Results sharing this error type."""
        pass

    @abstractmethod
    def chain(self, f: Callable[[T], Result[U, F]]) -> Result[U, Union[E, F]]:
        """
        Chain an operation whose error type may differ from this one.

        The error type of the returned Result is the union of both, which is
        the closest thing to early-return error propagation.
        """
        pass

    @abstractmethod
    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Return this if Ok, otherwise ``other``."""
        pass

    @abstractmethod
    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Chain error recovery operations."""
        pass

    @abstractmethod
    def match(self, *, ok: Callable[[T], R], err: Callable[[E], R]) -> R:
        """Call exactly one of the handlers and return its result."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Iterate over the Ok value, if any."""
        pass

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Alias for and_then."""
        return self.and_then(f)

    def flatten(self: Result[Result[U, E], E]) -> Result[U, E]:
        """Remove one level of nesting from a Result of a Result."""
        return self.and_then(lambda inner: inner)

    def to_optional(self) -> Optional[T]:
        """Convert to Optional, losing error information."""
        return self.ok().to_optional()


@dataclass(frozen=True)
class Ok(Result[T, E]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        return bool(predicate(self.value))

    def is_err(self) -> bool:
        return False

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        return False

    def ok(self) -> Option[T]:
        return Some(self.value)

    def err(self) -> Option[E]:
        return Nothing()

    def unwrap(self, message: Optional[str] = None) -> T:
        return self.value

    def unwrap_err(self, message: Optional[str] = None) -> E:
        if message is None:
            message = f"Expected error but got Ok({format_payload(self.value)})"
        raise UnwrapError(message, self.value)

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        return Ok(self.value)

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return f(self.value)

    def map_or_else(self, default_f: Callable[[E], U], f: Callable[[T], U]) -> U:
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Result[T, E]:
        f(self.value)
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Result[T, E]:
        return self

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        return other

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return f(self.value)

    def chain(self, f: Callable[[T], Result[U, F]]) -> Result[U, Union[E, F]]:
        return f(self.value)

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        return Ok(self.value)

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return Ok(self.value)

    def match(self, *, ok: Callable[[T], R], err: Callable[[E], R]) -> R:
        return ok(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value


@dataclass(frozen=True)
class Err(Result[T, E]):
    """Error variant of Result."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        return bool(predicate(self.error))

    def ok(self) -> Option[T]:
        return Nothing()

    def err(self) -> Option[E]:
        return Some(self.error)

    def unwrap(self, message: Optional[str] = None) -> T:
        if message is None:
            message = f"Expected ok() but got Err({format_payload(self.error)})"
        raise UnwrapError(message, self.error)

    def unwrap_err(self, message: Optional[str] = None) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return f(self.error)

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return Err(self.error)

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        return Err(f(self.error))

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return default

    def map_or_else(self, default_f: Callable[[E], U], f: Callable[[T], U]) -> U:
        return default_f(self.error)

    def inspect(self, f: Callable[[T], Any]) -> Result[T, E]:
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Result[T, E]:
        f(self.error)
        return self

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        return Err(self.error)

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return Err(self.error)

    def chain(self, f: Callable[[T], Result[U, F]]) -> Result[U, Union[E, F]]:
        return Err(self.error)

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        return other

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return f(self.error)

    def match(self, *, ok: Callable[[T], R], err: Callable[[E], R]) -> R:
        return err(self.error)

    def __iter__(self) -> Iterator[T]:
        return iter(())


# Result type alias for better type hints
ResultT = Union[Ok[T, E], Err[T, E]]


# Helper functions for Result creation
def ok(value: T) -> Ok[T, Any]:
    """Create an Ok result."""
    return Ok(value)


def err(error: E) -> Err[Any, E]:
    """Create an Err result."""
    return Err(error)


def from_optional(opt: Optional[T], error: E) -> Result[T, E]:
    """Convert Python Optional to Result."""
    return Ok(opt) if opt is not None else Err(error)


def try_result(f: Callable[[], T],
               error_type: Type[BaseException] = Exception) -> Result[T, Any]:
    """
    Execute a function and wrap the result in Result.
    Catches exceptions of the specified type; anything else propagates.
    """
    try:
        return Ok(f())
    except error_type as e:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Exception captured by try_result: {e!r}")
        return Err(e)

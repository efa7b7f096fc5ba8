"""Option monad for handling optional values functionally."""

from __future__ import annotations
from typing import TypeVar, Generic, Callable, Iterator, Optional, Tuple, Union, Any, TYPE_CHECKING
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..utils.error_manager import UnwrapError

if TYPE_CHECKING:
    from .result import Result

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')
R = TypeVar('R')

NOTHING_UNWRAP_MESSAGE = "Called Option.unwrap on a Nothing value"


class Option(ABC, Generic[T]):
    """
    Option monad for handling optional values without null checks.
    Represents a value that might be present (Some) or absent (Nothing).

    Some and Nothing are the only variants; code that needs to branch on the
    hidden state uses ``match`` or one of the total operations
    (``unwrap_or``, ``map_or``, ...).
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> bool:
        """Check if this contains a value."""
        pass

    @abstractmethod
    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """Check if this contains a value and the predicate holds for it."""
        pass

    @abstractmethod
    def is_nothing(self) -> bool:
        """Check if this is empty."""
        pass

    @abstractmethod
    def is_nothing_or(self, predicate: Callable[[T], bool]) -> bool:
        """Check if this is empty, or the predicate holds for the value."""
        pass

    @abstractmethod
    def unwrap(self, message: Optional[str] = None) -> T:
        """Get the value, raising UnwrapError if this is Nothing."""
        pass

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Get the value or a default."""
        pass

    @abstractmethod
    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Get the value or compute a default."""
        pass

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Transform the value if present."""
        pass

    @abstractmethod
    def inspect(self, f: Callable[[T], Any]) -> Option[T]:
        """Call ``f`` with the value for its side effect; return self."""
        pass

    @abstractmethod
    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """Apply ``f`` to the value, or return ``default`` if Nothing."""
        pass

    @abstractmethod
    def map_or_else(self, default_f: Callable[[], U], f: Callable[[T], U]) -> U:
        """Apply ``f`` to the value, or compute a default if Nothing."""
        pass

    @abstractmethod
    def ok_or(self, error: E) -> Result[T, E]:
        """Convert to Result: Some(v) -> Ok(v), Nothing -> Err(error)."""
        pass

    @abstractmethod
    def ok_or_else(self, f: Callable[[], E]) -> Result[T, E]:
        """Like ok_or, computing the error only when Nothing."""
        pass

    @abstractmethod
    def and_(self, other: Option[U]) -> Option[U]:
        """Return ``other`` if this is Some, otherwise Nothing."""
        pass

    @abstractmethod
    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Monadic bind for Option."""
        pass

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Filter the value based on a predicate."""
        pass

    @abstractmethod
    def or_(self, other: Option[T]) -> Option[T]:
        """Return this if Some, otherwise ``other``."""
        pass

    @abstractmethod
    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return this if Some, otherwise the Option produced by ``f``."""
        pass

    @abstractmethod
    def xor(self, other: Option[T]) -> Option[T]:
        """Some if exactly one of this and ``other`` is Some, else Nothing."""
        pass

    @abstractmethod
    def zip(self, other: Option[U]) -> Option[Tuple[T, U]]:
        """Pair up the values if both are Some."""
        pass

    @abstractmethod
    def zip_with(self, other: Option[U], f: Callable[[T, U], R]) -> Option[R]:
        """Combine the values with ``f`` if both are Some."""
        pass

    @abstractmethod
    def match(self, *, some: Callable[[T], R], nothing: Callable[[], R]) -> R:
        """Call exactly one of the handlers and return its result."""
        pass

    @abstractmethod
    def to_optional(self) -> Optional[T]:
        """Convert to Python Optional."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Iterate over zero or one values."""
        pass

    def flatten(self: Option[Option[U]]) -> Option[U]:
        """Remove one level of nesting from an Option of an Option."""
        return self.and_then(lambda inner: inner)


@dataclass(frozen=True)
class Some(Option[T]):
    """Some variant containing a value."""
    value: T

    def is_some(self) -> bool:
        return True

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        return bool(predicate(self.value))

    def is_nothing(self) -> bool:
        return False

    def is_nothing_or(self, predicate: Callable[[T], bool]) -> bool:
        return bool(predicate(self.value))

    def unwrap(self, message: Optional[str] = None) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Option[U]:
        return Some(f(self.value))

    def inspect(self, f: Callable[[T], Any]) -> Option[T]:
        f(self.value)
        return self

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return f(self.value)

    def map_or_else(self, default_f: Callable[[], U], f: Callable[[T], U]) -> U:
        return f(self.value)

    def ok_or(self, error: E) -> Result[T, E]:
        from .result import Ok
        return Ok(self.value)

    def ok_or_else(self, f: Callable[[], E]) -> Result[T, E]:
        from .result import Ok
        return Ok(self.value)

    def and_(self, other: Option[U]) -> Option[U]:
        return other

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self if predicate(self.value) else Nothing()

    def or_(self, other: Option[T]) -> Option[T]:
        return self

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        return self

    def xor(self, other: Option[T]) -> Option[T]:
        return other.match(some=lambda _: Nothing(), nothing=lambda: self)

    def zip(self, other: Option[U]) -> Option[Tuple[T, U]]:
        return other.match(
            some=lambda other_value: Some((self.value, other_value)),
            nothing=Nothing,
        )

    def zip_with(self, other: Option[U], f: Callable[[T, U], R]) -> Option[R]:
        return other.match(
            some=lambda other_value: Some(f(self.value, other_value)),
            nothing=Nothing,
        )

    def match(self, *, some: Callable[[T], R], nothing: Callable[[], R]) -> R:
        return some(self.value)

    def to_optional(self) -> Optional[T]:
        return self.value

    def __iter__(self) -> Iterator[T]:
        yield self.value


class Nothing(Option[T]):
    """Nothing variant representing absence of value."""

    __slots__ = ()

    def is_some(self) -> bool:
        return False

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def is_nothing_or(self, predicate: Callable[[T], bool]) -> bool:
        return True

    def unwrap(self, message: Optional[str] = None) -> T:
        raise UnwrapError(message if message is not None else NOTHING_UNWRAP_MESSAGE, None)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return f()

    def map(self, f: Callable[[T], U]) -> Option[U]:
        return Nothing()

    def inspect(self, f: Callable[[T], Any]) -> Option[T]:
        return self

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return default

    def map_or_else(self, default_f: Callable[[], U], f: Callable[[T], U]) -> U:
        return default_f()

    def ok_or(self, error: E) -> Result[T, E]:
        from .result import Err
        return Err(error)

    def ok_or_else(self, f: Callable[[], E]) -> Result[T, E]:
        from .result import Err
        return Err(f())

    def and_(self, other: Option[U]) -> Option[U]:
        return Nothing()

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        return Nothing()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return Nothing()

    def or_(self, other: Option[T]) -> Option[T]:
        return other

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        return f()

    def xor(self, other: Option[T]) -> Option[T]:
        return other.match(some=lambda _: other, nothing=Nothing)

    def zip(self, other: Option[U]) -> Option[Tuple[T, U]]:
        return Nothing()

    def zip_with(self, other: Option[U], f: Callable[[T, U], R]) -> Option[R]:
        return Nothing()

    def match(self, *, some: Callable[[T], R], nothing: Callable[[], R]) -> R:
        return nothing()

    def to_optional(self) -> Optional[T]:
        return None

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other):
        return isinstance(other, Nothing)

    def __hash__(self):
        return hash(None)

    def __repr__(self) -> str:
        return "Nothing()"


# Type alias
OptionT = Union[Some[T], Nothing[T]]


# Helper functions
def some(value: T) -> Some[T]:
    """Create a Some value."""
    return Some(value)


def nothing() -> Nothing[Any]:
    """Create a Nothing value."""
    return Nothing()


def from_optional(opt: Optional[T]) -> Option[T]:
    """Convert Python Optional to Option."""
    return Some(opt) if opt is not None else Nothing()


def lift_option(f: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:
    """Lift a function to work with Option values."""
    return lambda option: option.map(f)

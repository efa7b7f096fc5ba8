"""Asynchronous Option: an awaitable that always settles to an Option."""

from __future__ import annotations
from typing import TypeVar, Generic, Callable, Awaitable, AsyncIterator, Optional, Tuple, Union, Any, TYPE_CHECKING
import logging

from .option import Option, Some, Nothing
from .awaitables import MaybeAwaitable, Ready, SharedAwaitable, resolve

if TYPE_CHECKING:
    from .async_result import AsyncResult

logger = logging.getLogger(__name__)

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')
R = TypeVar('R')

OptionLike = Union['AsyncOption[T]', Option[T], Awaitable[Option[T]]]


async def _absorb(awaitable: Awaitable[Option[T]]) -> Option[T]:
    try:
        return await awaitable
    except Exception as e:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Exception in AsyncOption computation: {e!r}")
        return Nothing()


async def _lift(awaitable: Awaitable[T]) -> Option[T]:
    try:
        return Some(await awaitable)
    except Exception as e:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Exception in AsyncOption.from_awaitable: {e!r}")
        return Nothing()


class AsyncOption(Generic[T]):
    """
    Wraps one pending computation that resolves to an Option.

    Any exception raised by the wrapped computation is turned into Nothing,
    so awaiting an AsyncOption never raises on account of its source.
    Every combinator returns a new AsyncOption; ``match`` is the primitive
    the rest of the API is written with.

    Callbacks may return plain values or awaitables; arguments standing for
    another option may be an AsyncOption, an Option, or an awaitable of one.
    """

    __slots__ = ('_shared',)

    def __init__(self, awaitable: Awaitable[Option[T]]):
        self._shared = SharedAwaitable(awaitable, _absorb)

    @staticmethod
    def from_option(option: Option[T]) -> AsyncOption[T]:
        """Wrap an already settled Option."""
        return AsyncOption(Ready(option))

    @staticmethod
    def from_awaitable(awaitable: Awaitable[T]) -> AsyncOption[T]:
        """Resolve to Some(value) on completion and Nothing on exception."""
        return AsyncOption(_lift(awaitable))

    async def get_option(self) -> Option[T]:
        """Wait for the wrapped computation and return its Option."""
        return await self._shared.get()

    def __await__(self):
        return self.get_option().__await__()

    async def match(
        self,
        *,
        some: Callable[[T], MaybeAwaitable[R]],
        nothing: Callable[[], MaybeAwaitable[R]],
    ) -> R:
        """Resolve, then call exactly one handler and await its result."""
        option = await self.get_option()
        if option.is_some():
            return await resolve(some(option.unwrap()))
        return await resolve(nothing())

    async def is_some(self) -> bool:
        return (await self.get_option()).is_some()

    async def is_some_and(self, predicate: Callable[[T], MaybeAwaitable[bool]]) -> bool:
        return bool(await self.match(some=predicate, nothing=lambda: False))

    async def is_nothing(self) -> bool:
        return (await self.get_option()).is_nothing()

    async def is_nothing_or(self, predicate: Callable[[T], MaybeAwaitable[bool]]) -> bool:
        return bool(await self.match(some=predicate, nothing=lambda: True))

    async def unwrap(self, message: Optional[str] = None) -> T:
        return (await self.get_option()).unwrap(message)

    async def unwrap_or(self, default: T) -> T:
        return (await self.get_option()).unwrap_or(default)

    async def unwrap_or_else(self, f: Callable[[], MaybeAwaitable[T]]) -> T:
        return await self.match(some=lambda value: value, nothing=f)

    async def map_or(self, default: U, f: Callable[[T], MaybeAwaitable[U]]) -> U:
        return await self.match(some=f, nothing=lambda: default)

    async def map_or_else(
        self,
        default_f: Callable[[], MaybeAwaitable[U]],
        f: Callable[[T], MaybeAwaitable[U]],
    ) -> U:
        return await self.match(some=f, nothing=default_f)

    def map(self, f: Callable[[T], MaybeAwaitable[U]]) -> AsyncOption[U]:
        """
        Transform the value if present.

        An exception raised by ``f`` (or by the awaitable it returns)
        produces Nothing instead of propagating.
        """
        async def on_some(value: T) -> Option[U]:
            try:
                return Some(await resolve(f(value)))
            except Exception as e:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(f"Exception in map: {e!r}")
                return Nothing()

        return AsyncOption(self.match(some=on_some, nothing=Nothing))

    def inspect(self, f: Callable[[T], MaybeAwaitable[Any]]) -> AsyncOption[T]:
        """
        Run ``f`` on the value for its side effect once it settles.

        The value is kept even when ``f`` raises.
        """
        async def on_some(value: T) -> Option[T]:
            try:
                await resolve(f(value))
            except Exception as e:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(f"Exception in inspect: {e!r}")
            return Some(value)

        return AsyncOption(self.match(some=on_some, nothing=Nothing))

    def ok_or(self, error: E) -> AsyncResult[T, E]:
        """Bridge to AsyncResult: Some(v) -> Ok(v), Nothing -> Err(error)."""
        from .async_result import AsyncResult
        from .result import Ok, Err
        return AsyncResult(self.match(some=Ok, nothing=lambda: Err(error)))

    def ok_or_else(self, f: Callable[[], MaybeAwaitable[E]]) -> AsyncResult[T, E]:
        from .async_result import AsyncResult
        from .result import Ok, Err

        async def on_nothing():
            return Err(await resolve(f()))

        return AsyncResult(self.match(some=Ok, nothing=on_nothing))

    def and_(self, other: OptionLike[U]) -> AsyncOption[U]:
        return AsyncOption(self.match(some=lambda _: _to_option(other), nothing=Nothing))

    def and_then(self, f: Callable[[T], MaybeAwaitable[OptionLike[U]]]) -> AsyncOption[U]:
        async def on_some(value: T) -> Option[U]:
            return await _to_option(await resolve(f(value)))

        return AsyncOption(self.match(some=on_some, nothing=Nothing))

    def filter(self, predicate: Callable[[T], MaybeAwaitable[bool]]) -> AsyncOption[T]:
        async def on_some(value: T) -> Option[T]:
            return Some(value) if await resolve(predicate(value)) else Nothing()

        return AsyncOption(self.match(some=on_some, nothing=Nothing))

    def or_(self, other: OptionLike[T]) -> AsyncOption[T]:
        return AsyncOption(self.match(some=Some, nothing=lambda: _to_option(other)))

    def or_else(self, f: Callable[[], MaybeAwaitable[OptionLike[T]]]) -> AsyncOption[T]:
        async def on_nothing() -> Option[T]:
            return await _to_option(await resolve(f()))

        return AsyncOption(self.match(some=Some, nothing=on_nothing))

    def xor(self, other: OptionLike[T]) -> AsyncOption[T]:
        async def on_some(value: T) -> Option[T]:
            return (await _to_option(other)).match(
                some=lambda _: Nothing(), nothing=lambda: Some(value)
            )

        return AsyncOption(self.match(some=on_some, nothing=lambda: _to_option(other)))

    def zip(self, other: OptionLike[U]) -> AsyncOption[Tuple[T, U]]:
        async def on_some(value: T) -> Option[Tuple[T, U]]:
            return (await _to_option(other)).map(lambda other_value: (value, other_value))

        return AsyncOption(self.match(some=on_some, nothing=Nothing))

    def zip_with(
        self,
        other: OptionLike[U],
        f: Callable[[T, U], MaybeAwaitable[R]],
    ) -> AsyncOption[R]:
        async def on_some(value: T) -> Option[R]:
            other_option = await _to_option(other)
            if other_option.is_nothing():
                return Nothing()
            return Some(await resolve(f(value, other_option.unwrap())))

        return AsyncOption(self.match(some=on_some, nothing=Nothing))

    async def __aiter__(self) -> AsyncIterator[T]:
        for value in await self.get_option():
            yield value

    def __repr__(self) -> str:
        return "AsyncOption(<pending>)"


async def _to_option(other: OptionLike[T]) -> Option[T]:
    """Normalise an AsyncOption, Option or awaitable of Option to an Option."""
    if isinstance(other, Option):
        return other
    return await resolve(other)

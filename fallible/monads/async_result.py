"""Asynchronous Result: an awaitable that settles to a Result."""

from __future__ import annotations
from typing import TypeVar, Generic, Callable, Awaitable, AsyncIterator, Optional, Union, Any
import logging

from .option import Some, Nothing
from .result import Result, Ok, Err
from .async_option import AsyncOption
from .awaitables import MaybeAwaitable, Ready, SharedAwaitable, resolve

logger = logging.getLogger(__name__)

T = TypeVar('T')
E = TypeVar('E')
U = TypeVar('U')
F = TypeVar('F')
R = TypeVar('R')

ResultLike = Union['AsyncResult[T, E]', Result[T, E], Awaitable[Result[T, E]]]


async def _capture(awaitable: Awaitable[T]) -> Result[T, Exception]:
    try:
        return Ok(await awaitable)
    except Exception as e:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Exception captured by AsyncResult.from_awaitable: {e!r}")
        return Err(e)


class AsyncResult(Generic[T, E]):
    """
    Wraps one pending computation that resolves to a Result.

    Unlike AsyncOption, an exception raised by the wrapped computation is
    not converted: it surfaces when the AsyncResult is awaited. Use
    ``from_awaitable`` to capture exceptions as Err explicitly.
    Callback exceptions propagate the same way.
    """

    __slots__ = ('_shared',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]):
        self._shared = SharedAwaitable(awaitable)

    @staticmethod
    def from_result(result: Result[T, E]) -> AsyncResult[T, E]:
        """Wrap an already settled Result."""
        return AsyncResult(Ready(result))

    @staticmethod
    def from_awaitable(awaitable: Awaitable[T]) -> AsyncResult[T, Exception]:
        """Resolve to Ok(value) on completion and Err(exception) on failure."""
        return AsyncResult(_capture(awaitable))

    async def get_result(self) -> Result[T, E]:
        """Wait for the wrapped computation and return its Result."""
        return await self._shared.get()

    def __await__(self):
        return self.get_result().__await__()

    async def match(
        self,
        *,
        ok: Callable[[T], MaybeAwaitable[R]],
        err: Callable[[E], MaybeAwaitable[R]],
    ) -> R:
        """Resolve, then call exactly one handler and await its result."""
        result = await self.get_result()
        if result.is_ok():
            return await resolve(ok(result.unwrap()))
        return await resolve(err(result.unwrap_err()))

    async def is_ok(self) -> bool:
        return (await self.get_result()).is_ok()

    async def is_ok_and(self, predicate: Callable[[T], MaybeAwaitable[bool]]) -> bool:
        return bool(await self.match(ok=predicate, err=lambda _: False))

    async def is_err(self) -> bool:
        return (await self.get_result()).is_err()

    async def is_err_and(self, predicate: Callable[[E], MaybeAwaitable[bool]]) -> bool:
        return bool(await self.match(ok=lambda _: False, err=predicate))

    def ok(self) -> AsyncOption[T]:
        """Project the success value into an AsyncOption."""
        return AsyncOption(self.match(ok=Some, err=lambda _: Nothing()))

    def err(self) -> AsyncOption[E]:
        """Project the error value into an AsyncOption."""
        return AsyncOption(self.match(ok=lambda _: Nothing(), err=Some))

    async def unwrap(self, message: Optional[str] = None) -> T:
        return (await self.get_result()).unwrap(message)

    async def unwrap_err(self, message: Optional[str] = None) -> E:
        return (await self.get_result()).unwrap_err(message)

    async def unwrap_or(self, default: T) -> T:
        return (await self.get_result()).unwrap_or(default)

    async def unwrap_or_else(self, f: Callable[[E], MaybeAwaitable[T]]) -> T:
        return await self.match(ok=lambda value: value, err=f)

    async def map_or(self, default: MaybeAwaitable[U], f: Callable[[T], MaybeAwaitable[U]]) -> U:
        return await self.match(ok=f, err=lambda _: default)

    async def map_or_else(
        self,
        default_f: Callable[[E], MaybeAwaitable[U]],
        f: Callable[[T], MaybeAwaitable[U]],
    ) -> U:
        return await self.match(ok=f, err=default_f)

    def map(self, f: Callable[[T], MaybeAwaitable[U]]) -> AsyncResult[U, E]:
        async def on_ok(value: T) -> Result[U, E]:
            return Ok(await resolve(f(value)))

        return AsyncResult(self.match(ok=on_ok, err=Err))

    def map_err(self, f: Callable[[E], MaybeAwaitable[F]]) -> AsyncResult[T, F]:
        async def on_err(error: E) -> Result[T, F]:
            return Err(await resolve(f(error)))

        return AsyncResult(self.match(ok=Ok, err=on_err))

    def inspect(self, f: Callable[[T], MaybeAwaitable[Any]]) -> AsyncResult[T, E]:
        async def on_ok(value: T) -> Result[T, E]:
            await resolve(f(value))
            return Ok(value)

        return AsyncResult(self.match(ok=on_ok, err=Err))

    def inspect_err(self, f: Callable[[E], MaybeAwaitable[Any]]) -> AsyncResult[T, E]:
        async def on_err(error: E) -> Result[T, E]:
            await resolve(f(error))
            return Err(error)

        return AsyncResult(self.match(ok=Ok, err=on_err))

    def and_(self, other: ResultLike[U, E]) -> AsyncResult[U, E]:
        return AsyncResult(self.match(ok=lambda _: _to_result(other), err=Err))

    def and_then(self, f: Callable[[T], MaybeAwaitable[ResultLike[U, E]]]) -> AsyncResult[U, E]:
        async def on_ok(value: T) -> Result[U, E]:
            return await _to_result(await resolve(f(value)))

        return AsyncResult(self.match(ok=on_ok, err=Err))

    def chain(
        self, f: Callable[[T], MaybeAwaitable[ResultLike[U, F]]]
    ) -> AsyncResult[U, Union[E, F]]:
        """
        Chain an operation whose error type may differ from this one.

        Runtime behaviour matches ``and_then``; the error type of the returned
        wrapper is the union of both error types.
        """
        async def on_ok(value: T) -> Result[U, Union[E, F]]:
            return await _to_result(await resolve(f(value)))

        return AsyncResult(self.match(ok=on_ok, err=Err))

    def or_(self, other: ResultLike[T, F]) -> AsyncResult[T, F]:
        return AsyncResult(self.match(ok=Ok, err=lambda _: _to_result(other)))

    def or_else(self, f: Callable[[E], MaybeAwaitable[ResultLike[T, F]]]) -> AsyncResult[T, F]:
        async def on_err(error: E) -> Result[T, F]:
            return await _to_result(await resolve(f(error)))

        return AsyncResult(self.match(ok=Ok, err=on_err))

    async def __aiter__(self) -> AsyncIterator[T]:
        for value in await self.get_result():
            yield value

    def __repr__(self) -> str:
        return "AsyncResult(<pending>)"


async def _to_result(other: ResultLike[T, E]) -> Result[T, E]:
    """Normalise an AsyncResult, Result or awaitable of Result to a Result."""
    if isinstance(other, Result):
        return other
    return await resolve(other)

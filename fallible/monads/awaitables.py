"""Helpers for callbacks that may return either a value or an awaitable."""

from __future__ import annotations
from typing import TypeVar, Awaitable, Callable, Generic, Optional, Union
import asyncio
import inspect

T = TypeVar('T')
U = TypeVar('U')

MaybeAwaitable = Union[T, Awaitable[T]]


async def resolve(value: MaybeAwaitable[T]) -> T:
    """Await ``value`` if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value


class Ready(Generic[T]):
    """An awaitable that is already settled to ``value``."""

    __slots__ = ('value',)

    def __init__(self, value: T):
        self.value = value

    def __await__(self):
        return self.value
        yield  # makes __await__ a generator


class SharedAwaitable(Generic[T]):
    """
    Memoise a single awaitable so it can be awaited any number of times.

    A coroutine can only be awaited once, so the source (passed through
    ``wrapper`` when one is given) is scheduled as a future on the running
    loop and every resolution awaits that future. Outside a running loop the
    source is scheduled on first resolution instead.

    Each consumer awaits the future through ``asyncio.shield``: cancelling one
    consumer never cancels the shared computation.
    """

    __slots__ = ('_awaitable', '_wrapper', '_future')

    def __init__(
        self,
        awaitable: Awaitable[U],
        wrapper: Optional[Callable[[Awaitable[U]], Awaitable[T]]] = None,
    ):
        self._awaitable = awaitable
        self._wrapper = wrapper
        self._future = None
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return
        self._schedule()

    def _schedule(self) -> None:
        awaitable = self._awaitable
        if self._wrapper is not None:
            awaitable = self._wrapper(awaitable)
        self._future = asyncio.ensure_future(awaitable)
        self._awaitable = self._wrapper = None

    async def get(self) -> T:
        if self._future is None:
            self._schedule()
        return await asyncio.shield(self._future)

"""Utilities for composing monadic operations.

This module provides helper functions and combinators for working with
collections of Options and Results, synchronous and asynchronous.
"""

from typing import TypeVar, Callable, Iterable
import asyncio

from .result import Result, Ok, Err
from .option import Option, Some, Nothing
from .async_option import AsyncOption
from .async_result import AsyncResult

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


# Result combinators

def sequence_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Convert Results into a Result of list.

    Fails fast - returns first error encountered.
    """
    values = []
    for result in results:
        if result.is_err():
            return Err(result.unwrap_err())
        values.append(result.unwrap())
    return Ok(values)


def traverse_result(
    f: Callable[[T], Result[U, E]],
    items: Iterable[T]
) -> Result[list[U], E]:
    """Apply a Result-returning function to each item and collect results.

    Stops calling ``f`` at the first Err.
    """
    values = []
    for item in items:
        result = f(item)
        if result.is_err():
            return Err(result.unwrap_err())
        values.append(result.unwrap())
    return Ok(values)


def partition_results(
    results: Iterable[Result[T, E]]
) -> tuple[list[T], list[E]]:
    """Partition Results into successes and failures."""
    successes = []
    failures = []

    for result in results:
        result.match(ok=successes.append, err=failures.append)

    return successes, failures


# Option combinators

def sequence_options(options: Iterable[Option[T]]) -> Option[list[T]]:
    """Convert Options into an Option of list.

    Returns Nothing if any Option is Nothing.
    """
    values = []
    for option in options:
        if option.is_nothing():
            return Nothing()
        values.append(option.unwrap())
    return Some(values)


def cat_options(options: Iterable[Option[T]]) -> list[T]:
    """Extract all Some values."""
    return [value for option in options for value in option]


def first_some(options: Iterable[Option[T]]) -> Option[T]:
    """Return the first Some value, or Nothing if all are Nothing."""
    for option in options:
        if option.is_some():
            return option
    return Nothing()


# Async combinators

async def gather_options(options: Iterable[AsyncOption[T]]) -> Option[list[T]]:
    """Await AsyncOptions concurrently and sequence them."""
    settled = await asyncio.gather(*(option.get_option() for option in options))
    return sequence_options(settled)


async def gather_results(results: Iterable[AsyncResult[T, E]]) -> Result[list[T], E]:
    """Await AsyncResults concurrently and sequence them.

    An exception raised by any wrapped computation propagates.
    """
    settled = await asyncio.gather(*(result.get_result() for result in results))
    return sequence_results(settled)

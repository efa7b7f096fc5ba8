import pytest
import asyncio
import os
import sys

# Add project root to path to ensure imports work correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


class Boom(Exception):
    """Exception raised by the failing fixtures."""


@pytest.fixture
def boom():
    """Return the exception class raised by failing computations."""
    return Boom


@pytest.fixture
def resolved():
    """Factory for coroutines that yield to the loop once, then return a value."""
    async def _resolved(value, delay=0):
        await asyncio.sleep(delay)
        return value
    return _resolved


@pytest.fixture
def rejected():
    """Factory for coroutines that yield to the loop once, then raise."""
    async def _rejected(exc=None, delay=0):
        await asyncio.sleep(delay)
        raise exc if exc is not None else Boom("rejected")
    return _rejected


@pytest.fixture
def calls():
    """A list handlers can append to, for counting invocations."""
    return []

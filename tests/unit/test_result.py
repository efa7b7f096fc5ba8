"""Unit tests for the Result monad."""

from dataclasses import dataclass

import pytest

from fallible.monads import Result, Ok, Err, ok, err, some, nothing, try_result
from fallible.monads.result import from_optional
from fallible.utils.error_manager import UnwrapError, ErrorCode


@dataclass
class CustomError:
    """Custom error type for testing."""

    code: str
    message: str


class TestResult:
    """Tests for Result construction and predicates."""

    def test_ok_creation_and_access(self):
        result = ok(42)
        assert isinstance(result, Result)
        assert result.is_ok()
        assert not result.is_err()
        assert result.unwrap() == 42
        assert result.unwrap_or(0) == 42

    def test_err_creation_and_access(self):
        result = err("error")
        assert isinstance(result, Result)
        assert result.is_err()
        assert not result.is_ok()
        assert result.unwrap_err() == "error"
        assert result.unwrap_or(0) == 0

    def test_err_with_custom_dataclass(self):
        error = CustomError(code="NOT_FOUND", message="Resource not found")
        result = err(error)
        assert result.unwrap_err().code == "NOT_FOUND"

    def test_equality(self):
        assert ok(1) == Ok(1)
        assert err("e") == Err("e")
        assert ok("e") != err("e")

    def test_is_ok_and(self):
        assert ok(5).is_ok_and(lambda x: x > 3)
        assert not ok(1).is_ok_and(lambda x: x > 3)
        assert not err(5).is_ok_and(lambda x: True)

    def test_is_err_and(self):
        assert err("boom").is_err_and(lambda e: e == "boom")
        assert not err("boom").is_err_and(lambda e: e == "bang")
        assert not ok(1).is_err_and(lambda e: True)

    def test_ok_and_err_projections(self):
        assert ok(1).ok() == some(1)
        assert ok(1).err() == nothing()
        assert err("e").ok() == nothing()
        assert err("e").err() == some("e")

    def test_to_optional(self):
        assert ok(1).to_optional() == 1
        assert err("e").to_optional() is None


class TestResultUnwrap:
    """Tests for unchecked extraction."""

    def test_unwrap_err_value_raises_with_error_payload(self):
        with pytest.raises(UnwrapError) as exc_info:
            err("boom").unwrap()
        assert exc_info.value.error == "boom"
        assert exc_info.value.code is ErrorCode.UNWRAP_FAILED
        assert "Expected ok() but got Err('boom')" in str(exc_info.value)

    def test_unwrap_err_on_ok_raises_with_value_payload(self):
        with pytest.raises(UnwrapError) as exc_info:
            ok(5).unwrap_err()
        assert exc_info.value.error == 5
        assert exc_info.value.message == "Expected error but got Ok(5)"

    def test_unwrap_custom_message(self):
        with pytest.raises(UnwrapError, match="config must load"):
            err("io").unwrap("config must load")
        with pytest.raises(UnwrapError, match="should have failed"):
            ok(1).unwrap_err("should have failed")

    def test_unwrap_or_else_receives_error(self):
        assert err("abc").unwrap_or_else(len) == 3
        assert ok(1).unwrap_or_else(len) == 1


class TestResultTransformation:
    """Tests for map, map_err and folds."""

    def test_map_on_ok(self):
        assert ok(5).map(lambda x: x * 2) == ok(10)

    def test_map_on_err(self, calls):
        assert err("error").map(calls.append) == err("error")
        assert calls == []

    def test_map_exception_propagates(self):
        with pytest.raises(ZeroDivisionError):
            ok(1).map(lambda x: x / 0)

    def test_map_err(self):
        assert err("error").map_err(str.upper) == err("ERROR")
        assert ok(1).map_err(str.upper) == ok(1)

    def test_map_or(self):
        assert ok(5).map_or(0, lambda x: x + 1) == 6
        assert err("e").map_or(0, lambda x: x + 1) == 0

    def test_map_or_else(self):
        assert ok(5).map_or_else(len, lambda x: x + 1) == 6
        assert err("abcd").map_or_else(len, lambda x: x + 1) == 4

    def test_inspect(self, calls):
        result = ok(1)
        assert result.inspect(calls.append) is result
        err("e").inspect(calls.append)
        assert calls == [1]

    def test_inspect_err(self, calls):
        result = err("e")
        assert result.inspect_err(calls.append) is result
        ok(1).inspect_err(calls.append)
        assert calls == ["e"]

    def test_iteration(self):
        assert list(ok(1)) == [1]
        assert list(err("e")) == []

    def test_flatten(self):
        assert ok(ok(1)).flatten() == ok(1)
        assert ok(err("inner")).flatten() == err("inner")
        assert err("outer").flatten() == err("outer")


class TestResultCombinators:
    """Tests for and_, and_then, chain, or_ and or_else."""

    def test_and(self):
        assert ok(1).and_(ok("b")) == ok("b")
        assert ok(1).and_(err("late")) == err("late")
        assert err("early").and_(ok("b")) == err("early")

    def test_and_then(self):
        assert ok(5).and_then(lambda x: ok(x * 2)) == ok(10)
        assert ok(5).and_then(lambda x: err("failed")) == err("failed")
        assert err("error").and_then(lambda x: ok(x * 2)) == err("error")

    def test_flat_map_alias(self):
        assert ok(5).flat_map(lambda x: ok(x + 1)) == ok(6)

    def test_chain(self):
        def f(x):
            return x * 3

        assert ok(2).chain(lambda x: ok(f(x))) == ok(f(2))

    def test_chain_widens_error(self):
        def parse(text: str) -> Result[int, ValueError]:
            return try_result(lambda: int(text), ValueError)

        def positive(n: int) -> Result[int, str]:
            return ok(n) if n > 0 else err("not positive")

        assert parse("4").chain(positive) == ok(4)
        assert parse("-4").chain(positive) == err("not positive")
        assert isinstance(parse("x").chain(positive).unwrap_err(), ValueError)

    def test_chain_on_err_never_calls(self, calls):
        assert err("e").chain(lambda x: calls.append(x) or ok(x)) == err("e")
        assert calls == []

    def test_or(self):
        assert ok(1).or_(ok(2)) == ok(1)
        assert err("e").or_(ok(2)) == ok(2)
        assert err("e").or_(err("f")) == err("f")

    def test_or_else(self):
        assert ok(1).or_else(lambda e: ok(0)) == ok(1)
        assert err("e").or_else(lambda e: ok(len(e))) == ok(1)
        assert err("e").or_else(lambda e: err(e * 2)) == err("ee")

    def test_no_xor(self):
        assert not hasattr(ok(1), "xor")


class TestResultMatch:
    """Tests for exhaustive case analysis."""

    def test_match_ok(self, calls):
        value = ok(5).match(ok=lambda v: calls.append("ok") or v * 2, err=lambda e: calls.append("err"))
        assert value == 10
        assert calls == ["ok"]

    def test_match_err(self, calls):
        value = err("abc").match(ok=lambda v: calls.append("ok"), err=lambda e: calls.append("err") or len(e))
        assert value == 3
        assert calls == ["err"]


class TestResultHelpers:
    """Tests for module-level helpers."""

    def test_try_result(self):
        result = try_result(lambda: 42)
        assert result == ok(42)

        result = try_result(lambda: 1 / 0)
        assert result.is_err()
        assert isinstance(result.unwrap_err(), ZeroDivisionError)

    def test_try_result_only_catches_requested_type(self):
        with pytest.raises(ZeroDivisionError):
            try_result(lambda: 1 / 0, KeyError)

    def test_from_optional(self):
        assert from_optional(1, "missing") == ok(1)
        assert from_optional(None, "missing") == err("missing")

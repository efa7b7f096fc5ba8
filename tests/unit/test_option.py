"""Unit tests for the Option monad."""

import pytest

from fallible.monads import Option, Some, Nothing, some, nothing, Ok, Err
from fallible.monads.option import from_optional, lift_option, NOTHING_UNWRAP_MESSAGE
from fallible.utils.error_manager import UnwrapError


class TestOptionConstruction:
    """Tests for the Option factories and predicates."""

    def test_some_creation_and_access(self):
        option = some(42)
        assert isinstance(option, Option)
        assert option.is_some()
        assert not option.is_nothing()
        assert option.unwrap() == 42

    def test_nothing_creation_and_access(self):
        option = nothing()
        assert isinstance(option, Option)
        assert option.is_nothing()
        assert not option.is_some()

    def test_equality(self):
        assert some(1) == some(1)
        assert some(1) != some(2)
        assert nothing() == nothing()
        assert some(None) != nothing()
        assert hash(nothing()) == hash(Nothing())

    def test_some_is_immutable(self):
        option = some(1)
        with pytest.raises(AttributeError):
            option.value = 2  # type: ignore

    def test_repr(self):
        assert repr(some(1)) == "Some(value=1)"
        assert repr(nothing()) == "Nothing()"

    def test_isinstance_dispatch(self):
        def describe(option):
            if isinstance(option, Some):
                return f"some {option.value}"
            return "nothing"

        assert describe(some(3)) == "some 3"
        assert describe(nothing()) == "nothing"

    def test_is_some_and(self):
        assert some(5).is_some_and(lambda x: x > 3)
        assert not some(1).is_some_and(lambda x: x > 3)

    def test_is_some_and_skips_predicate_on_nothing(self, calls):
        assert not nothing().is_some_and(lambda x: calls.append(x) or True)
        assert calls == []

    def test_is_nothing_or(self):
        assert nothing().is_nothing_or(lambda x: False)
        assert some(5).is_nothing_or(lambda x: x == 5)
        assert not some(5).is_nothing_or(lambda x: x == 6)


class TestOptionExtraction:
    """Tests for unwrap and its total variants."""

    def test_unwrap_nothing_raises(self):
        with pytest.raises(UnwrapError) as exc_info:
            nothing().unwrap()
        assert exc_info.value.error is None
        assert exc_info.value.message == NOTHING_UNWRAP_MESSAGE

    def test_unwrap_nothing_custom_message(self):
        with pytest.raises(UnwrapError, match="no user configured"):
            nothing().unwrap("no user configured")

    def test_unwrap_or(self):
        assert some(5).unwrap_or(0) == 5
        assert nothing().unwrap_or(0) == 0

    def test_unwrap_or_else(self, calls):
        assert some(5).unwrap_or_else(lambda: calls.append(1) or 0) == 5
        assert calls == []
        assert nothing().unwrap_or_else(lambda: 7) == 7

    def test_to_optional(self):
        assert some(42).to_optional() == 42
        assert nothing().to_optional() is None

    def test_from_optional(self):
        assert from_optional(42) == some(42)
        assert from_optional(0) == some(0)
        assert from_optional(None) == nothing()


class TestOptionTransformation:
    """Tests for map, inspect and the folds."""

    def test_map_on_some(self):
        assert some(5).map(lambda x: x * 2) == some(10)

    def test_map_identity(self):
        assert some("v").map(lambda x: x) == some("v")

    def test_map_on_nothing_never_calls(self, calls):
        assert nothing().map(lambda x: calls.append(x)) == nothing()
        assert calls == []

    def test_map_exception_propagates(self):
        with pytest.raises(ZeroDivisionError):
            some(1).map(lambda x: x / 0)

    def test_inspect(self, calls):
        option = some(3)
        assert option.inspect(calls.append) is option
        assert nothing().inspect(calls.append) == nothing()
        assert calls == [3]

    def test_map_or(self):
        assert some(5).map_or(0, lambda x: x + 1) == 6
        assert nothing().map_or(0, lambda x: x + 1) == 0

    def test_map_or_else(self):
        assert some(5).map_or_else(lambda: -1, lambda x: x + 1) == 6
        assert nothing().map_or_else(lambda: -1, lambda x: x + 1) == -1

    def test_lift_option(self):
        double = lift_option(lambda x: x * 2)
        assert double(some(4)) == some(8)
        assert double(nothing()) == nothing()

    def test_iteration(self):
        assert list(some(1)) == [1]
        assert list(nothing()) == []

    def test_iteration_restarts(self):
        option = some("a")
        assert list(option) == ["a"]
        assert list(option) == ["a"]

    def test_flatten(self):
        assert some(some(1)).flatten() == some(1)
        assert some(nothing()).flatten() == nothing()
        assert nothing().flatten() == nothing()


class TestOptionBridge:
    """Tests for conversion into Result."""

    def test_ok_or(self):
        assert some(1).ok_or("missing") == Ok(1)
        assert nothing().ok_or("missing") == Err("missing")

    def test_ok_or_else(self, calls):
        assert some(1).ok_or_else(lambda: calls.append(1)) == Ok(1)
        assert calls == []
        assert nothing().ok_or_else(lambda: "computed") == Err("computed")

    def test_ok_or_round_trip(self):
        assert some(5).ok_or("e").ok() == some(5)
        assert nothing().ok_or("e").ok() == nothing()


class TestOptionCombinators:
    """Tests for and_, or_, xor, zip and friends."""

    def test_and(self):
        assert some(1).and_(some("b")) == some("b")
        assert some(1).and_(nothing()) == nothing()
        assert nothing().and_(some("b")) == nothing()

    def test_and_then(self):
        assert some(5).and_then(lambda x: some(x * 2)) == some(10)
        assert some(5).and_then(lambda x: nothing()) == nothing()
        assert nothing().and_then(lambda x: some(x * 2)) == nothing()

    def test_and_then_associativity(self):
        def f(x):
            return some(x + 1) if x < 10 else nothing()

        def g(x):
            return some(x * 3) if x % 2 == 0 else nothing()

        for option in (some(1), some(2), some(10), nothing()):
            assert option.and_then(f).and_then(g) == option.and_then(lambda x: f(x).and_then(g))

    def test_filter(self):
        assert some(5).filter(lambda x: x > 3) == some(5)
        assert some(5).filter(lambda x: x > 10) == nothing()
        assert nothing().filter(lambda x: True) == nothing()

    def test_or(self):
        assert some(5).or_(some(10)) == some(5)
        assert nothing().or_(some(10)) == some(10)
        assert nothing().or_(nothing()) == nothing()

    def test_or_else(self, calls):
        assert some(5).or_else(lambda: calls.append(1)) == some(5)
        assert calls == []
        assert nothing().or_else(lambda: some(10)) == some(10)

    def test_xor(self):
        assert some(1).xor(some(2)) == nothing()
        assert some(1).xor(nothing()) == some(1)
        assert nothing().xor(some(2)) == some(2)
        assert nothing().xor(nothing()) == nothing()

    def test_zip(self):
        assert some(1).zip(some("a")) == some((1, "a"))
        assert some(1).zip(nothing()) == nothing()
        assert nothing().zip(some("a")) == nothing()

    def test_zip_with(self):
        assert some(2).zip_with(some(3), lambda a, b: a * b) == some(6)
        assert some(2).zip_with(nothing(), lambda a, b: a * b) == nothing()
        assert nothing().zip_with(some(3), lambda a, b: a * b) == nothing()


class TestOptionMatch:
    """Tests for exhaustive case analysis."""

    def test_match_some(self, calls):
        result = some(4).match(
            some=lambda x: calls.append(("some", x)) or x * 2,
            nothing=lambda: calls.append(("nothing",)) or 0,
        )
        assert result == 8
        assert calls == [("some", 4)]

    def test_match_nothing(self, calls):
        result = nothing().match(
            some=lambda x: calls.append(("some", x)) or x,
            nothing=lambda: calls.append(("nothing",)) or "empty",
        )
        assert result == "empty"
        assert calls == [("nothing",)]

    def test_match_requires_both_handlers(self):
        with pytest.raises(TypeError):
            some(1).match(some=lambda x: x)  # type: ignore

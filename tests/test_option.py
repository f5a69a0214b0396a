"""Tests for Option type (Some and Nothing)."""

import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from okopt import (
    ArgumentError,
    Err,
    ExpectError,
    NotComparableError,
    Nothing,
    NothingType,
    Ok,
    Some,
    UnwrapError,
    lenient_comparison,
    relaxed_block_checks,
)
from okopt.types.result import Arbitrary
from tests.strategies import options, payloads


class TestSomeCreation:
    """Tests for Some instantiation and basic properties."""

    def test_some_creation(self):
        """Some wraps a value."""
        some = Some(42)
        assert some.value == 42

    def test_some_with_none(self):
        """Some can wrap None (Some(None) is not Nothing)."""
        some = Some(None)
        assert some.value is None
        assert some.is_some() is True
        assert some != Nothing

    def test_some_with_nested_option(self):
        """Some does not flatten a nested Option on construction."""
        some = Some(Some(1))
        assert some.value == Some(1)

    def test_some_is_frozen(self):
        """Some instances are immutable."""
        some = Some(42)
        with pytest.raises(AttributeError):
            some.value = 100  # type: ignore[misc]

    def test_some_requires_value(self):
        """Some cannot be constructed without a value."""
        with pytest.raises(TypeError):
            Some()  # type: ignore[call-arg]


class TestNothingCreation:
    """Tests for the Nothing singleton."""

    def test_nothing_is_singleton(self):
        """Nothing is a NothingType instance."""
        assert Nothing is Nothing
        assert isinstance(Nothing, NothingType)

    def test_nothing_type_instances_equal(self):
        """Separately constructed NothingType instances are equal."""
        assert NothingType() == Nothing
        assert NothingType() == NothingType()

    def test_nothing_repr(self):
        """Nothing has a short repr."""
        assert repr(Nothing) == 'Nothing'


class TestOptionEquality:
    """Tests for Option equality and hashing."""

    def test_some_equality(self):
        """Some instances with same value are equal."""
        assert Some(42) == Some(42)
        assert Some('hello') == Some('hello')

    def test_some_inequality(self):
        """Some instances with different values are not equal."""
        assert Some(42) != Some(43)

    def test_some_not_equal_to_nothing(self):
        """Some is never equal to Nothing."""
        assert Some(42) != Nothing
        assert Nothing != Some(None)

    def test_compare_to_bare_value_raises(self):
        """Comparing an Option to a bare value raises NotComparableError."""
        with pytest.raises(NotComparableError, match='Cannot compare Some to int'):
            _ = Some(1) == 1
        with pytest.raises(NotComparableError):
            _ = Nothing == None  # noqa: E711

    def test_compare_to_result_raises(self):
        """Comparing an Option to a Result raises, even under lenient comparison."""
        with pytest.raises(NotComparableError):
            _ = Some(1) == Ok(1)
        with lenient_comparison(), pytest.raises(NotComparableError):
            _ = Some(1) == Ok(1)

    def test_lenient_comparison(self):
        """Under lenient comparison, Some compares its payload to bare values."""
        with lenient_comparison():
            assert Some(1) == 1
            assert Some(1) != 2
            assert Nothing != 1

    def test_nested_payloads_of_other_algebra_are_unequal(self):
        """Payloads that cannot be compared make the Options unequal instead of raising."""
        assert Some(Some(1)) != Some(1)
        assert Some(1) != Some(Some(1))
        assert Some(Ok(1)) != Some(Some(1))
        assert Some((Some(1),)) != Some((1,))
        assert Some(Some(1)) == Some(Some(1))

    def test_lenient_comparison_does_not_change_hashing(self):
        """A bare value equal to Some(x) under lenient comparison is still not a set member."""
        with lenient_comparison():
            assert Some(1) == 1
            assert hash(Some(1)) != hash(1)
            assert 1 not in {Some(1)}
            assert Some(1) in {Some(1)}

    def test_some_hashable(self):
        """Some instances are hashable."""
        assert hash(Some(42)) == hash(Some(42))
        assert {Some(42): 'value'}[Some(42)] == 'value'

    def test_nothing_hashable(self):
        """Nothing is hashable."""
        assert hash(Nothing) == hash(NothingType())
        assert {Nothing: 'value'}[NothingType()] == 'value'

    def test_copy_preserves_equality(self):
        """Copies compare equal to the original."""
        assert copy.deepcopy(Some([1, 2])) == Some([1, 2])
        assert copy.copy(Nothing) == Nothing

    @given(options)
    def test_equality_is_reflexive(self, option):
        """Every Option equals itself."""
        assert option == option  # noqa: PLR0124

    @given(options, options)
    def test_equality_is_symmetric(self, left, right):
        """a == b exactly when b == a."""
        assert (left == right) == (right == left)


class TestOptionQuerying:
    """Tests for is_some, is_none, some_and, none_or."""

    def test_some_is_some(self):
        """Some.is_some() is True and is_none() is False."""
        assert Some(42).is_some() is True
        assert Some(42).is_none() is False

    def test_nothing_is_none(self):
        """Nothing.is_none() is True and is_some() is False."""
        assert Nothing.is_none() is True
        assert Nothing.is_some() is False

    def test_some_and(self):
        """some_and() applies the predicate to a Some value."""
        assert Some(1).some_and(lambda x: x > 0) is True
        assert Some(0).some_and(lambda x: x > 0) is False

    def test_some_and_coerces_truthiness(self):
        """some_and() returns a bool even for truthy non-bool predicates."""
        assert Some('abc').some_and(len) is True
        assert Some('').some_and(len) is False

    def test_nothing_some_and(self, explode):
        """Nothing.some_and() is False without calling the predicate."""
        assert Nothing.some_and(explode) is False

    def test_none_or(self):
        """none_or() applies the predicate to a Some value."""
        assert Some(1).none_or(lambda x: x > 0) is True
        assert Some(1).none_or(lambda x: x < 0) is False

    def test_nothing_none_or(self, explode):
        """Nothing.none_or() is True without calling the predicate."""
        assert Nothing.none_or(explode) is True

    @given(payloads)
    def test_some_is_some_for_any_value(self, value):
        """Some(x) is Some for all x."""
        assert Some(value).is_some() is True
        assert Some(value).is_none() is False


class TestOptionUnwrap:
    """Tests for unwrap, expect, unwrap_or, unwrap_or_else, to_sequence."""

    def test_some_unwrap(self):
        """Some.unwrap() returns the value."""
        assert Some(42).unwrap() == 42

    def test_nothing_unwrap_raises(self):
        """Nothing.unwrap() raises UnwrapError."""
        with pytest.raises(UnwrapError, match='cannot unwrap Nothing'):
            Nothing.unwrap()

    def test_some_expect(self):
        """Some.expect() returns the value."""
        assert Some(42).expect('should not fail') == 42

    def test_nothing_expect_raises(self):
        """Nothing.expect() raises ExpectError with the given message."""
        with pytest.raises(ExpectError, match='^custom message$'):
            Nothing.expect('custom message')

    def test_unwrap_or(self):
        """unwrap_or() returns the value or the default."""
        assert Some(42).unwrap_or(0) == 42
        assert Nothing.unwrap_or(0) == 0

    def test_some_unwrap_or_else_is_lazy(self, explode):
        """Some.unwrap_or_else() does not call the function."""
        assert Some(42).unwrap_or_else(explode) == 42

    def test_nothing_unwrap_or_else(self):
        """Nothing.unwrap_or_else() calls the function with no arguments."""
        assert Nothing.unwrap_or_else(lambda: 0) == 0

    def test_to_sequence(self):
        """to_sequence() gives [] or [value]."""
        assert Some(1).to_sequence() == [1]
        assert Some(None).to_sequence() == [None]
        assert Nothing.to_sequence() == []

    @given(payloads)
    def test_unwrap_roundtrip(self, value):
        """Some(x).unwrap() == x and Some(x).map(identity).unwrap() == x."""
        assert Some(value).unwrap() == value
        assert Some(value).map(lambda x: x).unwrap() == value


class TestOptionTapSome:
    """Tests for tap_some."""

    def test_some_tap_some(self):
        """tap_some() calls the function and returns the same Option."""
        seen = []
        some = Some(1)
        assert some.tap_some(seen.append) is some
        assert seen == [1]

    def test_nothing_tap_some(self, explode):
        """Nothing.tap_some() returns Nothing without calling the function."""
        assert Nothing.tap_some(explode) is Nothing


class TestOptionMap:
    """Tests for map, map_or, map_or_else."""

    def test_some_map(self):
        """Some.map() wraps the transformed value in Some."""
        assert Some(5).map(lambda x: x * 2) == Some(10)

    def test_some_map_chain(self):
        """Some.map() can be chained."""
        assert Some(5).map(lambda x: x * 2).map(str) == Some('10')

    def test_some_map_wraps_option_results(self):
        """map() always wraps; a callback returning an Option nests it."""
        assert Some(1).map(lambda x: Some(x)) == Some(Some(1))

    def test_nothing_map(self, explode):
        """Nothing.map() returns Nothing without calling the function."""
        assert Nothing.map(explode) is Nothing

    def test_map_or(self):
        """map_or() wraps the default or the mapped value in Some."""
        assert Nothing.map_or(1, lambda _: 100) == Some(1)
        assert Some('foo').map_or(0, len) == Some(3)

    def test_nothing_map_or_does_not_call(self, explode):
        """Nothing.map_or() does not call the function."""
        assert Nothing.map_or(0, explode) == Some(0)

    def test_map_or_else(self):
        """map_or_else() computes the default lazily."""
        assert Nothing.map_or_else(lambda: 'foo', lambda _: 'bar') == Some('foo')
        assert Some('str').map_or_else(lambda: 100, len) == Some(3)

    def test_some_map_or_else_is_lazy(self, explode):
        """Some.map_or_else() does not call the default factory."""
        assert Some(2).map_or_else(explode, lambda x: x + 1) == Some(3)

    @pytest.mark.parametrize('blank', [None, '', '   ', [], {}, False, Nothing])
    def test_nothing_map_or_else_blank_default(self, blank):
        """A blank default gives Nothing instead of Some."""
        assert Nothing.map_or_else(lambda: blank, lambda _: 'unused') is Nothing

    def test_nothing_map_or_else_zero_is_present(self):
        """Zero is present, so it is wrapped."""
        assert Nothing.map_or_else(lambda: 0, lambda _: 1) == Some(0)


class TestOptionFilter:
    """Tests for filter, xor, flatten."""

    def test_filter(self):
        """filter() keeps values satisfying the predicate."""
        assert Some(4).filter(lambda x: x % 2 == 0) == Some(4)
        assert Some(3).filter(lambda x: x % 2 == 0) is Nothing

    def test_nothing_filter(self, explode):
        """Nothing.filter() returns Nothing without calling the predicate."""
        assert Nothing.filter(explode) is Nothing

    def test_xor(self):
        """xor() returns Some only when exactly one side is Some."""
        assert Some(1).xor(Nothing) == Some(1)
        assert Nothing.xor(Some(2)) == Some(2)
        assert Some(1).xor(Some(2)) is Nothing
        assert Nothing.xor(Nothing) is Nothing

    def test_flatten(self):
        """flatten() removes one level of nesting."""
        assert Some(Some(1)).flatten() == Some(1)
        assert Some(Nothing).flatten() is Nothing
        assert Some(Some(Some(1))).flatten() == Some(Some(1))
        assert Nothing.flatten() is Nothing

    def test_flatten_plain_value(self):
        """flatten() on a Some holding a plain value is a no-op."""
        assert Some(1).flatten() == Some(1)


class TestOptionConversion:
    """Tests for ok, ok_or, ok_or_else."""

    def test_ok(self):
        """ok() maps Some to Ok and Nothing to a detail-less Err."""
        assert Some(1).ok() == Ok(1)
        assert Nothing.ok() == Err()
        assert Nothing.ok().unwrap_err() is Arbitrary

    def test_ok_or(self):
        """ok_or() uses the given error for Nothing."""
        assert Nothing.ok_or('wow') == Err('wow')
        assert Some(1).ok_or('such err') == Ok(1)

    def test_ok_or_else(self):
        """ok_or_else() computes the error lazily."""
        assert Nothing.ok_or_else(lambda: 'wow') == Err('wow')
        assert Some('foo').ok_or_else(lambda: 'such err') == Ok('foo')

    def test_some_ok_or_else_is_lazy(self, explode):
        """Some.ok_or_else() does not call the error factory."""
        assert Some(1).ok_or_else(explode) == Ok(1)


class TestOptionOr:
    """Tests for or_ and or_else."""

    def test_or(self):
        """or_() keeps a Some and falls back for Nothing."""
        assert Some(1).or_(Some(2)) == Some(1)
        assert Some(1).or_(Nothing) == Some(1)
        assert Nothing.or_(Some(2)) == Some(2)
        assert Nothing.or_(Nothing) is Nothing

    def test_or_requires_option(self):
        """or_() with a bare value raises ArgumentError on both variants."""
        with pytest.raises(ArgumentError, match='unwrap_or'):
            Nothing.or_(2)
        with pytest.raises(ArgumentError):
            Some(1).or_(2)

    def test_or_else(self):
        """or_else() evaluates the fallback only for Nothing."""
        assert Nothing.or_else(lambda: Some(2)) == Some(2)
        assert Nothing.or_else(lambda: Nothing) is Nothing

    def test_some_or_else_is_lazy(self, explode):
        """Some.or_else() does not call the fallback."""
        assert Some(1).or_else(explode) == Some(1)

    def test_or_else_must_return_option(self):
        """or_else() raises ArgumentError if the fallback returns a bare value."""
        with pytest.raises(ArgumentError, match='or_else callback must return an Option'):
            Nothing.or_else(lambda: 2)

    def test_or_else_relaxed(self):
        """Under relaxed block checks, or_else() passes bare values through."""
        with relaxed_block_checks():
            assert Nothing.or_else(lambda: 2) == 2


class TestOptionAnd:
    """Tests for and_ and and_then."""

    def test_and(self):
        """and_() returns other for Some and Nothing for Nothing."""
        assert Some(1).and_(Some(2)) == Some(2)
        assert Some(1).and_(Nothing) is Nothing
        assert Nothing.and_(Some(2)) is Nothing

    def test_and_requires_option(self):
        """and_() with a bare value raises ArgumentError."""
        with pytest.raises(ArgumentError):
            Some(1).and_(2)
        with pytest.raises(ArgumentError):
            Nothing.and_(2)

    def test_and_then(self):
        """and_then() returns the callback's Option as-is."""
        assert Some(1).and_then(lambda: Some(2)) == Some(2)
        assert Some(1).and_then(lambda: Nothing) is Nothing

    def test_nothing_and_then_is_lazy(self, explode):
        """Nothing.and_then() does not call the callback."""
        assert Nothing.and_then(explode) is Nothing

    def test_and_then_must_return_option(self):
        """and_then() raises ArgumentError if the callback returns a bare value."""
        with pytest.raises(ArgumentError, match='and_then callback must return an Option, got str'):
            Some(1).and_then(lambda: 'nope')

    def test_and_then_rejects_result(self):
        """A Result is not an Option."""
        with pytest.raises(ArgumentError):
            Some(1).and_then(lambda: Ok(1))

    def test_and_then_relaxed(self):
        """Under relaxed block checks, and_then() passes bare values through."""
        with relaxed_block_checks():
            assert Some(1).and_then(lambda: 'nope') == 'nope'
        with pytest.raises(ArgumentError):
            Some(1).and_then(lambda: 'nope')


class TestOptionZip:
    """Tests for zip and zip_with."""

    def test_zip(self):
        """zip() pairs two Some values in a list."""
        assert Some(2).zip(Some(3)) == Some([2, 3])
        assert Some(2).zip(Nothing) is Nothing
        assert Nothing.zip(Some(1)) is Nothing
        assert Nothing.zip(Nothing) is Nothing

    def test_zip_requires_option(self):
        """zip() with a bare value raises ArgumentError."""
        with pytest.raises(ArgumentError):
            Some(2).zip(3)

    def test_zip_with(self):
        """zip_with() combines two Some values with a function."""
        assert Some(2).zip_with(Some(3), lambda a, b: a * b) == Some(6)

    def test_zip_with_is_lazy(self, explode):
        """zip_with() does not call the function unless both are Some."""
        assert Some(2).zip_with(Nothing, explode) is Nothing
        assert Nothing.zip_with(Some(3), explode) is Nothing

    @given(options, options)
    def test_zip_is_some_iff_both_some(self, left, right):
        """zip() gives Some exactly when both sides are Some."""
        assert left.zip(right).is_some() == (left.is_some() and right.is_some())


class TestOptionPatternMatching:
    """Tests for structural pattern matching."""

    def test_match_some(self):
        """Some(value) can be destructured."""
        match Some(5):
            case Some(value):
                assert value == 5
            case _:
                pytest.fail('expected Some')

    def test_match_nothing(self):
        """Nothing matches its class pattern."""
        match Nothing:
            case Some():
                pytest.fail('expected Nothing')
            case NothingType():
                pass


class TestOptionKeywordArguments:
    """Both variants accept the same keyword arguments."""

    @pytest.mark.parametrize('option', [Some(1), Nothing])
    def test_keyword_calls(self, option):
        """Callbacks and defaults can be passed by name on Some and Nothing alike."""
        assert option.map(f=str) in (Some('1'), Nothing)
        assert option.map_or(default=0, f=str) in (Some('1'), Some(0))
        assert option.unwrap_or(default=0) in (1, 0)
        assert option.unwrap_or_else(f=lambda: 0) in (1, 0)
        assert option.ok_or(err='e') in (Ok(1), Err('e'))
        assert option.ok_or_else(f=lambda: 'e') in (Ok(1), Err('e'))
        assert option.filter(predicate=bool) in (Some(1), Nothing)
        assert option.some_and(predicate=bool) in (True, False)
        assert option.none_or(predicate=bool) is True
        assert option.tap_some(f=lambda _: None) is option
        assert option.and_then(f=lambda: Some(2)) in (Some(2), Nothing)
        assert option.or_else(f=lambda: Some(2)) in (Some(1), Some(2))
        assert option.zip_with(Some(2), f=lambda a, b: a + b) in (Some(3), Nothing)

    def test_expect_keyword(self):
        """expect() takes msg by name on both variants."""
        assert Some(1).expect(msg='boom') == 1
        with pytest.raises(ExpectError, match='boom'):
            Nothing.expect(msg='boom')


class TestOptionProperties:
    """Property-based tests for Option laws."""

    @given(payloads, st.integers())
    def test_map_composition(self, value, n):
        """map(f).map(g) == map(g . f)."""

        def f(x):
            return (x, n)

        assert Some(value).map(f).map(repr) == Some(value).map(lambda x: repr(f(x)))

    @given(options)
    def test_or_nothing_is_identity(self, option):
        """or_(Nothing) leaves any Option unchanged."""
        assert option.or_(Nothing) == option

    @given(options)
    def test_unwrap_or_matches_is_some(self, option):
        """unwrap_or(sentinel) returns the sentinel exactly for Nothing."""
        sentinel = object()
        assert (option.unwrap_or(sentinel) is sentinel) == option.is_none()

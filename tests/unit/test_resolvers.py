"""
Unit tests for value resolvers.
"""

import pytest

from looseconf.models.resolvers import (
    Resolver,
    InferResolver,
    RawResolver,
    CustomResolver,
    as_resolver
)


class TestInferResolver:
    """Test cases for JSON literal inference."""

    def test_literals(self):
        """Test numbers, booleans, null and containers."""
        resolver = InferResolver()

        assert resolver('42') == 42
        assert resolver('-0.5') == -0.5
        assert resolver('1e3') == 1000.0
        assert resolver('false') is False
        assert resolver('null') is None
        assert resolver('[1, "two"]') == [1, 'two']
        assert resolver('{"k": true}') == {'k': True}
        assert resolver('"quoted \\u00e9"') == 'quoted é'

    def test_non_literals_stay_raw(self):
        """Test values that are not JSON literals."""
        resolver = InferResolver()

        for value in ['', 'hello', 'True', "'single'", '01', '1,2', '[1,']:
            assert resolver(value) == value

    def test_non_standard_constants_stay_raw(self):
        """Test NaN and Infinity, which are not JSON literals."""
        resolver = InferResolver()

        for value in ['NaN', 'Infinity', '-Infinity']:
            assert resolver(value) == value

    def test_surrounding_whitespace(self):
        """Test that whitespace around a literal is allowed."""
        assert InferResolver()(' 7 ') == 7

    def test_deeply_nested_literal_stays_raw(self):
        """Test that nesting too deep to decode returns the raw string."""
        value = '[' * 100000 + ']' * 100000
        assert InferResolver()(value) == value


class TestRawResolver:
    """Test cases for raw resolution."""

    def test_returns_input(self):
        """Test that values are untouched."""
        resolver = RawResolver()
        for value in ['1', 'true', '["a"]', '']:
            assert resolver(value) == value


class TestCustomResolver:
    """Test cases for custom resolution."""

    def test_calls_function(self):
        """Test that the function result is returned verbatim."""
        sentinel = object()
        resolver = CustomResolver(lambda value: sentinel)
        assert resolver('x') is sentinel

    def test_errors_propagate(self):
        """Test that function errors are not caught."""
        def boom(value):
            raise RuntimeError(f"cannot resolve {value}")

        with pytest.raises(RuntimeError, match="cannot resolve x"):
            CustomResolver(boom)('x')

    def test_requires_callable(self):
        """Test that non-callables are rejected."""
        with pytest.raises(ValueError, match="must be callable"):
            CustomResolver('upper')

    def test_equality(self):
        """Test that resolvers compare by function."""
        assert CustomResolver(str.upper) == CustomResolver(str.upper)
        assert CustomResolver(str.upper) != CustomResolver(str.lower)


class TestAsResolver:
    """Test cases for as_resolver."""

    def test_conversions(self):
        """Test the accepted resolve forms."""
        assert isinstance(as_resolver(True), InferResolver)
        assert isinstance(as_resolver(False), RawResolver)
        assert isinstance(as_resolver(str.strip), CustomResolver)

    def test_resolver_passthrough(self):
        """Test that resolver instances are kept."""
        resolver = RawResolver()
        assert as_resolver(resolver) is resolver

    def test_invalid(self):
        """Test rejected forms."""
        for value in [None, 'true', 1, 0, ['x']]:
            with pytest.raises(ValueError, match="Invalid resolve option"):
                as_resolver(value)

    def test_base_resolver_is_abstract(self):
        """Test that the base class does not resolve."""
        with pytest.raises(NotImplementedError):
            Resolver()('x')

"""
Value resolution strategies for looseconf.

A resolver turns the raw text found on the right-hand side of a delimiter into
the value stored in the parse result. Exactly three strategies exist: infer a
JSON literal, keep the raw text, or hand the text to a user function.
"""

import json
from typing import Any, Callable, Union


def _reject_constant(name: str) -> Any:
    """Refuse the non-standard NaN/Infinity constants."""
    raise ValueError(f"Not a JSON literal: {name}")


class Resolver:
    """Base class for value resolution strategies."""

    def resolve(self, value: str) -> Any:
        raise NotImplementedError

    def __call__(self, value: str) -> Any:
        return self.resolve(value)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class InferResolver(Resolver):
    """
    Infer a typed value from a JSON literal.

    Numbers, booleans, null, arrays, objects and quoted strings are decoded.
    Anything that is not a valid literal is returned unchanged.
    """

    def resolve(self, value: str) -> Any:
        try:
            return json.loads(value, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            return value


class RawResolver(Resolver):
    """Keep the raw string."""

    def resolve(self, value: str) -> Any:
        return value


class CustomResolver(Resolver):
    """
    Delegate resolution to a user supplied function.

    The function's return value is stored verbatim and any exception it raises
    propagates to the caller of ``parse``.
    """

    def __init__(self, func: Callable[[str], Any]):
        if not callable(func):
            raise ValueError(f"Custom resolver must be callable, got {type(func).__name__}")
        self.func = func

    def resolve(self, value: str) -> Any:
        return self.func(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CustomResolver) and other.func is self.func

    def __hash__(self) -> int:
        return hash(self.func)

    def __repr__(self) -> str:
        name = getattr(self.func, '__name__', repr(self.func))
        return f"CustomResolver({name})"


ResolveOption = Union[bool, Callable[[str], Any], Resolver]


def as_resolver(value: ResolveOption) -> Resolver:
    """
    Convert a ``resolve`` option into its resolver variant.

    Args:
        value: True (infer), False (raw), a callable or a Resolver

    Returns:
        The matching Resolver instance

    Raises:
        ValueError: If value is none of the accepted forms
    """
    if isinstance(value, Resolver):
        return value
    if value is True:
        return InferResolver()
    if value is False:
        return RawResolver()
    if callable(value):
        return CustomResolver(value)
    raise ValueError(
        f"Invalid resolve option: expected a bool or a callable, got {type(value).__name__}"
    )

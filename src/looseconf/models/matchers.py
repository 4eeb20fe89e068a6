"""
Pattern compilation for looseconf.

This module turns the user-facing option shapes (disabled, a literal string,
a list of literals, or an already compiled pattern) into compiled regular
expressions, and bundles the compiled artifacts the parser uses on every line.
"""

import re
from dataclasses import dataclass
from typing import Any, Optional, Pattern, Sequence, Union

from .resolvers import Resolver, as_resolver


DEFAULT_COMMENT = re.compile(r"[#;]")
DEFAULT_DELIMITER = "="
DEFAULT_ESCAPE = re.compile(r"\\(.)")
DEFAULT_NEWLINES = re.compile(r"\r?\n")
DEFAULT_SECTION = re.compile(r"^\[([^\]]*)\]$")

PatternOption = Union[Pattern[str], str, Sequence[str], bool, None]


def compile_pattern(value: PatternOption, fallback: Optional[Pattern[str]] = None) -> Optional[Pattern[str]]:
    """
    Normalize a pattern-shaped option into a compiled pattern.

    Args:
        value: The option value. False, None and empty values select the fallback.
            A string matches any one of its characters. A list or tuple matches
            any one of its elements, tried in order. A compiled pattern is used
            unchanged.
        fallback: Pattern returned for disabled or empty values (None means off)

    Returns:
        Compiled pattern, or the fallback

    Raises:
        TypeError: If value has an unsupported shape
    """
    if isinstance(value, re.Pattern):
        return value
    if value is None or value is False:
        return fallback
    if isinstance(value, str):
        if not value:
            return fallback
        return re.compile('[' + ''.join(re.escape(char) for char in value) + ']')
    if isinstance(value, (list, tuple)):
        elements = [element for element in value if element]
        if not elements:
            return fallback
        for element in elements:
            if not isinstance(element, str):
                raise TypeError(f"Pattern list elements must be strings, got {type(element).__name__}")
        return re.compile('|'.join(re.escape(element) for element in elements))
    raise TypeError(f"Cannot build a pattern from {type(value).__name__}")


def compile_delimiter(value: Union[Pattern[str], str, bool, None]) -> Optional[Pattern[str]]:
    """Compile the key/value delimiter; a string is matched literally as a whole."""
    if isinstance(value, re.Pattern):
        return value
    if value is None or value is False or value == '':
        return None
    if isinstance(value, str):
        return re.compile(re.escape(value))
    raise TypeError(f"Delimiter must be a string or a compiled pattern, got {type(value).__name__}")


def compile_regex(value: Union[Pattern[str], str, bool, None]) -> Optional[Pattern[str]]:
    """Compile a regex-source option such as ``section`` or ``escape``."""
    if isinstance(value, re.Pattern):
        return value
    if value is None or value is False or value == '':
        return None
    if isinstance(value, str):
        try:
            return re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid regular expression '{value}': {e}") from e
    raise TypeError(f"Expected a regular expression, got {type(value).__name__}")


@dataclass(frozen=True)
class CompiledMatchers:
    """
    Matchers derived from a ParseOptions instance.

    Attributes:
        comment: Pattern marking the start of a comment, or None when disabled
        delimiter: Pattern separating key from value, or None when disabled
        newlines: Pattern splitting the input into lines
        section: Pattern recognizing a section header, or None when disabled
        resolver: Strategy resolving raw values
    """
    comment: Optional[Pattern[str]]
    delimiter: Optional[Pattern[str]]
    newlines: Pattern[str]
    section: Optional[Pattern[str]]
    resolver: Resolver

    @classmethod
    def from_options(cls, options: Any) -> 'CompiledMatchers':
        """Compile every matcher from the given options."""
        return cls(
            comment=compile_pattern(options.comment),
            delimiter=compile_delimiter(options.delimiter),
            newlines=compile_pattern(options.newlines, DEFAULT_NEWLINES),
            section=compile_regex(options.section),
            resolver=as_resolver(options.resolve),
        )

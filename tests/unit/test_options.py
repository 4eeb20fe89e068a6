"""
Unit tests for the ParseOptions model.
"""

import pytest
import re
from pydantic import ValidationError

from looseconf.models.options import ParseOptions
from looseconf.models.resolvers import InferResolver, RawResolver, CustomResolver


class TestParseOptions:
    """Test cases for ParseOptions."""

    def test_defaults(self):
        """Test the default option values."""
        options = ParseOptions()

        assert options.comment.pattern == r"[#;]"
        assert options.delimiter == "="
        assert options.newlines.pattern == r"\r?\n"
        assert options.section.pattern == r"^\[([^\]]*)\]$"
        assert options.escape.pattern == r"\\(.)"
        assert isinstance(options.resolve, InferResolver)
        assert options.trim is True

    def test_option_names(self):
        """Test the list of known options."""
        assert sorted(ParseOptions.option_names()) == [
            'comment', 'delimiter', 'escape', 'newlines', 'resolve', 'section', 'trim'
        ]

    def test_resolve_normalization(self):
        """Test that resolve values become resolver variants."""
        assert isinstance(ParseOptions(resolve=True).resolve, InferResolver)
        assert isinstance(ParseOptions(resolve=False).resolve, RawResolver)

        custom = ParseOptions(resolve=len).resolve
        assert isinstance(custom, CustomResolver)
        assert custom('abc') == 3

    def test_invalid_resolve(self):
        """Test that other resolve values are rejected."""
        with pytest.raises(ValidationError):
            ParseOptions(resolve='infer')
        with pytest.raises(ValidationError):
            ParseOptions(resolve=1.5)

    def test_section_string_is_compiled(self):
        """Test that a section regex source is compiled."""
        options = ParseOptions(section=r'^<(\w+)>$')
        assert isinstance(options.section, re.Pattern)
        assert options.section.fullmatch('<abc>').group(1) == 'abc'

    def test_invalid_section_regex(self):
        """Test that a broken section regex is rejected."""
        with pytest.raises(ValidationError, match="Invalid regular expression"):
            ParseOptions(section='(')

    def test_comment_shapes(self):
        """Test accepted comment shapes."""
        assert ParseOptions(comment='#').comment == '#'
        assert ParseOptions(comment=('#', '//')).comment == ['#', '//']
        assert ParseOptions(comment=False).comment is False

    def test_invalid_comment(self):
        """Test that unsupported comment shapes are rejected."""
        with pytest.raises(ValidationError):
            ParseOptions(comment=3)
        with pytest.raises(ValidationError):
            ParseOptions(comment=['#', 1])

    def test_invalid_delimiter(self):
        """Test that unsupported delimiter shapes are rejected."""
        with pytest.raises(ValidationError):
            ParseOptions(delimiter=['=', ':'])

    def test_unknown_fields_ignored(self):
        """Test that unknown keys are dropped."""
        options = ParseOptions(colour='blue')
        assert not hasattr(options, 'colour')

    def test_frozen(self):
        """Test that options cannot be mutated in place."""
        options = ParseOptions()
        with pytest.raises(ValidationError):
            options.trim = False

    def test_explicit_fields(self):
        """Test that only explicitly set fields are reported."""
        options = ParseOptions(delimiter=':', trim=False)
        assert options.explicit_fields() == {'delimiter': ':', 'trim': False}

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = ParseOptions(delimiter=':').to_dict()
        assert set(data) == set(ParseOptions.option_names())
        assert data['delimiter'] == ':'

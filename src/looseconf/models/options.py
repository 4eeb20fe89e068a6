"""
Parse option models for looseconf.

This module defines the ParseOptions model, which holds every syntactic setting
the parser honours: comment markers, the key/value delimiter, the line
separator, the section header pattern, whitespace trimming and the value
resolution strategy.
"""

from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .matchers import (
    DEFAULT_COMMENT,
    DEFAULT_DELIMITER,
    DEFAULT_ESCAPE,
    DEFAULT_NEWLINES,
    DEFAULT_SECTION,
    compile_delimiter,
    compile_pattern,
    compile_regex,
)
from .resolvers import InferResolver, Resolver, as_resolver


class ParseOptions(BaseModel):
    """
    Syntactic configuration for the parser.

    Instances are immutable; the parser layers partial overrides onto its
    current options by building a new instance.

    Attributes:
        comment: Comment marker (pattern, characters, list of markers, or False)
        delimiter: Literal string or pattern separating a key from its value
        escape: Escape sequence pattern (reserved, not applied while parsing)
        newlines: Pattern, characters or list of sequences splitting lines
        resolve: Value resolution strategy
        section: Pattern with one capture group naming a section
        trim: Whether to strip surrounding whitespace from each line
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='ignore', frozen=True)

    comment: Any = Field(DEFAULT_COMMENT, description="Comment marker; False disables comments")
    delimiter: Any = Field(DEFAULT_DELIMITER, description="Key/value delimiter")
    escape: Any = Field(DEFAULT_ESCAPE, description="Escape sequence pattern (reserved)")
    newlines: Any = Field(DEFAULT_NEWLINES, description="Line separator")
    resolve: Resolver = Field(default_factory=InferResolver, description="Value resolution strategy")
    section: Any = Field(DEFAULT_SECTION, description="Section header pattern; False disables sections")
    trim: bool = Field(True, description="Strip leading and trailing whitespace from lines")

    @field_validator('comment', 'newlines', mode='before')
    @classmethod
    def validate_pattern_option(cls, v: Any) -> Any:
        """Check that the value can be compiled into a pattern."""
        try:
            compile_pattern(v)
        except TypeError as e:
            raise ValueError(str(e)) from e
        if isinstance(v, (list, tuple)):
            return list(v)
        return v

    @field_validator('delimiter', mode='before')
    @classmethod
    def validate_delimiter(cls, v: Any) -> Any:
        """Check that the delimiter is a string, a pattern or disabled."""
        try:
            compile_delimiter(v)
        except TypeError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator('escape', 'section', mode='before')
    @classmethod
    def validate_regex_option(cls, v: Any) -> Any:
        """Compile regex sources given as strings."""
        try:
            compiled = compile_regex(v)
        except TypeError as e:
            raise ValueError(str(e)) from e
        return compiled if isinstance(v, str) and v else v

    @field_validator('resolve', mode='before')
    @classmethod
    def validate_resolve(cls, v: Any) -> Resolver:
        """Normalize the resolve option into a resolver variant."""
        return as_resolver(v)

    @classmethod
    def option_names(cls) -> List[str]:
        """Names of all known options."""
        return list(cls.model_fields)

    def explicit_fields(self) -> Dict[str, Any]:
        """Options that were set explicitly when this instance was built."""
        return {name: getattr(self, name) for name in self.model_fields_set}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {name: getattr(self, name) for name in self.option_names()}

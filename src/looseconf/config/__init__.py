"""
Parsing package for looseconf.

This package provides the configurable line parser, the shared default parser
and the module level functions that forward to it.
"""

from .parser import (
    Parser,
    ParseResult,
    ConfigurationError,
    configure,
    reset_configuration,
    parse,
    get_default_parser,
    load_options
)

__all__ = [
    'Parser',
    'ParseResult',
    'ConfigurationError',
    'configure',
    'reset_configuration',
    'parse',
    'get_default_parser',
    'load_options'
]

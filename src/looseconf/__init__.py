"""
looseconf - Configurable INI/properties parser

Parses loosely formatted, hand-edited configuration text into nested
dictionaries, with comment markers, delimiters, section headers, line
separators and value resolution all configurable at runtime.
"""

__version__ = "0.1.0"
__author__ = "looseconf Team"

from .config import (
    Parser,
    ParseResult,
    ConfigurationError,
    configure,
    reset_configuration,
    parse,
    get_default_parser,
    load_options
)
from .models import (
    ParseOptions,
    Resolver,
    InferResolver,
    RawResolver,
    CustomResolver
)

__all__ = [
    'Parser',
    'ParseResult',
    'ParseOptions',
    'ConfigurationError',
    'Resolver',
    'InferResolver',
    'RawResolver',
    'CustomResolver',
    'configure',
    'reset_configuration',
    'parse',
    'get_default_parser',
    'load_options'
]

"""
Data models for looseconf.

This module contains the parse option model, the compiled matchers derived
from it and the value resolution strategies.
"""

from .options import ParseOptions
from .matchers import CompiledMatchers, compile_pattern
from .resolvers import Resolver, InferResolver, RawResolver, CustomResolver, as_resolver

__all__ = [
    'ParseOptions',
    'CompiledMatchers',
    'compile_pattern',
    'Resolver',
    'InferResolver',
    'RawResolver',
    'CustomResolver',
    'as_resolver',
]

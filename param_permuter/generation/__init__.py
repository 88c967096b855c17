"""
URL permutation generation.

This module provides:
- Query decomposition and serialization
- The normal, combine and ignore strategies
- The generator running them in a fixed order
"""

from .generator import GenerationStats, PermutationGenerator
from .query import ParsedURL, build_url, parse_url, transform_value
from .strategies import combine_strategy, ignore_strategy, normal_strategy

__all__ = [
    'PermutationGenerator',
    'GenerationStats',
    'ParsedURL',
    'parse_url',
    'build_url',
    'transform_value',
    'normal_strategy',
    'combine_strategy',
    'ignore_strategy',
]

"""Core types: Option, Some, Nothing, Result, Ok, Err."""

from okopt.types.option import Nothing, NothingType, Option, Some
from okopt.types.result import Arbitrary, ArbitraryType, Err, Ok, Result, collect

__all__ = [
    'Arbitrary',
    'ArbitraryType',
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'collect',
]

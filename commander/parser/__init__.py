"""
Commander CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument_parser import ArgumentParser
from .convertible import (
    ArgumentConvertible,
    ParserConvertible,
    StringConvertible,
    convert_parser,
    convert_string,
)
from .tokens import Flag, Option, Positional, Token, tokenize, tokenize_all

__all__ = [
    "ArgumentParser",
    "ArgumentConvertible",
    "ParserConvertible",
    "StringConvertible",
    "convert_parser",
    "convert_string",
    "Flag",
    "Option",
    "Positional",
    "Token",
    "tokenize",
    "tokenize_all",
]

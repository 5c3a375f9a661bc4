"""
Commander CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command import Command, command
from .descriptors import (
    Argument,
    ArgumentDescriptor,
    ArgumentType,
    BoxedArgumentDescriptor,
    Flag,
    Option,
    Options,
)
from .exceptions import (
    ArgumentError,
    ArgumentParserError,
    CommanderError,
    InvalidTypeError,
    MissingValueError,
    UnknownCommandError,
)
from .group import Group
from .help import Help
from .logger import logger
from .parser import ArgumentConvertible, ArgumentParser
from .runner import run

__version__ = "0.1.0"

__all__ = [
    "Argument",
    "ArgumentConvertible",
    "ArgumentDescriptor",
    "ArgumentError",
    "ArgumentParser",
    "ArgumentParserError",
    "ArgumentType",
    "BoxedArgumentDescriptor",
    "Command",
    "CommanderError",
    "Flag",
    "Group",
    "Help",
    "InvalidTypeError",
    "MissingValueError",
    "Option",
    "Options",
    "UnknownCommandError",
    "command",
    "logger",
    "run",
]

# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Commander.

Exception Hierarchy:
- CommanderError
    ├── ArgumentError
    │   ├── ArgumentParserError
    │   ├── MissingValueError
    │   └── InvalidTypeError
    └── UnknownCommandError

`ArgumentError` and its subclasses are raised while values are extracted from
the token stream. They propagate unmodified through descriptors and commands,
so a handler is never invoked with partially parsed values.
"""


class CommanderError(Exception):
    """Base exception for Commander."""


class ArgumentError(CommanderError):
    """Exception raised when a value cannot be extracted from the arguments."""


class ArgumentParserError(ArgumentError):
    """Exception raised when the token stream does not hold the expected values."""

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description

    def __str__(self) -> str:
        return self.description


class MissingValueError(ArgumentError):
    """Exception raised when a required positional value is missing."""

    def __init__(self, argument: str | None = None):
        self.argument = argument
        if argument:
            super().__init__(f"Missing value for `{argument}`")
        else:
            super().__init__("Missing value")


class InvalidTypeError(ArgumentError):
    """Exception raised when a value cannot be converted to the requested type."""

    def __init__(self, value: str, type_name: str, argument: str | None = None):
        self.value = value
        self.type_name = type_name
        self.argument = argument
        message = f"`{value}` is not a valid `{type_name}`"
        if argument:
            message += f" for `{argument}`"
        super().__init__(message)


class UnknownCommandError(CommanderError):
    """Exception raised when a group is asked to dispatch an unregistered command."""

    def __init__(self, name: str):
        super().__init__(f"Unknown command: `{name}`")
        self.name = name

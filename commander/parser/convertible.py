# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Conversion protocols that let any type be used as a descriptor value type.

A value type can be built in one of two ways:

- from a whole `ArgumentParser` (`ParserConvertible.from_parser`), for composite
  values that consume several tokens, or
- from a single string (`StringConvertible.from_string`), for scalar values.

`ArgumentConvertible` is a base class that bridges the two: its default
`from_string` wraps the string in a one-element parser and delegates to
`from_parser`, and its default `from_parser` shifts one positional value and
hands it to `from_string`. Subclasses override whichever is natural.

Plain Python types (`int`, `float`, `Path`, enums, `datetime`, ...) need no
adapter and are coerced through `coerce_value`.

Functions:
- convert_string: Build a value of the target type from one string.
- convert_parser: Build a value of the target type from a parser.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from commander.exceptions import ArgumentError, InvalidTypeError, MissingValueError
from commander.parser.argument_parser import ArgumentParser
from commander.parser.utils import coerce_value


@runtime_checkable
class ParserConvertible(Protocol):
    @classmethod
    def from_parser(cls, parser: ArgumentParser) -> Any: ...


@runtime_checkable
class StringConvertible(Protocol):
    @classmethod
    def from_string(cls, value: str) -> Any: ...


class ArgumentConvertible:
    """
    Base class for custom descriptor value types.

    Override `from_string` for values held in one token, or `from_parser` for
    values that need to read several tokens.

    Example:
        class Point(ArgumentConvertible):
            def __init__(self, x: int, y: int):
                self.x, self.y = x, y

            @classmethod
            def from_parser(cls, parser):
                return cls(int(parser.shift()), int(parser.shift()))
    """

    @classmethod
    def from_parser(cls, parser: ArgumentParser) -> Any:
        if cls.from_string.__func__ is ArgumentConvertible.from_string.__func__:
            raise NotImplementedError(
                f"{cls.__name__} must implement from_parser() or from_string()"
            )
        value = parser.shift()
        if value is None:
            raise MissingValueError()
        return cls.from_string(value)

    @classmethod
    def from_string(cls, value: str) -> Any:
        return cls.from_parser(ArgumentParser([value]))


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or str(target)


def convert_string(value: str, target: Any, name: str | None = None) -> Any:
    """
    Convert a single string to `target`.

    Args:
        value (str): The raw token value.
        target (Any): The value type of the descriptor.
        name (str | None): Descriptor label used in error messages.

    Raises:
        InvalidTypeError: If the value cannot be converted.
    """
    try:
        if isinstance(target, StringConvertible):
            return target.from_string(value)
        if isinstance(target, ParserConvertible):
            return target.from_parser(ArgumentParser([value]))
        return coerce_value(value, target)
    except ArgumentError:
        raise
    except (ValueError, TypeError) as error:
        raise InvalidTypeError(value, _type_name(target), name) from error


def _bridges_to_from_string(target: Any) -> bool:
    return (
        isinstance(target, type)
        and issubclass(target, ArgumentConvertible)
        and target.from_parser.__func__ is ArgumentConvertible.from_parser.__func__
    )


def _consumed(before: list[str], after: list[str]) -> list[str]:
    # Removal never reorders, so `after` is a subsequence of `before`.
    consumed = []
    remaining = iter(after)
    pending = next(remaining, None)
    for token in before:
        if token == pending:
            pending = next(remaining, None)
        else:
            consumed.append(token)
    return consumed


def convert_parser(parser: ArgumentParser, target: Any, name: str | None = None) -> Any:
    """
    Build a `target` value by reading from `parser`.

    Types implementing their own `from_parser` read the parser themselves; all
    others consume exactly one positional value.

    Raises:
        MissingValueError: If no positional value remains.
        InvalidTypeError: If the value cannot be converted.
    """
    if isinstance(target, ParserConvertible) and not _bridges_to_from_string(target):
        before = parser.remaining
        try:
            return target.from_parser(parser)
        except ArgumentError:
            raise
        except (ValueError, TypeError) as error:
            consumed = _consumed(before, parser.remaining)
            raise InvalidTypeError(" ".join(consumed), _type_name(target), name) from error
    value = parser.shift()
    if value is None:
        raise MissingValueError(name)
    return convert_string(value, target, name)

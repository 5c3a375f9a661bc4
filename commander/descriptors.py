# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Typed argument descriptors used to declare a command's signature.

Each descriptor declares how to extract one value from an `ArgumentParser`:

- `Argument[T]`: a required positional value.
- `Option[T]`: a `--name value` option with a default.
- `Options[T]`: a `--name v1 v2 ...` option with a fixed value count and a default list.
- `Flag`: a boolean switch (`--name`, `--no-name`, or a short alias `-n`).

Descriptors hold no reference to a parser, so one instance can be reused across
any number of dispatch attempts.

`BoxedArgumentDescriptor` is a type-erased snapshot of a descriptor used only
for help rendering.

Example:
    @command(
        Argument("name", description="Who to greet"),
        Option("count", 1, description="Number of greetings"),
        Flag("shout", flag="s"),
    )
    def greet(name: str, count: int, shout: bool) -> None:
        ...
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Protocol, Sequence, TypeVar, runtime_checkable

from commander.exceptions import CommanderError
from commander.parser.argument_parser import ArgumentParser
from commander.parser.convertible import convert_parser, convert_string

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class ArgumentType(Enum):
    """Whether a descriptor is rendered as a positional argument or an option."""

    ARGUMENT = "argument"
    OPTION = "option"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class ArgumentDescriptor(Protocol[T_co]):
    """Structural interface shared by all descriptors."""

    name: str
    description: str | None

    @property
    def type(self) -> ArgumentType: ...

    def parse(self, parser: ArgumentParser) -> T_co: ...


class Argument(Generic[T]):
    """
    A required positional argument.

    Args:
        name (str): Name shown in usage output.
        description (str | None): Help text.
        type (type): Value type; anything accepted by `convert_parser`.
    """

    def __init__(
        self, name: str, description: str | None = None, type: Any = str
    ) -> None:
        self.name = name
        self.description = description
        self.value_type = type

    @property
    def type(self) -> ArgumentType:
        return ArgumentType.ARGUMENT

    def parse(self, parser: ArgumentParser) -> T:
        return convert_parser(parser, self.value_type, self.name)

    def __repr__(self) -> str:
        return f"Argument(name={self.name!r}, type={self.value_type!r})"


class Option(Generic[T]):
    """
    A named option with a single value: `--name value`.

    If `type` is omitted it is inferred from the default.
    """

    def __init__(
        self,
        name: str,
        default: T,
        description: str | None = None,
        type: Any = None,
    ) -> None:
        self.name = name
        self.default = default
        self.description = description
        self.value_type = type or _infer_type(default)

    @property
    def type(self) -> ArgumentType:
        return ArgumentType.OPTION

    def parse(self, parser: ArgumentParser) -> T:
        value = parser.shift_value_for_option(self.name)
        if value is None:
            return self.default
        return convert_string(value, self.value_type, f"--{self.name}")

    def __repr__(self) -> str:
        return f"Option(name={self.name!r}, default={self.default!r})"


class Options(Generic[T]):
    """
    A named option consuming exactly `count` values: `--name v1 v2 ...`.

    Values are converted independently; the first conversion failure aborts.
    """

    def __init__(
        self,
        name: str,
        default: Sequence[T],
        count: int,
        description: str | None = None,
        type: Any = None,
    ) -> None:
        if count < 1:
            raise CommanderError(f"Options '{name}' count must be at least 1, got {count}")
        self.name = name
        self.default = list(default)
        self.count = count
        self.description = description
        self.value_type = type or (_infer_type(self.default[0]) if self.default else str)

    @property
    def type(self) -> ArgumentType:
        return ArgumentType.OPTION

    def parse(self, parser: ArgumentParser) -> list[T]:
        values = parser.shift_values_for_option(self.name, count=self.count)
        if values is None:
            return list(self.default)
        return [
            convert_string(value, self.value_type, f"--{self.name}") for value in values
        ]

    def __repr__(self) -> str:
        return (
            f"Options(name={self.name!r}, count={self.count}, default={self.default!r})"
        )


class Flag:
    """
    A boolean switch.

    Precedence, highest first: `--no-<name>` gives False, `--<name>` gives True,
    the short alias (`-<flag>`, possibly bundled) gives True, otherwise `default`.
    Flags never consume value tokens.
    """

    def __init__(
        self,
        name: str,
        flag: str | None = None,
        description: str | None = None,
        default: bool = False,
    ) -> None:
        if flag is not None and len(flag) != 1:
            raise CommanderError(
                f"Flag '{name}' short alias must be a single character, got {flag!r}"
            )
        self.name = name
        self.flag = flag
        self.description = description
        self.default = default

    @property
    def type(self) -> ArgumentType:
        return ArgumentType.OPTION

    def parse(self, parser: ArgumentParser) -> bool:
        if parser.has_option(f"no-{self.name}"):
            return False
        if parser.has_option(self.name):
            return True
        if self.flag and parser.has_flag(self.flag):
            return True
        return self.default

    def __repr__(self) -> str:
        return f"Flag(name={self.name!r}, flag={self.flag!r}, default={self.default!r})"


def _infer_type(default: Any) -> Any:
    if default is None:
        return str
    return type(default)


@dataclass(frozen=True)
class BoxedArgumentDescriptor:
    """Type-erased snapshot of a descriptor, used only for help rendering."""

    name: str
    description: str | None
    type: ArgumentType
    default: str | None = None

    @classmethod
    def from_descriptor(cls, descriptor: ArgumentDescriptor[Any]) -> BoxedArgumentDescriptor:
        # TODO: stringify Option/Options defaults once help renders them.
        default = str(descriptor.default) if isinstance(descriptor, Flag) else None
        return cls(
            name=descriptor.name,
            description=descriptor.description,
            type=descriptor.type,
            default=default,
        )

# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token model and tokenizer for raw command-line arguments.

Every raw argument is classified into exactly one of three token kinds:

- `Positional`: a bare value such as `build` or `42`.
- `Option`: a long option such as `--verbose`; the name is everything after `--`.
- `Flag`: one or more bundled short flags such as `-abc`.

Classification is purely prefix-based and `--` wins over `-`. The value after
`--` is never split on `=`, so `--name=value` yields an option literally named
`name=value`.

Functions:
- tokenize: Classify one raw argument.
- tokenize_all: Classify a sequence of raw arguments, preserving order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class Positional:
    """A bare value argument."""

    value: str

    @property
    def kind(self) -> str:
        return "argument"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Option:
    """A `--name` long option."""

    name: str

    @property
    def kind(self) -> str:
        return "option"

    def __str__(self) -> str:
        return f"--{self.name}"


@dataclass(frozen=True)
class Flag:
    """One or more bundled short flags, e.g. `-abc`.

    `chars` keeps the distinct characters in their first-seen order so the
    canonical rendering is stable; membership is what matters for matching.
    """

    chars: tuple[str, ...]

    @classmethod
    def from_string(cls, flags: str) -> Flag:
        return cls(tuple(dict.fromkeys(flags)))

    @property
    def kind(self) -> str:
        return "flag"

    def __contains__(self, char: object) -> bool:
        return char in self.chars

    def __str__(self) -> str:
        return f"-{''.join(self.chars)}"


Token = Union[Positional, Option, Flag]


def tokenize(argument: str) -> Token:
    """Classify a single raw argument into a token."""
    if argument.startswith("--"):
        return Option(argument[2:])
    if argument.startswith("-"):
        return Flag.from_string(argument[1:])
    return Positional(argument)


def tokenize_all(arguments: Iterable[str]) -> list[Token]:
    """Classify raw arguments in order."""
    return [tokenize(argument) for argument in arguments]

# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, the mutable token cursor that every
Commander descriptor reads from.

An `ArgumentParser` owns an ordered list of tokens produced by `tokenize`.
Descriptors pull the values they need out of it with "shift" operations, which
remove the consumed tokens in place and leave everything else, in its original
order, for the descriptors that follow. This makes extraction independent of
the order in which descriptors are declared.

Public Interface:
- `shift()`: Remove and return the first positional value.
- `shift_value_for_option(name)` / `shift_values_for_option(name, count)`:
  Remove `--name` and the positional value(s) that directly follow it.
- `shift_value_for_flag(char)` / `shift_values_for_flag(char, count)`:
  Remove the positional value(s) that directly follow the first `-<char>` flag.
- `has_option(name)` / `has_flag(char)`: Read-only presence checks.

Example Usage:
    parser = ArgumentParser(["deploy", "--env", "prod", "-v"])
    parser.shift_value_for_option("env")  # "prod"
    parser.has_flag("v")                  # True
    parser.shift()                        # "deploy"

A parser backs exactly one dispatch attempt and must not be shared. Use
`ArgumentParser.from_parser()` to take an independent copy.
"""
from __future__ import annotations

from typing import Iterable

from commander.exceptions import ArgumentParserError
from commander.logger import logger
from commander.parser.tokens import Flag, Option, Positional, Token, tokenize_all


class ArgumentParser:
    """
    Ordered, destructively consumed stream of classified argument tokens.

    Args:
        arguments (Iterable[str]): Raw arguments, typically `sys.argv[1:]`.
    """

    def __init__(self, arguments: Iterable[str] = ()) -> None:
        self._tokens: list[Token] = tokenize_all(arguments)
        logger.debug("Tokenized arguments: %s", self._tokens)

    @classmethod
    def from_parser(cls, parser: ArgumentParser) -> ArgumentParser:
        """Return a new parser holding a copy of `parser`'s remaining tokens."""
        copy = cls()
        copy._tokens = list(parser._tokens)
        return copy

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Snapshot of the remaining tokens."""
        return tuple(self._tokens)

    @property
    def remaining(self) -> list[str]:
        """Canonical text of every remaining token, in order."""
        return [str(token) for token in self._tokens]

    def shift(self) -> str | None:
        """
        Remove and return the first positional value.

        Returns:
            str | None: The value, or None if no positional token remains.
        """
        for index, token in enumerate(self._tokens):
            if isinstance(token, Positional):
                del self._tokens[index]
                logger.debug("Shifted positional value '%s'", token.value)
                return token.value
        return None

    def shift_value_for_option(self, name: str) -> str | None:
        """Return the value for an option (`--name Kyle`)."""
        values = self.shift_values_for_option(name)
        return values[0] if values else None

    def shift_values_for_option(self, name: str, count: int = 1) -> list[str] | None:
        """
        Remove `--name` and the `count` tokens directly following it.

        Args:
            name (str): Option name without the leading dashes.
            count (int): Number of values to consume.

        Returns:
            list[str] | None: The values in order, or None if the option is absent.

        Raises:
            ArgumentParserError: If a following token is not a positional value,
                or fewer than `count` tokens follow the option.
        """
        for index, token in enumerate(self._tokens):
            if isinstance(token, Option) and token.name == name:
                del self._tokens[index]
                return self._shift_values(index, count, f"--{name}")
        return None

    def has_option(self, name: str) -> bool:
        """Return whether `--name` is present."""
        return any(
            isinstance(token, Option) and token.name == name for token in self._tokens
        )

    def has_flag(self, flag: str) -> bool:
        """Return whether any flag token contains `flag`."""
        return any(isinstance(token, Flag) and flag in token for token in self._tokens)

    def shift_value_for_flag(self, flag: str) -> str | None:
        """Return the value for a flag (`-n Kyle`)."""
        values = self.shift_values_for_flag(flag)
        return values[0] if values else None

    def shift_values_for_flag(self, flag: str, count: int = 1) -> list[str] | None:
        """
        Remove the `count` tokens directly following the first flag containing `flag`.

        The flag token itself is left in place, so `has_flag(flag)` still
        reports True afterwards.

        Raises:
            ArgumentParserError: If a following token is not a positional value,
                or fewer than `count` tokens follow the flag.
        """
        for index, token in enumerate(self._tokens):
            if isinstance(token, Flag) and flag in token:
                return self._shift_values(index + 1, count, f"-{flag}")
        return None

    def _shift_values(self, index: int, count: int, label: str) -> list[str]:
        values: list[str] = []
        for _ in range(count):
            if len(self._tokens) <= index:
                raise ArgumentParserError(f"Missing value for `{label}`")
            token = self._tokens.pop(index)
            match token:
                case Positional(value=value):
                    values.append(value)
                case _:
                    raise ArgumentParserError(
                        f"Unexpected {token.kind} `{token}` as a value for `{label}`"
                    )
        logger.debug("Shifted values %s for '%s'", values, label)
        return values

    def __len__(self) -> int:
        return len(self._tokens)

    def __str__(self) -> str:
        return f"ArgumentParser(remaining={self.remaining})"

    def __repr__(self) -> str:
        return str(self)

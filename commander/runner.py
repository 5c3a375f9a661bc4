# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process entry point for Commander commands and groups.

`run()` tokenizes the process arguments, dispatches them to a command, and maps
the outcome to an exit code:

- handler completed: 0
- `Help` requested: usage is printed, 0
- `CommanderError` (parse, conversion or unknown command): message printed, 1
- interrupted: 130
"""
from __future__ import annotations

import sys
from typing import Any, Callable, NoReturn, Sequence

from rich.console import Console
from rich.markup import escape

from commander.console import console as default_console
from commander.console import error_console
from commander.exceptions import CommanderError
from commander.help import Help
from commander.logger import logger
from commander.parser.argument_parser import ArgumentParser
from commander.themes import OneColors
from commander.utils import get_program_invocation


def dispatch(command: Callable[[ArgumentParser], Any], argv: Sequence[str]) -> Any:
    """Tokenize `argv` and invoke `command` with a fresh parser."""
    return command(ArgumentParser(argv))


def run(
    command: Callable[[ArgumentParser], Any],
    argv: Sequence[str] | None = None,
    name: str | None = None,
    console: Console | None = None,
) -> NoReturn:
    """
    Dispatch `command` against `argv` and exit the process.

    Args:
        command (Callable): A `Command`, `Group`, or any callable taking a parser.
        argv (Sequence[str] | None): Arguments, defaults to `sys.argv[1:]`.
        name (str | None): Program name used in usage output.
        console (Console | None): Console for help output.
    """
    if argv is None:
        argv = sys.argv[1:]
    name = name or get_program_invocation()
    console = console or default_console

    try:
        dispatch(command, argv)
    except Help as help_signal:
        logger.debug("Help signal received for '%s'.", name)
        help_signal.reraise(name).render(console)
        sys.exit(0)
    except CommanderError as error:
        error_console.print(f"[{OneColors.DARK_RED}]❌ {escape(str(error))}[/]")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("[KeyboardInterrupt]. <- Exiting run.")
        sys.exit(130)
    sys.exit(0)

# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Subcommand registry and dispatch.

A `Group` maps subcommand names to commands (or nested groups). Dispatch shifts
the first positional value as the subcommand name and forwards the remaining
tokens to it. When the subcommand raises `Help`, the group re-raises it with the
subcommand name prepended, so usage reads `tool deploy <target>`.

Example:
    group = Group()

    @group.command("deploy", Argument("target"))
    def deploy(target: str) -> None:
        ...

    group.run()
"""
from __future__ import annotations

from typing import Any, Callable, Sequence

from commander.command import command as bind_command
from commander.exceptions import CommanderError, UnknownCommandError
from commander.help import Help
from commander.logger import logger
from commander.parser.argument_parser import ArgumentParser
from commander.runner import run


class Group:
    """Ordered collection of named subcommands."""

    def __init__(self) -> None:
        self.commands: dict[str, Callable[[ArgumentParser], Any]] = {}

    def add_command(self, name: str, command: Callable[[ArgumentParser], Any]) -> None:
        if name in self.commands:
            raise CommanderError(f"Command '{name}' is already registered")
        self.commands[name] = command

    def command(self, name: str, *descriptors: Any) -> Callable[[Callable[..., Any]], Any]:
        """Decorator registering a handler bound to `descriptors` under `name`."""

        def decorator(handler: Callable[..., Any]) -> Any:
            bound = bind_command(*descriptors)(handler)
            bound.name = name
            self.add_command(name, bound)
            return bound

        return decorator

    def group(self, name: str) -> Group:
        """Create, register and return a nested group."""
        subgroup = Group()
        self.add_command(name, subgroup)
        return subgroup

    def __call__(self, parser: ArgumentParser) -> Any:
        name = parser.shift()
        if name is None:
            raise Help(group=self)

        command = self.commands.get(name)
        if command is None:
            if parser.has_option("help"):
                raise Help(group=self)
            raise UnknownCommandError(name)

        logger.debug("Dispatching subcommand '%s'.", name)
        try:
            return command(parser)
        except Help as help_signal:
            raise help_signal.reraise(name) from None

    def run(self, argv: Sequence[str] | None = None, name: str | None = None) -> Any:
        return run(self, argv, name=name)

    def __str__(self) -> str:
        return f"Group(commands={list(self.commands)})"

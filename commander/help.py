# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The `Help` signal and its usage-text renderer.

`Help` is raised by a command when `--help` is present. It is a `HelpSignal`,
not an error: it aborts normal dispatch so the outer driver can print usage and
exit successfully. A `Group` re-raises it with its own subcommand name
prepended, building a full command chain such as `tool deploy`.

Rendered layout:

    Usage:

        <command chain> <positional names...>

    Commands:

        + <subcommand>

    Options:
        --<name> - <description>
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from rich.console import Console
from rich.markup import escape

from commander.console import console as default_console
from commander.descriptors import ArgumentType, BoxedArgumentDescriptor
from commander.signals import HelpSignal
from commander.themes import OneColors

if TYPE_CHECKING:
    from commander.group import Group


class Help(HelpSignal):
    """
    Carries the metadata needed to render usage text.

    Args:
        descriptors (Sequence[BoxedArgumentDescriptor]): Snapshots in declared order.
        command (str | None): Command-name chain, e.g. `"tool deploy"`.
        group (Group | None): Group whose subcommands should be listed.
    """

    def __init__(
        self,
        descriptors: Sequence[BoxedArgumentDescriptor] = (),
        command: str | None = None,
        group: Group | None = None,
    ) -> None:
        super().__init__("Help requested.")
        self.descriptors = list(descriptors)
        self.command = command
        self.group = group

    def reraise(self, command: str | None = None) -> Help:
        """Return a new `Help` with `command` prepended to the command chain."""
        if self.command is not None and command is not None:
            return Help(
                self.descriptors, command=f"{command} {self.command}", group=self.group
            )
        chain = command if command is not None else self.command
        return Help(self.descriptors, command=chain, group=self.group)

    @property
    def arguments(self) -> list[BoxedArgumentDescriptor]:
        return [d for d in self.descriptors if d.type is ArgumentType.ARGUMENT]

    @property
    def options(self) -> list[BoxedArgumentDescriptor]:
        return [d for d in self.descriptors if d.type is ArgumentType.OPTION]

    def __str__(self) -> str:
        output: list[str] = []

        if self.command is not None:
            usage = " ".join([self.command] + [arg.name for arg in self.arguments])
            output += ["Usage:", "", f"    {usage}", ""]

        if self.group is not None:
            output += ["Commands:", ""]
            output += [f"    + {name}" for name in self.group.commands]
            output.append("")

        if self.options:
            output.append("Options:")
            for option in self.options:
                if option.description:
                    output.append(f"    --{option.name} - {option.description}")
                else:
                    output.append(f"    --{option.name}")

        return "\n".join(output)

    def __repr__(self) -> str:
        return f"Help(command={self.command!r}, descriptors={len(self.descriptors)})"

    def render(self, console: Console | None = None) -> None:
        """Print the usage text with rich styling."""
        console = console or default_console
        for line in str(self).splitlines():
            stripped = line.strip()
            if stripped.endswith(":") and line == stripped:
                console.print(f"[{OneColors.BLUE_b}]{escape(line)}[/]")
            elif stripped.startswith("--"):
                console.print(f"[{OneColors.LIGHT_YELLOW}]{escape(line)}[/]")
            elif stripped.startswith("+ "):
                console.print(f"[{OneColors.GREEN}]{escape(line)}[/]")
            else:
                console.print(escape(line), highlight=False)

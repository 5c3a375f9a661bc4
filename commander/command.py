# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Binds an ordered list of descriptors and a handler into a dispatchable `Command`.

Dispatch contract for `Command.__call__(parser)`:

1. If `--help` is present, raise `Help` with snapshots of every descriptor in
   declared order. The handler is never invoked.
2. Otherwise parse each descriptor strictly in declared order. The first
   failure propagates and aborts the remaining parses.
3. Invoke the handler once with all parsed values, in declared order.

The `command()` decorator accepts one to five descriptors. Its overloads fix the
arity and the type of every handler slot for static type checkers.

Example:
    @command(Argument("path"), Flag("force", flag="f"))
    def remove(path: str, force: bool) -> None:
        ...

    remove(ArgumentParser(["build", "-f"]))
"""
from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar, overload

from pydantic import BaseModel, ConfigDict, Field, field_validator

from commander.descriptors import ArgumentDescriptor, BoxedArgumentDescriptor
from commander.exceptions import CommanderError
from commander.help import Help
from commander.logger import logger
from commander.parser.argument_parser import ArgumentParser
from commander.runner import run

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
R = TypeVar("R")

MAX_ARITY = 5


class Command(BaseModel):
    """
    A handler bound to its typed descriptors.

    Attributes:
        handler (Callable): Receives one parsed value per descriptor.
        descriptors (list[ArgumentDescriptor]): Extraction units, in declared order.
        name (str): Display name, defaults to the handler's name.
        help_text (str): Short description used by groups and docs.
    """

    handler: Callable[..., Any]
    descriptors: list[Any] = Field(default_factory=list)
    name: str = ""
    help_text: str = ""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("descriptors", mode="before")
    @classmethod
    def check_descriptors(cls, descriptors: Sequence[Any]) -> list[Any]:
        descriptors = list(descriptors)
        if not 1 <= len(descriptors) <= MAX_ARITY:
            raise CommanderError(
                f"A command takes 1 to {MAX_ARITY} descriptors, got {len(descriptors)}"
            )
        for descriptor in descriptors:
            if not isinstance(descriptor, ArgumentDescriptor):
                raise CommanderError(f"{descriptor!r} is not an argument descriptor")
        return descriptors

    def model_post_init(self, context: Any) -> None:
        if not self.name:
            self.name = getattr(self.handler, "__name__", "command")
        if not self.help_text:
            self.help_text = (getattr(self.handler, "__doc__", None) or "").strip()

    def help(self) -> Help:
        return Help([BoxedArgumentDescriptor.from_descriptor(d) for d in self.descriptors])

    def __call__(self, parser: ArgumentParser) -> Any:
        if parser.has_option("help"):
            logger.debug("[%s] Help requested.", self.name)
            raise self.help()

        values = [descriptor.parse(parser) for descriptor in self.descriptors]
        logger.debug("[%s] Parsed values: %s", self.name, values)
        return self.handler(*values)

    def run(self, argv: Sequence[str] | None = None, name: str | None = None) -> Any:
        """Dispatch against `argv` (default `sys.argv[1:]`) and exit the process."""
        return run(self, argv, name=name)

    def __str__(self) -> str:
        names = ", ".join(descriptor.name for descriptor in self.descriptors)
        return f"Command(name='{self.name}', descriptors=[{names}])"


@overload
def command(
    a: ArgumentDescriptor[A], /
) -> Callable[[Callable[[A], R]], Command]: ...
@overload
def command(
    a: ArgumentDescriptor[A], b: ArgumentDescriptor[B], /
) -> Callable[[Callable[[A, B], R]], Command]: ...
@overload
def command(
    a: ArgumentDescriptor[A], b: ArgumentDescriptor[B], c: ArgumentDescriptor[C], /
) -> Callable[[Callable[[A, B, C], R]], Command]: ...
@overload
def command(
    a: ArgumentDescriptor[A],
    b: ArgumentDescriptor[B],
    c: ArgumentDescriptor[C],
    d: ArgumentDescriptor[D],
    /,
) -> Callable[[Callable[[A, B, C, D], R]], Command]: ...
@overload
def command(
    a: ArgumentDescriptor[A],
    b: ArgumentDescriptor[B],
    c: ArgumentDescriptor[C],
    d: ArgumentDescriptor[D],
    e: ArgumentDescriptor[E],
    /,
) -> Callable[[Callable[[A, B, C, D, E], R]], Command]: ...
def command(*descriptors: Any) -> Callable[[Callable[..., Any]], Command]:
    """
    Decorator binding 1 to 5 descriptors to a handler.

    Raises:
        CommanderError: If the number of descriptors is outside 1 to 5.
    """
    if not 1 <= len(descriptors) <= MAX_ARITY:
        raise CommanderError(
            f"A command takes 1 to {MAX_ARITY} descriptors, got {len(descriptors)}"
        )

    def decorator(handler: Callable[..., Any]) -> Command:
        return Command(handler=handler, descriptors=list(descriptors))

    return decorator

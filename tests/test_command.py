import pytest

from commander import (
    Argument,
    ArgumentParser,
    Command,
    Flag,
    Help,
    Option,
    Options,
    command,
)
from commander.exceptions import CommanderError, MissingValueError


def test_command_single_descriptor():
    calls = []

    @command(Argument("name"))
    def greet(name: str) -> None:
        calls.append(name)

    assert isinstance(greet, Command)
    greet(ArgumentParser(["Kyle"]))
    assert calls == ["Kyle"]


def test_command_returns_handler_result():
    @command(Option("count", 1))
    def double(count: int) -> int:
        return count * 2

    assert double(ArgumentParser(["--count", "4"])) == 8


def test_command_five_descriptors_in_declared_order():
    @command(
        Argument("source"),
        Argument("destination"),
        Option("mode", "copy"),
        Options("size", [0, 0], count=2),
        Flag("force", flag="f"),
    )
    def handler(source, destination, mode, size, force):
        return source, destination, mode, size, force

    parser = ArgumentParser(["-f", "--size", "3", "4", "a", "--mode", "move", "b"])
    assert handler(parser) == ("a", "b", "move", [3, 4], True)


def test_descriptor_order_is_independent_of_token_order():
    @command(Option("name", "World"), Argument("greeting"))
    def handler(name, greeting):
        return f"{greeting} {name}"

    assert handler(ArgumentParser(["Hi", "--name", "Kyle"])) == "Hi Kyle"


def test_help_short_circuits_handler():
    calls = []

    @command(Argument("name"), Argument("other"))
    def handler(name, other):
        calls.append((name, other))

    with pytest.raises(Help) as excinfo:
        handler(ArgumentParser(["--help"]))
    assert calls == []
    assert [d.name for d in excinfo.value.descriptors] == ["name", "other"]


@pytest.mark.parametrize("arity", [1, 2, 3, 4, 5])
def test_help_for_every_arity(arity):
    descriptors = [Argument(f"arg{index}") for index in range(arity)]
    calls = []
    bound = command(*descriptors)(lambda *values: calls.append(values))

    with pytest.raises(Help) as excinfo:
        bound(ArgumentParser(["x", "--help"]))
    assert calls == []
    assert len(excinfo.value.descriptors) == arity


def test_help_is_not_an_exception():
    @command(Argument("name"))
    def handler(name):
        pass

    with pytest.raises(Help):
        try:
            handler(ArgumentParser(["--help"]))
        except Exception:
            pytest.fail("Help must not be caught as an Exception")


def test_first_failure_aborts_remaining_parses():
    parsed = []

    class Recording(Option):
        def parse(self, parser):
            parsed.append(self.name)
            return super().parse(parser)

    calls = []

    @command(Argument("required"), Recording("after", "x"))
    def handler(required, after):
        calls.append(required)

    parser = ArgumentParser(["--after"])
    with pytest.raises(MissingValueError):
        handler(parser)
    assert parsed == []
    assert calls == []
    assert parser.remaining == ["--after"]


@pytest.mark.parametrize("count", [0, 6])
def test_command_arity_bounds(count):
    with pytest.raises(CommanderError):
        command(*[Argument(f"a{index}") for index in range(count)])


def test_command_rejects_non_descriptors():
    with pytest.raises(CommanderError):
        Command(handler=print, descriptors=["name"])


def test_command_name_and_help_text_from_handler():
    @command(Argument("name"))
    def greet(name):
        """Say hello."""

    assert greet.name == "greet"
    assert greet.help_text == "Say hello."
    assert str(greet) == "Command(name='greet', descriptors=[name])"

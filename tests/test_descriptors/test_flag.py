import pytest

from commander import ArgumentParser, ArgumentType, Flag
from commander.exceptions import CommanderError


@pytest.mark.parametrize(
    "arguments, expected",
    [
        (["--no-clean"], False),
        ([], True),
        (["--clean"], True),
        (["-c"], True),
        (["-xc"], True),
        (["--clean", "--no-clean"], False),
        (["-c", "--no-clean"], False),
    ],
)
def test_flag_default_true(arguments, expected):
    flag = Flag("clean", flag="c", default=True)
    assert flag.parse(ArgumentParser(arguments)) is expected


@pytest.mark.parametrize(
    "arguments, expected",
    [
        ([], False),
        (["--verbose"], True),
        (["-v"], False),
    ],
)
def test_flag_without_alias(arguments, expected):
    assert Flag("verbose").parse(ArgumentParser(arguments)) is expected


def test_flag_never_consumes_tokens():
    parser = ArgumentParser(["--clean", "value", "-c"])
    Flag("clean", flag="c").parse(parser)
    assert parser.remaining == ["--clean", "value", "-c"]


def test_flag_metadata():
    flag = Flag("clean", flag="c", description="Clean first")
    assert flag.type is ArgumentType.OPTION
    assert flag.default is False


def test_flag_alias_must_be_single_character():
    with pytest.raises(CommanderError):
        Flag("clean", flag="cl")

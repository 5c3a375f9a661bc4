import pytest
from rich.console import Console

from commander import Argument, Group, Option, command, run


@command(Argument("name"), Option("count", 1, description="Number of greetings"))
def greet(name, count):
    for _ in range(count):
        print(f"Hello {name}")


def test_run_success(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(greet, ["Kyle", "--count", "2"], name="greet")
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == "Hello Kyle\nHello Kyle\n"


def test_run_help_exits_zero():
    console = Console(record=True, width=80)
    with pytest.raises(SystemExit) as excinfo:
        run(greet, ["--help"], name="greet", console=console)
    assert excinfo.value.code == 0
    output = console.export_text()
    assert "greet name" in output
    assert "--count - Number of greetings" in output


def test_run_parse_error_exits_one(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(greet, ["Kyle", "--count"], name="greet")
    assert excinfo.value.code == 1
    assert "Missing value for `--count`" in capsys.readouterr().err


def test_run_group_help_lists_commands():
    tool = Group()
    tool.add_command("greet", greet)
    console = Console(record=True, width=80)
    with pytest.raises(SystemExit) as excinfo:
        run(tool, [], name="tool", console=console)
    assert excinfo.value.code == 0
    output = console.export_text()
    assert "Usage:" in output
    assert "+ greet" in output


def test_command_run_uses_sys_argv(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["greet", "Ada"])
    with pytest.raises(SystemExit) as excinfo:
        greet.run(name="greet")
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == "Hello Ada\n"

import pytest

from commander.exceptions import InvalidTypeError, MissingValueError
from commander.parser import (
    ArgumentConvertible,
    ArgumentParser,
    convert_parser,
    convert_string,
)


class Point(ArgumentConvertible):
    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    @classmethod
    def from_parser(cls, parser):
        return cls(int(parser.shift()), int(parser.shift()))


class Upper(ArgumentConvertible):
    def __init__(self, value: str):
        self.value = value

    @classmethod
    def from_string(cls, value):
        if not value.isalpha():
            raise ValueError(value)
        return cls(value.upper())


class Nothing(ArgumentConvertible):
    pass


def test_convert_string_builtin():
    assert convert_string("80", int) == 80


def test_convert_string_failure_names_the_argument():
    with pytest.raises(InvalidTypeError) as excinfo:
        convert_string("x", int, "--port")
    assert str(excinfo.value) == "`x` is not a valid `int` for `--port`"
    assert excinfo.value.value == "x"
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_from_parser_type_reads_several_tokens():
    parser = ArgumentParser(["1", "2", "3"])
    point = convert_parser(parser, Point)
    assert (point.x, point.y) == (1, 2)
    assert parser.remaining == ["3"]


def test_from_parser_type_from_single_string_uses_one_element_parser():
    with pytest.raises(InvalidTypeError):
        convert_string("1", Point)


def test_from_string_type_through_parser():
    parser = ArgumentParser(["--x", "abc"])
    assert convert_parser(parser, Upper).value == "ABC"
    assert parser.remaining == ["--x"]


def test_from_string_type_failure():
    with pytest.raises(InvalidTypeError):
        convert_string("123", Upper, "name")


def test_default_from_string_bridges_to_from_parser():
    class Word(ArgumentConvertible):
        def __init__(self, value):
            self.value = value

        @classmethod
        def from_parser(cls, parser):
            return cls(parser.shift())

    assert Word.from_string("hello").value == "hello"


def test_convertible_without_implementation():
    with pytest.raises(NotImplementedError):
        Nothing.from_string("value")


def test_convert_parser_missing_value():
    with pytest.raises(MissingValueError) as excinfo:
        convert_parser(ArgumentParser(["--flag"]), int, "port")
    assert str(excinfo.value) == "Missing value for `port`"


def test_argument_parser_is_convertible():
    original = ArgumentParser(["a", "b"])
    copy = convert_parser(original, ArgumentParser)
    assert isinstance(copy, ArgumentParser)
    assert copy.remaining == ["a", "b"]


class Version(ArgumentConvertible):
    def __init__(self, major: int, minor: int):
        self.major = major
        self.minor = minor

    @classmethod
    def from_string(cls, value):
        major, minor = value.split(".")
        return cls(int(major), int(minor))


def test_from_string_type_invalid_value_names_the_bad_token():
    parser = ArgumentParser(["1.x", "-n", "other"])
    with pytest.raises(InvalidTypeError) as excinfo:
        convert_parser(parser, Version, "version")
    assert excinfo.value.value == "1.x"
    assert str(excinfo.value) == "`1.x` is not a valid `Version` for `version`"
    assert parser.remaining == ["-n", "other"]


def test_from_string_type_missing_value_names_the_argument():
    with pytest.raises(MissingValueError) as excinfo:
        convert_parser(ArgumentParser([]), Version, "version")
    assert str(excinfo.value) == "Missing value for `version`"


def test_from_parser_type_failure_names_consumed_tokens():
    parser = ArgumentParser(["1", "y", "--keep", "rest"])
    with pytest.raises(InvalidTypeError) as excinfo:
        convert_parser(parser, Point, "point")
    assert excinfo.value.value == "1 y"
    assert parser.remaining == ["--keep", "rest"]

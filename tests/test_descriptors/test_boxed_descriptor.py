from commander import (
    Argument,
    ArgumentType,
    BoxedArgumentDescriptor,
    Flag,
    Option,
    Options,
)


def test_boxed_argument():
    boxed = BoxedArgumentDescriptor.from_descriptor(Argument("target", "Build target"))
    assert boxed == BoxedArgumentDescriptor(
        name="target",
        description="Build target",
        type=ArgumentType.ARGUMENT,
        default=None,
    )


def test_boxed_flag_stringifies_default():
    boxed = BoxedArgumentDescriptor.from_descriptor(Flag("clean", default=True))
    assert boxed.default == "True"
    assert boxed.type is ArgumentType.OPTION


def test_boxed_option_default_not_rendered():
    assert BoxedArgumentDescriptor.from_descriptor(Option("count", 1)).default is None
    boxed = BoxedArgumentDescriptor.from_descriptor(Options("size", [1, 2], count=2))
    assert boxed.default is None
    assert boxed.description is None

## easyflag — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import easyflag.api as F


def test_facade_exports():
    for name in ('FlagSet', 'Flag', 'Binding', 'Kind', 'KINDS', 'Bool', 'I32', 'Usize', 'F64', 'String',
                 'FlagError', 'FlagTypeError', 'FlagValueError', 'FlagNameError', 'FlagArgumentError', 'FlagParseError'):
        assert hasattr(F, name), name


def test_readme_example():
    help, my_flag = F.Bool(False), F.String("default value")
    flags = F.FlagSet("prog") \
        .add("-h, --help", help, "Prints help message.") \
        .add("-m, --my-flag", my_flag, "Help message for my_flag with string `value`")

    flags.parse(["-m", "hello"])
    assert help.value is False
    assert my_flag.value == "hello"
    assert flags.usage() == (
        "Usage of prog:\n"
        "  -h, --help\n    \tPrints help message.\n"
        "  -m, --my-flag string\n    \tHelp message for my_flag with string `value`\n"
    )


def test_error_hierarchy():
    for cls in (F.FlagValueError, F.FlagNameError, F.FlagArgumentError, F.FlagParseError):
        assert issubclass(cls, F.FlagError)
    assert issubclass(F.FlagTypeError, TypeError)
    assert not issubclass(F.FlagTypeError, F.FlagError)
    assert issubclass(F.FlagNameError, NameError)

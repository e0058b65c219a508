import io

import pytest

from flagkit.helptext import (
    ZSH_HACK_ENV,
    CommandEntry,
    FlagEntry,
    cli_arg_contains,
    default_complete_with_flags,
    indent,
    nindent,
    print_command_suggestions,
    print_flag_suggestions,
)


def test_indent_multiline_description():
    assert indent(3, "multi\n  line") == "   multi\n     line"


def test_nindent_adds_leading_newline():
    assert nindent(3, "a\nb") == "\n   a\n   b"


def test_nindent_then_strip_gives_usage_block():
    text = "This is a\nmulti\nline\nUsageText"
    assert nindent(3, text).strip() == "This is a\n   multi\n   line\n   UsageText"


def test_command_names_and_has_name():
    cmd = CommandEntry(name="frobbly", aliases=["fr", "frob", "bork"])
    assert cmd.names() == ["frobbly", "fr", "frob", "bork"]
    assert cmd.has_name("fr")
    assert not cmd.has_name("nope")


def test_flag_names():
    assert FlagEntry(name="foo", aliases=["f"]).names() == ["foo", "f"]


@pytest.mark.parametrize(
    "flag_name, argv, expected",
    [
        ("v", ["prog", "-v"], True),
        ("verbose", ["prog", "--verbose"], True),
        ("verbose", ["prog", "-verbose"], False),
        ("verbose, v", ["prog", "-v"], True),
        ("x", ["prog", "--x"], False),
    ],
)
def test_cli_arg_contains(flag_name, argv, expected):
    assert cli_arg_contains(flag_name, argv) is expected


@pytest.mark.parametrize(
    "name, commands, flags, argv, expected",
    [
        ("empty", [], [], ["prog", "cmd"], ""),
        (
            "typical-flag-suggestion",
            [],
            [FlagEntry(name="excitement"), FlagEntry(name="hat-shape")],
            ["cmd", "--e", "--generate-bash-completion"],
            "--excitement\n",
        ),
        (
            "typical-command-suggestion",
            [CommandEntry(name="futz")],
            [FlagEntry(name="excitement"), FlagEntry(name="hat-shape")],
            ["cmd", "--generate-bash-completion"],
            "futz\n",
        ),
    ],
)
def test_default_complete_with_flags(name, commands, flags, argv, expected, monkeypatch):
    monkeypatch.delenv(ZSH_HACK_ENV, raising=False)
    writer = io.StringIO()
    default_complete_with_flags(commands, flags, writer, argv)
    assert writer.getvalue() == expected


def test_command_suggestions_skip_hidden(monkeypatch):
    monkeypatch.delenv(ZSH_HACK_ENV, raising=False)
    writer = io.StringIO()
    print_command_suggestions(
        [
            CommandEntry(name="frobbly", aliases=["fr"]),
            CommandEntry(name="secretfrob", hidden=True),
        ],
        writer,
    )
    assert writer.getvalue() == "frobbly\nfr\n"


def test_command_suggestions_zsh_hack(monkeypatch):
    monkeypatch.setenv(ZSH_HACK_ENV, "1")
    writer = io.StringIO()
    print_command_suggestions([CommandEntry(name="putz", usage="does putz")], writer)
    assert writer.getvalue() == "putz:does putz\n"


def test_flag_suggestions_skip_short_after_double_dash():
    writer = io.StringIO()
    flags = [FlagEntry(name="verbose", aliases=["v"])]
    print_flag_suggestions("--v", flags, writer, ["prog", "--v", "x"])
    assert writer.getvalue() == "--verbose\n"


def test_flag_suggestions_single_dash_includes_short():
    writer = io.StringIO()
    flags = [FlagEntry(name="verbose", aliases=["v"])]
    print_flag_suggestions("-", flags, writer, ["prog", "-", "x"])
    assert writer.getvalue() == "--verbose\n-v\n"


def test_flag_suggestions_skip_already_used_and_hidden():
    writer = io.StringIO()
    flags = [
        FlagEntry(name="excitement"),
        FlagEntry(name="extra"),
        FlagEntry(name="exotic", hidden=True),
    ]
    print_flag_suggestions("--e", flags, writer, ["prog", "--extra", "--e", "x"])
    assert writer.getvalue() == "--excitement\n"


def test_flag_suggestions_skip_exact_match():
    writer = io.StringIO()
    print_flag_suggestions("--happy", [FlagEntry(name="happy")], writer, ["p", "--happy", "x"])
    assert writer.getvalue() == ""


def test_complete_non_dash_arg_lists_commands(monkeypatch):
    monkeypatch.delenv(ZSH_HACK_ENV, raising=False)
    writer = io.StringIO()
    default_complete_with_flags(
        [CommandEntry(name="putz")],
        [FlagEntry(name="happiness")],
        writer,
        ["cmd", "sub", "--generate-bash-completion"],
    )
    assert writer.getvalue() == "putz\n"
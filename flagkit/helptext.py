"""Help text helpers and shell completion suggestions."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

ZSH_HACK_ENV = "_CLI_ZSH_AUTOCOMPLETE_HACK"


@dataclass
class CommandEntry:
    """A command as seen by help and completion output."""

    name: str = ""
    aliases: list[str] = field(default_factory=list)
    usage: str = ""
    hidden: bool = False
    subcommands: list[CommandEntry] = field(default_factory=list)

    def names(self) -> list[str]:
        """Return the command's name followed by its aliases."""
        return [self.name, *self.aliases]

    def has_name(self, name: str) -> bool:
        """Return True if ``name`` is the command's name or one of its aliases."""
        return name in self.names()


@dataclass
class FlagEntry:
    """A flag as seen by completion output."""

    name: str = ""
    aliases: list[str] = field(default_factory=list)
    hidden: bool = False

    def names(self) -> list[str]:
        """Return the flag's name followed by its aliases."""
        return [self.name, *self.aliases]


def indent(spaces: int, text: str) -> str:
    """Prefix every line of ``text`` with ``spaces`` spaces."""
    pad = " " * spaces
    return pad + text.replace("\n", "\n" + pad)


def nindent(spaces: int, text: str) -> str:
    """Like :func:`indent`, preceded by a newline."""
    return "\n" + indent(spaces, text)


def _dashes(name: str) -> str:
    return "-" * min(len(name), 2)


def cli_arg_contains(flag_name: str, argv: Sequence[str] | None = None) -> bool:
    """Return True if any comma-separated name of the flag appears in ``argv``."""
    args = sys.argv if argv is None else argv
    for name in flag_name.split(","):
        name = name.strip()
        if _dashes(name) + name in args:
            return True
    return False


def print_command_suggestions(
    commands: Iterable[CommandEntry], writer: TextIO
) -> None:
    """Write the names of all visible commands, one per line."""
    zsh = os.environ.get(ZSH_HACK_ENV) == "1"
    for command in commands:
        if command.hidden:
            continue
        for name in command.names():
            if zsh:
                writer.write(f"{name}:{command.usage}\n")
            else:
                writer.write(f"{name}\n")


def print_flag_suggestions(
    last_arg: str,
    flags: Iterable[FlagEntry],
    writer: TextIO,
    argv: Sequence[str] | None = None,
) -> None:
    """Write the flags that complete ``last_arg`` and are not used yet."""
    args = sys.argv if argv is None else argv
    cur = last_arg.removeprefix("-").removeprefix("-")
    for flag in flags:
        if flag.hidden:
            continue
        for name in flag.names():
            name = name.strip()
            count = min(len(name), 2)
            # a "--" prefix never completes to a one-letter flag
            if last_arg.startswith("--") and count == 1:
                continue
            if name.startswith(cur) and cur != name and not cli_arg_contains(name, args):
                writer.write("-" * count + name + "\n")


def default_complete_with_flags(
    commands: Iterable[CommandEntry],
    flags: Iterable[FlagEntry],
    writer: TextIO,
    argv: Sequence[str] | None = None,
) -> None:
    """Suggest flags if the word being completed starts with "-", else commands."""
    args = sys.argv if argv is None else argv
    if len(args) > 2:
        last_arg = args[-2]
        if last_arg.startswith("-"):
            print_flag_suggestions(last_arg, flags, writer, args)
            return
    print_command_suggestions(commands, writer)
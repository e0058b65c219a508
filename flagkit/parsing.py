"""Helpers for splitting combined short options such as ``-it``."""

from __future__ import annotations

from collections.abc import Container, Sequence

PROVIDED_BUT_NOT_DEFINED = "flag provided but not defined: -"


def flag_from_error(message: str) -> str:
    """Extract the flag name from an "undefined flag" error message.

    Raises ValueError if the message is not of that form.
    """
    if not message.startswith(PROVIDED_BUT_NOT_DEFINED):
        raise ValueError(message)
    return message[len(PROVIDED_BUT_NOT_DEFINED):]


def is_splittable(flag_arg: str) -> bool:
    """Return True if the argument looks like several combined short flags."""
    return (
        flag_arg.startswith("-")
        and not flag_arg.startswith("--")
        and len(flag_arg) > 2
    )


def split_short_options(arg: str, known: Container[str]) -> list[str]:
    """Split ``-abc`` into ``-a``, ``-b``, ``-c`` if every letter is a known flag.

    Otherwise the argument is returned unchanged as a one-item list.
    """
    if not is_splittable(arg) or not all(c in known for c in arg[1:]):
        return [arg]
    return [f"-{c}" for c in arg[1:]]


def expand_short_options(
    args: Sequence[str], unknown_name: str, known: Container[str]
) -> list[str]:
    """Return a copy of ``args`` with the argument naming ``unknown_name`` split.

    Raises ValueError if no argument names the flag, or if it cannot be split
    into known short flags.
    """
    for index, arg in enumerate(args):
        if arg.lstrip("-") != unknown_name:
            continue
        short_opts = split_short_options(arg, known)
        if len(short_opts) == 1:
            raise ValueError(f"{PROVIDED_BUT_NOT_DEFINED}{unknown_name}")
        return [*args[:index], *short_opts, *args[index + 1:]]
    raise ValueError(f"{PROVIDED_BUT_NOT_DEFINED}{unknown_name}")
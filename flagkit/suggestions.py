"""Suggest the nearest flag or command name for a mistyped one."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from flagkit.parsing import flag_from_error

DID_YOU_MEAN = "Did you mean '{}'?"
HELP_NAMES = ("help", "h")


def jaro_winkler(a: str, b: str, long_tolerance: bool = True) -> float:
    """Jaro-Winkler similarity of two strings, between 0.0 and 1.0.

    With ``long_tolerance`` an extra boost is given to long strings that
    agree beyond their common prefix.
    """
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    shorter = min(len(a), len(b))
    search_range = max(max(len(a), len(b)) // 2 - 1, 0)

    a_flags = [False] * len(a)
    b_flags = [False] * len(b)
    common = 0
    for i, ch in enumerate(a):
        low = max(i - search_range, 0)
        high = min(i + search_range, len(b) - 1)
        for j in range(low, high + 1):
            if not b_flags[j] and b[j] == ch:
                a_flags[i] = b_flags[j] = True
                common += 1
                break

    if common == 0:
        return 0.0

    a_matched = [c for c, hit in zip(a, a_flags) if hit]
    b_matched = [c for c, hit in zip(b, b_flags) if hit]
    transpositions = sum(x != y for x, y in zip(a_matched, b_matched)) // 2

    weight = (
        common / len(a) + common / len(b) + (common - transpositions) / common
    ) / 3

    if weight > 0.7:
        prefix = 0
        for x, y in zip(a[:4], b[:4]):
            if x != y or x.isdecimal():
                break
            prefix += 1
        if prefix:
            weight += prefix * 0.1 * (1.0 - weight)

        if (
            long_tolerance
            and shorter > 4
            and common > prefix + 1
            and 2 * common >= shorter + prefix
            and not a[0].isdecimal()
        ):
            weight += (1.0 - weight) * (
                (common - prefix - 1) / (len(a) + len(b) - prefix * 2 + 2)
            )

    return weight


def _group(entry: str | Sequence[str]) -> tuple[str, ...]:
    return (entry,) if isinstance(entry, str) else tuple(entry)


def _best(candidates: Iterable[str], provided: str) -> str:
    best, distance = "", 0.0
    for name in candidates:
        score = jaro_winkler(name, provided, True)
        if score > distance:
            distance, best = score, name
    return best


def suggest_flag(
    flag_names: Iterable[str | Sequence[str]],
    provided: str,
    hide_help: bool = False,
) -> str:
    """Return the closest flag as ``-x`` or ``--name``, or "" if none is close.

    ``flag_names`` holds one group of names per flag. Unless ``hide_help`` is
    set, the help flag's names are considered alongside each flag.
    """

    def candidates():
        for entry in flag_names:
            yield from _group(entry)
            if not hide_help:
                yield from HELP_NAMES

    suggestion = _best(candidates(), provided)
    if len(suggestion) == 1:
        return "-" + suggestion
    if len(suggestion) > 1:
        return "--" + suggestion
    return suggestion


def suggest_flag_from_error(
    message: str,
    flag_names: Iterable[str | Sequence[str]],
    hide_help: bool = False,
) -> str:
    """Build a "did you mean" hint from an undefined-flag error message.

    Raises ValueError if the message names no flag or nothing is close.
    """
    provided = flag_from_error(message)
    suggestion = suggest_flag(flag_names, provided, hide_help)
    if not suggestion:
        raise ValueError(message)
    return DID_YOU_MEAN.format(suggestion) + "\n\n"


def suggest_command(
    command_names: Iterable[str | Sequence[str]], provided: str
) -> str:
    """Return a "did you mean" hint naming the closest command.

    ``command_names`` holds one group of names per command; the help
    command's names are considered alongside each of them.
    """

    def candidates():
        for entry in command_names:
            yield from _group(entry)
            yield from HELP_NAMES

    return DID_YOU_MEAN.format(_best(candidates(), provided))
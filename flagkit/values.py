"""Parseable flag values: typed lists and timestamps."""

from __future__ import annotations

import json
import math
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from decimal import Decimal

SLICE_SEPARATOR = ","
SERIALIZE_PREFIX = (
    "sl:::" + datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ") + ":::"
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def split_multi_values(value: str) -> list[str]:
    """Split a multi-valued flag argument on the slice separator."""
    return value.split(SLICE_SEPARATOR)


def _parse_int(text: str) -> int:
    """Parse a signed 64-bit integer, honouring 0x, 0o, 0b and leading-0 octal."""
    body = text
    negative = False
    if body and body[0] in "+-":
        negative = body[0] == "-"
        body = body[1:]
    if not body or body[0] in "+-" or not body[0].isalnum():
        raise ValueError(f'parsing "{text}": invalid syntax')
    try:
        if len(body) > 1 and body[0] == "0" and body[1] not in "xXoObB":
            number = int(body[1:], 8)
        else:
            number = int(body, 0)
    except ValueError:
        raise ValueError(f'parsing "{text}": invalid syntax') from None
    if negative:
        number = -number
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f'parsing "{text}": value out of range')
    return number


def _parse_float(text: str) -> float:
    """Parse a 64-bit float, accepting hexadecimal notation as well."""
    lowered = text.lower()
    try:
        if "0x" in lowered:
            number = float.fromhex(text)
        else:
            number = float(text)
    except ValueError:
        raise ValueError(f'parsing "{text}": invalid syntax') from None
    if math.isinf(number) and "inf" not in lowered:
        raise ValueError(f'parsing "{text}": value out of range')
    return number


def _format_float(x: float, *, for_json: bool = False) -> str:
    """Format a float with shortest digits, in %v or JSON style."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    digits = "".join(map(str, digit_tuple))
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped
    count = len(digits)
    point = count + exponent
    exp10 = point - 1

    if for_json:
        use_exponent = abs(x) < 1e-6 or abs(x) >= 1e21
    else:
        use_exponent = exp10 < -4 or exp10 >= 6

    if use_exponent:
        mantissa = digits[0] + ("." + digits[1:] if count > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        exp_digits = f"{abs(exp10):02d}"
        if for_json and exp_sign == "-":
            exp_digits = str(abs(exp10))
        body = f"{mantissa}e{exp_sign}{exp_digits}"
    elif point <= 0:
        body = "0." + "0" * (-point) + digits
    elif point >= count:
        body = digits + "0" * (point - count)
    else:
        body = digits[:point] + "." + digits[point:]
    return ("-" if sign else "") + body


class _SliceValue(ABC):
    """A list of values filled from repeated or comma-separated arguments."""

    _type_label = ""

    def __init__(self, *args) -> None:
        self._items: list = list(args)
        self.has_been_set = False

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @abstractmethod
    def _parse(self, text: str):
        """Parse one argument item."""

    @abstractmethod
    def _coerce(self, item):
        """Check one decoded JSON element, raising ValueError if unfit."""

    def _format(self, item) -> str:
        return str(item)

    def _json_payload(self) -> str:
        return json.dumps(self._items, separators=(",", ":"))

    def _begin_set(self) -> None:
        if not self.has_been_set:
            self._items = []
            self.has_been_set = True

    def _deserialize(self, value: str) -> None:
        # Deserialising overwrites; malformed payloads are ignored.
        payload = value.replace(SERIALIZE_PREFIX, "", 1)
        try:
            decoded = json.loads(payload)
        except ValueError:
            return
        if decoded is None:
            self._items = []
            return
        if not isinstance(decoded, list):
            return
        try:
            self._items = [self._coerce(item) for item in decoded]
        except (TypeError, ValueError):
            return

    def set(self, value: str) -> None:
        """Parse ``value`` and append its items; the first call drops defaults."""
        self._begin_set()
        if value.startswith(SERIALIZE_PREFIX):
            self._deserialize(value)
            self.has_been_set = True
            return
        for part in split_multi_values(value):
            self._items.append(self._parse(part.strip()))

    def serialize(self) -> str:
        """Return the items in a form that :meth:`set` restores exactly."""
        return SERIALIZE_PREFIX + self._json_payload()

    def value(self) -> list:
        """Return the items currently held."""
        return list(self._items)

    def clone(self):
        """Return an independent copy, including whether it has been set."""
        copy = type(self)(*self._items)
        copy.has_been_set = self.has_been_set
        return copy

    def __str__(self) -> str:
        inner = ", ".join(self._format(item) for item in self._items)
        return f"[]{self._type_label}{{{inner}}}"


class _IntegerSlice(_SliceValue):
    def _parse(self, text: str) -> int:
        return _parse_int(text)

    def _coerce(self, item) -> int:
        if isinstance(item, bool) or not isinstance(item, int):
            raise TypeError(f"not an integer: {item!r}")
        if not _INT64_MIN <= item <= _INT64_MAX:
            raise ValueError(f"out of range: {item}")
        return item


class IntSlice(_IntegerSlice):
    """A list of ints for a repeatable flag."""

    _type_label = "int"

    def __init__(self, *args) -> None:
        super().__init__(*args)

    def set(self, value: str) -> None:
        """Parse ``value`` as ints and append them; the first call drops defaults."""
        super().set(value)

    def set_int(self, value: int) -> None:
        """Append an integer directly; the first call drops defaults."""
        self._begin_set()
        self._items.append(value)

    def serialize(self) -> str:
        """Return the items in a form that :meth:`set` restores exactly."""
        return super().serialize()

    def value(self) -> list[int]:
        """Return the ints currently held."""
        return super().value()

    def clone(self) -> IntSlice:
        """Return an independent copy, including whether it has been set."""
        return super().clone()

    def __str__(self) -> str:
        return super().__str__()


class Int64Slice(_IntegerSlice):
    """A list of 64-bit ints for a repeatable flag."""

    _type_label = "int64"

    def __init__(self, *args) -> None:
        super().__init__(*args)

    def set(self, value: str) -> None:
        """Parse ``value`` as ints and append them; the first call drops defaults."""
        super().set(value)

    def serialize(self) -> str:
        """Return the items in a form that :meth:`set` restores exactly."""
        return super().serialize()

    def value(self) -> list[int]:
        """Return the ints currently held."""
        return super().value()

    def clone(self) -> Int64Slice:
        """Return an independent copy, including whether it has been set."""
        return super().clone()

    def __str__(self) -> str:
        return super().__str__()


class Float64Slice(_SliceValue):
    """A list of floats for a repeatable flag."""

    _type_label = "float64"

    def __init__(self, *args) -> None:
        super().__init__(*args)

    def _parse(self, text: str) -> float:
        return _parse_float(text)

    def _coerce(self, item) -> float:
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise TypeError(f"not a number: {item!r}")
        return float(item)

    def _format(self, item) -> str:
        return _format_float(item)

    def _json_payload(self) -> str:
        if not all(math.isfinite(item) for item in self._items):
            return ""
        return "[" + ",".join(_format_float(i, for_json=True) for i in self._items) + "]"

    def set(self, value: str) -> None:
        """Parse ``value`` as floats and append them; the first call drops defaults."""
        super().set(value)

    def serialize(self) -> str:
        """Return the items in a form that :meth:`set` restores exactly."""
        return super().serialize()

    def value(self) -> list[float]:
        """Return the floats currently held."""
        return super().value()

    def clone(self) -> Float64Slice:
        """Return an independent copy, including whether it has been set."""
        return super().clone()

    def __str__(self) -> str:
        return super().__str__()


class StringSlice(_SliceValue):
    """A list of strings for a repeatable flag."""

    def __init__(self, *args) -> None:
        super().__init__(*args)

    def _parse(self, text: str) -> str:
        return text

    def _coerce(self, item) -> str:
        if not isinstance(item, str):
            raise TypeError(f"not a string: {item!r}")
        return item

    def _json_payload(self) -> str:
        text = json.dumps(self._items, separators=(",", ":"), ensure_ascii=False)
        for raw, escaped in (
            ("<", "\\u003c"),
            (">", "\\u003e"),
            ("&", "\\u0026"),
            ("\u2028", "\\u2028"),
            ("\u2029", "\\u2029"),
        ):
            text = text.replace(raw, escaped)
        return text

    def set(self, value: str) -> None:
        """Append the trimmed items of ``value``; the first call drops defaults."""
        super().set(value)

    def serialize(self) -> str:
        """Return the items in a form that :meth:`set` restores exactly."""
        return super().serialize()

    def value(self) -> list[str]:
        """Return the strings currently held."""
        return super().value()

    def clone(self) -> StringSlice:
        """Return an independent copy, including whether it has been set."""
        return super().clone()

    def __str__(self) -> str:
        return "[" + " ".join(self._items) + "]"


_LAYOUT_TOKENS = (
    ("January", "%B"),
    ("Monday", "%A"),
    ("Z07:00:00", "%z"),
    ("-07:00:00", "%z"),
    ("Z070000", "%z"),
    ("-070000", "%z"),
    ("Z07:00", "%z"),
    ("-07:00", "%z"),
    ("Z0700", "%z"),
    ("-0700", "%z"),
    ("2006", "%Y"),
    ("Z07", "%z"),
    ("-07", "%z"),
    ("Jan", "%b"),
    ("Mon", "%a"),
    ("MST", "%Z"),
    ("002", "%j"),
    ("__2", "%j"),
    ("_2", "%d"),
    ("15", "%H"),
    ("01", "%m"),
    ("02", "%d"),
    ("03", "%I"),
    ("04", "%M"),
    ("05", "%S"),
    ("06", "%y"),
    ("PM", "%p"),
    ("pm", "%p"),
    ("1", "%m"),
    ("2", "%d"),
    ("3", "%I"),
    ("4", "%M"),
    ("5", "%S"),
)


def _fraction_length(layout: str, start: int) -> int:
    """Length of a fractional-seconds element (".000", ",999") at ``start``, or 0."""
    if layout[start] not in ".," or start + 1 >= len(layout):
        return 0
    digit = layout[start + 1]
    if digit not in "09":
        return 0
    end = start + 1
    while end < len(layout) and layout[end] == digit:
        end += 1
    if end < len(layout) and layout[end].isdigit():
        return 0
    return end - start


def go_layout_to_strftime(layout: str) -> str:
    """Convert a reference-time layout ("2006-01-02 15:04:05") to strptime form."""
    out: list[str] = []
    pos = 0
    while pos < len(layout):
        fraction = _fraction_length(layout, pos)
        if fraction:
            out.append(layout[pos] + "%f")
            pos += fraction
            continue
        for token, directive in _LAYOUT_TOKENS:
            if layout.startswith(token, pos):
                out.append(directive)
                pos += len(token)
                break
        else:
            char = layout[pos]
            out.append("%%" if char == "%" else char)
            pos += 1
    return "".join(out)


class Timestamp:
    """A point in time parsed from a flag argument with a given layout."""

    def __init__(self, timestamp: datetime | None = None) -> None:
        self._timestamp = timestamp
        self.has_been_set = False
        self._layout = ""

    @property
    def layout(self) -> str:
        return self._layout

    def set_timestamp(self, value: datetime) -> None:
        """Store ``value`` unless a value has already been set."""
        if not self.has_been_set:
            self._timestamp = value
            self.has_been_set = True

    def set_layout(self, layout: str) -> None:
        """Set the layout used by later calls to :meth:`set`."""
        self._layout = layout

    def set(self, value: str) -> None:
        """Parse ``value`` with the current layout; raises ValueError on mismatch."""
        parsed = datetime.strptime(value, go_layout_to_strftime(self._layout))
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        self._timestamp = parsed
        self.has_been_set = True

    def value(self) -> datetime | None:
        """Return the stored time, or None if there is none."""
        return self._timestamp

    def __str__(self) -> str:
        return "" if self._timestamp is None else self._timestamp.isoformat()
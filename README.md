# flagkit

Small, dependency-free building blocks for command-line tools that handle
flags themselves.

## Modules

### `flagkit.values`

Flag values that take repeated or comma-separated input.

- `IntSlice`, `Int64Slice`, `Float64Slice`, `StringSlice` hold lists. Values
  given to the constructor are defaults; the first call to `set()` drops them,
  later calls append. `set("1,2")` splits on commas and trims each item.
  Integers accept `0x`, `0o`, `0b` and leading-`0` octal and must fit in a
  signed 64-bit range; floats also accept hexadecimal notation. A bad item
  raises `ValueError`.
- `serialize()` returns a prefixed JSON form; passing that string back to
  `set()` replaces the contents.
- `value()` returns a copy of the items, `clone()` an independent copy, and
  `IntSlice.set_int()` appends an integer directly.
- `Timestamp` holds a `datetime`. `set_layout()` takes a reference-time layout
  such as `"2006-01-02 15:04:05"`; `set()` parses with it (naive results are
  taken as UTC) and raises `ValueError` on a mismatch. `set_timestamp()` stores
  a value only if none has been set yet.
- `split_multi_values()` splits an argument on commas;
  `go_layout_to_strftime()` converts a reference-time layout to a
  `strptime`/`strftime` format.

### `flagkit.parsing`

- `flag_from_error()` extracts the flag name from a message of the form
  `"flag provided but not defined: -name"`, raising `ValueError` otherwise.
- `is_splittable()` tells whether an argument looks like combined short flags.
- `split_short_options("-it", known)` gives `["-i", "-t"]` when every letter is
  in `known`, and the argument unchanged otherwise.
- `expand_short_options()` returns a copy of an argument list with the
  argument naming an unknown flag split into short flags, or raises
  `ValueError` if that is not possible.

### `flagkit.suggestions`

"Did you mean ...?" hints based on Jaro-Winkler similarity
(`jaro_winkler()`).

- `suggest_flag()` returns the closest flag as `-x` or `--name`, or `""`.
  Unless `hide_help` is set, `help` and `h` are candidates too.
- `suggest_flag_from_error()` builds the hint from an undefined-flag message,
  raising `ValueError` if the message names no flag or nothing is close.
- `suggest_command()` returns the hint for the closest command name.

### `flagkit.sorting`

`lexicographic_less()` compares names case-insensitively first, then by case;
`lexicographic_key()` is the matching `sort` key.

### `flagkit.helptext`

- `indent()` and `nindent()` indent every line of a text block.
- `CommandEntry` and `FlagEntry` describe commands and flags (name, aliases,
  hidden, and for commands usage and subcommands).
- `print_command_suggestions()`, `print_flag_suggestions()` and
  `default_complete_with_flags()` write shell completion candidates to a
  writer; `cli_arg_contains()` checks whether a flag is already on the command
  line. The argument list defaults to `sys.argv`. With the environment
  variable `_CLI_ZSH_AUTOCOMPLETE_HACK=1`, command suggestions are written as
  `name:usage`.

### `flagkit.genflags`

A model of flag types for code generation: `Spec`, `FlagType`,
`FlagTypeConfig`, `FlagStructField` and `type_name()` (for example `"int"` →
`"IntFlag"`, `"[]bool"` → `"BoolSliceFlag"`).

## Example

```python
from flagkit.values import IntSlice
from flagkit.parsing import split_short_options
from flagkit.suggestions import suggest_command

numbers = IntSlice(1, 2)
numbers.set("3,4")            # the first set replaces the defaults
print(numbers.value())        # [3, 4]

print(split_short_options("-it", {"i", "t"}))       # ['-i', '-t']
print(suggest_command(["config", "info"], "conf"))  # Did you mean 'config'?
```

## What it does not do

flagkit has no application or command runner, no flag-set parser, and does
not render full help pages from templates; it offers the pieces such a tool is
built from. `flagkit.genflags` only describes flag types; it does not read
spec files or write generated code. There is no command-line program.

## Installing

```
pip install .
```

Run the tests with `pip install .[test]` followed by `pytest`.
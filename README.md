# intstr

Integer parsing and formatting with fine control over radix, sign display,
letter case, radix prefixes and digit grouping. It is a library only, with no
command-line tool, and has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Formatting

```python
from intstr.fmt import FormatOptions, format_int, format_uint
from intstr.case import Case
from intstr.plus import Plus

format_int(-42)                                                   # '-42'
format_uint(255, FormatOptions(radix=16))                         # '0xFF'
format_uint(255, FormatOptions(radix=16, digit_case=Case.LOWER))  # '0xff'
format_uint(255, FormatOptions(radix=16, show_radix_prefix=False))  # 'FF'
format_int(7, FormatOptions(plus=Plus.SIGN))                      # '+7'
format_int(7, FormatOptions(plus=Plus.SPACE))                     # ' 7'
format_uint(1234567, FormatOptions(group_sep=",", group_size=3))  # '1,234,567'
format_uint(5, FormatOptions(radix=2, min_digits=8))              # '0b00000101'
```

`FormatOptions` is a frozen dataclass with these fields and defaults:

| field               | default      | meaning                                             |
|---------------------|--------------|-----------------------------------------------------|
| `group_sep`         | `None`       | text written between digit groups                   |
| `group_size`        | `0`          | digits per group, counted from the right; 0 = off   |
| `min_digits`        | `0`          | pad with leading zeros up to this many digits       |
| `digit_case`        | `Case.UPPER` | case of letter digits                               |
| `plus`              | `Plus.NONE`  | what to write before a non-negative value           |
| `radix`             | `10`         | 2 to 36, or `RADIX_AUTO` (0) meaning decimal        |
| `radix_prefix_case` | `Case.LOWER` | case of the `0b` / `0o` / `0x` prefix               |
| `show_radix_prefix` | `True`       | write the prefix for radix 2, 8 and 16              |

`group_size` and `min_digits` must be between 0 and 255. Invalid options
raise `TypeError` or `ValueError` when the options are created.

Signed values must fit a 64-bit two's-complement integer and unsigned ones a
64-bit unsigned integer; other values raise `OverflowError`.

- `format_int` / `format_uint` return a string; an optional `limit` keeps at
  most that many characters.
- `iter_int` / `iter_uint` yield the characters one at a time.
- `write_int` / `write_uint` write to a text file and return the number of
  characters written; with `file` set to `None` they only return the length.

When no options are given, `DEFAULT_FORMAT_OPTIONS` is used.

## Parsing

```python
from intstr.parse import ParseOptions, parse_int, parse_uint, IntParser
from intstr.pres import Presence

result = parse_int("  -0x1F")
result.value       # -31
result.valid       # True
result.read_count  # 7
result.last_read   # None (end of input)

parse_uint("1_000", ParseOptions(group_sep="_")).value              # 1000
parse_int("42", ParseOptions(sign_presence=Presence.REQUIRED)).valid  # False
```

`ParseOptions` is a frozen dataclass:

| field                   | default             | meaning                                       |
|-------------------------|---------------------|-----------------------------------------------|
| `group_sep`             | `None`              | separator allowed between digits              |
| `sign_presence`         | `Presence.OPTIONAL` | whether a `+` / `-` sign may or must appear   |
| `radix`                 | `RADIX_AUTO`        | 2 to 36, or automatic                         |
| `radix_prefix_case`     | `Case.ANY`          | accepted case of the prefix letter            |
| `digit_case`            | `Case.ANY`          | accepted case of letter digits                |
| `radix_prefix_presence` | `Presence.OPTIONAL` | whether a `0b` / `0o` / `0x` prefix may appear|
| `skip_ws`               | `True`              | skip whitespace before and after the sign     |

With an automatic radix, a prefix selects binary, octal or hexadecimal and
the radix is decimal otherwise.

A parse returns a `ParseResult` with `value`, `read_count` (characters that
belong to the number), `last_read` (the character that stopped the parse, or
`None` at the end of input) and `valid` (whether a number was read). Parsing
never raises on malformed text; it reports `valid=False` instead. Values wrap
modulo 2**64, and signed parses reinterpret the result as a signed 64-bit value.
An unsigned parse rejects a `-` sign.

- `parse_int` / `parse_uint` parse a string.
- `parse_int_stream` / `parse_uint_stream` parse any iterable of strings.
- `parse_int_file` / `parse_uint_file` read a file one character at a time;
  after a valid parse that stopped on a character, a seekable file is moved
  back so that character is read next.
- `IntParser(signed, options)` keeps a signedness and options for parsing many
  inputs with `parse(chars)`.

When no options are given, `DEFAULT_PARSE_OPTIONS` is used.

## Enumerations and radix helpers

- `intstr.case.Case`: `UPPER`, `LOWER`, `ANY`, with `short_name()`, `match(ch)`,
  `compatible(other)`, `allows_upper()` and `allows_lower()`.
- `intstr.plus.Plus`: `NONE`, `SPACE`, `SIGN`, with `short_name()` and `symbol()`.
- `intstr.pres.Presence`: `NO`, `OPTIONAL`, `REQUIRED`, with `short_name()`.
- `intstr.radix`: `RADIX_AUTO` (0), `RADIX_MIN` (2), `RADIX_MAX` (36),
  `radix_prefix(radix, case)`, `is_valid_radix(radix)` and `check_radix(radix)`,
  which raises `ValueError` for an invalid radix.
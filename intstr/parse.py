"""Parsing of integers from text, character streams and files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterable, Iterator, Optional

from intstr.case import Case
from intstr.fmt import INT_MAX, UINT_MAX
from intstr.pres import Presence
from intstr.radix import RADIX_AUTO, check_radix

__all__ = [
    "DEFAULT_PARSE_OPTIONS",
    "IntParser",
    "ParseOptions",
    "ParseResult",
    "parse_int",
    "parse_int_file",
    "parse_int_stream",
    "parse_uint",
    "parse_uint_file",
    "parse_uint_stream",
]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_PREFIXED_RADIXES = frozenset({RADIX_AUTO, 2, 8, 16})
_PREFIX_RADIX = {"b": 2, "B": 2, "o": 8, "O": 8, "x": 16, "X": 16}
_MODULUS = UINT_MAX + 1


@dataclass(frozen=True)
class ParseOptions:
    """Options that control how an integer is read.

    ``group_sep`` may stand between digits. With an ``RADIX_AUTO`` radix the
    radix comes from a "0b", "0o" or "0x" prefix and is decimal otherwise.
    """

    group_sep: Optional[str] = None
    sign_presence: Presence = Presence.OPTIONAL
    radix: int = RADIX_AUTO
    radix_prefix_case: Case = Case.ANY
    digit_case: Case = Case.ANY
    radix_prefix_presence: Presence = Presence.OPTIONAL
    skip_ws: bool = True

    def __post_init__(self) -> None:
        if self.group_sep is not None and not isinstance(self.group_sep, str):
            raise TypeError("group_sep must be a string or None")
        for name in ("sign_presence", "radix_prefix_presence"):
            if not isinstance(getattr(self, name), Presence):
                raise TypeError(f"{name} must be a Presence")
        for name in ("radix_prefix_case", "digit_case"):
            if not isinstance(getattr(self, name), Case):
                raise TypeError(f"{name} must be a Case")
        if not isinstance(self.skip_ws, bool):
            raise TypeError("skip_ws must be a bool")
        check_radix(self.radix)


DEFAULT_PARSE_OPTIONS = ParseOptions()
"""The options used when none are given."""


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a parse.

    ``read_count`` is the number of characters that belong to the number,
    ``last_read`` the character that stopped the parse (None at the end of
    input) and ``valid`` tells whether any number was read at all.
    """

    value: int
    read_count: int
    last_read: Optional[str]
    valid: bool


class _Scan:
    """Mutable state of one parse."""

    def __init__(self, chars: Iterator[str], radix: int) -> None:
        self._chars = chars
        self.last: Optional[str] = None
        self.value = 0
        self.count = 0
        self.radix = radix
        self.negative = False
        self.valid = False

    def advance(self) -> bool:
        self.last = next(self._chars, None)
        return self.last is not None


def _characters(chunks: Iterable[str]) -> Iterator[str]:
    for chunk in chunks:
        if not isinstance(chunk, str):
            raise TypeError(f"expected str characters, not {type(chunk).__name__}")
        yield from chunk


def _digit_value(ch: str) -> Optional[tuple[int, Case]]:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0"), Case.ANY
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10, Case.UPPER
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10, Case.LOWER
    return None


def _resolve(options: Optional[ParseOptions]) -> ParseOptions:
    if options is None:
        return DEFAULT_PARSE_OPTIONS
    if not isinstance(options, ParseOptions):
        raise TypeError(f"options must be ParseOptions, not {type(options).__name__}")
    return options


class IntParser:
    """Reads one integer from a character stream.

    Values wrap modulo 2**64; a signed parser reinterprets the result as a
    signed 64-bit value.
    """

    def __init__(self, signed: bool = True, options: Optional[ParseOptions] = None) -> None:
        self.signed = bool(signed)
        self.options = _resolve(options)

    def parse(self, chars: Iterable[str]) -> ParseResult:
        """Parse the characters of ``chars``, an iterable of strings."""
        scan = _Scan(_characters(chars), self.options.radix)
        if scan.advance():
            steps = (
                self._whitespace,
                self._sign,
                self._whitespace,
                self._radix_prefix,
                self._digits,
            )
            all(step(scan) for step in steps)

        value = scan.value % _MODULUS
        if scan.negative:
            value = -value % _MODULUS
        if self.signed and value > INT_MAX:
            value -= _MODULUS
        return ParseResult(value, scan.count, scan.last, scan.valid)

    def _whitespace(self, scan: _Scan) -> bool:
        if self.options.skip_ws:
            while scan.last in _WHITESPACE:
                scan.count += 1
                if not scan.advance():
                    return False
        return True

    def _sign(self, scan: _Scan) -> bool:
        presence = self.options.sign_presence
        if presence is Presence.NO:
            return True
        if scan.last in ("+", "-"):
            if scan.last == "-" and not self.signed:
                return False
            scan.count += 1
            scan.negative = scan.last == "-"
            return scan.advance()
        return presence is Presence.OPTIONAL

    def _radix_prefix(self, scan: _Scan) -> bool:
        opts = self.options
        if opts.radix not in _PREFIXED_RADIXES:
            return True
        if opts.radix_prefix_presence is Presence.NO:
            return True

        optional = opts.radix_prefix_presence is Presence.OPTIONAL
        if scan.last != "0":
            return optional
        if optional:
            # A lone "0" is already a number when the prefix is optional.
            scan.valid = True
            scan.count += 1
        if not scan.advance():
            return False

        radix = _PREFIX_RADIX.get(scan.last)
        if radix is None or (scan.radix != RADIX_AUTO and radix != scan.radix):
            return optional
        if not opts.radix_prefix_case.match(scan.last):
            return optional

        if optional:
            scan.valid = False
            scan.count += 1
        else:
            scan.count += 2
        scan.radix = radix
        return scan.advance()

    def _digits(self, scan: _Scan) -> bool:
        opts = self.options
        radix = scan.radix if scan.radix != RADIX_AUTO else 10
        sep = opts.group_sep or ""
        prev_digit = scan.valid
        after_sep = False

        while True:
            if prev_digit and sep and scan.last == sep[0]:
                if not scan.advance():
                    return False
                for expected in sep[1:]:
                    if scan.last != expected:
                        return False
                    if not scan.advance():
                        return False
                prev_digit = False
                after_sep = True
                continue

            parsed = _digit_value(scan.last)
            if parsed is None:
                return False
            digit, case = parsed
            if digit >= radix or not case.compatible(opts.digit_case):
                return False

            scan.count += 1
            if after_sep:
                scan.count += len(sep)
            scan.value = (scan.value * radix + digit) % _MODULUS
            scan.valid = True
            if not scan.advance():
                return False
            prev_digit = True
            after_sep = False


def _check_text(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")
    return text


def parse_int(text: str, options: Optional[ParseOptions] = None) -> ParseResult:
    """Parse a signed integer from ``text``."""
    return IntParser(True, options).parse(_check_text(text))


def parse_uint(text: str, options: Optional[ParseOptions] = None) -> ParseResult:
    """Parse an unsigned integer from ``text``."""
    return IntParser(False, options).parse(_check_text(text))


def parse_int_stream(chars: Iterable[str], options: Optional[ParseOptions] = None) -> ParseResult:
    """Parse a signed integer from an iterable of strings."""
    return IntParser(True, options).parse(chars)


def parse_uint_stream(chars: Iterable[str], options: Optional[ParseOptions] = None) -> ParseResult:
    """Parse an unsigned integer from an iterable of strings."""
    return IntParser(False, options).parse(chars)


class _FileReader:
    """Iterates over a file one character at a time, remembering positions."""

    def __init__(self, file: IO) -> None:
        self._file = file
        seekable = getattr(file, "seekable", None)
        self._seekable = bool(seekable()) if callable(seekable) else False
        self._mark: Optional[int] = None

    def __iter__(self) -> _FileReader:
        return self

    def __next__(self) -> str:
        if self._seekable:
            self._mark = self._file.tell()
        ch = self._file.read(1)
        if not ch:
            raise StopIteration
        if isinstance(ch, (bytes, bytearray)):
            return chr(ch[0])
        return ch

    def unread(self) -> None:
        if self._seekable and self._mark is not None:
            self._file.seek(self._mark)


def _parse_file(signed: bool, file: IO, options: Optional[ParseOptions]) -> ParseResult:
    reader = _FileReader(file)
    result = IntParser(signed, options).parse(reader)
    if result.valid and result.last_read is not None:
        reader.unread()
    return result


def parse_int_file(file: IO, options: Optional[ParseOptions] = None) -> ParseResult:
    """Parse a signed integer from a file.

    After a valid parse the character that stopped it is put back when the
    file is seekable.
    """
    return _parse_file(True, file, options)


def parse_uint_file(file: IO, options: Optional[ParseOptions] = None) -> ParseResult:
    """Parse an unsigned integer from a file.

    After a valid parse the character that stopped it is put back when the
    file is seekable.
    """
    return _parse_file(False, file, options)
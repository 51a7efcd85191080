"""Error classes and low-level scanning helpers shared by all EDL parsers.

Every parser in this package is a plain function of an immutable byte buffer and a starting
position.  A parser returns the position just past whatever it recognized, together with the
parsed value, or raises one of the errors below.  Because the caller keeps its own position, a
failed parser never consumes input and the next alternative can start from the same place.
"""

from __future__ import annotations


class ValidationError(ValueError):
    """A model object was constructed with out-of-range or inconsistent values."""

    pass


class EDLParseError(ValueError):
    """Base class for all errors raised while parsing EDL text.

    The position is a byte offset into the parsed buffer.  It may be None when a field classifier
    is called directly on a token; the line parsers fill it in before re-raising.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position


class MalformedHeaderError(EDLParseError):
    pass


class InvalidEditIndexError(EDLParseError):
    pass


class InvalidTransitionDurationError(InvalidEditIndexError):
    pass


class InvalidReelError(EDLParseError):
    pass


class InvalidChannelsError(EDLParseError):
    pass


class InvalidEditTypeError(EDLParseError):
    pass


class InvalidFrameCodeModeError(EDLParseError):
    pass


class UnexpectedTokenError(EDLParseError):
    pass


class UnterminatedLineError(EDLParseError):
    pass


class UnexpectedEOFError(EDLParseError):
    pass


# Line terminator and whitespace classes.  A carriage return is treated as horizontal
# whitespace so that CRLF files parse the same as LF files.
NEWLINE = ord("\n")
HORIZONTAL_WHITESPACE = b" \t\r"
WHITESPACE = b" \t\r\n\v\f"


def decode_text(text: bytes) -> str:
    return text.decode("utf-8", errors="replace")


def at_line_end(buffer: bytes, position: int) -> bool:
    return position >= len(buffer) or buffer[position] == NEWLINE


def line_end(buffer: bytes, position: int) -> int:
    """Return the position of the next line terminator, or the end of the buffer."""
    end = buffer.find(b"\n", position)
    return end if end != -1 else len(buffer)


def line_number(buffer: bytes, position: int) -> int:
    """Convert a byte position into a one-based line number."""
    return buffer.count(b"\n", 0, position) + 1


def skip_horizontal_whitespace(buffer: bytes, position: int) -> int:
    while position < len(buffer) and buffer[position] in HORIZONTAL_WHITESPACE:
        position += 1
    return position


def skip_whitespace(buffer: bytes, position: int) -> int:
    """Skip all whitespace, including any number of blank lines."""
    while position < len(buffer) and buffer[position] in WHITESPACE:
        position += 1
    return position


def next_token(buffer: bytes, position: int, field_name: str) -> tuple[int, int]:
    """Find the next whitespace-delimited token on the current line.

    Leading horizontal whitespace is skipped.  The returned tuple holds the start and end
    positions of the token.  If the line ends before a token is found, UnexpectedEOFError is
    raised, naming the field that was expected.
    """
    start = skip_horizontal_whitespace(buffer, position)
    if start >= len(buffer):
        raise UnexpectedEOFError(f"Input ended before the {field_name} field.", start)
    if buffer[start] == NEWLINE:
        raise UnexpectedEOFError(f"Line ended before the {field_name} field.", start)
    end = start
    while end < len(buffer) and buffer[end] not in WHITESPACE:
        end += 1
    return start, end


def parse_decimal(digits: bytes) -> int | None:
    """Combine a run of ASCII decimal digits into an integer.

    Returns None if the run is empty or contains anything other than the digits 0-9.
    """
    zero = ord("0")
    if not digits:
        return None
    value = 0
    for digit in digits:
        if digit < zero or digit > zero + 9:
            return None
        value = value * 10 + (digit - zero)
    return value

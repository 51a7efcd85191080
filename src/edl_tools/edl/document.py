"""Title parser and top-level driver for parsing a whole EDL file."""

from __future__ import annotations

from dataclasses import dataclass

from .base import (
    MalformedHeaderError,
    UnterminatedLineError,
    decode_text,
    line_end,
    skip_horizontal_whitespace,
    skip_whitespace,
)
from .line import Clip, ClipLine, Line, NoteLine, parse_line

_TITLE_MARKER = b"TITLE:"


@dataclass(frozen=True, kw_only=True)
class Document:
    """A parsed EDL file.

    The lines are kept in the order they appeared in the file: clips, frame code mode changes and
    notes are interleaved exactly as they were found.
    """

    title: str
    lines: tuple[Line, ...]

    @property
    def clips(self) -> list[Clip]:
        return [line.clip for line in self.lines if isinstance(line, ClipLine)]

    @property
    def notes(self) -> list[str]:
        return [line.text for line in self.lines if isinstance(line, NoteLine)]


def parse_title(buffer: bytes, position: int = 0) -> tuple[int, str]:
    """Parse the mandatory TITLE: header line.

    Returns the position of the line terminator following the title (it is not consumed) and the
    title text with surrounding whitespace removed.
    """
    cursor = skip_whitespace(buffer, position)
    if not buffer.startswith(_TITLE_MARKER, cursor):
        raise MalformedHeaderError("The EDL does not begin with a TITLE: line.", cursor)
    cursor = skip_horizontal_whitespace(buffer, cursor + len(_TITLE_MARKER))
    end = line_end(buffer, cursor)
    return end, decode_text(buffer[cursor:end]).strip()


def parse_document(data: bytes | str, require_final_newline: bool = False) -> Document:
    """Parse a complete EDL file held in memory.

    By default, the end of the input also ends the last line.  If require_final_newline is set,
    a last line without a line terminator raises UnterminatedLineError instead.
    """
    buffer = data.encode("utf-8") if isinstance(data, str) else bytes(data)

    position, title = parse_title(buffer)
    if position >= len(buffer) and require_final_newline:
        raise UnterminatedLineError("The title line is missing a line terminator.", position)

    lines: list[Line] = []
    while True:
        # Line terminators, blank lines and indentation between lines produce nothing.
        position = skip_whitespace(buffer, position)
        if position >= len(buffer):
            break
        position, line = parse_line(buffer, position, allow_unterminated=not require_final_newline)
        lines.append(line)

    return Document(title=title, lines=tuple(lines))

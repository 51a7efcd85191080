"""Model classes and parsers for the lines that make up the body of an EDL."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from .base import (
    EDLParseError,
    InvalidFrameCodeModeError,
    UnexpectedEOFError,
    UnexpectedTokenError,
    UnterminatedLineError,
    ValidationError,
    at_line_end,
    decode_text,
    line_end,
    next_token,
    skip_horizontal_whitespace,
)
from .fields import (
    INDEX_MAX,
    INDEX_MIN,
    Cut,
    EditChannels,
    EditType,
    Reel,
    parse_edit_channels,
    parse_edit_index,
    parse_edit_type,
    parse_reel,
    parse_transition_duration,
)
from .timecode import TimeCode, parse_timecode

T = TypeVar("T")


class FrameCodeMode(Enum):
    DROP_FRAME = "DROP FRAME"
    NON_DROP_FRAME = "NON-DROP FRAME"


@dataclass(frozen=True, kw_only=True)
class Clip:
    """A single edit event."""

    edit_index: int
    reel: Reel
    edit_channels: EditChannels
    edit_type: EditType
    # Length of the transition in frames.  Present if and only if the edit is not a cut.
    transition_duration: int | None = None

    source_in: TimeCode
    source_out: TimeCode
    record_in: TimeCode
    record_out: TimeCode

    def __post_init__(self) -> None:
        validation_message = self.validate()
        if validation_message is not None:
            raise ValidationError(validation_message)

    def validate(self) -> str | None:
        if self.edit_index < INDEX_MIN or self.edit_index > INDEX_MAX:
            return f"Edit index must be between {INDEX_MIN} and {INDEX_MAX}."
        is_cut = isinstance(self.edit_type, Cut)
        if is_cut and self.transition_duration is not None:
            return "A cut must not have a transition duration."
        if not is_cut and self.transition_duration is None:
            return "A transition duration is required for every edit type other than a cut."
        if self.transition_duration is not None and (
            self.transition_duration < INDEX_MIN or self.transition_duration > INDEX_MAX
        ):
            return f"Transition duration must be between {INDEX_MIN} and {INDEX_MAX}."
        return None

    def source_duration(self, frame_rate: int = 30) -> int:
        return self.source_out.to_frames(frame_rate) - self.source_in.to_frames(frame_rate)

    def record_duration(self, frame_rate: int = 30) -> int:
        return self.record_out.to_frames(frame_rate) - self.record_in.to_frames(frame_rate)


# Lines of the EDL body.  Exactly one line parser produced each of these.


@dataclass(frozen=True, kw_only=True)
class FrameCodeModeLine:
    mode: FrameCodeMode


@dataclass(frozen=True, kw_only=True)
class ClipLine:
    clip: Clip


@dataclass(frozen=True, kw_only=True)
class NoteLine:
    text: str


Line = FrameCodeModeLine | ClipLine | NoteLine


# ======================== CLIP LINES ========================


def _classify(classifier: Callable[[bytes], T], buffer: bytes, start: int, end: int) -> T:
    """Run a field classifier on one token, attaching the token position to any error."""
    try:
        return classifier(buffer[start:end])
    except EDLParseError as e:
        if e.position is None:
            e.position = start
        raise


_TIMECODE_NAMES = ["source in", "source out", "record in", "record out"]


def parse_clip_line(buffer: bytes, position: int) -> tuple[int, Clip]:
    """Parse an edit line such as:

        001  AX       V     C        00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16

    Returns the position of the line terminator (or end of input) and the parsed clip.
    """
    start, cursor = next_token(buffer, position, "edit index")
    edit_index = _classify(parse_edit_index, buffer, start, cursor)
    start, cursor = next_token(buffer, cursor, "reel")
    reel = _classify(parse_reel, buffer, start, cursor)
    start, cursor = next_token(buffer, cursor, "edit channels")
    edit_channels = _classify(parse_edit_channels, buffer, start, cursor)
    start, cursor = next_token(buffer, cursor, "edit type")
    edit_type = _classify(parse_edit_type, buffer, start, cursor)

    # The edit type alone decides whether a duration token follows; no lookahead is done.
    transition_duration: int | None = None
    if not isinstance(edit_type, Cut):
        start, cursor = next_token(buffer, cursor, "transition duration")
        transition_duration = _classify(parse_transition_duration, buffer, start, cursor)

    timecodes: list[TimeCode] = []
    for name in _TIMECODE_NAMES:
        start = skip_horizontal_whitespace(buffer, cursor)
        if at_line_end(buffer, start):
            raise UnexpectedEOFError(f"Line ended before the {name} timecode.", start)
        cursor, timecode = parse_timecode(buffer, start)
        timecodes.append(timecode)

    cursor = skip_horizontal_whitespace(buffer, cursor)
    if not at_line_end(buffer, cursor):
        raise UnexpectedTokenError("Unexpected text after the record out timecode.", cursor)

    source_in, source_out, record_in, record_out = timecodes
    return cursor, Clip(
        edit_index=edit_index,
        reel=reel,
        edit_channels=edit_channels,
        edit_type=edit_type,
        transition_duration=transition_duration,
        source_in=source_in,
        source_out=source_out,
        record_in=record_in,
        record_out=record_out,
    )


# ======================== FRAME CODE MODE LINES ========================

_FCM_MARKER = b"FCM:"
_FRAME_CODE_MODES_BY_PHRASE: dict[bytes, FrameCodeMode] = {
    mode.value.encode("ascii"): mode for mode in FrameCodeMode
}


def parse_fcm_line(buffer: bytes, position: int) -> tuple[int, FrameCodeMode]:
    """Parse a line such as "FCM: NON-DROP FRAME"."""
    if not buffer.startswith(_FCM_MARKER, position):
        raise InvalidFrameCodeModeError("Expected an FCM: marker.", position)
    cursor = skip_horizontal_whitespace(buffer, position + len(_FCM_MARKER))
    end = line_end(buffer, cursor)
    phrase = buffer[cursor:end].rstrip(b" \t\r")
    mode = _FRAME_CODE_MODES_BY_PHRASE.get(phrase)
    if mode is None:
        raise InvalidFrameCodeModeError(
            f"Unknown frame code mode '{decode_text(phrase)}'; expected DROP FRAME or "
            "NON-DROP FRAME.",
            cursor,
        )
    return end, mode


# ======================== NOTE LINES ========================


def parse_note_line(
    buffer: bytes, position: int, allow_unterminated: bool = False
) -> tuple[int, str]:
    """Capture the rest of the line as free text.

    The line must end with a line terminator unless allow_unterminated is set, in which case the
    end of the buffer also ends the line.
    """
    end = buffer.find(b"\n", position)
    if end == -1:
        if not allow_unterminated:
            raise UnterminatedLineError("The final line is missing a line terminator.", position)
        end = len(buffer)
    return end, decode_text(buffer[position:end].removesuffix(b"\r"))


# ======================== LINE ALTERNATION ========================


def parse_line(buffer: bytes, position: int, allow_unterminated: bool = True) -> tuple[int, Line]:
    """Parse one body line: try a clip, then a frame code mode, and otherwise take it as a note.

    A line that looks like a clip but fails any field check is returned as a note holding the raw
    text.  The returned position is that of the line terminator, or the end of the buffer.
    """
    try:
        end, clip = parse_clip_line(buffer, position)
    except EDLParseError:
        pass
    else:
        _check_terminated(buffer, position, end, allow_unterminated)
        return end, ClipLine(clip=clip)

    try:
        end, mode = parse_fcm_line(buffer, position)
    except EDLParseError:
        pass
    else:
        _check_terminated(buffer, position, end, allow_unterminated)
        return end, FrameCodeModeLine(mode=mode)

    end, text = parse_note_line(buffer, position, allow_unterminated)
    return end, NoteLine(text=text)


def _check_terminated(buffer: bytes, start: int, end: int, allow_unterminated: bool) -> None:
    if end >= len(buffer) and not allow_unterminated:
        raise UnterminatedLineError("The final line is missing a line terminator.", start)

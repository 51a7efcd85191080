"""Contains model classes and parsers for CMX3600 edit decision lists."""

from .base import (
    EDLParseError,
    InvalidChannelsError,
    InvalidEditIndexError,
    InvalidEditTypeError,
    InvalidFrameCodeModeError,
    InvalidReelError,
    InvalidTransitionDurationError,
    MalformedHeaderError,
    UnexpectedEOFError,
    UnexpectedTokenError,
    UnterminatedLineError,
    ValidationError,
    line_number,
)
from .document import Document, parse_document, parse_title
from .fields import (
    AuxReel,
    BlackReel,
    Cut,
    Dissolve,
    EditChannels,
    EditType,
    IndexReel,
    KeyBackground,
    KeyForeground,
    KeyRemoveFromForeground,
    Reel,
    Wipe,
    format_edit_type,
    format_reel,
    parse_edit_channels,
    parse_edit_index,
    parse_edit_type,
    parse_reel,
    parse_transition_duration,
)
from .line import (
    Clip,
    ClipLine,
    FrameCodeMode,
    FrameCodeModeLine,
    Line,
    NoteLine,
    parse_clip_line,
    parse_fcm_line,
    parse_line,
    parse_note_line,
)
from .timecode import (
    InvalidTimecodeError,
    InvalidTimecodeFieldError,
    TimeCode,
    TimecodeField,
    parse_timecode,
)

__all__ = [
    "AuxReel",
    "BlackReel",
    "Clip",
    "ClipLine",
    "Cut",
    "Dissolve",
    "Document",
    "EDLParseError",
    "EditChannels",
    "EditType",
    "FrameCodeMode",
    "FrameCodeModeLine",
    "format_edit_type",
    "format_reel",
    "IndexReel",
    "InvalidChannelsError",
    "InvalidEditIndexError",
    "InvalidEditTypeError",
    "InvalidFrameCodeModeError",
    "InvalidReelError",
    "InvalidTimecodeError",
    "InvalidTimecodeFieldError",
    "InvalidTransitionDurationError",
    "KeyBackground",
    "KeyForeground",
    "KeyRemoveFromForeground",
    "Line",
    "line_number",
    "MalformedHeaderError",
    "NoteLine",
    "parse_clip_line",
    "parse_document",
    "parse_edit_channels",
    "parse_edit_index",
    "parse_edit_type",
    "parse_fcm_line",
    "parse_line",
    "parse_note_line",
    "parse_reel",
    "parse_timecode",
    "parse_title",
    "parse_transition_duration",
    "Reel",
    "TimeCode",
    "TimecodeField",
    "UnexpectedEOFError",
    "UnexpectedTokenError",
    "UnterminatedLineError",
    "ValidationError",
    "Wipe",
]

"""Model classes and classifiers for the small fields of an EDL clip line.

Each classifier takes one whitespace-delimited token and maps it to a domain value, raising a
named error if the token is not recognized.  Splitting the line into tokens is the job of the clip
line parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .base import (
    InvalidChannelsError,
    InvalidEditIndexError,
    InvalidEditTypeError,
    InvalidReelError,
    InvalidTransitionDurationError,
    ValidationError,
    decode_text,
    parse_decimal,
)

# Edit indexes, reel numbers, wipe patterns and transition durations all share this range.
INDEX_MIN = 1
INDEX_MAX = 999


def _parse_three_digits(token: bytes) -> int | None:
    value = parse_decimal(token) if len(token) == 3 else None
    return value if value is not None and value >= INDEX_MIN else None


# ======================== EDIT INDEX ========================


def parse_edit_index(token: bytes) -> int:
    """Parse an edit number, which is always exactly three decimal digits."""
    edit_index = _parse_three_digits(token)
    if edit_index is None:
        raise InvalidEditIndexError(
            f"Invalid edit index '{decode_text(token)}': expected three digits from 001 to 999."
        )
    return edit_index


def parse_transition_duration(token: bytes) -> int:
    """Parse the frame count of a dissolve, wipe or key, written like an edit index."""
    duration = _parse_three_digits(token)
    if duration is None:
        raise InvalidTransitionDurationError(
            f"Invalid transition duration '{decode_text(token)}': expected three digits from "
            "001 to 999."
        )
    return duration


# ======================== REEL ========================


@dataclass(frozen=True, kw_only=True)
class IndexReel:
    """A numbered source tape, optionally marked as B-roll."""

    index: int
    is_b_roll: bool = False

    def __post_init__(self) -> None:
        if self.index < INDEX_MIN or self.index > INDEX_MAX:
            raise ValidationError(f"Reel index must be between {INDEX_MIN} and {INDEX_MAX}.")


@dataclass(frozen=True)
class BlackReel:
    """The synthetic black source, BL."""

    pass


@dataclass(frozen=True)
class AuxReel:
    """An auxiliary source.  The parser never produces this; see parse_reel."""

    pass


Reel = IndexReel | BlackReel | AuxReel


def parse_reel(token: bytes) -> Reel:
    """Parse a reel (tape) identifier.

    Numbered reels are three digits, optionally followed by a B-roll marker.  Only a lower case
    'b' actually marks B-roll; an upper case 'B' is accepted but ignored.
    """
    # AX is mapped to black, not to AuxReel, matching the behavior of the EDL tools this parser
    # was checked against.  This is very likely a defect in those tools.
    if token == b"BL" or token == b"AX":
        return BlackReel()
    if len(token) in (3, 4):
        index = _parse_three_digits(token[:3])
        marker = token[3:]
        if index is not None and marker in (b"", b"b", b"B"):
            return IndexReel(index=index, is_b_roll=marker == b"b")
    raise InvalidReelError(f"Invalid reel '{decode_text(token)}'.")


def format_reel(reel: Reel) -> str:
    match reel:
        case IndexReel(index=index, is_b_roll=is_b_roll):
            return f"{index:03}b" if is_b_roll else f"{index:03}"
        case BlackReel():
            return "BL"
        case AuxReel():
            return "AX"


# ======================== EDIT CHANNELS ========================


class EditChannels(Enum):
    AUDIO_1 = "A"
    AUDIO_1_VIDEO = "B"
    VIDEO = "V"
    AUDIO_2 = "A2"
    AUDIO_2_VIDEO = "A2/V"
    AUDIO_1_AUDIO_2 = "AA"
    AUDIO_1_AUDIO_2_VIDEO = "AA/V"


_EDIT_CHANNELS_BY_TOKEN: dict[bytes, EditChannels] = {
    channels.value.encode("ascii"): channels for channels in EditChannels
}


def parse_edit_channels(token: bytes) -> EditChannels:
    channels = _EDIT_CHANNELS_BY_TOKEN.get(token)
    if channels is None:
        raise InvalidChannelsError(f"Invalid edit channels '{decode_text(token)}'.")
    return channels


# ======================== EDIT TYPE ========================


@dataclass(frozen=True)
class Cut:
    pass


@dataclass(frozen=True)
class Dissolve:
    pass


@dataclass(frozen=True, kw_only=True)
class Wipe:
    pattern_index: int

    def __post_init__(self) -> None:
        if self.pattern_index < INDEX_MIN or self.pattern_index > INDEX_MAX:
            raise ValidationError(
                f"Wipe pattern index must be between {INDEX_MIN} and {INDEX_MAX}."
            )


@dataclass(frozen=True)
class KeyForeground:
    pass


@dataclass(frozen=True)
class KeyBackground:
    pass


@dataclass(frozen=True)
class KeyRemoveFromForeground:
    pass


EditType = Cut | Dissolve | Wipe | KeyForeground | KeyBackground | KeyRemoveFromForeground


def parse_edit_type(token: bytes) -> EditType:
    match token:
        case b"C":
            return Cut()
        case b"D":
            return Dissolve()
        case b"K":
            return KeyForeground()
        case b"KB":
            return KeyBackground()
        case b"KO":
            return KeyRemoveFromForeground()

    if token.startswith(b"W"):
        pattern_index = _parse_three_digits(token[1:])
        if pattern_index is not None:
            return Wipe(pattern_index=pattern_index)
        raise InvalidEditTypeError(
            f"Invalid wipe edit type '{decode_text(token)}': expected a three digit pattern "
            "number after W."
        )
    raise InvalidEditTypeError(f"Invalid edit type '{decode_text(token)}'.")


def format_edit_type(edit_type: EditType) -> str:
    match edit_type:
        case Cut():
            return "C"
        case Dissolve():
            return "D"
        case Wipe(pattern_index=pattern_index):
            return f"W{pattern_index:03}"
        case KeyForeground():
            return "K"
        case KeyBackground():
            return "KB"
        case KeyRemoveFromForeground():
            return "KO"

"""Model class and parser for HH:MM:SS:FF timecodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .base import EDLParseError, ValidationError, parse_decimal


class TimecodeField(Enum):
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    FRAMES = "frames"


# Highest value allowed in each field.  The frame ceiling is fixed at 29 no matter which frame code
# mode was declared, so 24 and 25 fps material is accepted with the 30 fps limit.
TIMECODE_FIELD_MAXIMUMS: dict[TimecodeField, int] = {
    TimecodeField.HOURS: 23,
    TimecodeField.MINUTES: 59,
    TimecodeField.SECONDS: 59,
    TimecodeField.FRAMES: 29,
}

_TIMECODE_SEPARATOR = ord(":")
_GROUP_DELIMITERS = b": \t\r\n\v\f"


class InvalidTimecodeError(EDLParseError):
    """A timecode token did not have the HH:MM:SS:FF shape."""

    pass


class InvalidTimecodeFieldError(InvalidTimecodeError):
    """One of the four groups of a timecode is not two digits, or is out of range."""

    def __init__(
        self,
        field: TimecodeField,
        text: str,
        maximum: int,
        position: int | None = None,
    ) -> None:
        super().__init__(
            f"Invalid {field.value} field '{text}' in timecode: expected two digits with a value "
            f"no greater than {maximum:02}.",
            position,
        )
        self.field = field
        self.text = text
        self.maximum = maximum

    @property
    def value(self) -> int | None:
        """Integer value of the offending group, if it was numeric at all."""
        return parse_decimal(self.text.encode("utf-8"))


@dataclass(frozen=True, kw_only=True, order=True)
class TimeCode:
    hours: int
    minutes: int
    seconds: int
    frames: int

    def __post_init__(self) -> None:
        validation_message = self.validate()
        if validation_message is not None:
            raise ValidationError(validation_message)

    def validate(self) -> str | None:
        """Indicate whether all four fields are within range.

        The return value contains a description of the validation failure, or None if the
        timecode is valid.
        """
        for field, value in zip(
            TimecodeField, [self.hours, self.minutes, self.seconds, self.frames], strict=True
        ):
            maximum = TIMECODE_FIELD_MAXIMUMS[field]
            if value < 0 or value > maximum:
                return f"The {field.value} field must be between 0 and {maximum}."
        return None

    def __str__(self) -> str:
        return f"{self.hours:02}:{self.minutes:02}:{self.seconds:02}:{self.frames:02}"

    def to_frames(self, frame_rate: int = 30) -> int:
        """Count the frames elapsed since 00:00:00:00, using non-drop-frame counting."""
        if frame_rate <= 0:
            raise ValueError("The frame rate must be positive.")
        if self.frames >= frame_rate:
            raise ValueError("The frame number is too high for the given frame rate.")
        return ((self.hours * 60 + self.minutes) * 60 + self.seconds) * frame_rate + self.frames


def parse_timecode(buffer: bytes, position: int) -> tuple[int, TimeCode]:
    """Parse an HH:MM:SS:FF timecode token starting exactly at position.

    The token must be followed by whitespace or the end of the buffer.  Returns the position just
    past the token along with the parsed timecode.
    """
    values: list[int] = []
    cursor = position
    for field in TimecodeField:
        if field != TimecodeField.HOURS:
            if cursor >= len(buffer) or buffer[cursor] != _TIMECODE_SEPARATOR:
                raise InvalidTimecodeError(
                    f"Expected ':' before the {field.value} field of a timecode.", cursor
                )
            cursor += 1

        end = cursor
        while end < len(buffer) and buffer[end] not in _GROUP_DELIMITERS:
            end += 1
        group = buffer[cursor:end]
        maximum = TIMECODE_FIELD_MAXIMUMS[field]
        value = parse_decimal(group) if len(group) == 2 else None
        if value is None or value > maximum:
            raise InvalidTimecodeFieldError(
                field, group.decode("utf-8", errors="replace"), maximum, cursor
            )
        values.append(value)
        cursor = end

    if cursor < len(buffer) and buffer[cursor] == _TIMECODE_SEPARATOR:
        raise InvalidTimecodeError("Too many fields in timecode.", cursor)

    hours, minutes, seconds, frames = values
    return cursor, TimeCode(hours=hours, minutes=minutes, seconds=seconds, frames=frames)
